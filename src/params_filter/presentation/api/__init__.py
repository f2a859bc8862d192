"""Public API: one-shot function, reusable filter object, matcher factory."""

from params_filter.infrastructure.matchers import make_matcher
from params_filter.presentation.api.functional import filter_params
from params_filter.presentation.api.params_filter import ParamsFilter

__all__ = [
    "ParamsFilter",
    "filter_params",
    "make_matcher",
]
