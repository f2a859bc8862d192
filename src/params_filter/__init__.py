"""params_filter - field-presence filter for loosely-structured parameter bags."""

__version__ = "0.1.0"

from params_filter.domain.exceptions import FilterRejectedError, ParamsFilterError
from params_filter.domain.model.enums import FailureKind
from params_filter.domain.model.filter_config import WILDCARD, FilterConfig
from params_filter.domain.model.filter_result import FilterResult
from params_filter.infrastructure.matchers import Matcher, make_matcher
from params_filter.presentation.api.functional import filter_params
from params_filter.presentation.api.params_filter import ParamsFilter

__all__ = [
    "WILDCARD",
    "FailureKind",
    "FilterConfig",
    "FilterRejectedError",
    "FilterResult",
    "Matcher",
    "ParamsFilter",
    "ParamsFilterError",
    "__version__",
    "filter_params",
    "make_matcher",
]
