"""One-shot filtering: rules passed on every call."""

from __future__ import annotations

from params_filter.application.engine import apply_rules
from params_filter.application.normalizer import normalize
from params_filter.domain.model.filter_config import FilterConfig
from params_filter.domain.model.filter_result import FilterResult


def filter_params(
    value: object,
    required: object,
    accepted: object = (),
    excluded: object = (),
    debug: bool = False,
) -> FilterResult:
    """Filter a parameter bag by field presence.

    Example:
        record, message = filter_params(
            {"name": "BVA", "email": "me@here.com", "ssn": "111-22-3333"},
            ["name", "email"],
            excluded=["ssn"],
        )
        # record == {"name": "BVA", "email": "me@here.com"}, message == "Admitted"

    Args:
        value: Mapping, list/tuple, or scalar. Never modified.
        required: Names that must be present.
        accepted: Names admitted when present. ["*"] = any name not excluded.
        excluded: Names never admitted through `accepted`.
        debug: Report dropped fields in the message.

    Returns:
        FilterResult, unpackable as (record | None, message)
    """
    config = FilterConfig.create(required, accepted, excluded, debug)
    return run(value, config)


def run(value: object, config: FilterConfig) -> FilterResult:
    """Normalize value and apply config."""
    normalized = normalize(value)
    return apply_rules(normalized.record, config, normalized.messages)
