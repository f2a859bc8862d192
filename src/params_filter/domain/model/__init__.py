"""Domain model entities."""

from params_filter.domain.model.enums import FailureKind
from params_filter.domain.model.filter_config import WILDCARD, FieldName, FilterConfig
from params_filter.domain.model.filter_result import ADMITTED, FilterResult
from params_filter.domain.model.raw_input import (
    KeyedInput,
    OrderedInput,
    RawInput,
    ScalarInput,
    classify_input,
)

__all__ = [
    "ADMITTED",
    "WILDCARD",
    "FailureKind",
    "FieldName",
    "FilterConfig",
    "FilterResult",
    "KeyedInput",
    "OrderedInput",
    "RawInput",
    "ScalarInput",
    "classify_input",
]
