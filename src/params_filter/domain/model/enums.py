"""Domain enumerations."""

from enum import Enum, auto


class FailureKind(Enum):
    """Why a record was rejected."""

    INSUFFICIENT_FIELDS = auto()  # empty record or fewer fields than required
    MISSING_REQUIRED_FIELDS = auto()  # required names absent after extraction
