"""Filter rules: required, accepted and excluded field names.

FilterConfig is immutable. Owners that need to change rules
(ParamsFilter) swap the whole config instead of mutating it.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import TypeAlias

FieldName: TypeAlias = Hashable

# Only meaningful inside `accepted`; a literal name elsewhere.
WILDCARD = "*"


def coerce_names(value: object) -> tuple[FieldName, ...]:
    """Coerce a field-name argument to a tuple of names.

    None = no names. A bare string is one name, not a sequence of characters.
    None entries and unhashable entries are dropped.
    Values that are not iterable yield no names.

    Args:
        value: Single name, iterable of names, or None.

    Returns:
        Tuple of names in original order (duplicates kept).
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes)):
        return (value,)
    if not isinstance(value, Iterable):
        return ()
    return tuple(name for name in value if name is not None and isinstance(name, Hashable))


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Rules for one filtering operation.

    Attributes:
        required: Names that must be present. Always copied to output.
        accepted: Names admitted when present. WILDCARD = any name not excluded.
        excluded: Names never admitted through `accepted`.
        debug: Attach warnings about dropped fields to the status message.
    """

    required: tuple[FieldName, ...] = ()
    accepted: tuple[FieldName, ...] = ()
    excluded: tuple[FieldName, ...] = ()
    debug: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("required", "accepted", "excluded"):
            value = getattr(self, name)
            if not isinstance(value, tuple):
                raise TypeError(f"{name} must be tuple, got {type(value).__name__}")
        if not isinstance(self.debug, bool):
            raise TypeError(f"debug must be bool, got {type(self.debug).__name__}")

    @classmethod
    def create(
        cls,
        required: object = None,
        accepted: object = None,
        excluded: object = None,
        debug: object = False,
    ) -> FilterConfig:
        """Create config from loosely-typed arguments.

        Args:
            required: Name or iterable of names. None = empty.
            accepted: Name or iterable of names. None = empty.
            excluded: Name or iterable of names. None = empty.
            debug: Any truthy value enables debug warnings.

        Returns:
            Validated FilterConfig
        """
        return cls(
            required=coerce_names(required),
            accepted=coerce_names(accepted),
            excluded=coerce_names(excluded),
            debug=bool(debug),
        )

    @classmethod
    def from_mapping(cls, value: object) -> FilterConfig:
        """Create config from a mapping such as {"required": [...], "DEBUG": 1}.

        Lenient: anything that is not a mapping yields the empty config.
        Debug flag is read from "debug" or "DEBUG".

        Args:
            value: Mapping with optional required/accepted/excluded/debug keys.

        Returns:
            FilterConfig (empty when value is absent or malformed)
        """
        if not isinstance(value, Mapping):
            return cls.empty()
        return cls.create(
            required=value.get("required"),
            accepted=value.get("accepted"),
            excluded=value.get("excluded"),
            debug=value.get("DEBUG") or value.get("debug") or False,
        )

    @classmethod
    def empty(cls) -> FilterConfig:
        """Create config with no rules and debug off."""
        return cls()

    @property
    def has_wildcard(self) -> bool:
        """Check if `accepted` admits every non-excluded name."""
        return WILDCARD in self.accepted

    @property
    def unique_required(self) -> tuple[FieldName, ...]:
        """Required names with duplicates collapsed, first occurrence wins."""
        return tuple(dict.fromkeys(self.required))

    def with_required(self, names: object) -> FilterConfig:
        """Return new config with `required` replaced."""
        return replace(self, required=coerce_names(names))

    def with_accepted(self, names: object) -> FilterConfig:
        """Return new config with `accepted` replaced."""
        return replace(self, accepted=coerce_names(names))

    def with_excluded(self, names: object) -> FilterConfig:
        """Return new config with `excluded` replaced."""
        return replace(self, excluded=coerce_names(names))
