"""Reusable filter object with chainable setters.

Example:
    flt = ParamsFilter({"required": ["name", "email"], "DEBUG": True})
    flt.set_accepted("phone", "city").set_excluded(["ssn"])
    record, message = flt.apply(form_data)

Thread safety: apply() reads the config reference once and never writes it,
so concurrent apply() calls are safe. Setters replace the config; callers
mixing setters with concurrent apply() must serialize them externally.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from params_filter.domain.model.filter_config import WILDCARD, FilterConfig
from params_filter.infrastructure.matchers.strategies import make_matcher
from params_filter.presentation.api.functional import run

if TYPE_CHECKING:
    from collections.abc import Mapping

    from params_filter.domain.model.filter_config import FieldName
    from params_filter.domain.model.filter_result import FilterResult
    from params_filter.infrastructure.matchers.types import Matcher


def _names(fields: tuple[object, ...]) -> object:
    """Setter arguments: one iterable of names, or names given variadically."""
    if len(fields) != 1:
        return fields
    first = fields[0]
    if isinstance(first, Iterable) and not isinstance(first, (str, bytes)):
        return first
    return fields


class ParamsFilter:
    """Filter holding its rules between calls.

    Attributes:
        _config: Current rules, replaced wholesale by setters
    """

    def __init__(self, config: FilterConfig | Mapping[str, object] | None = None) -> None:
        """Initialize filter.

        Args:
            config: FilterConfig, or mapping with optional "required",
                "accepted", "excluded" and "debug"/"DEBUG" keys.
                Absent or malformed = empty rules, debug off.
        """
        if isinstance(config, FilterConfig):
            self._config = config
        else:
            self._config = FilterConfig.from_mapping(config)

    def __repr__(self) -> str:
        c = self._config
        return (
            f"ParamsFilter(required={c.required!r}, accepted={c.accepted!r}, "
            f"excluded={c.excluded!r}, debug={c.debug!r})"
        )

    @property
    def config(self) -> FilterConfig:
        """Current rules (immutable snapshot)."""
        return self._config

    @property
    def required(self) -> tuple[FieldName, ...]:
        return self._config.required

    @property
    def accepted(self) -> tuple[FieldName, ...]:
        return self._config.accepted

    @property
    def excluded(self) -> tuple[FieldName, ...]:
        return self._config.excluded

    @property
    def debug(self) -> bool:
        return self._config.debug

    def set_required(self, *fields: object) -> ParamsFilter:
        """Replace required names. No names = clear.

        Args:
            *fields: Names, or a single iterable of names. None entries dropped.

        Returns:
            self, for chaining
        """
        self._config = self._config.with_required(_names(fields))
        return self

    def set_accepted(self, *fields: object) -> ParamsFilter:
        """Replace accepted names. No names = clear.

        Args:
            *fields: Names, or a single iterable of names. None entries dropped.

        Returns:
            self, for chaining
        """
        self._config = self._config.with_accepted(_names(fields))
        return self

    def set_excluded(self, *fields: object) -> ParamsFilter:
        """Replace excluded names. No names = clear.

        Args:
            *fields: Names, or a single iterable of names. None entries dropped.

        Returns:
            self, for chaining
        """
        self._config = self._config.with_excluded(_names(fields))
        return self

    def accept_all(self) -> ParamsFilter:
        """Accept any field not excluded. Same as set_accepted("*")."""
        self._config = self._config.with_accepted((WILDCARD,))
        return self

    def accept_none(self) -> ParamsFilter:
        """Accept required fields only. Same as set_accepted()."""
        self._config = self._config.with_accepted(())
        return self

    def apply(self, value: object) -> FilterResult:
        """Filter value with current rules.

        Args:
            value: Mapping, list/tuple, or scalar. Never modified.

        Returns:
            FilterResult, unpackable as (record | None, message)
        """
        return run(value, self._config)

    def compile(self) -> Matcher:
        """Create precompiled matcher for current rules.

        Later setter calls do not affect the returned matcher.

        Returns:
            Matcher for mapping input
        """
        config = self._config
        return make_matcher(config.required, config.accepted, config.excluded)
