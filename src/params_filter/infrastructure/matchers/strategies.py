"""Matcher strategies specialized by the shape of `accepted`.

- empty: required fields only
- WILDCARD: required fields plus every other field not excluded
- names: required fields plus listed names not excluded

Strategy is chosen once in make_matcher(); the returned closure never
branches on configuration. Input must be a mapping: no normalization,
no status message.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from params_filter.domain.model.filter_config import FilterConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from params_filter.domain.model.filter_config import FieldName
    from params_filter.infrastructure.matchers.types import Matcher


def _extract_required(
    record: Mapping[FieldName, object],
    required: tuple[FieldName, ...],
) -> dict[FieldName, object] | None:
    """Copy required fields, None if any is missing or record is too small."""
    if not record or len(record) < len(required):
        return None
    for name in required:
        if name not in record:
            return None
    return {name: record[name] for name in required}


def match_required_only(required: tuple[FieldName, ...]) -> Matcher:
    """Create matcher admitting only required fields.

    Args:
        required: Names that must be present (unique).

    Returns:
        Matcher returning required fields, or None if any is missing.
    """

    def _match(record: Mapping[FieldName, object]) -> dict[FieldName, object] | None:
        return _extract_required(record, required)

    return _match


def match_all(
    required: tuple[FieldName, ...],
    excluded: frozenset[FieldName],
) -> Matcher:
    """Create matcher admitting every field except excluded ones.

    Required fields are admitted even if also excluded.

    Args:
        required: Names that must be present (unique).
        excluded: Names never admitted beyond `required`.

    Returns:
        Matcher returning required plus all non-excluded fields.
    """
    blocked = frozenset(required) | excluded

    def _match(record: Mapping[FieldName, object]) -> dict[FieldName, object] | None:
        filtered = _extract_required(record, required)
        if filtered is None:
            return None
        filtered.update((k, v) for k, v in record.items() if k not in blocked)
        return filtered

    return _match


def match_accepted(
    required: tuple[FieldName, ...],
    accepted: tuple[FieldName, ...],
    excluded: frozenset[FieldName],
) -> Matcher:
    """Create matcher admitting required fields plus listed names.

    Args:
        required: Names that must be present (unique).
        accepted: Names admitted when present.
        excluded: Names never admitted beyond `required`.

    Returns:
        Matcher returning required plus present accepted fields.
    """
    required_set = frozenset(required)
    admissible = tuple(
        name
        for name in dict.fromkeys(accepted)
        if name not in excluded and name not in required_set
    )

    def _match(record: Mapping[FieldName, object]) -> dict[FieldName, object] | None:
        filtered = _extract_required(record, required)
        if filtered is None:
            return None
        filtered.update((name, record[name]) for name in admissible if name in record)
        return filtered

    return _match


def make_matcher(
    required: object = None,
    accepted: object = None,
    excluded: object = None,
) -> Matcher:
    """Create precompiled matcher for fixed rules.

    Same admission rules as the filter engine, for mapping input only.
    Returns a fresh dict per call; the input mapping is never modified.

    Args:
        required: Name or iterable of names that must be present.
        accepted: Name or iterable of names to admit. WILDCARD = all.
        excluded: Name or iterable of names never admitted.

    Returns:
        Matcher: mapping → admitted fields, or None on missing required field.
    """
    config = FilterConfig.create(required, accepted, excluded)
    required_names = config.unique_required

    if not config.accepted:
        return match_required_only(required_names)

    excluded_names = frozenset(config.excluded)
    if config.has_wildcard:
        return match_all(required_names, excluded_names)

    return match_accepted(required_names, config.accepted, excluded_names)
