"""Filter engine: apply FilterConfig to a record.

Order of decisions:
1. Empty record, or fewer fields than required names → reject
2. Move every present required field to the output, collect missing names
3. Nothing missing: succeed early with status "Admitted" if the record is
   used up, or if all required fields were found and `accepted` is empty
4. Required names missing → reject naming exactly those names
5. Drop excluded names
6. Move accepted names (or everything left, for WILDCARD)
7. Whatever is left is discarded; reported only in debug mode
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from params_filter.domain.model.enums import FailureKind
from params_filter.domain.model.filter_result import FilterResult, quote_names

if TYPE_CHECKING:
    from params_filter.domain.model.filter_config import FieldName, FilterConfig

NO_FIELDS = "Unable to initialize without required arguments"
TOO_FEW_FIELDS = "Unable to initialize without all required arguments"
MISSING_FIELDS = "Unable to initialize without required arguments"


def _debug_warnings(
    unrecognized: tuple[FieldName, ...],
    excluded: tuple[FieldName, ...],
) -> tuple[str, ...]:
    warnings: list[str] = []
    if unrecognized:
        warnings.append(f"Ignoring unrecognized arguments: {quote_names(unrecognized)}")
    if excluded:
        warnings.append(f"Ignoring excluded arguments: {quote_names(excluded)}")
    return tuple(warnings)


def apply_rules(
    record: dict[FieldName, object],
    config: FilterConfig,
    messages: tuple[str, ...] = (),
) -> FilterResult:
    """Filter record by config.

    Consumes `record`: admitted and dropped fields are removed from it.
    Callers that need the original must pass a copy (normalize() does).

    Args:
        record: Record to filter. Owned by this call.
        config: Rules to apply.
        messages: Normalization notices, reported before debug warnings.
            Not reported when a fast-success check admits the record.

    Returns:
        FilterResult with admitted record, or rejection
    """
    required = config.unique_required

    # Necessary condition only: can reject, never wrongly admit
    if not record:
        return FilterResult.reject(FailureKind.INSUFFICIENT_FIELDS, required, NO_FIELDS)
    if len(record) < len(required):
        return FilterResult.reject(FailureKind.INSUFFICIENT_FIELDS, required, TOO_FEW_FIELDS)

    filtered: dict[FieldName, object] = {}
    missing: list[FieldName] = []
    for name in required:
        if name in record:
            filtered[name] = record.pop(name)
        else:
            missing.append(name)

    # Record used up, or nothing else can ever be admitted. Status is plain "Admitted".
    if not missing and (not record or not config.accepted):
        return FilterResult.accept(filtered)

    if missing:
        return FilterResult.reject(
            FailureKind.MISSING_REQUIRED_FIELDS, tuple(missing), MISSING_FIELDS
        )

    excluded: list[FieldName] = []
    for name in config.excluded:
        if name in record:
            del record[name]
            excluded.append(name)

    if config.has_wildcard:
        filtered.update(record)
        record.clear()
    else:
        for name in config.accepted:
            if name in record:
                filtered[name] = record.pop(name)

    if not config.debug:
        return FilterResult.accept(filtered, messages)

    warnings = _debug_warnings(tuple(record), tuple(excluded))
    return FilterResult.accept(filtered, (*messages, *warnings))
