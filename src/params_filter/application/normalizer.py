"""Input normalization: raw value → record.

Shapes:
- mapping: copied as the record
- list/tuple starting with a mapping: that mapping is the record, rest ignored
- list/tuple of one value: {"_": value}
- list/tuple of odd length: key/value pairs, last element becomes {last: 1}
- list/tuple of even length: key/value pairs
- anything else: {"_": value}

Coercions other than plain pairing produce a notice that is reported
regardless of debug mode. Fast-success admissions report "Admitted" only.

Pair lists need hashable keys: a list such as [["x"], 1] cannot form a
record and raises TypeError, like dict() would.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from params_filter.domain.model.raw_input import (
    KeyedInput,
    OrderedInput,
    ScalarInput,
    classify_input,
)

SCALAR_KEY = "_"
FLAG_VALUE = 1
PREVIEW_LENGTH = 20


@dataclass(frozen=True, slots=True)
class NormalizedInput:
    """Record built from raw input plus coercion notices.

    Attributes:
        record: Fresh dict owned by the caller. Safe to consume.
        messages: Coercion notices in the order they arose.
    """

    record: dict[object, object]
    messages: tuple[str, ...] = ()


def preview(value: object) -> str:
    """Shorten a value for diagnostics: first 20 chars, '...' if longer."""
    text = str(value)
    if len(text) > PREVIEW_LENGTH:
        return text[:PREVIEW_LENGTH] + "..."
    return text


def _scalar(value: object) -> NormalizedInput:
    return NormalizedInput(
        record={SCALAR_KEY: value},
        messages=(f"Plain text argument accepted with key '{SCALAR_KEY}': '{preview(value)}'",),
    )


def _pairs(items: tuple[object, ...]) -> dict[object, object]:
    return dict(zip(items[::2], items[1::2], strict=True))


def _ordered(items: tuple[object, ...]) -> NormalizedInput:
    if items and isinstance(items[0], Mapping):
        return NormalizedInput(record=dict(items[0]))

    if len(items) == 1:
        return _scalar(items[0])

    if len(items) % 2:
        last = items[-1]
        record = _pairs((*items, FLAG_VALUE))
        return NormalizedInput(
            record=record,
            messages=(
                "Odd number of arguments provided; "
                f"last element '{last}' converted to flag with value {FLAG_VALUE}",
            ),
        )

    return NormalizedInput(record=_pairs(items))


def normalize(value: object) -> NormalizedInput:
    """Convert any supported input to a record.

    Never mutates `value`: the returned record is always a new dict.

    Args:
        value: Mapping, list/tuple, or scalar.

    Returns:
        NormalizedInput with record and coercion notices.
    """
    match classify_input(value):
        case KeyedInput(value=mapping):
            return NormalizedInput(record=dict(mapping))
        case OrderedInput(items=items):
            return _ordered(items)
        case ScalarInput(value=scalar):
            return _scalar(scalar)
