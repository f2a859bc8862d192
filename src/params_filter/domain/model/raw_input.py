"""Raw input shapes accepted at the filtering boundary.

Input shape is resolved once by classify_input(). Normalization then
dispatches on the variant instead of inspecting types again.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class KeyedInput:
    """Mapping input. Used as the record."""

    value: Mapping[object, object]


@dataclass(frozen=True, slots=True)
class OrderedInput:
    """List or tuple input: key/value pairs, a nested mapping, or one value."""

    items: tuple[object, ...]


@dataclass(frozen=True, slots=True)
class ScalarInput:
    """Any other value, strings and None included."""

    value: object


RawInput: TypeAlias = KeyedInput | OrderedInput | ScalarInput


def classify_input(value: object) -> RawInput:
    """Wrap a raw value in its input variant.

    Strings and bytes are scalars even though they are sequences.

    Args:
        value: Any caller-supplied value.

    Returns:
        KeyedInput, OrderedInput or ScalarInput
    """
    if isinstance(value, Mapping):
        return KeyedInput(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return OrderedInput(tuple(value))
    return ScalarInput(value)
