"""Matcher type alias.

Matcher function: takes a mapping, returns admitted fields or None.
"""

from collections.abc import Callable, Mapping
from typing import TypeAlias

Matcher: TypeAlias = Callable[[Mapping[object, object]], dict[object, object] | None]
