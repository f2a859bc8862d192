"""Infrastructure layer: precompiled matchers.

Matchers are closures specialized once for fixed rules:
Matcher = Callable[[Mapping], dict | None]
None = required field missing.

Usage:
    from params_filter.infrastructure.matchers import make_matcher

    match = make_matcher(["id"], ["name", "email"], ["password"])
    admitted = match({"id": 7, "name": "Ann", "password": "x"})
    # {"id": 7, "name": "Ann"}
"""

from params_filter.infrastructure.matchers.strategies import (
    make_matcher,
    match_accepted,
    match_all,
    match_required_only,
)
from params_filter.infrastructure.matchers.types import Matcher

__all__ = [
    "Matcher",
    "make_matcher",
    "match_accepted",
    "match_all",
    "match_required_only",
]
