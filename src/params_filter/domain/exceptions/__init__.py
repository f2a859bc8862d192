"""Domain exceptions."""

from params_filter.domain.exceptions.base import ParamsFilterError
from params_filter.domain.exceptions.rejection import FilterRejectedError

__all__ = [
    "ParamsFilterError",
    "FilterRejectedError",
]
