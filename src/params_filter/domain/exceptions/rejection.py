"""Filter rejection exception."""

from __future__ import annotations

from typing import TYPE_CHECKING

from params_filter.domain.exceptions.base import ParamsFilterError

if TYPE_CHECKING:
    from params_filter.domain.model.filter_result import FilterResult


class FilterRejectedError(ParamsFilterError):
    """Input rejected by filter rules.

    Raised by FilterResult.unwrap() when the result carries no record.

    Attributes:
        result: Rejected filter result
    """

    def __init__(self, result: FilterResult) -> None:
        if result.admitted:
            raise ValueError("FilterRejectedError requires a rejected result")

        self.result = result
        super().__init__(result.message)
