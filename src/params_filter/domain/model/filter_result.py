"""Filter result: admitted record or rejection message."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

from params_filter.domain.exceptions.rejection import FilterRejectedError

if TYPE_CHECKING:
    from params_filter.domain.model.enums import FailureKind
    from params_filter.domain.model.filter_config import FieldName

ADMITTED = "Admitted"


def quote_names(names: tuple[FieldName, ...]) -> str:
    """Format names as 'a', 'b', 'c'."""
    return ", ".join(f"'{name}'" for name in names)


@dataclass(frozen=True, slots=True, eq=False)
class FilterResult:
    """Outcome of one filtering call.

    Behaves as the (record, message) pair: unpacks, indexes, and compares
    equal to a 2-tuple. Truthy only when admitted.

        result = filter_params(data, ["name"])
        record, message = result
        if not result:
            print(result[1])

    Attributes:
        record: Admitted fields. None = rejected.
        message: "Admitted", notices and warnings, or the rejection reason.
        failure: Rejection kind. None when admitted.
        fields: Field names the rejection message refers to.
    """

    record: dict[FieldName, object] | None
    message: str
    failure: FailureKind | None = None
    fields: tuple[FieldName, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")
        if self.record is None and self.failure is None:
            raise ValueError("rejected result requires failure kind")
        if self.record is not None and self.failure is not None:
            raise ValueError("admitted result must not carry failure kind")

    def __iter__(self) -> Iterator[object]:
        yield self.record
        yield self.message

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int | slice) -> object:
        return (self.record, self.message)[index]

    def __bool__(self) -> bool:
        return self.record is not None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilterResult):
            return (self.record, self.message, self.failure, self.fields) == (
                other.record,
                other.message,
                other.failure,
                other.fields,
            )
        if isinstance(other, tuple):
            return (self.record, self.message) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    @property
    def admitted(self) -> bool:
        """Check if the input passed the filter."""
        return self.record is not None

    def unwrap(self) -> dict[FieldName, object]:
        """Return the admitted record.

        Raises:
            FilterRejectedError: If the input was rejected
        """
        if self.record is None:
            raise FilterRejectedError(self)
        return self.record

    @classmethod
    def accept(
        cls,
        record: dict[FieldName, object],
        notes: tuple[str, ...] = (),
    ) -> FilterResult:
        """Create admitted result.

        Args:
            record: Admitted fields
            notes: Normalization notices and debug warnings, in order.
                Empty = status "Admitted".

        Returns:
            Admitted FilterResult
        """
        message = "\n".join(notes) if notes else ADMITTED
        return cls(record=record, message=message)

    @classmethod
    def reject(
        cls,
        failure: FailureKind,
        fields: tuple[FieldName, ...],
        reason: str,
    ) -> FilterResult:
        """Create rejected result.

        Args:
            failure: Rejection kind
            fields: Names to report
            reason: Message prefix, names are appended

        Returns:
            Rejected FilterResult
        """
        return cls(
            record=None,
            message=f"{reason}: {quote_names(fields)}",
            failure=failure,
            fields=fields,
        )
