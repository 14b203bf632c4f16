"""
Ledger

An append-only, insertion-ordered sequence of transaction records
owned by one wallet.

DESIGN DECISION: Totals are never stored. Every aggregate is derived
from the records on demand, so there is nothing to keep in sync.

Sums accumulate left to right in insertion order with plain float
addition. No rounding, no compensated summation.

All queries return fresh lists or dicts; nothing returned aliases the
ledger's own storage.
"""

from typing import Iterable, Iterator, Optional

from pocketbook.models.transaction import TransactionKind, TransactionRecord


class Ledger:
    """
    Ordered transaction records of one wallet.

    Normal flows only append. `remove` exists for corrective
    maintenance and for rolling back a half-applied transfer.
    """

    def __init__(self, records: Optional[Iterable[TransactionRecord]] = None):
        self._records: list[TransactionRecord] = list(records) if records else []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TransactionRecord]:
        return iter(list(self._records))

    def __repr__(self) -> str:
        return f"Ledger(records={len(self._records)})"

    def append(self, record: TransactionRecord) -> None:
        """Insert at the end. Validation is the caller's job."""
        self._records.append(record)

    def remove(self, record: TransactionRecord) -> bool:
        """
        Remove the first record that is the given object.

        Matches by identity, not by value.

        Returns:
            True if a record was removed
        """
        for index, existing in enumerate(self._records):
            if existing is record:
                del self._records[index]
                return True
        return False

    def records(self) -> list[TransactionRecord]:
        """All records in insertion order."""
        return list(self._records)

    def total_by_kind(self, kind: TransactionKind) -> float:
        """Sum of amounts over records of the given kind. 0 when empty."""
        total = 0.0
        for record in self._records:
            if record.kind == kind:
                total += record.amount
        return total

    def group_by_category(self, kind: TransactionKind) -> dict[str, float]:
        """
        Sum amounts per category for the given kind.

        Categories without a record of that kind are absent, not zero.
        Keys appear in order of first occurrence.
        """
        totals: dict[str, float] = {}
        for record in self._records:
            if record.kind == kind:
                totals[record.category] = totals.get(record.category, 0.0) + record.amount
        return totals

    def spent_in(self, category: str) -> float:
        """Expense total for one category."""
        total = 0.0
        for record in self._records:
            if record.kind == TransactionKind.EXPENSE and record.category == category:
                total += record.amount
        return total

    def filter_by_kind(self, kind: TransactionKind) -> list[TransactionRecord]:
        return [record for record in self._records if record.kind == kind]

    def filter_by_category(self, category: str) -> list[TransactionRecord]:
        return [record for record in self._records if record.category == category]

    def recent(self, n: int) -> list[TransactionRecord]:
        """
        The n records with the latest timestamps, newest first.

        Equal timestamps are ordered most-recently-inserted first.
        Asking for more than exist returns all of them.
        """
        if n <= 0:
            return []
        indexed = sorted(
            enumerate(self._records),
            key=lambda pair: (pair[1].created_at, pair[0]),
            reverse=True,
        )
        return [record for _, record in indexed[:n]]
