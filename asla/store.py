"""Append-only voucher log."""

import datetime
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator

import structlog

from .base import AslaError, NotFound
from .entry import JournalEntry, Voucher
from .ledger import by_date

log = structlog.get_logger(__name__)

REVERSAL_PREFIX = "Reversal: "


@dataclass
class VoucherStore:
    """Vouchers in the order they were appended.

    Vouchers are never edited or deleted. A voucher is cancelled by
    appending its reversal.
    """

    vouchers: list[Voucher] = field(default_factory=list)
    today: Callable[[], datetime.date] = datetime.date.today
    now: Callable[[], datetime.datetime] = datetime.datetime.now

    def __len__(self) -> int:
        return len(self.vouchers)

    def __iter__(self) -> Iterator[Voucher]:
        return iter(list(self.vouchers))

    def get(self, voucher_id: str) -> Voucher:
        for voucher in self.vouchers:
            if voucher.id == voucher_id:
                return voucher
        raise NotFound(f"Voucher {voucher_id} not found.")

    def append(
        self,
        date: datetime.date,
        description: str,
        debit_entries: Iterable[JournalEntry],
        credit_entries: Iterable[JournalEntry],
        reverses: str | None = None,
        id: str | None = None,
    ) -> Voucher:
        """Validate and add a voucher to the log."""
        fields = dict(
            date=date,
            description=description,
            debit_entries=tuple(debit_entries),
            credit_entries=tuple(credit_entries),
            created_at=self.now(),
            reverses=reverses,
        )
        if id is not None:
            fields["id"] = id
        try:
            voucher = Voucher(**fields)  # type: ignore
        except AslaError as e:
            log.warning("voucher_rejected", description=description, error=str(e))
            raise
        self.vouchers.append(voucher)
        log.info(
            "voucher_appended",
            id=voucher.id,
            date=voucher.date.isoformat(),
            total=voucher.total,
        )
        return voucher

    def reverse(self, voucher_id: str) -> Voucher:
        """Append a voucher with the sides of *voucher_id* swapped."""
        original = self.get(voucher_id)
        return self.append(
            date=self.today(),
            description=REVERSAL_PREFIX + original.description,
            debit_entries=[e.model_copy() for e in original.credit_entries],
            credit_entries=[e.model_copy() for e in original.debit_entries],
            reverses=original.id,
            id=f"rev-{original.id}-{len(self.vouchers)}",
        )

    def chronological(self) -> list[Voucher]:
        """Vouchers sorted by date, same-date vouchers kept in append order."""
        return by_date(self.vouchers)

    def recent(self, n: int | None = None) -> list[Voucher]:
        """Most recent first, for display only."""
        return list(reversed(self.vouchers))[:n]

    def references(self, account_id: str) -> bool:
        return any(account_id in v.account_ids for v in self.vouchers)
