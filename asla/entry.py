import datetime
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .base import ImbalancedVoucher, InvalidInput, Side
from .chart import new_id


class JournalEntry(BaseModel):
    """One line on either the debit or the credit side of a voucher."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    account_id: str
    amount: int
    description: str = ""

    @field_validator("amount")
    @classmethod
    def must_not_be_negative(cls, value: int) -> int:
        if value < 0:
            raise InvalidInput(f"Amount must not be negative: {value}.")
        return value


def sums(entries: Iterable[JournalEntry]) -> int:
    return sum(entry.amount for entry in entries)


class Voucher(BaseModel):
    """Balanced transaction record. Immutable once created."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    date: datetime.date
    description: str
    debit_entries: tuple[JournalEntry, ...]
    credit_entries: tuple[JournalEntry, ...]
    id: str = Field(default_factory=new_id)
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
    reverses: str | None = None

    @model_validator(mode="after")
    def must_balance(self):
        ds = sums(self.debit_entries)
        cs = sums(self.credit_entries)
        if ds != cs or ds <= 0:
            raise ImbalancedVoucher(
                f"Debits {ds} and credits {cs} must be equal and positive."
            )
        return self

    @property
    def total(self) -> int:
        return sums(self.debit_entries)

    @property
    def is_reversal(self) -> bool:
        return self.reverses is not None

    @property
    def account_ids(self) -> set[str]:
        return {e.account_id for e in self.debit_entries + self.credit_entries}

    def lines(self) -> Iterator[tuple[Side, JournalEntry]]:
        """Debit lines then credit lines, each in entry order."""
        for entry in self.debit_entries:
            yield Side.DEBIT, entry
        for entry in self.credit_entries:
            yield Side.CREDIT, entry


Line = tuple[str, int, str]


@dataclass
class Entry:
    """Draft of a voucher assembled line by line before posting.

    Accounts are referred to by code and resolved against the chart
    when the draft is posted.
    """

    title: str
    debits: list[Line] = field(default_factory=list)
    credits: list[Line] = field(default_factory=list)
    _amount: int | None = None

    def amount(self, amount: int):
        """Set default amount for the lines that follow."""
        self._amount = amount
        return self

    def get_amount(self, amount: int | None = None) -> int:
        if amount is not None:
            return amount
        if self._amount is None:
            raise InvalidInput("Amount is not set.")
        return self._amount

    def debit(self, account: str, amount: int | None = None, description: str = ""):
        self.debits.append((account, self.get_amount(amount), description))
        return self

    def credit(self, account: str, amount: int | None = None, description: str = ""):
        self.credits.append((account, self.get_amount(amount), description))
        return self

    def double(self, debit: str, credit: str, amount: int):
        return self.debit(debit, amount).credit(credit, amount)

    @property
    def debit_total(self) -> int:
        return sum(amount for _, amount, _ in self.debits)

    @property
    def credit_total(self) -> int:
        return sum(amount for _, amount, _ in self.credits)

    def is_balanced(self) -> bool:
        """True if the draft would be accepted as a voucher."""
        return self.debit_total > 0 and self.debit_total == self.credit_total
