"""General ledger for one account.

Vouchers are replayed in date order into a T-account and every line that
touches the account is reported together with the running balance.
"""

import datetime
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .base import Side
from .chart import Account
from .entry import Voucher


@dataclass
class TAccount(ABC):
    """Amounts collected on the left (debit) and right (credit) sides."""

    left: int = 0
    right: int = 0

    def debit(self, amount: int):
        self.left += amount

    def credit(self, amount: int):
        self.right += amount

    def post(self, side: Side, amount: int):
        match side:
            case Side.DEBIT:
                self.debit(amount)
            case Side.CREDIT:
                self.credit(amount)

    @property
    @abstractmethod
    def balance(self) -> int:
        pass


class DebitAccount(TAccount):
    @property
    def balance(self) -> int:
        return self.left - self.right


class CreditAccount(TAccount):
    @property
    def balance(self) -> int:
        return self.right - self.left


def t_account(account: Account) -> TAccount:
    return DebitAccount() if account.is_debit_normal else CreditAccount()


@dataclass(frozen=True)
class LedgerLine:
    date: datetime.date
    description: str
    debit: int
    credit: int
    balance: int
    voucher_id: str


def by_date(vouchers: Iterable[Voucher]) -> list[Voucher]:
    """Stable sort, vouchers with equal dates keep their given order."""
    return sorted(vouchers, key=lambda v: v.date)


def ledger_for(vouchers: Iterable[Voucher], account: Account) -> tuple[LedgerLine, ...]:
    """Entries posted to *account* in date order with running balance."""
    t = t_account(account)
    lines = []
    for voucher in by_date(vouchers):
        for side, entry in voucher.lines():
            if entry.account_id != account.id:
                continue
            t.post(side, entry.amount)
            lines.append(
                LedgerLine(
                    date=voucher.date,
                    description=entry.description or voucher.description,
                    debit=entry.amount if side == Side.DEBIT else 0,
                    credit=entry.amount if side == Side.CREDIT else 0,
                    balance=t.balance,
                    voucher_id=voucher.id,
                )
            )
    return tuple(lines)
