"""Chart of accounts.

Accounts are immutable records. The chart keeps them sorted by code,
refuses duplicate codes and will not drop a standard account.
"""

from typing import Iterable, Iterator
from uuid import uuid4

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import AccountType, DuplicateCode, InvalidInput, NotFound, Protected

log = structlog.get_logger(__name__)


def new_id() -> str:
    return uuid4().hex


class Account(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str
    name: str
    type: AccountType
    standard: bool = False
    id: str = Field(default_factory=new_id)

    @field_validator("code", "name")
    @classmethod
    def must_not_be_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise InvalidInput("Account code and name must not be empty.")
        return value

    @property
    def is_debit_normal(self) -> bool:
        return self.type.is_debit_normal

    def __str__(self):
        return f"{self.code}: {self.name}"


def seed(id: str, code: str, name: str, t: AccountType) -> Account:
    return Account(id=id, code=code, name=name, type=t, standard=True)


# fmt: off
STANDARD_ACCOUNTS: tuple[Account, ...] = (
    seed("101", "1101", "Cash", AccountType.ASSET),
    seed("102", "1102", "Ordinary deposits", AccountType.ASSET),
    seed("103", "1103", "Accounts receivable", AccountType.ASSET),
    seed("104", "1201", "Vehicles", AccountType.ASSET),
    seed("201", "2101", "Accounts payable", AccountType.LIABILITY),
    seed("202", "2102", "Accrued payables", AccountType.LIABILITY),
    seed("203", "2201", "Borrowings", AccountType.LIABILITY),
    seed("301", "3101", "Capital stock", AccountType.EQUITY),
    seed("401", "4101", "Freight revenue", AccountType.REVENUE),
    seed("501", "5101", "Fuel", AccountType.EXPENSE),
    seed("502", "5102", "Highway tolls", AccountType.EXPENSE),
    seed("503", "5103", "Vehicle maintenance", AccountType.EXPENSE),
    seed("504", "5104", "Packing and freight", AccountType.EXPENSE),
    seed("505", "5105", "Outsourcing", AccountType.EXPENSE),
    seed("506", "5106", "Salaries", AccountType.EXPENSE),
)
# fmt: on


class ChartOfAccounts:
    """Master list of postable accounts, sorted ascending by code."""

    def __init__(self, accounts: Iterable[Account] = ()):
        self._accounts: list[Account] = []
        for account in accounts:
            self.insert(account)

    @classmethod
    def standard(cls):
        """Chart seeded with the standard accounts."""
        return cls(STANDARD_ACCOUNTS)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return any(account.id == account_id for account in self._accounts)

    @property
    def codes(self) -> list[str]:
        return [account.code for account in self._accounts]

    @property
    def names(self) -> list[str]:
        return [account.name for account in self._accounts]

    def get(self, account_id: str) -> Account:
        for account in self._accounts:
            if account.id == account_id:
                return account
        raise NotFound(f"Account {account_id} not found.")

    def by_code(self, code: str) -> Account:
        for account in self._accounts:
            if account.code == code:
                return account
        raise NotFound(f"Account with code {code} not found.")

    def by_name(self, name: str) -> Account | None:
        """First account with exactly this display name, if any."""
        for account in self._accounts:
            if account.name == name:
                return account
        return None

    def insert(self, account: Account) -> Account:
        if account.code in self.codes:
            raise DuplicateCode(f"Account code {account.code} already exists.")
        if account.id in self:
            raise DuplicateCode(f"Account id {account.id} already exists.")
        self._accounts = sorted([*self._accounts, account], key=lambda a: a.code)
        return account

    def add(self, code: str, name: str, t: AccountType) -> Account:
        """Create a new account with a fresh id and insert it into the chart."""
        account = self.insert(Account(code=code, name=name, type=t))
        log.info("account_added", code=account.code, name=account.name, id=account.id)
        return account

    def remove(self, account_id: str) -> None:
        account = self.get(account_id)
        if account.standard:
            raise Protected(f"Standard account {account} cannot be removed.")
        self._accounts = [a for a in self._accounts if a.id != account_id]
        log.info("account_removed", code=account.code, id=account.id)
