from enum import Enum
from typing import Container


class AslaError(Exception):
    """Base error for the bookkeeping engine."""


class InvalidEntry(AslaError):
    """Input rejected before any change to the books."""


class InvalidInput(InvalidEntry):
    pass


class DuplicateCode(InvalidEntry):
    pass


class ImbalancedVoucher(InvalidEntry):
    pass


class Protected(AslaError):
    """Account cannot be removed."""


class AccountInUse(Protected):
    """Account has posted entries and cannot be removed."""


class NotFound(AslaError, LookupError):
    @staticmethod
    def must_exist(collection: Container[str], key: str, what: str = "Account"):
        if key not in collection:
            raise NotFound(f"{what} {key} not found.")


class AccountType(Enum):
    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"

    def __repr__(self):
        return self.value.capitalize()

    @property
    def is_debit_normal(self) -> bool:
        """Assets and expenses increase on the debit side."""
        return self in (AccountType.ASSET, AccountType.EXPENSE)

    @property
    def is_profit_and_loss(self) -> bool:
        return self in (AccountType.REVENUE, AccountType.EXPENSE)


class Side(Enum):
    DEBIT = "debit"
    CREDIT = "credit"
