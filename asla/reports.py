"""Trial balance and financial statements.

Both are recomputed from the full voucher history on every call.
Report values are keyed by account code.
"""

from collections import UserDict
from dataclasses import dataclass
from typing import Iterable, Iterator

import simplejson as json  # type: ignore

from .base import AccountType
from .chart import Account
from .entry import Voucher
from .ledger import TAccount, t_account


class ReportDict(UserDict[str, int]):
    @property
    def total(self) -> int:
        return sum(self.data.values())

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.data, indent=indent)


@dataclass(frozen=True)
class TrialBalanceRow:
    account: Account
    debit_total: int
    credit_total: int
    balance: int

    def to_dict(self) -> dict:
        return dict(
            code=self.account.code,
            name=self.account.name,
            type=self.account.type.value,
            debit=self.debit_total,
            credit=self.credit_total,
            balance=self.balance,
        )


@dataclass(frozen=True)
class TrialBalance:
    rows: tuple[TrialBalanceRow, ...]

    def __iter__(self) -> Iterator[TrialBalanceRow]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def debit_total(self) -> int:
        return sum(row.debit_total for row in self.rows)

    @property
    def credit_total(self) -> int:
        return sum(row.credit_total for row in self.rows)

    def is_balanced(self) -> bool:
        """Grand debit total equals grand credit total."""
        return self.debit_total == self.credit_total

    @property
    def balances(self) -> ReportDict:
        return ReportDict({row.account.code: row.balance for row in self.rows})

    def by_type(self, t: AccountType) -> ReportDict:
        return ReportDict(
            {row.account.code: row.balance for row in self.rows if row.account.type == t}
        )

    def balance_of(self, account_id: str) -> int:
        for row in self.rows:
            if row.account.id == account_id:
                return row.balance
        return 0

    def to_dict(self) -> list[dict]:
        return [row.to_dict() for row in self.rows]

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def trial_balance(accounts: Iterable[Account], vouchers: Iterable[Voucher]) -> TrialBalance:
    """Debit and credit totals and net balance for every account with activity."""
    accounts = list(accounts)
    t_accounts: dict[str, TAccount] = {a.id: t_account(a) for a in accounts}
    for voucher in vouchers:
        for side, entry in voucher.lines():
            if entry.account_id in t_accounts:
                t_accounts[entry.account_id].post(side, entry.amount)
    rows = []
    for account in accounts:
        t = t_accounts[account.id]
        if t.left == 0 and t.right == 0:
            continue
        rows.append(TrialBalanceRow(account, t.left, t.right, t.balance))
    return TrialBalance(tuple(rows))


@dataclass
class ProfitAndLoss:
    revenue: ReportDict
    expenses: ReportDict

    @property
    def net_income(self) -> int:
        """Revenue less expenses."""
        return self.revenue.total - self.expenses.total


NET_INCOME_LINE = "Net income"


@dataclass
class BalanceSheet:
    assets: ReportDict
    liabilities: ReportDict
    equity: ReportDict
    net_income: int = 0

    @property
    def liabilities_and_equity(self) -> ReportDict:
        """Liability and equity balances followed by the net income line."""
        return ReportDict(
            {**self.liabilities, **self.equity, NET_INCOME_LINE: self.net_income}
        )

    @property
    def liabilities_and_equity_total(self) -> int:
        return self.liabilities_and_equity.total

    def is_balanced(self) -> bool:
        return self.assets.total == self.liabilities_and_equity_total


@dataclass
class FinancialStatements:
    profit_and_loss: ProfitAndLoss
    balance_sheet: BalanceSheet
    net_income: int


def financial_statements(tb: TrialBalance) -> FinancialStatements:
    """Split trial balance rows into profit and loss and balance sheet items.

    Net income is shown as a separate line next to liabilities and equity
    and is not added to any equity account, as there is no period closing.
    """
    pl = ProfitAndLoss(
        revenue=tb.by_type(AccountType.REVENUE),
        expenses=tb.by_type(AccountType.EXPENSE),
    )
    bs = BalanceSheet(
        assets=tb.by_type(AccountType.ASSET),
        liabilities=tb.by_type(AccountType.LIABILITY),
        equity=tb.by_type(AccountType.EQUITY),
        net_income=pl.net_income,
    )
    return FinancialStatements(pl, bs, pl.net_income)
