"""User-facing Book class that owns the chart of accounts and the voucher log."""

import datetime
from dataclasses import dataclass, field
from typing import Iterable

import structlog

from .advisors import AdviceProvider, SuggestionProvider, get_advice, suggest_account
from .base import AccountInUse, AccountType, NotFound, Side
from .chart import Account, ChartOfAccounts
from .config import get_settings
from .entry import Entry, JournalEntry, Voucher
from .ledger import LedgerLine, ledger_for
from .reports import FinancialStatements, TrialBalance, financial_statements, trial_balance
from .store import VoucherStore

log = structlog.get_logger(__name__)


@dataclass
class Book:
    chart: ChartOfAccounts = field(default_factory=ChartOfAccounts.standard)
    store: VoucherStore = field(default_factory=VoucherStore)

    @classmethod
    def empty(cls):
        return cls(chart=ChartOfAccounts())

    @property
    def accounts(self) -> list[Account]:
        return list(self.chart)

    @property
    def vouchers(self) -> list[Voucher]:
        return list(self.store)

    def add_account(self, code: str, name: str, t: AccountType) -> Account:
        return self.chart.add(code, name, t)

    def remove_account(self, account_id: str) -> None:
        """Remove account unless it is standard or has posted entries."""
        account = self.chart.get(account_id)
        if not account.standard and self.store.references(account_id):
            log.warning("account_in_use", code=account.code, id=account.id)
            raise AccountInUse(f"Account {account} has posted entries.")
        self.chart.remove(account.id)

    def _check_accounts(self, entries: Iterable[JournalEntry]):
        for entry in entries:
            NotFound.must_exist(self.chart, entry.account_id)

    def append_voucher(
        self,
        date: datetime.date,
        description: str,
        debit_entries: Iterable[JournalEntry],
        credit_entries: Iterable[JournalEntry],
    ) -> Voucher:
        debit_entries = list(debit_entries)
        credit_entries = list(credit_entries)
        self._check_accounts(debit_entries + credit_entries)
        return self.store.append(date, description, debit_entries, credit_entries)

    def resolve(self, code: str) -> str:
        """Account id for an account code."""
        return self.chart.by_code(code).id

    def post(self, entry: Entry, date: datetime.date | None = None) -> Voucher:
        """Post a draft entry, accounts given by code."""

        def to_journal(lines):
            return [
                JournalEntry(account_id=self.resolve(ref), amount=amount, description=text)
                for ref, amount, text in lines
            ]

        return self.append_voucher(
            date or self.store.today(),
            entry.title,
            to_journal(entry.debits),
            to_journal(entry.credits),
        )

    def post_many(self, entries: Iterable[Entry], date: datetime.date | None = None):
        return [self.post(entry, date) for entry in entries]

    def reverse_voucher(self, voucher_id: str) -> Voucher:
        return self.store.reverse(voucher_id)

    def recent_vouchers(self, n: int | None = None) -> list[Voucher]:
        if n is None:
            n = get_settings().recent_limit
        return self.store.recent(n)

    def ledger_for(self, account_id: str) -> tuple[LedgerLine, ...]:
        return ledger_for(self.store, self.chart.get(account_id))

    def trial_balance(self) -> TrialBalance:
        return trial_balance(self.chart, self.store)

    def financial_statements(self) -> FinancialStatements:
        return financial_statements(self.trial_balance())

    async def suggest_account(
        self,
        provider: SuggestionProvider,
        description: str,
        side: Side,
        timeout: float | None = None,
    ) -> Account | None:
        return await suggest_account(provider, self.chart, description, side, timeout)

    async def get_advice(
        self, provider: AdviceProvider, timeout: float | None = None
    ) -> str | None:
        return await get_advice(provider, self.trial_balance(), timeout)
