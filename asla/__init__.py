from .advisors import (
    AdviceProvider,
    GeminiAdviceProvider,
    GeminiSuggestionProvider,
    SuggestionProvider,
)
from .base import (
    AccountInUse,
    AccountType,
    AslaError,
    DuplicateCode,
    ImbalancedVoucher,
    InvalidEntry,
    InvalidInput,
    NotFound,
    Protected,
    Side,
)
from .book import Book
from .chart import STANDARD_ACCOUNTS, Account, ChartOfAccounts
from .config import Settings, configure_logging, get_settings
from .entry import Entry, JournalEntry, Voucher
from .ledger import LedgerLine, ledger_for
from .reports import (
    BalanceSheet,
    FinancialStatements,
    ProfitAndLoss,
    TrialBalance,
    TrialBalanceRow,
    financial_statements,
    trial_balance,
)
from .store import VoucherStore
