import datetime

import pytest

from asla import Account, AccountType, Entry, JournalEntry, Voucher, ledger_for
from asla.ledger import CreditAccount, DebitAccount, LedgerLine, t_account


@pytest.mark.ledger
def test_scenario_ledger_for_cash(scenario_book):
    lines = scenario_book.ledger_for("101")
    assert [x.balance for x in lines] == [10000, 7000]
    assert [(x.debit, x.credit) for x in lines] == [(10000, 0), (0, 3000)]
    assert [x.description for x in lines] == ["cash sale", "fuel purchase"]


@pytest.mark.ledger
def test_credit_normal_account_ledger(scenario_book):
    (line,) = scenario_book.ledger_for("401")
    assert line == LedgerLine(
        date=datetime.date(2024, 4, 1),
        description="cash sale",
        debit=0,
        credit=10000,
        balance=10000,
        voucher_id=line.voucher_id,
    )


@pytest.mark.ledger
def test_ledger_sorts_by_date_not_by_append_order(toy_book):
    toy_book.post(Entry("later").double("501", "101", 300), datetime.date(2024, 5, 1))
    toy_book.post(Entry("earlier").double("101", "401", 1000), datetime.date(2024, 4, 1))
    lines = toy_book.ledger_for("101")
    assert [x.description for x in lines] == ["earlier", "later"]
    assert [x.balance for x in lines] == [1000, 700]


@pytest.mark.ledger
def test_same_date_vouchers_keep_append_order(toy_book):
    day = datetime.date(2024, 4, 1)
    toy_book.post(Entry("fuel").double("501", "101", 300), day)
    toy_book.post(Entry("sale").double("101", "401", 1000), day)
    assert [x.balance for x in toy_book.ledger_for("101")] == [-300, 700]


@pytest.mark.ledger
def test_one_line_per_matching_entry(toy_book):
    entry = (
        Entry("Two fuel receipts")
        .debit("501", 40, "Station A")
        .debit("501", 60)
        .credit("101", 100)
    )
    toy_book.post(entry, datetime.date(2024, 4, 1))
    lines = toy_book.ledger_for("501")
    assert [x.description for x in lines] == ["Station A", "Two fuel receipts"]
    assert [x.balance for x in lines] == [40, 100]


@pytest.mark.ledger
def test_ledger_for_account_without_entries(scenario_book):
    scenario_book.add_account("601", "Rent", AccountType.EXPENSE)
    rent = scenario_book.chart.by_code("601")
    assert scenario_book.ledger_for(rent.id) == ()


@pytest.mark.ledger
def test_ledger_is_restartable(scenario_book):
    assert scenario_book.ledger_for("101") == scenario_book.ledger_for("101")


@pytest.mark.ledger
def test_ledger_for_plain_vouchers():
    cash = Account(code="101", name="Cash", type=AccountType.ASSET)
    other = "elsewhere"
    vouchers = [
        Voucher(
            date=datetime.date(2024, 4, 2),
            description="out",
            debit_entries=(JournalEntry(account_id=other, amount=5),),
            credit_entries=(JournalEntry(account_id=cash.id, amount=5),),
        ),
        Voucher(
            date=datetime.date(2024, 4, 1),
            description="in",
            debit_entries=(JournalEntry(account_id=cash.id, amount=8),),
            credit_entries=(JournalEntry(account_id=other, amount=8),),
        ),
    ]
    assert [x.balance for x in ledger_for(vouchers, cash)] == [8, 3]


@pytest.mark.ledger
def test_t_accounts():
    assert isinstance(
        t_account(Account(code="1", name="Cash", type=AccountType.ASSET)), DebitAccount
    )
    assert isinstance(
        t_account(Account(code="2", name="Loan", type=AccountType.LIABILITY)),
        CreditAccount,
    )
    t = CreditAccount()
    t.credit(10)
    t.debit(4)
    assert (t.left, t.right, t.balance) == (4, 10, 6)
