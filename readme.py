import datetime

from asla import AccountType, Book, Entry

# Book with the standard chart of accounts
book = Book()
book.add_account("5201", "Vehicle insurance", AccountType.EXPENSE)

# Post vouchers, accounts are referred to by code
# fmt: off
entries = [
    Entry("Capital paid in").amount(1_000_000).debit("1102").credit("3101"),
    Entry("Freight invoiced").double(debit="1103", credit="4101", amount=250_000),
    Entry("Fuel and tolls").debit("5101", 40_000, "Diesel").debit("5102", 8_000, "Expressway").credit("1101", 48_000),
    Entry("Insurance paid").double(debit="5201", credit="1102", amount=30_000),
]
# fmt: on
book.post_many(entries, datetime.date(2024, 4, 1))

# Cancel the insurance voucher with a reversal
book.reverse_voucher(book.recent_vouchers(1)[0].id)

for line in book.ledger_for(book.chart.by_code("1102").id):
    print(line.date, line.description, line.debit, line.credit, line.balance)

tb = book.trial_balance()
assert tb.is_balanced()
print(tb.to_json(indent=2))

fs = book.financial_statements()
assert fs.net_income == 202_000
assert fs.balance_sheet.is_balanced()
