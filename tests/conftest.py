import asyncio
import datetime
from types import SimpleNamespace

import pytest

from asla import Account, AccountType, Book, ChartOfAccounts, Entry, VoucherStore

TODAY = datetime.date(2024, 4, 30)
NOW = datetime.datetime(2024, 4, 30, 9, 0)


@pytest.fixture
def toy_chart() -> ChartOfAccounts:
    return ChartOfAccounts(
        [
            Account(id="101", code="101", name="Cash", type=AccountType.ASSET),
            Account(id="401", code="401", name="Revenue", type=AccountType.REVENUE),
            Account(id="501", code="501", name="Fuel", type=AccountType.EXPENSE),
        ]
    )


@pytest.fixture
def store() -> VoucherStore:
    return VoucherStore(today=lambda: TODAY, now=lambda: NOW)


@pytest.fixture
def toy_book(toy_chart, store) -> Book:
    return Book(chart=toy_chart, store=store)


@pytest.fixture
def scenario_book(toy_book) -> Book:
    day = datetime.date(2024, 4, 1)
    toy_book.post(Entry("cash sale").double("101", "401", 10000), day)
    toy_book.post(Entry("fuel purchase").double("501", "101", 3000), day)
    return toy_book


@pytest.fixture
def logistics_book(store) -> Book:
    book = Book(store=store)
    entries = [
        Entry("Capital paid in").double(debit="1102", credit="3101", amount=500_000),
        Entry("Freight invoiced").amount(120_000).debit("1103").credit("4101"),
        Entry("Fuel and tolls")
        .debit("5101", 18_000, "Diesel")
        .debit("5102", 4_000, "Expressway")
        .credit("1101", 22_000),
        Entry("Truck bought on credit").double("1201", "2201", 300_000),
        Entry("Customer paid").double("1102", "1103", 100_000),
        Entry("Salaries paid").double("5106", "1102", 60_000),
    ]
    for day, entry in enumerate(entries, start=1):
        book.post(entry, datetime.date(2024, 4, day))
    return book


class FixedSuggestion:
    def __init__(self, answer):
        self.answer = answer
        self.calls = []

    async def suggest(self, description, side, candidates):
        self.calls.append((description, side, list(candidates)))
        return self.answer


class FixedAdvice:
    def __init__(self, answer):
        self.answer = answer
        self.snapshots = []

    async def advise(self, snapshot):
        self.snapshots.append(snapshot)
        return self.answer


class FailingProvider:
    async def suggest(self, description, side, candidates):
        raise ConnectionError("service unavailable")

    async def advise(self, snapshot):
        raise ConnectionError("service unavailable")


class SlowProvider:
    async def suggest(self, description, side, candidates):
        await asyncio.sleep(10)
        return "Fuel"

    async def advise(self, snapshot):
        await asyncio.sleep(10)
        return "Too late."


class FakeGeminiModel:
    def __init__(self, text):
        self.text = text
        self.prompts = []

    async def generate_content_async(self, prompt):
        self.prompts.append(prompt)
        return SimpleNamespace(text=self.text)
