"""
SubTracker Backend: Payment Service Unit Tests
=================================================

What:  PaymentService and the spending aggregation over an in-memory store.

What we test:
    ✅ Payment date always comes from the server clock
    ✅ Spending sums per exact subscription name
    ✅ Empty history gives an empty mapping
    ✅ Reads are idempotent and do not write
    ✅ Store failures surface as DatabaseError
"""

from datetime import date

import pytest
from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.exc import OperationalError

from subtracker.exceptions import DatabaseError
from subtracker.models.payment import Payment
from subtracker.schemas.payment import PaymentCreate
from subtracker.services.payment_service import PaymentService, sum_by_subscription


def fixed_clock(*days: date):
    """Clock returning the given dates in order, one per call."""
    remaining = iter(days)
    return lambda: next(remaining)


def payment_input(name: str = "Netflix", amount: float = 15.99) -> PaymentCreate:
    return PaymentCreate(subscription_name=name, amount=amount)


class TestPaymentCreate:
    """Tests for PaymentService.create."""

    @pytest.mark.asyncio
    async def test_date_is_set_from_server_clock(self, payment_store):
        """Payment date should come from the injected clock."""
        service = PaymentService(payment_store, today=fixed_clock(date(2024, 7, 1)))

        created = await service.create(payment_input())

        assert created.id is not None
        assert created.subscription_name == "Netflix"
        assert created.amount == 15.99
        assert created.date == "2024-07-01"

    @pytest.mark.asyncio
    async def test_client_supplied_date_is_discarded(self, payment_store):
        """A date sent by the client should never be stored."""
        service = PaymentService(payment_store, today=fixed_clock(date(2024, 7, 1)))
        body = PaymentCreate.model_validate(
            {"subscriptionName": "Netflix", "amount": 15.99, "date": "1999-12-31"}
        )

        created = await service.create(body)

        assert created.date == "2024-07-01"
        stored = (await service.list())[0]
        assert stored.date == "2024-07-01"

    @pytest.mark.asyncio
    async def test_default_clock_is_today(self, payment_store):
        """Without an injected clock the date should be today."""
        service = PaymentService(payment_store)

        created = await service.create(payment_input())

        assert created.date == date.today().isoformat()

    @pytest.mark.asyncio
    async def test_payments_on_two_days_keep_their_own_dates(self, payment_store):
        """Each payment should keep the day it was created on."""
        service = PaymentService(
            payment_store,
            today=fixed_clock(date(2024, 7, 1), date(2024, 8, 1)),
        )

        first = await service.create(payment_input())
        second = await service.create(payment_input())

        assert first.date == "2024-07-01"
        assert second.date == "2024-08-01"
        assert await service.spending_by_subscription() == {"Netflix": 31.98}

    @pytest.mark.asyncio
    async def test_subscription_name_is_not_checked(self, payment_store):
        """Any subscription name should be accepted as is."""
        service = PaymentService(payment_store, today=fixed_clock(date(2024, 7, 1)))

        created = await service.create(payment_input("No such subscription", 1.0))

        assert created.subscription_name == "No such subscription"


class TestSpending:
    """Tests for spending_by_subscription and sum_by_subscription."""

    @pytest.mark.asyncio
    async def test_empty_store_gives_empty_mapping(self, payment_store):
        """No payments should give an empty mapping."""
        service = PaymentService(payment_store)
        assert await service.spending_by_subscription() == {}

    @pytest.mark.asyncio
    async def test_sums_per_subscription(self, payment_store):
        """Amounts should be summed per subscription name."""
        service = PaymentService(payment_store, today=lambda: date(2024, 7, 1))
        for name, amount in [("Netflix", 15.99), ("Spotify", 9.99), ("Netflix", 15.99)]:
            await service.create(payment_input(name, amount))

        assert await service.spending_by_subscription() == {
            "Netflix": 31.98,
            "Spotify": 9.99,
        }

    @pytest.mark.asyncio
    async def test_spending_is_read_only_and_idempotent(self, payment_store):
        """Repeated reads should agree and write nothing."""
        service = PaymentService(payment_store, today=lambda: date(2024, 7, 1))
        await service.create(payment_input("Netflix", 15.99))
        await service.create(payment_input("Spotify", 9.99))

        first = await service.spending_by_subscription()
        second = await service.spending_by_subscription()

        assert first == second
        assert len(payment_store) == 2

    def test_grouping_is_exact_and_case_sensitive(self):
        """Names differing in case or whitespace should stay separate."""
        payments = [
            Payment(subscription_name="Netflix", amount=10.0, date="2024-07-01"),
            Payment(subscription_name="netflix", amount=1.0, date="2024-07-01"),
            Payment(subscription_name="Netflix ", amount=2.0, date="2024-07-01"),
        ]

        assert sum_by_subscription(payments) == {
            "Netflix": 10.0,
            "netflix": 1.0,
            "Netflix ": 2.0,
        }

    def test_sum_matches_float_addition(self):
        """Totals should equal plain float addition in store order."""
        amounts = [0.1, 0.2, 0.3]
        payments = [
            Payment(subscription_name="Cloud", amount=a, date="2024-07-01") for a in amounts
        ]

        assert sum_by_subscription(payments) == {"Cloud": 0.0 + 0.1 + 0.2 + 0.3}

    def test_no_payments_no_entries(self):
        """An empty iterable should give an empty mapping."""
        assert sum_by_subscription([]) == {}


class TestPaymentList:
    """Tests for PaymentService.list."""

    @pytest.mark.asyncio
    async def test_list_returns_every_payment(self, payment_store):
        """Every created payment should be listed in order."""
        service = PaymentService(payment_store, today=lambda: date(2024, 7, 1))
        a = await service.create(payment_input("Netflix", 15.99))
        b = await service.create(payment_input("Spotify", 9.99))

        assert await service.list() == [a, b]


class TestPaymentStoreFailures:
    """Tests for store errors mapped to DatabaseError."""

    def setup_method(self):
        self.store = MagicMock()
        failure = OperationalError("SELECT 1", {}, Exception("connection lost"))
        self.store.find_all = AsyncMock(side_effect=failure)
        self.store.save = AsyncMock(side_effect=failure)
        self.service = PaymentService(self.store, today=lambda: date(2024, 7, 1))

    @pytest.mark.asyncio
    async def test_create_failure_raises_database_error(self):
        """Failed save should raise DatabaseError."""
        with pytest.raises(DatabaseError):
            await self.service.create(payment_input())

    @pytest.mark.asyncio
    async def test_spending_failure_raises_database_error(self):
        """Failed read should raise DatabaseError."""
        with pytest.raises(DatabaseError):
            await self.service.spending_by_subscription()
