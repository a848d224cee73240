"""Integration tests for the SQLAlchemy ledger repositories."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from pocketledger.application.context import UserContext
from pocketledger.domain.ledger import (
    Account,
    AccountType,
    Category,
    CategoryType,
    Transaction,
    TransactionFilter,
)
from pocketledger.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from tests.integration.conftest import TEST_USER_ID, TEST_USER_ID_2


@pytest.fixture
def alice(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session, UserContext(user_id=TEST_USER_ID))


@pytest.fixture
def bob(db_session) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(db_session, UserContext(user_id=TEST_USER_ID_2))


def _account(user_id, name="Checking", balance=100.0) -> Account:
    return Account(user_id=user_id, name=name, type=AccountType.BANK, balance=balance)


class TestAccountRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_round_trip(self, alice):
        repo = alice.account_repository()
        account = Account(
            user_id=TEST_USER_ID,
            name="Visa",
            type=AccountType.CREDIT_CARD,
            balance=-12.5,
        )

        await repo.save(account)
        found = await repo.find_by_id(account.id)

        assert found is not None
        assert found.name == "Visa"
        assert found.type == AccountType.CREDIT_CARD
        assert found.balance == -12.5
        assert found.user_id == TEST_USER_ID
        assert found.is_deleted is False
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_other_user_cannot_see_account(self, alice, bob):
        account = _account(TEST_USER_ID)
        await alice.account_repository().save(account)

        assert await bob.account_repository().find_by_id(account.id) is None
        assert await bob.account_repository().find_by_id(
            account.id,
            include_deleted=True,
        ) is None
        assert await bob.account_repository().find_all() == []

    @pytest.mark.asyncio
    async def test_soft_deleted_hidden_unless_requested(self, alice):
        repo = alice.account_repository()
        account = _account(TEST_USER_ID)
        await repo.save(account)

        account.mark_deleted()
        await repo.save(account)

        assert await repo.find_by_id(account.id) is None
        assert await repo.find_all() == []
        tombstone = await repo.find_by_id(account.id, include_deleted=True)
        assert tombstone is not None
        assert tombstone.is_deleted is True

    @pytest.mark.asyncio
    async def test_update_existing_row(self, alice):
        repo = alice.account_repository()
        account = _account(TEST_USER_ID)
        await repo.save(account)

        account.replace_fields(
            {"name": "Savings", "type": AccountType.BANK, "balance": 9.0},
        )
        await repo.save(account)

        found = await repo.find_by_id(account.id)
        assert found.name == "Savings"
        assert found.balance == 9.0
        assert len(await repo.find_all()) == 1


class TestCategoryRepository:
    @pytest.mark.asyncio
    async def test_list_sorted_by_type(self, alice):
        repo = alice.category_repository()
        for name, kind in [
            ("Salary", CategoryType.INCOME),
            ("Rent", CategoryType.EXPENSE),
            ("Bonus", CategoryType.INCOME),
            ("Food", CategoryType.EXPENSE),
        ]:
            await repo.save(Category(user_id=TEST_USER_ID, name=name, type=kind))

        listed = await repo.find_all()

        assert [(c.type, c.name) for c in listed] == [
            (CategoryType.EXPENSE, "Food"),
            (CategoryType.EXPENSE, "Rent"),
            (CategoryType.INCOME, "Bonus"),
            (CategoryType.INCOME, "Salary"),
        ]


class TestTransactionRepository:
    async def _seed(self, factory):
        account = _account(TEST_USER_ID)
        other_account = _account(TEST_USER_ID, name="Cash")
        category = Category(
            user_id=TEST_USER_ID,
            name="Groceries",
            type=CategoryType.EXPENSE,
        )
        await factory.account_repository().save(account)
        await factory.account_repository().save(other_account)
        await factory.category_repository().save(category)
        return account, other_account, category

    def _txn(self, account, category, when, amount=10.0) -> Transaction:
        return Transaction(
            user_id=TEST_USER_ID,
            amount=amount,
            date=when,
            account_id=account.id,
            category_id=category.id,
        )

    @pytest.mark.asyncio
    async def test_dates_round_trip_as_utc(self, alice):
        account, _, category = await self._seed(alice)
        repo = alice.transaction_repository()
        cet = timezone(timedelta(hours=1))
        txn = self._txn(account, category, datetime(2024, 1, 1, 0, 30, tzinfo=cet))

        await repo.save(txn)
        found = await repo.find_by_id(txn.id)

        assert found.date == datetime(2023, 12, 31, 23, 30, tzinfo=timezone.utc)
        assert found.description is None

    @pytest.mark.asyncio
    async def test_list_newest_first(self, alice):
        account, _, category = await self._seed(alice)
        repo = alice.transaction_repository()
        older = self._txn(account, category, datetime(2024, 1, 1, tzinfo=timezone.utc))
        newer = self._txn(account, category, datetime(2024, 2, 1, tzinfo=timezone.utc))
        await repo.save(older)
        await repo.save(newer)

        listed = await repo.find_all()

        assert [t.id for t in listed] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_find_filtered(self, alice):
        account, other_account, category = await self._seed(alice)
        repo = alice.transaction_repository()
        jan = self._txn(account, category, datetime(2024, 1, 10, tzinfo=timezone.utc))
        feb = self._txn(account, category, datetime(2024, 2, 10, tzinfo=timezone.utc))
        cash = self._txn(
            other_account,
            category,
            datetime(2024, 1, 20, tzinfo=timezone.utc),
        )
        for txn in (jan, feb, cash):
            await repo.save(txn)

        by_account = await repo.find_filtered(TransactionFilter(account_id=account.id))
        in_january = await repo.find_filtered(
            TransactionFilter(
                date_from=datetime(2024, 1, 1, tzinfo=timezone.utc),
                date_to=datetime(2024, 1, 31, 23, 59, 59, tzinfo=timezone.utc),
            ),
        )
        by_category = await repo.find_filtered(
            TransactionFilter(category_id=uuid4()),
        )

        assert {t.id for t in by_account} == {jan.id, feb.id}
        assert {t.id for t in in_january} == {jan.id, cash.id}
        assert by_category == []
