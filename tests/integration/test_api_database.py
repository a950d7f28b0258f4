"""
Тесты HTTP API на SQLAlchemy-хранилище и выбора Unit of Work.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.apps.invoices import dependencies
from src.apps.invoices.dependencies import get_uow
from src.apps.invoices.uow.unit_of_work import InMemoryUnitOfWork, UnitOfWork
from src.core.config import settings
from src.core.database import get_session
from src.main import app, lifespan


@pytest.fixture
def sqlalchemy_backend(monkeypatch):
    monkeypatch.setattr(settings, "storage_backend", "sqlalchemy")


@pytest.fixture
def memory_backend(monkeypatch):
    monkeypatch.setattr(settings, "storage_backend", "memory")
    dependencies.memory_repository.clear()
    yield
    dependencies.memory_repository.clear()


@pytest_asyncio.fixture
async def db_client(sqlalchemy_backend, db_session):
    app.dependency_overrides[get_session] = lambda: db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def memory_client(memory_backend):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


class TestGetUow:

    @pytest.mark.asyncio
    async def test_memory_backend(self, memory_backend):
        uow = await get_uow(session=MagicMock())

        assert isinstance(uow, InMemoryUnitOfWork)

    @pytest.mark.asyncio
    async def test_sqlalchemy_backend(self, sqlalchemy_backend):
        uow = await get_uow(session=MagicMock())

        assert isinstance(uow, UnitOfWork)


class TestLifespan:

    @pytest.mark.asyncio
    async def test_creates_tables_for_database_backend(self, sqlalchemy_backend, monkeypatch):
        init_db = AsyncMock()
        monkeypatch.setattr("src.main.init_db", init_db)
        monkeypatch.setattr("src.main.db_manager", MagicMock(dispose=AsyncMock()))

        async with lifespan(app):
            pass

        init_db.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_skips_tables_for_memory_backend(self, memory_backend, monkeypatch):
        init_db = AsyncMock()
        monkeypatch.setattr("src.main.init_db", init_db)
        monkeypatch.setattr("src.main.db_manager", MagicMock(dispose=AsyncMock()))

        async with lifespan(app):
            pass

        init_db.assert_not_awaited()


class TestDatabaseApi:

    @pytest.mark.asyncio
    async def test_payment_sequence(self, db_client):
        response = await db_client.post(
            "/api/invoices",
            json={"reference": "INV-1", "amount": "10.00", "type": "commercial"},
        )
        assert response.status_code == 201

        first = await db_client.post("/api/payments", json={"reference": "INV-1", "amount": "4"})
        second = await db_client.post("/api/payments", json={"reference": "INV-1", "amount": "6"})
        third = await db_client.post("/api/payments", json={"reference": "INV-1", "amount": "1"})

        assert first.json()["message"] == "invoice is now partially paid"
        assert second.json()["message"] == "final partial payment received, invoice is now fully paid"
        assert third.json()["message"] == "invoice was already fully paid"
        assert third.json()["accepted"] is False

        invoice = (await db_client.get("/api/invoices/INV-1")).json()
        assert Decimal(invoice["amount_paid"]) == Decimal("10")
        assert Decimal(invoice["tax_amount"]) == Decimal("1.40")
        assert [Decimal(p["amount"]) for p in invoice["payments"]] == [Decimal("4"), Decimal("6")]

    @pytest.mark.asyncio
    async def test_invalid_state_returns_409_and_rolls_back(self, db_client):
        await db_client.post(
            "/api/invoices",
            json={"reference": "INV-1", "amount": "0", "amount_paid": "5", "payments": [{"amount": "5"}]},
        )

        response = await db_client.post("/api/payments", json={"reference": "INV-1", "amount": "1"})

        assert response.status_code == 409
        assert response.json()["error_type"] == "InvoiceInvalidStateError"

        invoice = (await db_client.get("/api/invoices/INV-1")).json()
        assert len(invoice["payments"]) == 1
        assert Decimal(invoice["amount_paid"]) == Decimal("5")

    @pytest.mark.asyncio
    async def test_unknown_reference_returns_404(self, db_client):
        response = await db_client.post("/api/payments", json={"reference": "missing", "amount": "1"})

        assert response.status_code == 404
        assert response.json()["detail"] == "There is no invoice matching this payment"


class TestMemoryBackendApi:

    @pytest.mark.asyncio
    async def test_payment_through_module_repository(self, memory_client):
        await memory_client.post("/api/invoices", json={"reference": "INV-1", "amount": "10"})

        response = await memory_client.post("/api/payments", json={"reference": "INV-1", "amount": "10"})

        assert response.json()["message"] == "final partial payment received, invoice is now fully paid"
        stored = await dependencies.memory_repository.get_invoice("INV-1")
        assert stored.amount_paid == Decimal("10")
