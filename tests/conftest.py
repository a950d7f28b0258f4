"""
Общие фикстуры для тестов.
"""

import os
import tempfile
from decimal import Decimal

# Настройки задаются до импорта модулей приложения
os.environ.update({
    "IPS_DATABASE_URL": "sqlite+aiosqlite:///:memory:",
    "IPS_STORAGE_BACKEND": "memory",
    "IPS_LOG_LEVEL": "WARNING",
    "IPS_LOG_DIR": tempfile.mkdtemp(prefix="ips-logs-"),
})

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool

from src.apps.invoices.domain.entities import InvoiceEntity, PaymentEntity
from src.apps.invoices.repositories.memory_repository import InMemoryInvoiceRepository
from src.apps.invoices.schemas import InvoiceType
from src.apps.invoices.uow.unit_of_work import InMemoryUnitOfWork
from src.core.database import DatabaseManager


def make_invoice(
    amount,
    payments=(),
    type=InvoiceType.standard,
    reference="INV-1",
    amount_paid=None,
    tax_amount="0",
) -> InvoiceEntity:
    """Собрать счет; amount_paid по умолчанию равен сумме платежей."""
    payment_entities = [
        PaymentEntity(reference=reference, amount=Decimal(str(value)))
        for value in payments
    ]
    paid = (
        Decimal(str(amount_paid))
        if amount_paid is not None
        else sum((p.amount for p in payment_entities), Decimal("0"))
    )
    return InvoiceEntity(
        reference=reference,
        amount=Decimal(str(amount)),
        amount_paid=paid,
        tax_amount=Decimal(str(tax_amount)),
        type=type,
        payments=payment_entities,
    )


def make_payment(amount, reference="INV-1") -> PaymentEntity:
    return PaymentEntity(reference=reference, amount=Decimal(str(amount)))


@pytest.fixture
def invoice_factory():
    return make_invoice


@pytest.fixture
def payment_factory():
    return make_payment


@pytest.fixture
def memory_repository():
    return InMemoryInvoiceRepository()


@pytest.fixture
def memory_uow(memory_repository):
    return InMemoryUnitOfWork(memory_repository)


@pytest_asyncio.fixture
async def db_session():
    """Сессия SQLite в памяти с созданными таблицами."""
    manager = DatabaseManager(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    await manager.create_all()

    async with manager.session_factory() as session:
        yield session

    await manager.dispose()
