"""Dependency Injection для счетов и платежей."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.database import get_session

from .repositories.memory_repository import InMemoryInvoiceRepository
from .services.invoice_service import InvoiceService
from .services.payment_service import PaymentService
from .uow.unit_of_work import InMemoryUnitOfWork, InvoiceUnitOfWork, UnitOfWork

memory_repository = InMemoryInvoiceRepository()


async def get_uow(session: AsyncSession = Depends(get_session)) -> InvoiceUnitOfWork:
    if settings.storage_backend == "memory":
        return InMemoryUnitOfWork(memory_repository)
    return UnitOfWork(session)


async def get_invoice_service(uow: InvoiceUnitOfWork = Depends(get_uow)) -> InvoiceService:
    """Получить сервис счетов."""
    return InvoiceService(uow=uow)


async def get_payment_service(uow: InvoiceUnitOfWork = Depends(get_uow)) -> PaymentService:
    """Получить сервис платежей."""
    return PaymentService(uow=uow)


InvoiceSvcDep = Annotated[InvoiceService, Depends(get_invoice_service)]
PaymentSvcDep = Annotated[PaymentService, Depends(get_payment_service)]
