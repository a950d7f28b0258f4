"""Unit of Work для управления транзакциями."""

from abc import abstractmethod
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.uow import IUnitOfWork

from ..repositories.base import AbstractInvoiceRepository
from ..repositories.invoice_repository import InvoiceRepository
from ..repositories.memory_repository import (
    InMemoryInvoiceRepository,
    StagedInvoiceRepository,
)


class InvoiceUnitOfWork(IUnitOfWork):
    """Unit of Work с доступом к репозиторию счетов."""

    @property
    @abstractmethod
    def invoices(self) -> AbstractInvoiceRepository:
        raise NotImplementedError


class UnitOfWork(InvoiceUnitOfWork):
    """
    Unit of Work поверх сессии SQLAlchemy.

    Обеспечивает:
    - Единую точку входа для работы с репозиторием счетов
    - Управление транзакциями
    - Автоматический rollback при исключении
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Инициализировать Unit of Work.

        Args:
            session: Асинхронная сессия SQLAlchemy
        """
        self._session = session
        self._invoices: Optional[InvoiceRepository] = None

    @property
    def invoices(self) -> AbstractInvoiceRepository:
        """Получить репозиторий счетов."""
        if self._invoices is None:
            self._invoices = InvoiceRepository(self._session)
        return self._invoices

    async def commit(self) -> None:
        """Зафиксировать изменения в БД."""
        await self._session.commit()

    async def rollback(self) -> None:
        """Откатить изменения."""
        await self._session.rollback()


class InMemoryUnitOfWork(InvoiceUnitOfWork):
    """
    Unit of Work для хранилища в памяти.

    Сохранения копятся до commit(), rollback() их отбрасывает.
    """

    def __init__(self, repository: InMemoryInvoiceRepository) -> None:
        self._invoices = StagedInvoiceRepository(repository)

    @property
    def invoices(self) -> AbstractInvoiceRepository:
        return self._invoices

    async def commit(self) -> None:
        await self._invoices.apply()

    async def rollback(self) -> None:
        self._invoices.discard()
