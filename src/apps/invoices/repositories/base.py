"""Базовый абстрактный репозиторий счетов."""

from abc import ABC, abstractmethod
from typing import Optional

from ..domain.entities import InvoiceEntity


class AbstractInvoiceRepository(ABC):
    """
    Контракт хранилища счетов.

    Любая реализация (в памяти, SQLAlchemy) взаимозаменяема для сервисов.
    """

    @abstractmethod
    async def get_invoice(self, reference: str) -> Optional[InvoiceEntity]:
        """
        Получить счет по reference.

        Args:
            reference: Идентификатор счета

        Returns:
            Сущность счета или None
        """
        raise NotImplementedError

    @abstractmethod
    async def save_invoice(self, invoice: InvoiceEntity) -> None:
        """
        Сохранить состояние счета.

        Args:
            invoice: Сущность счета
        """
        raise NotImplementedError

    @abstractmethod
    async def add_invoice(self, invoice: InvoiceEntity) -> None:
        """
        Добавить новый счет.

        Args:
            invoice: Сущность счета
        """
        raise NotImplementedError
