"""Репозитории счетов в памяти процесса."""

import copy
from typing import Dict, Optional

from ..domain.entities import InvoiceEntity
from ..exceptions import RepositoryError
from .base import AbstractInvoiceRepository


class InMemoryInvoiceRepository(AbstractInvoiceRepository):
    """Хранит копии счетов в словаре по reference."""

    def __init__(self) -> None:
        self._invoices: Dict[str, InvoiceEntity] = {}

    async def get_invoice(self, reference: str) -> Optional[InvoiceEntity]:
        invoice = self._invoices.get(reference)
        return copy.deepcopy(invoice) if invoice is not None else None

    async def save_invoice(self, invoice: InvoiceEntity) -> None:
        if invoice.reference not in self._invoices:
            raise RepositoryError(
                f"Счет с reference={invoice.reference} не найден",
                details={"reference": invoice.reference},
            )
        self._invoices[invoice.reference] = copy.deepcopy(invoice)

    async def add_invoice(self, invoice: InvoiceEntity) -> None:
        self._invoices[invoice.reference] = copy.deepcopy(invoice)

    def clear(self) -> None:
        self._invoices.clear()


class StagedInvoiceRepository(AbstractInvoiceRepository):
    """
    Накапливает изменения поверх InMemoryInvoiceRepository.

    Изменения попадают в хранилище только в apply(), discard() их сбрасывает.
    """

    def __init__(self, store: InMemoryInvoiceRepository) -> None:
        self._store = store
        self._pending: Dict[str, InvoiceEntity] = {}

    async def get_invoice(self, reference: str) -> Optional[InvoiceEntity]:
        if reference in self._pending:
            return copy.deepcopy(self._pending[reference])
        return await self._store.get_invoice(reference)

    async def save_invoice(self, invoice: InvoiceEntity) -> None:
        if await self.get_invoice(invoice.reference) is None:
            raise RepositoryError(
                f"Счет с reference={invoice.reference} не найден",
                details={"reference": invoice.reference},
            )
        self._pending[invoice.reference] = copy.deepcopy(invoice)

    async def add_invoice(self, invoice: InvoiceEntity) -> None:
        self._pending[invoice.reference] = copy.deepcopy(invoice)

    async def apply(self) -> None:
        for invoice in self._pending.values():
            await self._store.add_invoice(invoice)
        self._pending.clear()

    def discard(self) -> None:
        self._pending.clear()
