"""Сервис для работы со счетами."""

import logging

from ..domain.entities import InvoiceEntity
from ..exceptions import InvoiceAlreadyExistsError, InvoiceNotFoundError
from ..uow.unit_of_work import InvoiceUnitOfWork

logger = logging.getLogger(__name__)


class InvoiceService:
    """Сервис для создания и получения счетов."""

    def __init__(self, uow: InvoiceUnitOfWork) -> None:
        self._uow = uow

    async def create_invoice(self, invoice: InvoiceEntity) -> InvoiceEntity:
        """
        Создать счет.

        Raises:
            InvoiceAlreadyExistsError: Счет с таким reference уже есть
        """
        async with self._uow:
            existing = await self._uow.invoices.get_invoice(invoice.reference)
            if existing is not None:
                raise InvoiceAlreadyExistsError(
                    f"Счет с reference={invoice.reference} уже существует",
                    details={"reference": invoice.reference},
                )

            await self._uow.invoices.add_invoice(invoice)
            await self._uow.commit()

        logger.info(
            "Счет создан: reference=%s, amount=%s, type=%s",
            invoice.reference,
            invoice.amount,
            invoice.type.value,
        )
        return invoice

    async def get_invoice(self, reference: str) -> InvoiceEntity:
        """Получить счет по reference."""
        invoice = await self._uow.invoices.get_invoice(reference)

        if invoice is None:
            raise InvoiceNotFoundError(
                f"Счет с reference={reference} не найден",
                details={"reference": reference},
            )

        return invoice
