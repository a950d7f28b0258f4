"""Репозиторий для работы со счетами в БД."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..domain.entities import InvoiceEntity, PaymentEntity
from ..exceptions import RepositoryError
from ..models import InvoiceModel, PaymentModel
from .base import AbstractInvoiceRepository


class InvoiceRepository(AbstractInvoiceRepository):
    """Репозиторий счетов поверх SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Инициализировать репозиторий счетов.

        Args:
            session: Асинхронная сессия SQLAlchemy
        """
        self._session = session

    async def get_invoice(self, reference: str) -> Optional[InvoiceEntity]:
        """
        Получить счет по reference.

        Args:
            reference: Идентификатор счета

        Returns:
            Сущность счета или None
        """
        model = await self._get_model(reference)
        return self._to_entity(model) if model else None

    async def save_invoice(self, invoice: InvoiceEntity) -> None:
        """
        Сохранить суммы счета и новые платежи.

        Платежи только добавляются: уже сохраненные строки не изменяются.

        Raises:
            RepositoryError: Счет не найден или ошибка БД
        """
        try:
            model = await self._get_model(invoice.reference)

            if model is None:
                raise RepositoryError(
                    f"Счет с reference={invoice.reference} не найден",
                    details={"reference": invoice.reference},
                )

            model.amount = invoice.amount
            model.amount_paid = invoice.amount_paid
            model.tax_amount = invoice.tax_amount
            model.type = invoice.type

            for payment in invoice.payments[len(model.payments):]:
                model.payments.append(self._to_payment_model(payment))

            await self._session.flush()
        except RepositoryError:
            raise
        except SQLAlchemyError as exc:
            raise RepositoryError(
                "Ошибка при сохранении счета",
                details={"reference": invoice.reference, "error": str(exc)},
            ) from exc

    async def add_invoice(self, invoice: InvoiceEntity) -> None:
        """
        Добавить новый счет вместе с его платежами.

        Raises:
            RepositoryError: При ошибке добавления
        """
        try:
            self._session.add(self._to_model(invoice))
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise RepositoryError(
                "Ошибка при добавлении счета",
                details={"reference": invoice.reference, "error": str(exc)},
            ) from exc

    async def _get_model(self, reference: str) -> Optional[InvoiceModel]:
        stmt = select(InvoiceModel).where(InvoiceModel.reference == reference)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: InvoiceModel) -> InvoiceEntity:
        """Преобразовать модель БД в доменную сущность."""
        return InvoiceEntity(
            reference=model.reference,
            amount=model.amount,
            amount_paid=model.amount_paid,
            tax_amount=model.tax_amount,
            type=model.type,
            payments=[
                PaymentEntity(reference=payment.reference, amount=payment.amount)
                for payment in model.payments
            ],
        )

    @classmethod
    def _to_model(cls, entity: InvoiceEntity) -> InvoiceModel:
        """Преобразовать доменную сущность в модель БД."""
        return InvoiceModel(
            reference=entity.reference,
            amount=entity.amount,
            amount_paid=entity.amount_paid,
            tax_amount=entity.tax_amount,
            type=entity.type,
            payments=[cls._to_payment_model(payment) for payment in entity.payments],
        )

    @staticmethod
    def _to_payment_model(entity: PaymentEntity) -> PaymentModel:
        return PaymentModel(reference=entity.reference, amount=entity.amount)
