"""Сервис обработки платежей по счетам."""

import logging
from typing import Optional

from ..domain.entities import PaymentEntity, PaymentOutcome
from ..domain.evaluator import PaymentEvaluator
from ..domain.value_objects import INVOICE_NOT_FOUND_MESSAGE
from ..exceptions import InvoiceNotFoundError
from ..uow.unit_of_work import InvoiceUnitOfWork

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Сервис для применения платежей к счетам.

    Находит счет, передает его в PaymentEvaluator и сохраняет результат.
    """

    def __init__(
        self,
        uow: InvoiceUnitOfWork,
        evaluator: Optional[PaymentEvaluator] = None,
    ) -> None:
        self._uow = uow
        self._evaluator = evaluator or PaymentEvaluator()

    async def process_payment(self, payment: PaymentEntity) -> str:
        """
        Обработать платеж.

        Args:
            payment: Входящий платеж

        Returns:
            Сообщение о статусе платежа

        Raises:
            InvoiceNotFoundError: Счет для платежа не найден
            InvoiceInvalidStateError: Счет в противоречивом состоянии
        """
        outcome = await self.apply_payment(payment)
        return outcome.result.message

    async def apply_payment(self, payment: PaymentEntity) -> PaymentOutcome:
        """Обработать платеж и вернуть результат вместе с обновленным счетом."""
        async with self._uow:
            invoice = await self._uow.invoices.get_invoice(payment.reference)

            if invoice is None:
                logger.warning("Счет для платежа не найден: reference=%s", payment.reference)
                raise InvoiceNotFoundError(
                    INVOICE_NOT_FOUND_MESSAGE,
                    details={"reference": payment.reference},
                )

            result = self._evaluator.evaluate(invoice, payment)

            # Счет сохраняется и при отклоненном платеже
            await self._uow.invoices.save_invoice(invoice)
            await self._uow.commit()

        logger.info(
            "Платеж обработан: reference=%s, amount=%s, accepted=%s, message=%s",
            payment.reference,
            payment.amount,
            result.accepted,
            result.message,
        )

        return PaymentOutcome(invoice=invoice, result=result)
