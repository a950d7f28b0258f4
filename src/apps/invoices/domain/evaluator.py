"""Оценка платежа по счету."""

import logging
from decimal import Decimal

from ..exceptions import InvoiceInvalidStateError
from .entities import InvoiceEntity, PaymentEntity
from .value_objects import (
    ALREADY_FULLY_PAID,
    ANOTHER_PARTIAL_PAYMENT_RECEIVED,
    COMMERCIAL_TAX_RATE,
    FINAL_PARTIAL_PAYMENT_RECEIVED,
    INVALID_STATE_MESSAGE,
    NO_PAYMENT_NEEDED,
    NOW_FULLY_PAID,
    NOW_PARTIALLY_PAID,
    PAYMENT_EXCEEDS_INVOICE_AMOUNT,
    PAYMENT_EXCEEDS_REMAINING_AMOUNT,
    ZERO,
    PaymentResult,
)

logger = logging.getLogger(__name__)


class PaymentEvaluator:
    """
    Решает, принять ли платеж по счету.

    При принятии платежа изменяет счет на месте: добавляет платеж,
    увеличивает оплаченную сумму и, для коммерческих счетов, налог.
    Сам платеж никогда не изменяется.
    """

    def evaluate(self, invoice: InvoiceEntity, payment: PaymentEntity) -> PaymentResult:
        """
        Оценить платеж.

        Args:
            invoice: Счет, к которому относится платеж
            payment: Входящий платеж

        Returns:
            Результат с сообщением о статусе

        Raises:
            InvoiceInvalidStateError: Счет с нулевой суммой уже имеет платежи
        """
        if invoice.amount == ZERO:
            return self._handle_zero_amount(invoice)

        total_paid = invoice.total_paid()

        rejection = self._validate_amount(invoice, payment, total_paid)
        if rejection is not None:
            return rejection

        return self._apply_payment(invoice, payment, total_paid)

    @staticmethod
    def _handle_zero_amount(invoice: InvoiceEntity) -> PaymentResult:
        if not invoice.has_payments():
            return PaymentResult.rejected(NO_PAYMENT_NEEDED)

        logger.error(
            "Счет %s с нулевой суммой содержит платежи: count=%d",
            invoice.reference,
            len(invoice.payments),
        )
        raise InvoiceInvalidStateError(
            INVALID_STATE_MESSAGE,
            details={
                "reference": invoice.reference,
                "payments": len(invoice.payments),
            },
        )

    @staticmethod
    def _validate_amount(
        invoice: InvoiceEntity,
        payment: PaymentEntity,
        total_paid: Decimal,
    ) -> PaymentResult | None:
        if total_paid >= invoice.amount:
            return PaymentResult.rejected(ALREADY_FULLY_PAID)

        if total_paid == ZERO:
            if payment.amount > invoice.amount:
                return PaymentResult.rejected(PAYMENT_EXCEEDS_INVOICE_AMOUNT)
        elif payment.amount > invoice.amount - total_paid:
            return PaymentResult.rejected(PAYMENT_EXCEEDS_REMAINING_AMOUNT)

        return None

    def _apply_payment(
        self,
        invoice: InvoiceEntity,
        payment: PaymentEntity,
        total_paid: Decimal,
    ) -> PaymentResult:
        remaining_amount = invoice.amount - total_paid
        is_first_payment = total_paid == ZERO

        invoice.payments.append(payment)
        if invoice.is_commercial():
            invoice.tax_amount += payment.amount * COMMERCIAL_TAX_RATE
        invoice.amount_paid += payment.amount

        return PaymentResult.applied(
            self._determine_message(
                invoice,
                payment,
                remaining_amount,
                is_first_payment,
            )
        )

    @staticmethod
    def _determine_message(
        invoice: InvoiceEntity,
        payment: PaymentEntity,
        remaining_amount: Decimal,
        is_first_payment: bool,
    ) -> str:
        # remaining_amount берется до применения платежа
        if payment.amount == remaining_amount:
            return FINAL_PARTIAL_PAYMENT_RECEIVED

        if invoice.amount_paid == invoice.amount:
            return NOW_FULLY_PAID

        if is_first_payment and invoice.amount_paid < invoice.amount:
            return NOW_PARTIALLY_PAID

        return ANOTHER_PARTIAL_PAYMENT_RECEIVED
