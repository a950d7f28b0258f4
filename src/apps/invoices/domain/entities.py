"""Доменные сущности счетов и платежей."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..schemas import InvoiceType
from .value_objects import ZERO, PaymentResult


@dataclass(frozen=True)
class PaymentEntity:
    """Доменная сущность платежа. Не изменяется после создания."""

    reference: str
    amount: Decimal = ZERO


@dataclass
class InvoiceEntity:
    """Доменная сущность счета."""

    reference: str
    amount: Decimal = ZERO
    amount_paid: Decimal = ZERO
    tax_amount: Decimal = ZERO
    type: InvoiceType = InvoiceType.standard
    payments: List[PaymentEntity] = field(default_factory=list)

    def has_payments(self) -> bool:
        """Проверить, есть ли у счета платежи."""
        return bool(self.payments)

    def total_paid(self) -> Decimal:
        """Сумма всех привязанных платежей."""
        return sum((payment.amount for payment in self.payments), ZERO)

    def is_commercial(self) -> bool:
        return self.type == InvoiceType.commercial


@dataclass
class PaymentOutcome:
    """Результат обработки платежа сервисом."""

    invoice: InvoiceEntity
    result: PaymentResult
