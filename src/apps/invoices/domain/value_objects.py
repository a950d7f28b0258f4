"""Value Objects для счетов и платежей."""

from dataclasses import dataclass
from decimal import Decimal

COMMERCIAL_TAX_RATE = Decimal("0.14")

ZERO = Decimal("0")

NO_PAYMENT_NEEDED = "no payment needed"
ALREADY_FULLY_PAID = "invoice was already fully paid"
PAYMENT_EXCEEDS_INVOICE_AMOUNT = "the payment is greater than the invoice amount"
PAYMENT_EXCEEDS_REMAINING_AMOUNT = "the payment is greater than the partial amount remaining"
FINAL_PARTIAL_PAYMENT_RECEIVED = "final partial payment received, invoice is now fully paid"
NOW_FULLY_PAID = "invoice is now fully paid"
NOW_PARTIALLY_PAID = "invoice is now partially paid"
ANOTHER_PARTIAL_PAYMENT_RECEIVED = "another partial payment received, still not fully paid"

INVOICE_NOT_FOUND_MESSAGE = "There is no invoice matching this payment"
INVALID_STATE_MESSAGE = "The invoice is in an invalid state."


@dataclass(frozen=True)
class PaymentResult:
    """Результат оценки платежа (Value Object)."""

    message: str
    accepted: bool = False

    @classmethod
    def rejected(cls, message: str) -> "PaymentResult":
        return cls(message=message, accepted=False)

    @classmethod
    def applied(cls, message: str) -> "PaymentResult":
        return cls(message=message, accepted=True)
