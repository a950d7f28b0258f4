"""Pydantic схемы для работы со счетами и платежами."""

from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class InvoiceType(str, Enum):
    standard = "standard"      # Обычный счет
    commercial = "commercial"  # Коммерческий счет, облагается налогом


class PaymentItem(BaseModel):
    """Платеж, уже привязанный к счету."""
    amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)


class PaymentPayload(BaseModel):
    """Входящий платеж по счету."""
    reference: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)


class InvoiceCreatePayload(BaseModel):
    """Данные для создания счета."""
    reference: str = Field(..., min_length=1)
    amount: Decimal = Field(..., ge=0, max_digits=15, decimal_places=2)
    amount_paid: Decimal = Field(Decimal("0"), ge=0, max_digits=15, decimal_places=2)
    tax_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=17, decimal_places=4)
    type: InvoiceType = InvoiceType.standard
    payments: List[PaymentItem] = []


class PaymentResponseItem(BaseModel):
    """Платеж в ответе API."""
    amount: Decimal


class InvoiceResponse(BaseModel):
    """Ответ API с информацией о счете."""
    reference: str
    amount: Decimal
    amount_paid: Decimal
    tax_amount: Decimal
    type: InvoiceType
    payments: List[PaymentResponseItem]


class PaymentResultResponse(BaseModel):
    """Результат обработки платежа."""
    message: str
    accepted: bool
    invoice: InvoiceResponse
