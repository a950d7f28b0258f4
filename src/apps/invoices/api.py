"""API эндпоинты для работы со счетами и платежами."""

import logging

from fastapi import APIRouter, status

from .dependencies import InvoiceSvcDep, PaymentSvcDep
from .domain.entities import InvoiceEntity, PaymentEntity
from .schemas import (
    InvoiceCreatePayload,
    InvoiceResponse,
    PaymentPayload,
    PaymentResponseItem,
    PaymentResultResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(invoice: InvoiceEntity) -> InvoiceResponse:
    return InvoiceResponse(
        reference=invoice.reference,
        amount=invoice.amount,
        amount_paid=invoice.amount_paid,
        tax_amount=invoice.tax_amount,
        type=invoice.type,
        payments=[PaymentResponseItem(amount=p.amount) for p in invoice.payments],
    )


@router.post(
    "/invoices",
    response_model=InvoiceResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_invoice(payload: InvoiceCreatePayload, service: InvoiceSvcDep):
    """
    Создать счет.

    Args:
        payload: Данные счета
        service: Сервис счетов

    Returns:
        Созданный счет
    """
    invoice = InvoiceEntity(
        reference=payload.reference,
        amount=payload.amount,
        amount_paid=payload.amount_paid,
        tax_amount=payload.tax_amount,
        type=payload.type,
        payments=[
            PaymentEntity(reference=payload.reference, amount=item.amount)
            for item in payload.payments
        ],
    )
    created = await service.create_invoice(invoice)
    return _to_response(created)


@router.get("/invoices/{reference}", response_model=InvoiceResponse)
async def get_invoice(reference: str, service: InvoiceSvcDep):
    invoice = await service.get_invoice(reference)
    return _to_response(invoice)


@router.post("/payments", response_model=PaymentResultResponse)
async def process_payment(payload: PaymentPayload, service: PaymentSvcDep):
    """
    Применить платеж к счету.

    Отклоненный платеж не является ошибкой: возвращается 200
    с accepted=false и сообщением о причине.
    """
    logger.info(
        "Получен платеж: reference=%s, amount=%s",
        payload.reference,
        payload.amount,
    )

    outcome = await service.apply_payment(
        PaymentEntity(reference=payload.reference, amount=payload.amount)
    )

    return PaymentResultResponse(
        message=outcome.result.message,
        accepted=outcome.result.accepted,
        invoice=_to_response(outcome.invoice),
    )
