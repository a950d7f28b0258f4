from decimal import Decimal
from typing import List

from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.core.models import Base, DecimalString, TimestampedMixin

from .schemas import InvoiceType

MONEY = DecimalString()


class InvoiceModel(TimestampedMixin, Base):
    __tablename__ = "invoices"

    reference: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    amount_paid: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))
    tax_amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False, default=Decimal("0"))

    type: Mapped[InvoiceType] = mapped_column(
        SAEnum(InvoiceType, name="invoice_type_enum"),
        nullable=False,
        default=InvoiceType.standard,
    )

    payments: Mapped[List["PaymentModel"]] = relationship(
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="PaymentModel.id",
        lazy="selectin",
    )


class PaymentModel(TimestampedMixin, Base):
    __tablename__ = "payments"

    invoice_id: Mapped[int] = mapped_column(
        ForeignKey("invoices.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    reference: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(MONEY, nullable=False)

    invoice: Mapped[InvoiceModel] = relationship(back_populates="payments")
