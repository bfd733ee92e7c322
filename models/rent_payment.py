# models/rent_payment.py
import enum
from datetime import date

from sqlalchemy import Column, String, Text, Numeric, Date, Enum, Index
from .base import Base, TimestampMixin, generate_id


class RentPaymentStatus(str, enum.Enum):
     """Enumeration for rent payment status."""
     PENDING = "pending"
     PAID = "paid"
     OVERDUE = "overdue"
     PARTIAL = "partial"


class RentPayment(TimestampMixin, Base):
     """
     RentPayment model - one month's rent owed by a tenant for a unit.

     Payments are generated per month or recorded by hand; marking one
     paid stamps the paid date and issues a receipt number.
     """
     __tablename__ = "rent_payments"
     __table_args__ = (
          Index("ix_rent_payments_tenant_due", "tenant_id", "due_date"),
     )

     id = Column(String(64), primary_key=True, default=generate_id)
     tenant_id = Column(String(64), nullable=False, index=True)

     # Unit the rent is for
     property_id = Column(String(64), nullable=False)
     property_type = Column(String(20), nullable=False)  # apartment, flat, land
     building_id = Column(String(64), nullable=True)

     # Amounts
     amount = Column(Numeric(12, 2), nullable=False)
     late_fee = Column(Numeric(10, 2), nullable=True)
     discount = Column(Numeric(10, 2), nullable=True)
     actual_amount_paid = Column(Numeric(12, 2), nullable=True)

     due_date = Column(Date, nullable=False, index=True)
     paid_date = Column(Date, nullable=True)
     status = Column(
          Enum(RentPaymentStatus, name="rent_payment_status", create_constraint=True),
          default=RentPaymentStatus.PENDING,
          nullable=False,
          index=True
     )
     payment_method = Column(String(20), nullable=False, default="bank_transfer")
     transaction_id = Column(String(100), nullable=True)
     receipt_number = Column(String(50), nullable=True)
     notes = Column(Text, nullable=True)

     def __repr__(self):
          return f"<RentPayment(id={self.id}, tenant_id={self.tenant_id}, amount={self.amount}, status='{self.status.value}', due_date={self.due_date})>"

     def is_overdue_on(self, today: date) -> bool:
          """Pending and past its due date."""
          return self.status == RentPaymentStatus.PENDING and self.due_date < today

     def mark_as_paid(self, paid_date: date) -> None:
          self.status = RentPaymentStatus.PAID
          self.paid_date = paid_date

     def mark_as_overdue(self) -> None:
          self.status = RentPaymentStatus.OVERDUE
