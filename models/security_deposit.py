# models/security_deposit.py
"""
SecurityDeposit model - deposit held against a tenancy.

Recorded when a tenant moves in with a non-zero deposit; deductions are
appended as JSON entries and the deposit is eventually refunded or forfeited.
"""
import enum
from decimal import Decimal

from sqlalchemy import Column, String, Numeric, Date, Text, JSON, Enum, Index
from .base import Base, TimestampMixin, generate_id


class DepositStatus(str, enum.Enum):
     """Lifecycle of a held deposit."""
     HELD = "held"
     REFUNDED = "refunded"
     FORFEITED = "forfeited"


class SecurityDeposit(TimestampMixin, Base):
     __tablename__ = "security_deposits"
     __table_args__ = (Index("ix_security_deposits_tenant_id", "tenant_id"),)

     id = Column(String(64), primary_key=True, default=generate_id)
     tenant_id = Column(String(64), nullable=False)
     property_id = Column(String(64), nullable=False)
     amount = Column(Numeric(12, 2), nullable=False)
     paid_date = Column(Date, nullable=False)
     refund_date = Column(Date, nullable=True)
     refund_amount = Column(Numeric(12, 2), nullable=True)
     deductions = Column(JSON, nullable=False, default=list)
     status = Column(
          Enum(DepositStatus, name="deposit_status", create_constraint=True),
          default=DepositStatus.HELD,
          nullable=False
     )
     notes = Column(Text, nullable=True)

     def __repr__(self):
          return f"<SecurityDeposit(id={self.id}, tenant_id={self.tenant_id}, amount={self.amount}, status='{self.status.value}')>"

     @property
     def total_deductions(self):
          return sum((Decimal(str(d["amount"])) for d in self.deductions or []), Decimal("0"))
