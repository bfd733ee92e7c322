# services/deposit_service.py
"""
Security Deposit Service - deposits held against a tenancy.

A deposit is recorded when a tenant moves in with a non-zero deposit.
Deductions are appended to the JSON list; a refund closes the deposit.
"""
import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified

from models import SecurityDeposit, DepositStatus
from schemas.deposit import DeductionCreate, RefundRequest
from .errors import NotFoundError, RecordValidationError

logger = logging.getLogger(__name__)


class DepositService:
     """Service for security deposit operations"""

     @staticmethod
     def get_by_tenant(db: Session, tenant_id: str) -> Optional[SecurityDeposit]:
          """Most recent deposit recorded for a tenant, or None."""
          return (
               db.query(SecurityDeposit)
               .filter(SecurityDeposit.tenant_id == tenant_id)
               .order_by(SecurityDeposit.paid_date.desc(), SecurityDeposit.created_at.desc())
               .first()
          )

     @staticmethod
     def require_by_tenant(db: Session, tenant_id: str) -> SecurityDeposit:
          deposit = DepositService.get_by_tenant(db, tenant_id)
          if deposit is None:
               raise NotFoundError(f"No security deposit recorded for tenant \"{tenant_id}\"")
          return deposit

     @staticmethod
     def record(
          db: Session,
          tenant_id: str,
          property_id: str,
          amount: Decimal,
          paid_date: Optional[date] = None,
          notes: Optional[str] = None,
     ) -> SecurityDeposit:
          """
          Record a held deposit.

          Raises:
               RecordValidationError: If amount is not positive.
          """
          if amount is None or Decimal(str(amount)) <= 0:
               raise RecordValidationError("Security deposit amount must be greater than zero")

          deposit = SecurityDeposit(
               tenant_id=tenant_id,
               property_id=property_id,
               amount=Decimal(str(amount)),
               paid_date=paid_date or date.today(),
               deductions=[],
               status=DepositStatus.HELD,
               notes=notes,
          )
          db.add(deposit)
          db.flush()
          logger.info("Recorded security deposit %s for tenant %s", deposit.amount, tenant_id)
          return deposit

     @staticmethod
     def add_deduction(db: Session, tenant_id: str, deduction: DeductionCreate) -> SecurityDeposit:
          """
          Deduct from a held deposit.

          Raises:
               NotFoundError: If the tenant has no deposit.
               RecordValidationError: If the deposit is closed or the
                    deductions would exceed the deposit.
          """
          deposit = DepositService.require_by_tenant(db, tenant_id)
          if deposit.status != DepositStatus.HELD:
               raise RecordValidationError(f"Cannot deduct from a {deposit.status.value} deposit")

          amount = Decimal(str(deduction.amount))
          if deposit.total_deductions + amount > Decimal(str(deposit.amount)):
               raise RecordValidationError("Deductions cannot exceed the deposit amount")

          entries = list(deposit.deductions or [])
          entries.append({
               "id": uuid.uuid4().hex,
               "description": deduction.description,
               "amount": str(amount),
               "category": deduction.category.value,
               "deducted_on": (deduction.deducted_on or date.today()).isoformat(),
          })
          deposit.deductions = entries
          flag_modified(deposit, "deductions")
          db.flush()
          logger.info("Deducted %s (%s) from deposit of tenant %s", amount, deduction.category.value, tenant_id)
          return deposit

     @staticmethod
     def refund(db: Session, tenant_id: str, request: RefundRequest) -> SecurityDeposit:
          """Refund a held deposit; refund may not exceed amount minus deductions."""
          deposit = DepositService.require_by_tenant(db, tenant_id)
          if deposit.status != DepositStatus.HELD:
               raise RecordValidationError(f"Deposit is already {deposit.status.value}")

          balance = Decimal(str(deposit.amount)) - deposit.total_deductions
          if Decimal(str(request.refund_amount)) > balance:
               raise RecordValidationError(f"Refund cannot exceed the remaining balance of {balance}")

          deposit.refund_amount = request.refund_amount
          deposit.refund_date = date.today()
          deposit.status = DepositStatus.REFUNDED
          if request.notes:
               deposit.notes = request.notes
          db.flush()
          logger.info("Refunded %s to tenant %s", request.refund_amount, tenant_id)
          return deposit

     @staticmethod
     def delete_for_tenant(db: Session, tenant_id: str) -> int:
          """Remove every deposit recorded for a tenant; returns how many were removed."""
          removed = (
               db.query(SecurityDeposit)
               .filter(SecurityDeposit.tenant_id == tenant_id)
               .delete(synchronize_session="fetch")
          )
          if removed:
               logger.info("Removed %d security deposit(s) of deleted tenant %s", removed, tenant_id)
          return removed

     @staticmethod
     def balance(deposit: SecurityDeposit) -> Decimal:
          """Amount still held: deposit minus deductions minus any refund."""
          remaining = Decimal(str(deposit.amount)) - deposit.total_deductions
          if deposit.refund_amount is not None:
               remaining -= Decimal(str(deposit.refund_amount))
          return remaining
