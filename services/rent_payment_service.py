# services/rent_payment_service.py
"""
Rent Payment Service - business logic for tenant rent payments.

Handles recording, updating and settling payments, monthly generation
for active tenants, overdue tracking and per-tenant payment summaries,
separate from the API layer.
"""
import calendar
import logging
import uuid
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

import config
from models import RentPayment, RentPaymentStatus, Tenant
from schemas.rent_payment import (
     RentPaymentCreate,
     RentPaymentUpdate,
     MarkPaidRequest,
     OverdueRentTenant,
)
from .errors import NotFoundError, RecordValidationError
from .tenant_store import TenantStore, to_record

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")

# Columns a null in an update patch must not clear
_REQUIRED_FIELDS = ("amount", "due_date", "status", "payment_method")


def generate_receipt_number(paid_date: date) -> str:
     return f"RCP-{paid_date:%Y%m%d}-{uuid.uuid4().hex[:6].upper()}"


def due_date_for(year: int, month: int, due_day: Optional[int]) -> date:
     """Rent due date in a month; a due day past the month's end falls on its last day."""
     last_day = calendar.monthrange(year, month)[1]
     return date(year, month, min(due_day or config.DEFAULT_RENT_DUE_DAY, last_day))


def _enum_value(value):
     return getattr(value, "value", value)


class RentPaymentService:
     """Service class for rent payment operations."""

     # ------------------------------------------------------------------
     # Lookup
     # ------------------------------------------------------------------

     @staticmethod
     def list_payments(db: Session, status: Optional[RentPaymentStatus] = None) -> List[RentPayment]:
          query = db.query(RentPayment)
          if status is not None:
               query = query.filter(RentPayment.status == status)
          return query.order_by(RentPayment.due_date.desc(), RentPayment.created_at.desc()).all()

     @staticmethod
     def get_payment(db: Session, payment_id: str) -> RentPayment:
          payment = db.get(RentPayment, payment_id)
          if payment is None:
               raise NotFoundError(f"Rent payment with id \"{payment_id}\" not found")
          return payment

     @staticmethod
     def payment_history(db: Session, tenant_id: str) -> List[RentPayment]:
          """All payments for a tenant, newest due date first."""
          TenantStore(db).get_tenant(tenant_id)
          return (
               db.query(RentPayment)
               .filter(RentPayment.tenant_id == tenant_id)
               .order_by(RentPayment.due_date.desc())
               .all()
          )

     # ------------------------------------------------------------------
     # Writes
     # ------------------------------------------------------------------

     @staticmethod
     def record_payment(db: Session, tenant_id: str, payload: RentPaymentCreate) -> RentPayment:
          """
          Record a rent payment for a tenant.

          Args:
               db: SQLAlchemy database session
               tenant_id: Tenant the rent is owed by
               payload: Payment details; the unit defaults to the tenant's

          Returns:
               Created RentPayment (flushed, not committed)

          Raises:
               NotFoundError: If the tenant does not exist
               RecordValidationError: If no unit is given and the tenant has none
          """
          tenant = TenantStore(db).get_tenant(tenant_id)

          if payload.property_id:
               property_id = payload.property_id
               property_type = payload.property_type.value
               building_id = payload.building_id
          elif tenant.property_id and tenant.property_type:
               property_id = tenant.property_id
               property_type = tenant.property_type
               building_id = tenant.building_id
          else:
               raise RecordValidationError(
                    f"Tenant \"{tenant_id}\" is not assigned to a property; give property_id and property_type"
               )

          payment = RentPayment(
               tenant_id=tenant_id,
               property_id=property_id,
               property_type=property_type,
               building_id=building_id,
               amount=payload.amount,
               due_date=payload.due_date,
               status=RentPaymentStatus(payload.status.value),
               payment_method=_enum_value(payload.payment_method) or tenant.payment_method or config.DEFAULT_PAYMENT_METHOD,
               transaction_id=payload.transaction_id,
               late_fee=payload.late_fee,
               discount=payload.discount,
               actual_amount_paid=payload.actual_amount_paid,
               notes=payload.notes,
          )
          if payment.status == RentPaymentStatus.PAID:
               payment.mark_as_paid(payload.paid_date or date.today())
               payment.receipt_number = generate_receipt_number(payment.paid_date)
          else:
               payment.paid_date = payload.paid_date

          db.add(payment)
          db.flush()
          logger.info("Recorded %s rent payment of %s for tenant %s", payment.status.value, payment.amount, tenant_id)
          return payment

     @staticmethod
     def update_payment(db: Session, payment_id: str, patch: RentPaymentUpdate) -> RentPayment:
          payment = RentPaymentService.get_payment(db, payment_id)
          changes = patch.model_dump(exclude_unset=True)
          was_paid = payment.status == RentPaymentStatus.PAID

          for field, value in changes.items():
               if value is None and field in _REQUIRED_FIELDS:
                    continue
               if field == "status":
                    value = RentPaymentStatus(_enum_value(value))
               elif field == "payment_method":
                    value = _enum_value(value)
               setattr(payment, field, value)

          if payment.amount is None or Decimal(str(payment.amount)) <= 0:
               raise RecordValidationError("Rent payment amount must be positive")

          if payment.status == RentPaymentStatus.PAID and not was_paid:
               payment.mark_as_paid(payment.paid_date or date.today())
          if payment.status == RentPaymentStatus.PAID and not payment.receipt_number:
               payment.receipt_number = generate_receipt_number(payment.paid_date)

          db.flush()
          return payment

     @staticmethod
     def delete_payment(db: Session, payment_id: str) -> None:
          payment = RentPaymentService.get_payment(db, payment_id)
          db.delete(payment)
          db.flush()

     @staticmethod
     def delete_for_tenant(db: Session, tenant_id: str) -> int:
          """Remove every payment of a tenant; returns how many were removed."""
          return (
               db.query(RentPayment)
               .filter(RentPayment.tenant_id == tenant_id)
               .delete(synchronize_session="fetch")
          )

     @staticmethod
     def mark_paid(db: Session, payment_id: str, request: MarkPaidRequest) -> RentPayment:
          """
          Settle a payment.

          Raises:
               NotFoundError: If the payment does not exist
               RecordValidationError: If it is already paid
          """
          payment = RentPaymentService.get_payment(db, payment_id)
          if payment.status == RentPaymentStatus.PAID:
               raise RecordValidationError(f"Rent payment \"{payment_id}\" is already paid")

          payment.mark_as_paid(request.paid_date or date.today())
          if request.payment_method is not None:
               payment.payment_method = request.payment_method.value
          if request.transaction_id:
               payment.transaction_id = request.transaction_id
          if request.actual_amount_paid is not None:
               payment.actual_amount_paid = request.actual_amount_paid
          if not payment.receipt_number:
               payment.receipt_number = generate_receipt_number(payment.paid_date)

          db.flush()
          logger.info("Rent payment %s marked paid (receipt %s)", payment.id, payment.receipt_number)
          return payment

     # ------------------------------------------------------------------
     # Scheduling
     # ------------------------------------------------------------------

     @staticmethod
     def generate_monthly_payments(db: Session, month: int, year: int) -> List[RentPayment]:
          """
          Create a pending payment for every active, assigned tenant that
          has none due in the given month yet.
          """
          first = date(year, month, 1)
          last = date(year, month, calendar.monthrange(year, month)[1])

          tenants = (
               db.query(Tenant)
               .filter(Tenant.is_active.is_(True), Tenant.property_id.isnot(None))
               .all()
          )
          created = []
          for tenant in tenants:
               if not tenant.property_type:
                    continue
               existing = (
                    db.query(RentPayment)
                    .filter(
                         RentPayment.tenant_id == tenant.id,
                         RentPayment.due_date >= first,
                         RentPayment.due_date <= last,
                    )
                    .first()
               )
               if existing:
                    continue
               payment = RentPayment(
                    tenant_id=tenant.id,
                    property_id=tenant.property_id,
                    property_type=tenant.property_type,
                    building_id=tenant.building_id,
                    amount=tenant.rent_amount,
                    due_date=due_date_for(year, month, tenant.rent_due_day),
                    status=RentPaymentStatus.PENDING,
                    payment_method=tenant.payment_method or config.DEFAULT_PAYMENT_METHOD,
               )
               db.add(payment)
               created.append(payment)

          db.flush()
          logger.info("Generated %d rent payment(s) for %04d-%02d", len(created), year, month)
          return created

     @staticmethod
     def update_overdue_payments(db: Session, today: Optional[date] = None) -> List[RentPayment]:
          """Flip pending payments past their due date to overdue."""
          today = today or date.today()
          pending = db.query(RentPayment).filter(RentPayment.status == RentPaymentStatus.PENDING).all()
          updated = [p for p in pending if p.is_overdue_on(today)]
          for payment in updated:
               payment.mark_as_overdue()
          db.flush()
          return updated

     @staticmethod
     def overdue_payments(db: Session) -> List[RentPayment]:
          return RentPaymentService.list_payments(db, status=RentPaymentStatus.OVERDUE)

     @staticmethod
     def upcoming_payments(db: Session, days_ahead: Optional[int] = None, today: Optional[date] = None) -> List[RentPayment]:
          """Pending payments due between today and days_ahead from now, soonest first."""
          today = today or date.today()
          days_ahead = config.UPCOMING_PAYMENT_DAYS if days_ahead is None else days_ahead
          return (
               db.query(RentPayment)
               .filter(
                    RentPayment.status == RentPaymentStatus.PENDING,
                    RentPayment.due_date >= today,
                    RentPayment.due_date <= today + timedelta(days=days_ahead),
               )
               .order_by(RentPayment.due_date)
               .all()
          )

     @staticmethod
     def overdue_rent_tenants(db: Session, today: Optional[date] = None) -> List[OverdueRentTenant]:
          """
          Active tenants whose rent for the current month is past due and
          not paid, most days past due first.
          """
          today = today or date.today()
          first = today.replace(day=1)
          last = date(today.year, today.month, calendar.monthrange(today.year, today.month)[1])

          paid_this_month: Dict[str, bool] = {}
          for payment in (
               db.query(RentPayment)
               .filter(RentPayment.due_date >= first, RentPayment.due_date <= last)
               .all()
          ):
               if payment.status == RentPaymentStatus.PAID:
                    paid_this_month[payment.tenant_id] = True
               else:
                    paid_this_month.setdefault(payment.tenant_id, False)

          results = []
          for tenant in TenantStore(db).get_tenants(active_only=True):
               due = due_date_for(today.year, today.month, tenant.rent_due_day)
               if today <= due or paid_this_month.get(tenant.id):
                    continue
               results.append(OverdueRentTenant(
                    tenant=to_record(tenant),
                    days_past_due=(today - due).days,
                    overdue_amount=Decimal(str(tenant.rent_amount or 0)),
               ))

          results.sort(key=lambda r: r.days_past_due, reverse=True)
          return results

     # ------------------------------------------------------------------
     # Summaries
     # ------------------------------------------------------------------

     @staticmethod
     def tenant_summary(db: Session, tenant: Tenant) -> Tuple[Decimal, Decimal, int]:
          """
          Returns (total_rent_paid, average_monthly_rent, payment_count).

          The average is over all recorded payments; with none it is the
          agreed rent.
          """
          history = (
               db.query(RentPayment)
               .filter(RentPayment.tenant_id == tenant.id)
               .all()
          )
          total_paid = sum(
               (
                    Decimal(str(p.actual_amount_paid if p.actual_amount_paid is not None else p.amount))
                    for p in history
                    if p.status == RentPaymentStatus.PAID
               ),
               Decimal("0"),
          )
          if history:
               average = (total_paid / len(history)).quantize(_CENT)
          else:
               average = Decimal(str(tenant.rent_amount or 0))
          return total_paid, average, len(history)
