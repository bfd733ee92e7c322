# routers/rent_payments.py
"""
Rent payment routes: listing, settling, monthly generation and overdue tracking.

Recording a payment for a tenant and a tenant's payment history live
under /api/tenants/{tenant_id}/payments.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

import config
from database import get_session
from models import RentPayment, RentPaymentStatus
from services.errors import StoreError
from services.rent_payment_service import RentPaymentService
from schemas.rent_payment import (
     RentPaymentStatusEnum,
     RentPaymentUpdate,
     RentPaymentResponse,
     RentPaymentListResponse,
     MarkPaidRequest,
     MonthlyGenerationRequest,
)
from .errors import http_error

router = APIRouter(prefix="/api/rent-payments", tags=["rent payments"])


def _listing(payments: List[RentPayment]) -> RentPaymentListResponse:
     return RentPaymentListResponse(
          payments=[RentPaymentResponse.model_validate(p) for p in payments],
          total=len(payments),
     )


@router.get("", response_model=RentPaymentListResponse, summary="List rent payments")
def list_payments(
     status_filter: Optional[RentPaymentStatusEnum] = Query(None, alias="status", description="pending, paid, overdue or partial"),
     db: Session = Depends(get_session)
):
     payment_status = RentPaymentStatus(status_filter.value) if status_filter else None
     return _listing(RentPaymentService.list_payments(db, status=payment_status))


@router.get("/overdue", response_model=RentPaymentListResponse, summary="Overdue payments")
def overdue_payments(db: Session = Depends(get_session)):
     """Payments already flagged overdue. Run **POST /mark-overdue** first to refresh flags."""
     return _listing(RentPaymentService.overdue_payments(db))


@router.get("/upcoming", response_model=RentPaymentListResponse, summary="Payments due soon")
def upcoming_payments(
     days: int = Query(config.UPCOMING_PAYMENT_DAYS, ge=0, le=366, description="Days ahead to look"),
     db: Session = Depends(get_session)
):
     return _listing(RentPaymentService.upcoming_payments(db, days_ahead=days))


@router.post(
     "/generate",
     response_model=RentPaymentListResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Generate monthly rent payments"
)
def generate_monthly(request: MonthlyGenerationRequest, db: Session = Depends(get_session)):
     """
     Create a pending payment for each active tenant with a unit.

     Tenants that already have a payment due in **month**/**year** are skipped,
     so running it twice creates nothing new.
     """
     return _listing(RentPaymentService.generate_monthly_payments(db, request.month, request.year))


@router.post("/mark-overdue", response_model=RentPaymentListResponse, summary="Flag overdue payments")
def mark_overdue(db: Session = Depends(get_session)):
     """Mark every pending payment past its due date as overdue; returns the ones changed."""
     return _listing(RentPaymentService.update_overdue_payments(db))


# ---------------------------------------------------------------------------
# Single payment
# ---------------------------------------------------------------------------

@router.get("/{payment_id}", response_model=RentPaymentResponse, summary="Get rent payment by ID")
def get_payment(payment_id: str, db: Session = Depends(get_session)):
     try:
          return RentPaymentService.get_payment(db, payment_id)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.put("/{payment_id}", response_model=RentPaymentResponse, summary="Update rent payment")
def update_payment(payment_id: str, patch: RentPaymentUpdate, db: Session = Depends(get_session)):
     try:
          return RentPaymentService.update_payment(db, payment_id, patch)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.post("/{payment_id}/mark-paid", response_model=RentPaymentResponse, summary="Mark payment as paid")
def mark_paid(payment_id: str, request: Optional[MarkPaidRequest] = None, db: Session = Depends(get_session)):
     """
     Settle a payment and issue its receipt number.

     - **paid_date**: defaults to today
     - **actual_amount_paid**: when it differs from the amount due
     """
     try:
          return RentPaymentService.mark_paid(db, payment_id, request or MarkPaidRequest())
     except StoreError as exc:
          raise http_error(exc) from exc


@router.delete("/{payment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete rent payment")
def delete_payment(payment_id: str, db: Session = Depends(get_session)):
     try:
          RentPaymentService.delete_payment(db, payment_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return None
