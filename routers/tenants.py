# routers/tenants.py
"""
Tenant API routes.

Create/update accept the simplified tenant form and run the full flow:
resolve property -> build tenant -> save tenant -> sync occupancy.
Write responses carry the notifications produced along the way.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

import config
from database import get_session
from services.deposit_service import DepositService
from services.rent_payment_service import RentPaymentService
from services.errors import StoreError
from services.notifications import Notifier
from services.tenant_service import TenantService
from schemas.tenant import (
     TenantForm,
     TenantRecord,
     TenantSubmissionResponse,
     TenantRemovalResponse,
     TenantListResponse,
     MoveInRequest,
     MoveOutRequest,
     TenantAnalytics,
)
from schemas.deposit import DeductionCreate, RefundRequest, SecurityDepositResponse
from schemas.rent_payment import (
     RentPaymentCreate,
     RentPaymentResponse,
     RentPaymentListResponse,
     OverdueRentResponse,
)
from .errors import http_error

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


def _persistence_failed(exc: SQLAlchemyError) -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
          detail=f"Tenant could not be saved: {exc.__class__.__name__}"
     )


# ---------------------------------------------------------------------------
# Listing and lookup
# ---------------------------------------------------------------------------

@router.get("", response_model=TenantListResponse, summary="List tenants")
def list_tenants(
     active_only: bool = Query(False, description="Only tenants currently renting"),
     db: Session = Depends(get_session)
):
     tenants = TenantService(db).list_tenants(active_only=active_only)
     return TenantListResponse(tenants=tenants, total=len(tenants))


@router.get("/search", response_model=TenantListResponse, summary="Search tenants")
def search_tenants(
     q: str = Query(..., min_length=1, description="Name, occupation, phone, email, agreement, Aadhar or PAN"),
     db: Session = Depends(get_session)
):
     tenants = TenantService(db).search(q)
     return TenantListResponse(tenants=tenants, total=len(tenants))


@router.get("/expiring", response_model=TenantListResponse, summary="Agreements expiring soon")
def expiring_agreements(
     days: int = Query(config.EXPIRING_AGREEMENT_DAYS, ge=0, le=3650, description="Days ahead to look"),
     db: Session = Depends(get_session)
):
     """Active tenants whose agreement ends within **days** days (already expired included)."""
     tenants = TenantService(db).expiring(days)
     return TenantListResponse(tenants=tenants, total=len(tenants))


@router.get("/overdue-rent", response_model=OverdueRentResponse, summary="Tenants with overdue rent")
def overdue_rent_tenants(db: Session = Depends(get_session)):
     """
     Active tenants whose rent for the current month is past its due day
     and not paid, sorted by **days_past_due** (most overdue first).
     """
     tenants = RentPaymentService.overdue_rent_tenants(db)
     return OverdueRentResponse(tenants=tenants, total=len(tenants))


@router.get("/{tenant_id}", response_model=TenantRecord, summary="Get tenant by ID")
def get_tenant(tenant_id: str, db: Session = Depends(get_session)):
     try:
          return TenantService(db).get_tenant(tenant_id)
     except StoreError as exc:
          raise http_error(exc) from exc


# ---------------------------------------------------------------------------
# Form flow
# ---------------------------------------------------------------------------

@router.post(
     "",
     response_model=TenantSubmissionResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a tenant from the tenant form"
)
def create_tenant(form: TenantForm, db: Session = Depends(get_session)):
     """
     Create a tenant.

     - **property_type**: `building` (with **building_id** and **apartment_id**) or `flat` (with **flat_id**)
     - **monthly_rent**: blank or 0 takes the chosen unit's rent
     - **security_deposit**: blank or 0 defaults to twice the rent

     An unknown unit leaves the tenant unassigned. If the unit cannot be
     marked occupied the tenant is still saved and a warning notification
     is returned.
     """
     notifier = Notifier()
     try:
          tenant = TenantService(db, notifier).submit_tenant(form)
     except StoreError as exc:
          raise http_error(exc) from exc
     except SQLAlchemyError as exc:
          raise _persistence_failed(exc) from exc
     return TenantSubmissionResponse(tenant=tenant, notifications=notifier.messages)


@router.put("/{tenant_id}", response_model=TenantSubmissionResponse, summary="Update a tenant from the tenant form")
def update_tenant(tenant_id: str, form: TenantForm, db: Session = Depends(get_session)):
     """
     Update a tenant.

     Fields not on the form (references, documents, identification, ...)
     are kept. Moving the tenant to another unit releases the old one.
     A blank rent keeps the stored rent unless a new unit is picked; a blank
     deposit keeps the stored deposit.
     """
     notifier = Notifier()
     try:
          tenant = TenantService(db, notifier).submit_tenant(form, tenant_id=tenant_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     except SQLAlchemyError as exc:
          raise _persistence_failed(exc) from exc
     return TenantSubmissionResponse(tenant=tenant, notifications=notifier.messages)


@router.delete("/{tenant_id}", response_model=TenantRemovalResponse, summary="Remove a tenant")
def remove_tenant(tenant_id: str, db: Session = Depends(get_session)):
     """Delete the tenant and mark its unit vacant."""
     notifier = Notifier()
     try:
          TenantService(db, notifier).remove_tenant(tenant_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     except SQLAlchemyError as exc:
          raise _persistence_failed(exc) from exc
     return TenantRemovalResponse(tenant_id=tenant_id, notifications=notifier.messages)


# ---------------------------------------------------------------------------
# Move-in / move-out
# ---------------------------------------------------------------------------

@router.post("/{tenant_id}/move-in", response_model=TenantSubmissionResponse, summary="Move a tenant in")
def move_in(tenant_id: str, request: MoveInRequest, db: Session = Depends(get_session)):
     notifier = Notifier()
     try:
          tenant = TenantService(db, notifier).move_in(tenant_id, request)
     except StoreError as exc:
          raise http_error(exc) from exc
     except SQLAlchemyError as exc:
          raise _persistence_failed(exc) from exc
     return TenantSubmissionResponse(tenant=tenant, notifications=notifier.messages)


@router.post("/{tenant_id}/move-out", response_model=TenantSubmissionResponse, summary="Move a tenant out")
def move_out(tenant_id: str, request: Optional[MoveOutRequest] = None, db: Session = Depends(get_session)):
     notifier = Notifier()
     try:
          tenant = TenantService(db, notifier).move_out(tenant_id, request or MoveOutRequest())
     except StoreError as exc:
          raise http_error(exc) from exc
     except SQLAlchemyError as exc:
          raise _persistence_failed(exc) from exc
     return TenantSubmissionResponse(tenant=tenant, notifications=notifier.messages)


@router.get("/{tenant_id}/analytics", response_model=TenantAnalytics, summary="Tenant analytics")
def tenant_analytics(tenant_id: str, db: Session = Depends(get_session)):
     try:
          return TenantService(db).analytics(tenant_id)
     except StoreError as exc:
          raise http_error(exc) from exc


# ---------------------------------------------------------------------------
# Security deposit
# ---------------------------------------------------------------------------

@router.get(
     "/{tenant_id}/security-deposit",
     response_model=SecurityDepositResponse,
     summary="Get a tenant's security deposit"
)
def get_security_deposit(tenant_id: str, db: Session = Depends(get_session)):
     try:
          return DepositService.require_by_tenant(db, tenant_id)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.post(
     "/{tenant_id}/security-deposit/deductions",
     response_model=SecurityDepositResponse,
     summary="Deduct from a security deposit"
)
def add_deduction(tenant_id: str, deduction: DeductionCreate, db: Session = Depends(get_session)):
     """
     - **category**: damage, cleaning, unpaid_rent or other
     - **amount**: total deductions may not exceed the deposit
     """
     try:
          return DepositService.add_deduction(db, tenant_id, deduction)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.post(
     "/{tenant_id}/security-deposit/refund",
     response_model=SecurityDepositResponse,
     summary="Refund a security deposit"
)
def refund_deposit(tenant_id: str, request: RefundRequest, db: Session = Depends(get_session)):
     try:
          return DepositService.refund(db, tenant_id, request)
     except StoreError as exc:
          raise http_error(exc) from exc


# ---------------------------------------------------------------------------
# Rent payments
# ---------------------------------------------------------------------------

@router.get("/{tenant_id}/payments", response_model=RentPaymentListResponse, summary="Tenant payment history")
def payment_history(tenant_id: str, db: Session = Depends(get_session)):
     try:
          payments = RentPaymentService.payment_history(db, tenant_id)
     except StoreError as exc:
          raise http_error(exc) from exc
     return RentPaymentListResponse(
          payments=[RentPaymentResponse.model_validate(p) for p in payments],
          total=len(payments),
     )


@router.post(
     "/{tenant_id}/payments",
     response_model=RentPaymentResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record a rent payment"
)
def record_payment(tenant_id: str, payment: RentPaymentCreate, db: Session = Depends(get_session)):
     """
     Record rent for a tenant.

     - **status**: `paid` stamps **paid_date** (today when omitted) and issues a receipt number
     - **property_id** / **property_type**: default to the tenant's current unit
     """
     try:
          return RentPaymentService.record_payment(db, tenant_id, payment)
     except StoreError as exc:
          raise http_error(exc) from exc
