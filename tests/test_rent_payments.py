"""Tests for rent payments: recording, settling, monthly generation and overdue tracking."""

from datetime import date
from decimal import Decimal

import pytest

from models import RentPayment, RentPaymentStatus, Tenant
from schemas.rent_payment import MarkPaidRequest, RentPaymentCreate, RentPaymentUpdate
from schemas.tenant import MoveOutRequest
from services.errors import NotFoundError, RecordValidationError
from services.rent_payment_service import RentPaymentService, due_date_for
from services.tenant_service import TenantService


@pytest.fixture
def service(seeded):
    return TenantService(seeded)


@pytest.fixture
def flat_tenant(service, make_form):
    return service.submit_tenant(make_form(property_type="flat", flat_id="F1"))


def _pending(due, amount=12000, **extra):
    return RentPaymentCreate(amount=amount, due_date=due, **extra)


def test_record_payment_defaults_unit_to_tenant_assignment(seeded, flat_tenant):
    payment = RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 5)))
    seeded.commit()

    assert payment.property_id == "F1"
    assert payment.property_type == "flat"
    assert payment.status == RentPaymentStatus.PENDING
    assert payment.payment_method == "bank_transfer"
    assert payment.paid_date is None
    assert payment.receipt_number is None


def test_record_paid_payment_issues_receipt(seeded, flat_tenant):
    payment = RentPaymentService.record_payment(
        seeded, flat_tenant.id, _pending(date(2026, 2, 5), status="paid", paid_date=date(2026, 2, 3), payment_method="upi")
    )

    assert payment.paid_date == date(2026, 2, 3)
    assert payment.payment_method == "upi"
    assert payment.receipt_number.startswith("RCP-20260203-")


def test_record_payment_for_unassigned_tenant_needs_a_unit(seeded, service, make_form):
    tenant = service.submit_tenant(make_form(monthly_rent=8000))

    with pytest.raises(RecordValidationError):
        RentPaymentService.record_payment(seeded, tenant.id, _pending(date(2026, 2, 5)))

    payment = RentPaymentService.record_payment(
        seeded, tenant.id, _pending(date(2026, 2, 5), property_type="land", property_id="L1")
    )
    assert payment.property_id == "L1"


def test_record_payment_for_unknown_tenant_raises(seeded):
    with pytest.raises(NotFoundError):
        RentPaymentService.record_payment(seeded, "tenant_missing", _pending(date(2026, 2, 5)))


def test_payment_history_newest_first(seeded, flat_tenant):
    RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 1, 5)))
    RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 5)))
    seeded.commit()

    history = RentPaymentService.payment_history(seeded, flat_tenant.id)

    assert [p.due_date for p in history] == [date(2026, 2, 5), date(2026, 1, 5)]
    with pytest.raises(NotFoundError):
        RentPaymentService.payment_history(seeded, "tenant_missing")


def test_mark_paid_stamps_date_and_receipt(seeded, flat_tenant):
    payment = RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 5)))

    paid = RentPaymentService.mark_paid(
        seeded, payment.id, MarkPaidRequest(paid_date=date(2026, 2, 6), transaction_id="TXN-1", actual_amount_paid=11500)
    )

    assert paid.status == RentPaymentStatus.PAID
    assert paid.paid_date == date(2026, 2, 6)
    assert paid.transaction_id == "TXN-1"
    assert paid.actual_amount_paid == Decimal("11500")
    assert paid.receipt_number.startswith("RCP-20260206-")

    with pytest.raises(RecordValidationError):
        RentPaymentService.mark_paid(seeded, payment.id, MarkPaidRequest())


def test_update_to_paid_fills_paid_date(seeded, flat_tenant):
    payment = RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 5)))

    updated = RentPaymentService.update_payment(seeded, payment.id, RentPaymentUpdate(status="paid", notes="cash at office"))

    assert updated.status == RentPaymentStatus.PAID
    assert updated.paid_date is not None
    assert updated.receipt_number
    assert updated.notes == "cash at office"
    assert updated.amount == Decimal("12000")


def test_delete_payment(seeded, flat_tenant):
    payment = RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 5)))
    seeded.commit()

    RentPaymentService.delete_payment(seeded, payment.id)

    assert seeded.get(RentPayment, payment.id) is None
    with pytest.raises(NotFoundError):
        RentPaymentService.delete_payment(seeded, payment.id)


def test_due_date_clamps_to_month_end():
    assert due_date_for(2026, 2, 31) == date(2026, 2, 28)
    assert due_date_for(2026, 3, 5) == date(2026, 3, 5)


def test_generate_monthly_payments_skips_existing(seeded, service, make_form, flat_tenant):
    service.submit_tenant(make_form(full_name="Meena Iyer", phone="9111111111", property_type="building", building_id="B1", apartment_id="A12"))
    service.submit_tenant(make_form(full_name="Unassigned Person", phone="9222222222", monthly_rent=5000))

    created = RentPaymentService.generate_monthly_payments(seeded, 2, 2026)
    seeded.commit()

    assert sorted(p.property_id for p in created) == ["A12", "F1"]
    assert all(p.due_date == date(2026, 2, 5) for p in created)
    assert all(p.status == RentPaymentStatus.PENDING for p in created)
    assert {p.property_id: p.amount for p in created}["A12"] == Decimal("15000")

    assert RentPaymentService.generate_monthly_payments(seeded, 2, 2026) == []


def test_update_overdue_and_upcoming(seeded, flat_tenant):
    late = RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 5)))
    soon = RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 2, 14)))
    RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 3, 5)))
    seeded.commit()

    flagged = RentPaymentService.update_overdue_payments(seeded, today=date(2026, 2, 10))

    assert [p.id for p in flagged] == [late.id]
    assert [p.id for p in RentPaymentService.overdue_payments(seeded)] == [late.id]
    upcoming = RentPaymentService.upcoming_payments(seeded, days_ahead=7, today=date(2026, 2, 10))
    assert [p.id for p in upcoming] == [soon.id]


def test_overdue_rent_tenants_sorted_by_days_past_due(seeded, service, make_form, flat_tenant):
    later_due = service.submit_tenant(
        make_form(full_name="Meena Iyer", phone="9111111111", property_type="building", building_id="B1", apartment_id="A12")
    )
    paid_up = service.submit_tenant(
        make_form(full_name="Arjun Rao", phone="9333333333", property_type="building", building_id="B1", apartment_id="A13")
    )
    moved_out = service.submit_tenant(make_form(full_name="Kiran Das", phone="9444444444", monthly_rent=9000))
    seeded.get(Tenant, later_due.id).rent_due_day = 10
    seeded.commit()
    service.move_out(moved_out.id, MoveOutRequest(move_out_date=date(2026, 3, 1)))
    RentPaymentService.record_payment(seeded, paid_up.id, _pending(date(2026, 3, 5), amount=14000, status="paid"))
    seeded.commit()

    overdue = RentPaymentService.overdue_rent_tenants(seeded, today=date(2026, 3, 20))

    assert [o.tenant.id for o in overdue] == [flat_tenant.id, later_due.id]
    assert [o.days_past_due for o in overdue] == [15, 10]
    assert overdue[0].overdue_amount == Decimal("12000")


def test_no_rent_overdue_before_due_day(seeded, flat_tenant):
    assert RentPaymentService.overdue_rent_tenants(seeded, today=date(2026, 3, 5)) == []


def test_analytics_summarises_payments(seeded, service, flat_tenant):
    RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 1, 5), status="paid"))
    RentPaymentService.record_payment(
        seeded, flat_tenant.id, _pending(date(2026, 2, 5), status="paid", actual_amount_paid=11000)
    )
    RentPaymentService.record_payment(seeded, flat_tenant.id, _pending(date(2026, 3, 5)))
    seeded.commit()

    analytics = service.analytics(flat_tenant.id, today=date(2026, 3, 10))

    assert analytics.total_rent_paid == Decimal("23000")
    assert analytics.average_monthly_rent == Decimal("7666.67")
    assert analytics.payment_count == 3


def test_analytics_without_payments_uses_agreed_rent(service, flat_tenant):
    analytics = service.analytics(flat_tenant.id, today=date(2026, 1, 31))

    assert analytics.total_rent_paid == Decimal("0")
    assert analytics.average_monthly_rent == Decimal("12000")
    assert analytics.payment_count == 0
