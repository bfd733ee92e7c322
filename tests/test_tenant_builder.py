"""Tests for building complete tenant records from the simplified form."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from schemas.tenant import Identification, TenantReference
from services.assignment_resolver import PropertyAssignment
from services.tenant_builder import build_tenant_record


NOW = datetime(2026, 3, 1, 10, 0, 0)


def _apartment(rent="20000"):
    return PropertyAssignment("A12", "apartment", "B1", Decimal(rent))


def test_deposit_defaults_to_twice_the_rent(make_form):
    record = build_tenant_record(make_form(), _apartment("20000"), now=NOW)

    assert record.rental_agreement.rent_amount == Decimal("20000")
    assert record.rental_agreement.security_deposit == Decimal("40000")


def test_explicit_deposit_is_kept(make_form):
    record = build_tenant_record(make_form(security_deposit=25000), _apartment("20000"), now=NOW)

    assert record.rental_agreement.security_deposit == Decimal("25000")


def test_create_fills_defaults(make_form):
    form = make_form(full_name="Ravi Kumar Sharma")

    record = build_tenant_record(form, _apartment(), now=NOW)

    assert record.id.startswith("tenant_")
    assert record.created_at == NOW
    assert record.updated_at == NOW
    assert record.personal_info.first_name == "Ravi"
    assert record.personal_info.last_name == "Kumar Sharma"
    assert record.personal_info.nationality == "Indian"
    assert record.rental_agreement.rent_due_day == 5
    assert record.rental_agreement.notice_period == 30
    assert record.rental_agreement.payment_method.value == "bank_transfer"
    assert record.rental_agreement.start_date == date(2026, 1, 1)
    assert record.rental_agreement.end_date == date(2026, 12, 31)
    assert record.move_in_date == form.start_date
    assert record.is_active
    assert record.references == []
    assert record.property_id == "A12"
    assert record.property_type.value == "apartment"
    assert record.building_id == "B1"


def test_edit_preserves_identity_and_carries_unedited_fields(make_form):
    original = build_tenant_record(make_form(), _apartment(), now=NOW)
    original = original.model_copy(update={
        "identification": Identification(pan_number="ABCDE1234F"),
        "references": [TenantReference(name="Asha", relationship="Friend", phone="9000000000")],
    })
    later = NOW + timedelta(days=3)

    edited = build_tenant_record(make_form(phone="9123456780"), _apartment(), existing=original, now=later)

    assert edited.id == original.id
    assert edited.created_at == NOW
    assert edited.updated_at == later
    assert edited.updated_at > original.updated_at
    assert edited.contact_info.phone == "9123456780"
    assert edited.identification.pan_number == "ABCDE1234F"
    assert [ref.name for ref in edited.references] == ["Asha"]


def test_edit_without_new_unit_keeps_existing_assignment(make_form):
    original = build_tenant_record(make_form(), _apartment(), now=NOW)
    unassigned = PropertyAssignment(None, None, None, Decimal("16000"))

    edited = build_tenant_record(make_form(monthly_rent=16000), unassigned, existing=original, now=NOW)

    assert edited.property_id == "A12"
    assert edited.building_id == "B1"
    assert edited.rental_agreement.rent_amount == Decimal("16000")


def test_edit_with_blank_rent_keeps_stored_rent_and_deposit(make_form):
    original = build_tenant_record(make_form(), _apartment("20000"), now=NOW)
    unassigned = PropertyAssignment(None, None, None, Decimal("0"))

    edited = build_tenant_record(make_form(phone="9000000001"), unassigned, existing=original, now=NOW)

    assert edited.rental_agreement.rent_amount == Decimal("20000")
    assert edited.rental_agreement.security_deposit == Decimal("40000")


def test_new_unit_replaces_whole_assignment(make_form):
    original = build_tenant_record(make_form(), _apartment(), now=NOW)
    flat = PropertyAssignment("F1", "flat", None, Decimal("12000"))

    edited = build_tenant_record(make_form(), flat, existing=original, now=NOW)

    assert edited.property_id == "F1"
    assert edited.property_type.value == "flat"
    assert edited.building_id is None


def test_default_timestamp_is_naive_utc(make_form):
    before = datetime.now(timezone.utc).replace(tzinfo=None)

    record = build_tenant_record(make_form(), _apartment())

    assert record.created_at.tzinfo is None
    assert before <= record.created_at <= before + timedelta(minutes=1)
