"""Tests for security deposit tracking."""

from datetime import date
from decimal import Decimal

import pytest

from models import DepositStatus
from schemas.deposit import DeductionCreate, RefundRequest
from services.deposit_service import DepositService
from services.errors import NotFoundError, RecordValidationError


@pytest.fixture
def deposit(db):
    deposit = DepositService.record(db, "tenant_1", "F1", Decimal("30000"), paid_date=date(2026, 1, 1))
    db.commit()
    return deposit


def test_record_requires_positive_amount(db):
    with pytest.raises(RecordValidationError):
        DepositService.record(db, "tenant_1", "F1", Decimal("0"))


def test_deductions_accumulate(db, deposit):
    DepositService.add_deduction(db, "tenant_1", DeductionCreate(description="Broken window", amount=2500, category="damage"))
    DepositService.add_deduction(
        db, "tenant_1", DeductionCreate(description="Deep clean", amount=1500, category="cleaning", deducted_on=date(2026, 5, 2))
    )
    db.commit()

    stored = DepositService.get_by_tenant(db, "tenant_1")
    assert stored.total_deductions == Decimal("4000")
    assert [d["category"] for d in stored.deductions] == ["damage", "cleaning"]
    assert stored.deductions[1]["deducted_on"] == "2026-05-02"
    assert DepositService.balance(stored) == Decimal("26000")


def test_deductions_cannot_exceed_deposit(db, deposit):
    with pytest.raises(RecordValidationError, match="exceed"):
        DepositService.add_deduction(db, "tenant_1", DeductionCreate(description="Everything", amount=30001))


def test_refund_closes_deposit(db, deposit):
    DepositService.add_deduction(db, "tenant_1", DeductionCreate(description="Paint", amount=5000))

    refunded = DepositService.refund(db, "tenant_1", RefundRequest(refund_amount=25000, notes="Settled"))

    assert refunded.status == DepositStatus.REFUNDED
    assert refunded.refund_date == date.today()
    assert DepositService.balance(refunded) == Decimal("0")
    with pytest.raises(RecordValidationError, match="already refunded"):
        DepositService.refund(db, "tenant_1", RefundRequest(refund_amount=1))
    with pytest.raises(RecordValidationError, match="Cannot deduct"):
        DepositService.add_deduction(db, "tenant_1", DeductionCreate(description="Late", amount=1))


def test_refund_cannot_exceed_balance(db, deposit):
    with pytest.raises(RecordValidationError, match="remaining balance"):
        DepositService.refund(db, "tenant_1", RefundRequest(refund_amount=30001))


def test_missing_deposit(db):
    assert DepositService.get_by_tenant(db, "nobody") is None
    with pytest.raises(NotFoundError):
        DepositService.require_by_tenant(db, "nobody")
