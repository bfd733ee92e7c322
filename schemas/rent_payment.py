# schemas/rent_payment.py
"""
Pydantic schemas for rent payments.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from enum import Enum

from .tenant import AssignedPropertyTypeEnum, PaymentMethodEnum, TenantRecord


class RentPaymentStatusEnum(str, Enum):
     PENDING = "pending"
     PAID = "paid"
     OVERDUE = "overdue"
     PARTIAL = "partial"


class RentPaymentCreate(BaseModel):
     """
     Schema for recording a rent payment against a tenant.

     The unit defaults to the tenant's current assignment when left out.
     """
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, description="Rent due")
     due_date: date
     status: RentPaymentStatusEnum = RentPaymentStatusEnum.PENDING
     payment_method: Optional[PaymentMethodEnum] = None
     paid_date: Optional[date] = None
     transaction_id: Optional[str] = Field(None, max_length=100)
     late_fee: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     discount: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     actual_amount_paid: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     notes: Optional[str] = None
     property_type: Optional[AssignedPropertyTypeEnum] = None
     property_id: Optional[str] = None
     building_id: Optional[str] = None

     @model_validator(mode="after")
     def _unit_given_together(self):
          if bool(self.property_id) != bool(self.property_type):
               raise ValueError("property_id and property_type must be given together")
          return self

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "amount": 15000,
                    "due_date": "2026-02-05",
                    "status": "pending",
                    "payment_method": "upi"
               }
          }
     )


class RentPaymentUpdate(BaseModel):
     """Schema for updating a rent payment (all fields optional)."""
     amount: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
     due_date: Optional[date] = None
     status: Optional[RentPaymentStatusEnum] = None
     payment_method: Optional[PaymentMethodEnum] = None
     paid_date: Optional[date] = None
     transaction_id: Optional[str] = Field(None, max_length=100)
     late_fee: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     discount: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
     actual_amount_paid: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     notes: Optional[str] = None


class MarkPaidRequest(BaseModel):
     paid_date: Optional[date] = None
     payment_method: Optional[PaymentMethodEnum] = None
     transaction_id: Optional[str] = Field(None, max_length=100)
     actual_amount_paid: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)


class MonthlyGenerationRequest(BaseModel):
     month: int = Field(..., ge=1, le=12)
     year: int = Field(..., ge=2000, le=2100)


class RentPaymentResponse(BaseModel):
     id: str
     tenant_id: str
     property_id: str
     property_type: AssignedPropertyTypeEnum
     building_id: Optional[str] = None
     amount: Decimal
     due_date: date
     paid_date: Optional[date] = None
     status: RentPaymentStatusEnum
     payment_method: PaymentMethodEnum
     transaction_id: Optional[str] = None
     receipt_number: Optional[str] = None
     late_fee: Optional[Decimal] = None
     discount: Optional[Decimal] = None
     actual_amount_paid: Optional[Decimal] = None
     notes: Optional[str] = None
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, value):
          return getattr(value, "value", value)


class RentPaymentListResponse(BaseModel):
     payments: List[RentPaymentResponse]
     total: int


class OverdueRentTenant(BaseModel):
     tenant: TenantRecord
     days_past_due: int
     overdue_amount: Decimal


class OverdueRentResponse(BaseModel):
     tenants: List[OverdueRentTenant]
     total: int
