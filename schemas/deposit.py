# schemas/deposit.py
"""
Pydantic schemas for security deposit tracking.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator
from enum import Enum


class DepositStatusEnum(str, Enum):
     HELD = "held"
     REFUNDED = "refunded"
     FORFEITED = "forfeited"


class DeductionCategoryEnum(str, Enum):
     DAMAGE = "damage"
     CLEANING = "cleaning"
     UNPAID_RENT = "unpaid_rent"
     OTHER = "other"


class DeductionCreate(BaseModel):
     """Schema for deducting from a held deposit."""
     description: str = Field(..., min_length=1)
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
     category: DeductionCategoryEnum = DeductionCategoryEnum.OTHER
     deducted_on: Optional[date] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "description": "Broken window",
                    "amount": 2500,
                    "category": "damage"
               }
          }
     )


class DeductionResponse(BaseModel):
     id: str
     description: str
     amount: Decimal
     category: DeductionCategoryEnum
     deducted_on: date


class RefundRequest(BaseModel):
     refund_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     notes: Optional[str] = None


class SecurityDepositResponse(BaseModel):
     id: str
     tenant_id: str
     property_id: str
     amount: Decimal
     paid_date: date
     refund_date: Optional[date] = None
     refund_amount: Optional[Decimal] = None
     deductions: List[DeductionResponse] = Field(default_factory=list)
     status: DepositStatusEnum
     notes: Optional[str] = None
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)

     @field_validator("status", mode="before")
     @classmethod
     def _status_value(cls, value):
          return getattr(value, "value", value)
