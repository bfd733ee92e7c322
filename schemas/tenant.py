# schemas/tenant.py
"""
Pydantic schemas for tenants.

TenantForm is the simplified form a user submits; TenantRecord is the
complete tenant entity produced from it and returned by the API.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator
from enum import Enum

from .notification import Notification


class PropertyChoiceEnum(str, Enum):
     """What the user picked on the form: an apartment inside a building, or a flat."""
     BUILDING = "building"
     FLAT = "flat"


class AssignedPropertyTypeEnum(str, Enum):
     """Concrete unit a tenant is linked to."""
     APARTMENT = "apartment"
     FLAT = "flat"
     LAND = "land"


class MaritalStatusEnum(str, Enum):
     SINGLE = "single"
     MARRIED = "married"
     DIVORCED = "divorced"
     WIDOWED = "widowed"


class PaymentMethodEnum(str, Enum):
     CASH = "cash"
     BANK_TRANSFER = "bank_transfer"
     CHEQUE = "cheque"
     UPI = "upi"


# ---------------------------------------------------------------------------
# Form input
# ---------------------------------------------------------------------------

class TenantForm(BaseModel):
     """Schema for the tenant create/edit form."""
     full_name: str = Field(..., min_length=1, max_length=255)
     phone: str = Field(..., min_length=1, max_length=20)
     email: Optional[str] = Field(None, max_length=255)
     occupation: str = Field(..., min_length=1, max_length=100)
     monthly_rent: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2, description="Blank or 0 uses the unit's stored rent; on edit without a new unit, keeps the current rent")
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2, description="Blank or 0 defaults to twice the rent; on edit, keeps the current deposit")
     agreement_number: str = Field(..., min_length=1, max_length=50)
     start_date: date
     end_date: date

     # Property assignment
     property_type: Optional[PropertyChoiceEnum] = None
     building_id: Optional[str] = None
     apartment_id: Optional[str] = None
     flat_id: Optional[str] = None

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "full_name": "Ravi Kumar",
                    "phone": "9876543210",
                    "email": "ravi@example.com",
                    "occupation": "Engineer",
                    "agreement_number": "AGR-2026-001",
                    "start_date": "2026-11-01",
                    "end_date": "2027-10-31",
                    "property_type": "building",
                    "building_id": "B1",
                    "apartment_id": "A12"
               }
          }
     )

     @field_validator("property_type", "building_id", "apartment_id", "flat_id", "email", mode="before")
     @classmethod
     def _blank_to_none(cls, value):
          if isinstance(value, str) and not value.strip():
               return None
          return value


# ---------------------------------------------------------------------------
# Complete tenant record
# ---------------------------------------------------------------------------

class PersonalInfo(BaseModel):
     first_name: str = ""
     last_name: str = ""
     full_name: str
     date_of_birth: Optional[date] = None
     occupation: str
     employer: Optional[str] = None
     monthly_income: Optional[Decimal] = None
     marital_status: MaritalStatusEnum = MaritalStatusEnum.SINGLE
     family_size: int = Field(1, ge=1)
     nationality: str
     religion: Optional[str] = None


class ContactInfo(BaseModel):
     phone: str
     email: Optional[str] = ""
     address: Optional[str] = ""


class EmergencyContact(BaseModel):
     name: str = ""
     relationship: str = ""
     phone: str = ""
     email: Optional[str] = None
     address: Optional[str] = None


class Identification(BaseModel):
     aadhar_number: Optional[str] = None
     pan_number: Optional[str] = None
     driving_license: Optional[str] = None
     passport: Optional[str] = None
     voter_id_number: Optional[str] = None


class RentalAgreement(BaseModel):
     agreement_number: str
     start_date: date
     end_date: date
     rent_amount: Decimal
     security_deposit: Decimal
     maintenance_charges: Optional[Decimal] = None
     rent_due_day: int = Field(5, ge=1, le=31, description="Day of month rent is due")
     payment_method: PaymentMethodEnum = PaymentMethodEnum.BANK_TRANSFER
     late_fee_amount: Optional[Decimal] = None
     notice_period: int = Field(30, ge=0, description="Notice period in days")
     renewal_terms: Optional[str] = None
     special_conditions: List[str] = Field(default_factory=list)


class TenantReference(BaseModel):
     name: str
     relationship: str
     phone: str
     email: Optional[str] = None
     address: Optional[str] = None
     verified: bool = False


class TenantDocument(BaseModel):
     """Metadata of a document attached to a tenant (file storage lives elsewhere)."""
     id: str
     title: str
     category: str
     file_name: str
     mime_type: Optional[str] = None
     file_size: Optional[int] = None
     expiry_date: Optional[date] = None
     tags: List[str] = Field(default_factory=list)


class TenantRecord(BaseModel):
     """The complete tenant entity."""
     id: str
     personal_info: PersonalInfo
     contact_info: ContactInfo
     emergency_contact: EmergencyContact = Field(default_factory=EmergencyContact)
     identification: Identification = Field(default_factory=Identification)
     rental_agreement: RentalAgreement
     references: List[TenantReference] = Field(default_factory=list)
     documents: List[TenantDocument] = Field(default_factory=list)
     move_in_date: date
     move_out_date: Optional[date] = None
     is_active: bool = True
     property_id: Optional[str] = None
     property_type: Optional[AssignedPropertyTypeEnum] = None
     building_id: Optional[str] = None
     created_at: datetime
     updated_at: datetime


class TenantSubmissionResponse(BaseModel):
     """Result of a create/update: the saved tenant plus user-facing notifications."""
     tenant: TenantRecord
     notifications: List[Notification] = Field(default_factory=list)


class TenantRemovalResponse(BaseModel):
     tenant_id: str
     notifications: List[Notification] = Field(default_factory=list)


class TenantListResponse(BaseModel):
     tenants: List[TenantRecord]
     total: int


# ---------------------------------------------------------------------------
# Move-in / move-out
# ---------------------------------------------------------------------------

class MoveInRequest(BaseModel):
     property_type: AssignedPropertyTypeEnum
     property_id: str = Field(..., min_length=1)
     building_id: Optional[str] = None
     move_in_date: Optional[date] = None


class MoveOutRequest(BaseModel):
     move_out_date: Optional[date] = None


class TenantAnalytics(BaseModel):
     tenant_id: str
     rent_amount: Decimal
     total_rent_paid: Decimal = Decimal("0")
     average_monthly_rent: Decimal
     payment_count: int = 0
     tenancy_duration_days: int
     document_count: int
     reference_count: int
     security_deposit_status: Optional[str] = None
     security_deposit_balance: Optional[Decimal] = None
