# schemas/property.py
"""
Pydantic schemas for building, apartment, flat and land request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict
from enum import Enum


class PropertyKindEnum(str, Enum):
     """Top-level property kinds (apartments live inside buildings)."""
     BUILDING = "building"
     FLAT = "flat"
     LAND = "land"


class WaterSupplyEnum(str, Enum):
     ALWAYS = "24x7"
     LIMITED = "limited"
     TANKER = "tanker"


class AreaUnitEnum(str, Enum):
     SQFT = "sqft"
     ACRES = "acres"
     CENTS = "cents"


class ZoningEnum(str, Enum):
     RESIDENTIAL = "residential"
     COMMERCIAL = "commercial"
     AGRICULTURAL = "agricultural"
     INDUSTRIAL = "industrial"


class RentFrequencyEnum(str, Enum):
     MONTHLY = "monthly"
     QUARTERLY = "quarterly"
     YEARLY = "yearly"


# ---------------------------------------------------------------------------
# Buildings
# ---------------------------------------------------------------------------

class BuildingCreate(BaseModel):
     """Schema for creating a new building."""
     id: Optional[str] = Field(None, max_length=64, description="Client supplied id (generated when omitted)")
     name: str = Field(..., min_length=1, max_length=255)
     building_code: str = Field(..., min_length=1, max_length=10)
     address: str = Field(..., min_length=1)
     description: Optional[str] = None
     total_floors: int = Field(1, ge=1)
     total_apartments: int = Field(0, ge=0)
     construction_year: Optional[int] = Field(None, ge=1800, le=2200)
     amenities: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "name": "Lakeview Residency",
                    "building_code": "A",
                    "address": "12 MG Road, Bengaluru",
                    "total_floors": 5,
                    "total_apartments": 20,
                    "amenities": ["lift", "parking"]
               }
          }
     )


class BuildingUpdate(BaseModel):
     """Schema for updating an existing building."""
     name: Optional[str] = Field(None, min_length=1, max_length=255)
     building_code: Optional[str] = Field(None, min_length=1, max_length=10)
     address: Optional[str] = Field(None, min_length=1)
     description: Optional[str] = None
     total_floors: Optional[int] = Field(None, ge=1)
     total_apartments: Optional[int] = Field(None, ge=0)
     construction_year: Optional[int] = Field(None, ge=1800, le=2200)
     amenities: Optional[List[str]] = None
     images: Optional[List[str]] = None


# ---------------------------------------------------------------------------
# Apartments
# ---------------------------------------------------------------------------

class ApartmentCreate(BaseModel):
     """Schema for creating an apartment inside a building."""
     id: Optional[str] = Field(None, max_length=64)
     door_number: str = Field(..., min_length=1, max_length=20)
     service_number: Optional[str] = Field(None, max_length=50)
     floor: int = 0
     bedroom_count: int = Field(1, ge=0)
     bathroom_count: int = Field(1, ge=0)
     area: Optional[Decimal] = Field(None, ge=0)
     rent_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     security_deposit: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     furnished: bool = False
     parking: bool = False
     balcony: bool = False
     air_conditioning: bool = False
     power_backup: bool = False
     water_supply: WaterSupplyEnum = WaterSupplyEnum.LIMITED
     internet_ready: bool = False
     additional_features: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "door_number": "501",
                    "floor": 5,
                    "bedroom_count": 2,
                    "bathroom_count": 2,
                    "rent_amount": 15000,
                    "security_deposit": 30000
               }
          }
     )


class ApartmentUpdate(BaseModel):
     """
     Schema for updating an apartment.

     Occupancy fields are accepted so that an administrator can correct a
     drifted flag by hand; normal tenant flows set them automatically.
     """
     door_number: Optional[str] = Field(None, max_length=20)
     service_number: Optional[str] = Field(None, max_length=50)
     floor: Optional[int] = None
     bedroom_count: Optional[int] = None
     bathroom_count: Optional[int] = Field(None, ge=0)
     area: Optional[Decimal] = Field(None, ge=0)
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     is_occupied: Optional[bool] = None
     furnished: Optional[bool] = None
     parking: Optional[bool] = None
     balcony: Optional[bool] = None
     air_conditioning: Optional[bool] = None
     power_backup: Optional[bool] = None
     water_supply: Optional[WaterSupplyEnum] = None
     internet_ready: Optional[bool] = None
     additional_features: Optional[List[str]] = None


class ApartmentResponse(BaseModel):
     """Schema for apartment response."""
     id: str
     building_id: str
     door_number: str
     service_number: Optional[str] = None
     floor: int
     bedroom_count: int
     bathroom_count: int
     area: Optional[Decimal] = None
     rent_amount: Decimal
     security_deposit: Decimal
     is_occupied: bool
     current_tenant_id: Optional[str] = None
     furnished: bool
     parking: bool
     balcony: bool
     air_conditioning: bool
     power_backup: bool
     water_supply: str
     internet_ready: bool
     additional_features: List[str] = Field(default_factory=list)
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class BuildingResponse(BaseModel):
     """Schema for building response, apartments included."""
     id: str
     name: str
     building_code: str
     address: str
     description: Optional[str] = None
     total_floors: int
     total_apartments: int
     construction_year: Optional[int] = None
     amenities: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)
     apartments: List[ApartmentResponse] = Field(default_factory=list)
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Flats
# ---------------------------------------------------------------------------

class FlatCreate(BaseModel):
     """Schema for creating a standalone flat."""
     id: Optional[str] = Field(None, max_length=64)
     name: str = Field(..., min_length=1, max_length=255)
     door_number: str = Field(..., min_length=1, max_length=20)
     service_number: Optional[str] = Field(None, max_length=50)
     address: str = Field(..., min_length=1)
     description: Optional[str] = None
     bedroom_count: int = Field(1, ge=0)
     bathroom_count: int = Field(1, ge=0)
     area: Optional[Decimal] = Field(None, ge=0)
     floor: int = 0
     total_floors: int = Field(1, ge=1)
     rent_amount: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     security_deposit: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     furnished: bool = False
     parking: bool = False
     balcony: bool = False
     air_conditioning: bool = False
     power_backup: bool = False
     water_supply: WaterSupplyEnum = WaterSupplyEnum.LIMITED
     internet_ready: bool = False
     society_name: Optional[str] = Field(None, max_length=255)
     maintenance_charges: Optional[Decimal] = Field(None, ge=0)
     additional_features: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "name": "Green Park Flat",
                    "door_number": "12B",
                    "address": "4 Park Street, Chennai",
                    "bedroom_count": 3,
                    "rent_amount": 20000
               }
          }
     )


class FlatUpdate(BaseModel):
     """Schema for updating a flat."""
     name: Optional[str] = Field(None, max_length=255)
     door_number: Optional[str] = Field(None, max_length=20)
     service_number: Optional[str] = Field(None, max_length=50)
     address: Optional[str] = None
     description: Optional[str] = None
     bedroom_count: Optional[int] = Field(None, ge=0)
     bathroom_count: Optional[int] = Field(None, ge=0)
     area: Optional[Decimal] = Field(None, ge=0)
     floor: Optional[int] = None
     total_floors: Optional[int] = Field(None, ge=1)
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     security_deposit: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     is_occupied: Optional[bool] = None
     furnished: Optional[bool] = None
     parking: Optional[bool] = None
     balcony: Optional[bool] = None
     air_conditioning: Optional[bool] = None
     power_backup: Optional[bool] = None
     water_supply: Optional[WaterSupplyEnum] = None
     internet_ready: Optional[bool] = None
     society_name: Optional[str] = Field(None, max_length=255)
     maintenance_charges: Optional[Decimal] = Field(None, ge=0)
     additional_features: Optional[List[str]] = None
     images: Optional[List[str]] = None


class FlatResponse(BaseModel):
     """Schema for flat response."""
     id: str
     name: str
     door_number: str
     service_number: Optional[str] = None
     address: str
     description: Optional[str] = None
     bedroom_count: int
     bathroom_count: int
     area: Optional[Decimal] = None
     floor: int
     total_floors: int
     rent_amount: Decimal
     security_deposit: Decimal
     is_occupied: bool
     current_tenant_id: Optional[str] = None
     furnished: bool
     parking: bool
     balcony: bool
     air_conditioning: bool
     power_backup: bool
     water_supply: str
     internet_ready: bool
     society_name: Optional[str] = None
     maintenance_charges: Optional[Decimal] = None
     additional_features: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Lands
# ---------------------------------------------------------------------------

class LandCreate(BaseModel):
     """Schema for creating a land parcel."""
     id: Optional[str] = Field(None, max_length=64)
     name: str = Field(..., min_length=1, max_length=255)
     address: str = Field(..., min_length=1)
     description: Optional[str] = None
     survey_number: Optional[str] = Field(None, max_length=50)
     area: Decimal = Field(..., gt=0, description="Area in area_unit")
     area_unit: AreaUnitEnum = AreaUnitEnum.SQFT
     zoning: ZoningEnum = ZoningEnum.RESIDENTIAL
     soil_type: Optional[str] = None
     water_source: Optional[str] = None
     road_access: bool = True
     electricity_connection: bool = True
     lease_type: Optional[str] = None
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     rent_frequency: Optional[RentFrequencyEnum] = None
     lease_security_deposit: Optional[Decimal] = Field(None, ge=0)
     lease_duration: Optional[int] = Field(None, ge=0, description="Lease duration in years")
     renewal_terms: Optional[str] = None
     restrictions: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)

     model_config = ConfigDict(
          str_strip_whitespace=True,
          json_schema_extra={
               "example": {
                    "name": "River Plot",
                    "address": "Survey 42, Mysuru",
                    "survey_number": "42/1",
                    "area": 2.5,
                    "area_unit": "acres",
                    "zoning": "agricultural"
               }
          }
     )


class LandUpdate(BaseModel):
     """Schema for updating a land parcel."""
     name: Optional[str] = Field(None, max_length=255)
     address: Optional[str] = None
     description: Optional[str] = None
     survey_number: Optional[str] = Field(None, max_length=50)
     area: Optional[Decimal] = None
     area_unit: Optional[AreaUnitEnum] = None
     zoning: Optional[ZoningEnum] = None
     soil_type: Optional[str] = None
     water_source: Optional[str] = None
     road_access: Optional[bool] = None
     electricity_connection: Optional[bool] = None
     is_leased: Optional[bool] = None
     lease_type: Optional[str] = None
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     rent_frequency: Optional[RentFrequencyEnum] = None
     lease_security_deposit: Optional[Decimal] = Field(None, ge=0)
     lease_duration: Optional[int] = Field(None, ge=0)
     renewal_terms: Optional[str] = None
     restrictions: Optional[List[str]] = None
     images: Optional[List[str]] = None


class LandResponse(BaseModel):
     """Schema for land response."""
     id: str
     name: str
     address: str
     description: Optional[str] = None
     survey_number: Optional[str] = None
     area: Decimal
     area_unit: str
     zoning: str
     soil_type: Optional[str] = None
     water_source: Optional[str] = None
     road_access: bool
     electricity_connection: bool
     is_leased: bool
     current_tenant_id: Optional[str] = None
     lease_type: Optional[str] = None
     rent_amount: Optional[Decimal] = None
     rent_frequency: Optional[str] = None
     lease_security_deposit: Optional[Decimal] = None
     lease_duration: Optional[int] = None
     renewal_terms: Optional[str] = None
     restrictions: List[str] = Field(default_factory=list)
     images: List[str] = Field(default_factory=list)
     created_at: Optional[datetime] = None
     updated_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)


class PropertySearchResponse(BaseModel):
     """Search hits grouped by property kind."""
     query: str
     buildings: List[BuildingResponse] = Field(default_factory=list)
     flats: List[FlatResponse] = Field(default_factory=list)
     lands: List[LandResponse] = Field(default_factory=list)
     total: int = 0
