# schemas/statistics.py
"""
Pydantic schemas for property statistics, the dashboard summary and the
occupancy reconciliation sweep.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from .property import BuildingResponse, FlatResponse, LandResponse
from .tenant import TenantRecord
from .rent_payment import RentPaymentResponse


class UnitCounts(BaseModel):
     total: int = 0
     occupied: int = 0
     vacant: int = 0


class LandCounts(BaseModel):
     total: int = 0
     leased: int = 0
     vacant: int = 0


class PropertyStatistics(BaseModel):
     buildings: UnitCounts
     flats: UnitCounts
     lands: LandCounts
     total_units: int
     total_occupied: int
     occupancy_rate: float = Field(..., description="Percent of units occupied, 2 decimals")


class DashboardSummary(BaseModel):
     total_properties: int
     total_tenants: int
     active_tenants: int
     expected_monthly_rent: Decimal
     expiring_agreements: int
     statistics: PropertyStatistics


class OccupancyCorrection(BaseModel):
     property_type: str
     property_id: str
     occupied: bool
     current_tenant_id: Optional[str] = None


class ReconcileResponse(BaseModel):
     checked: int
     corrections: List[OccupancyCorrection] = Field(default_factory=list)


class DataExport(BaseModel):
     buildings: List[BuildingResponse] = Field(default_factory=list)
     flats: List[FlatResponse] = Field(default_factory=list)
     lands: List[LandResponse] = Field(default_factory=list)
     tenants: List[TenantRecord] = Field(default_factory=list)
     rent_payments: List[RentPaymentResponse] = Field(default_factory=list)
     export_date: datetime


class DataImport(BaseModel):
     """Collections present in the payload replace what is stored."""
     buildings: Optional[List[BuildingResponse]] = None
     flats: Optional[List[FlatResponse]] = None
     lands: Optional[List[LandResponse]] = None
     tenants: Optional[List[TenantRecord]] = None
     rent_payments: Optional[List[RentPaymentResponse]] = None


class ImportResult(BaseModel):
     buildings: int = 0
     apartments: int = 0
     flats: int = 0
     lands: int = 0
     tenants: int = 0
     rent_payments: int = 0
