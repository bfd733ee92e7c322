# services/statistics_service.py
"""
Property statistics, dashboard summary and data export/import.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

import config
from models import Flat, Land, RentPayment, RentPaymentStatus
from models.base import utcnow
from schemas.property import BuildingResponse, FlatResponse, LandResponse
from schemas.rent_payment import RentPaymentResponse
from schemas.statistics import (
     UnitCounts,
     LandCounts,
     PropertyStatistics,
     DashboardSummary,
     DataExport,
     DataImport,
     ImportResult,
)
from .property_store import PropertyStore
from .tenant_store import TenantStore, to_record

logger = logging.getLogger(__name__)

_TIMESTAMPS = ("created_at", "updated_at")


def get_property_statistics(db: Session) -> PropertyStatistics:
     """
     Occupancy counts per property kind.

     A building counts as occupied when any of its apartments is. Units are
     apartments + flats + lands; the rate is a percentage rounded to 2
     decimals, 0 when there are no units.
     """
     store = PropertyStore(db)
     buildings = store.get_buildings()
     flats = store.get_flats()
     lands = store.get_lands()

     total_apartments = sum(len(b.apartments) for b in buildings)
     occupied_apartments = sum(1 for b in buildings for apt in b.apartments if apt.is_occupied)
     occupied_buildings = sum(1 for b in buildings if b.has_occupied_apartment)
     occupied_flats = sum(1 for f in flats if f.is_occupied)
     leased_lands = sum(1 for land in lands if land.is_leased)

     total_units = total_apartments + len(flats) + len(lands)
     total_occupied = occupied_apartments + occupied_flats + leased_lands
     occupancy_rate = round(total_occupied / total_units * 100, 2) if total_units else 0.0

     return PropertyStatistics(
          buildings=UnitCounts(
               total=len(buildings),
               occupied=occupied_buildings,
               vacant=len(buildings) - occupied_buildings,
          ),
          flats=UnitCounts(total=len(flats), occupied=occupied_flats, vacant=len(flats) - occupied_flats),
          lands=LandCounts(total=len(lands), leased=leased_lands, vacant=len(lands) - leased_lands),
          total_units=total_units,
          total_occupied=total_occupied,
          occupancy_rate=occupancy_rate,
     )


def dashboard_summary(db: Session, today: Optional[date] = None) -> DashboardSummary:
     store = PropertyStore(db)
     tenant_store = TenantStore(db)
     tenants = tenant_store.get_tenants()
     active = [t for t in tenants if t.is_active]

     return DashboardSummary(
          total_properties=len(store.get_buildings()) + len(store.get_flats()) + len(store.get_lands()),
          total_tenants=len(tenants),
          active_tenants=len(active),
          expected_monthly_rent=sum((Decimal(str(t.rent_amount or 0)) for t in active), Decimal("0")),
          expiring_agreements=len(tenant_store.get_expiring(config.EXPIRING_AGREEMENT_DAYS, today=today)),
          statistics=get_property_statistics(db),
     )


# ---------------------------------------------------------------------------
# Export / import
# ---------------------------------------------------------------------------

def export_data(db: Session) -> DataExport:
     store = PropertyStore(db)
     return DataExport(
          buildings=[BuildingResponse.model_validate(b) for b in store.get_buildings()],
          flats=[FlatResponse.model_validate(f) for f in store.get_flats()],
          lands=[LandResponse.model_validate(land) for land in store.get_lands()],
          tenants=[to_record(t) for t in TenantStore(db).get_tenants()],
          rent_payments=[
               RentPaymentResponse.model_validate(p)
               for p in db.query(RentPayment).order_by(RentPayment.due_date).all()
          ],
          export_date=utcnow(),
     )


def _row_values(item, exclude=()) -> dict:
     values = item.model_dump(exclude=set(exclude))
     for key in _TIMESTAMPS:
          if values.get(key) is None:
               values.pop(key, None)
     return values


def import_data(db: Session, payload: DataImport) -> ImportResult:
     """
     Replace each stored collection present in the payload.

     Runs inside the caller's transaction; a validation failure on any
     record aborts the whole import.
     """
     store = PropertyStore(db)
     result = ImportResult()

     if payload.buildings is not None:
          for building in store.get_buildings():
               db.delete(building)
          db.flush()
          for item in payload.buildings:
               store.create_building(_row_values(item, exclude=("apartments",)))
               for apartment in item.apartments:
                    store.create_apartment(item.id, _row_values(apartment, exclude=("building_id",)))
                    result.apartments += 1
          result.buildings = len(payload.buildings)

     if payload.flats is not None:
          db.query(Flat).delete(synchronize_session="fetch")
          for item in payload.flats:
               store.create_flat(_row_values(item))
          result.flats = len(payload.flats)

     if payload.lands is not None:
          db.query(Land).delete(synchronize_session="fetch")
          for item in payload.lands:
               store.create_land(_row_values(item))
          result.lands = len(payload.lands)

     if payload.tenants is not None:
          result.tenants = TenantStore(db).replace_all(payload.tenants)

     if payload.rent_payments is not None:
          db.query(RentPayment).delete(synchronize_session="fetch")
          for item in payload.rent_payments:
               values = _row_values(item)
               values["status"] = RentPaymentStatus(item.status.value)
               values["property_type"] = item.property_type.value
               values["payment_method"] = item.payment_method.value
               db.add(RentPayment(**values))
          db.flush()
          result.rent_payments = len(payload.rent_payments)

     logger.info(
          "Imported %d building(s), %d apartment(s), %d flat(s), %d land(s), %d tenant(s), %d rent payment(s)",
          result.buildings, result.apartments, result.flats, result.lands, result.tenants, result.rent_payments,
     )
     return result
