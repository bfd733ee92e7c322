# routers/dashboard.py
"""
Dashboard, occupancy maintenance, data export/import and health routes.
"""
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from database import get_session, check_connection
from services.errors import StoreError
from services.occupancy_service import OccupancySynchronizer
from services.statistics_service import dashboard_summary, export_data, import_data
from schemas.statistics import (
     DashboardSummary,
     ReconcileResponse,
     OccupancyCorrection,
     DataExport,
     DataImport,
     ImportResult,
)
from .errors import http_error

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardSummary, summary="Dashboard summary")
def get_dashboard(db: Session = Depends(get_session)):
     """
     Portfolio overview.

     - **total_properties**: buildings + flats + lands
     - **expected_monthly_rent**: sum of active tenants' rent
     - **expiring_agreements**: active agreements ending within the configured window
     """
     return dashboard_summary(db)


@router.post("/occupancy/reconcile", response_model=ReconcileResponse, summary="Rebuild occupancy flags")
def reconcile_occupancy(db: Session = Depends(get_session)):
     """
     Recompute every unit's occupied/leased flag and current tenant from
     the active tenants that reference it. Returns the units that changed.
     """
     try:
          checked, corrections = OccupancySynchronizer(db).reconcile_all()
     except StoreError as exc:
          raise http_error(exc) from exc
     return ReconcileResponse(
          checked=checked,
          corrections=[OccupancyCorrection(**c) for c in corrections],
     )


# ---------------------------------------------------------------------------
# Data export / import
# ---------------------------------------------------------------------------

@router.get("/data/export", response_model=DataExport, summary="Export all data")
def export_all(db: Session = Depends(get_session)):
     return export_data(db)


@router.post("/data/import", response_model=ImportResult, summary="Import data")
def import_all(payload: DataImport, db: Session = Depends(get_session)):
     """
     Replace stored collections with the ones in the payload.

     Collections left out of the payload are not touched. Any invalid
     record rejects the whole import.
     """
     try:
          return import_data(db, payload)
     except StoreError as exc:
          raise http_error(exc) from exc


@router.get("/health", summary="Liveness and database check")
def health(db: Session = Depends(get_session)):
     if check_connection(db.get_bind()):
          return {"status": "ok", "database": "connected"}
     return JSONResponse(
          status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
          content={"status": "degraded", "database": "unreachable"},
     )
