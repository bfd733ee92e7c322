from .errors import StoreError, NotFoundError, RecordValidationError
from .notifications import Notifier
from .property_store import PropertyStore
from .tenant_store import TenantStore, to_record
from .assignment_resolver import PropertyAssignment, resolve_assignment
from .tenant_builder import build_tenant_record
from .occupancy_service import OccupancySynchronizer
from .deposit_service import DepositService
from .rent_payment_service import RentPaymentService
from .tenant_service import TenantService, OCCUPANCY_SYNC_FAILED
from .statistics_service import (
     get_property_statistics,
     dashboard_summary,
     export_data,
     import_data,
)

__all__ = [
     "StoreError",
     "NotFoundError",
     "RecordValidationError",
     "Notifier",
     "PropertyStore",
     "TenantStore",
     "to_record",
     "PropertyAssignment",
     "resolve_assignment",
     "build_tenant_record",
     "OccupancySynchronizer",
     "DepositService",
     "RentPaymentService",
     "TenantService",
     "OCCUPANCY_SYNC_FAILED",
     "get_property_statistics",
     "dashboard_summary",
     "export_data",
     "import_data",
]
