from .property import (
     BuildingCreate,
     BuildingUpdate,
     BuildingResponse,
     ApartmentCreate,
     ApartmentUpdate,
     ApartmentResponse,
     FlatCreate,
     FlatUpdate,
     FlatResponse,
     LandCreate,
     LandUpdate,
     LandResponse,
     PropertySearchResponse,
)
from .tenant import (
     TenantForm,
     TenantRecord,
     TenantSubmissionResponse,
     TenantRemovalResponse,
     TenantListResponse,
     MoveInRequest,
     MoveOutRequest,
     TenantAnalytics,
)
from .notification import Notification, NotificationLevelEnum
from .deposit import DeductionCreate, RefundRequest, SecurityDepositResponse
from .rent_payment import (
     RentPaymentCreate,
     RentPaymentUpdate,
     MarkPaidRequest,
     MonthlyGenerationRequest,
     RentPaymentResponse,
     RentPaymentListResponse,
     OverdueRentResponse,
)
from .statistics import (
     PropertyStatistics,
     DashboardSummary,
     ReconcileResponse,
     DataExport,
     DataImport,
     ImportResult,
)

__all__ = [
     "BuildingCreate",
     "BuildingUpdate",
     "BuildingResponse",
     "ApartmentCreate",
     "ApartmentUpdate",
     "ApartmentResponse",
     "FlatCreate",
     "FlatUpdate",
     "FlatResponse",
     "LandCreate",
     "LandUpdate",
     "LandResponse",
     "PropertySearchResponse",
     "TenantForm",
     "TenantRecord",
     "TenantSubmissionResponse",
     "TenantRemovalResponse",
     "TenantListResponse",
     "MoveInRequest",
     "MoveOutRequest",
     "TenantAnalytics",
     "Notification",
     "NotificationLevelEnum",
     "DeductionCreate",
     "RefundRequest",
     "SecurityDepositResponse",
     "RentPaymentCreate",
     "RentPaymentUpdate",
     "MarkPaidRequest",
     "MonthlyGenerationRequest",
     "RentPaymentResponse",
     "RentPaymentListResponse",
     "OverdueRentResponse",
     "PropertyStatistics",
     "DashboardSummary",
     "ReconcileResponse",
     "DataExport",
     "DataImport",
     "ImportResult",
]
