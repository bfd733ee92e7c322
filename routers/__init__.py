from .properties import router as properties_router
from .tenants import router as tenants_router
from .dashboard import router as dashboard_router
from .rent_payments import router as rent_payments_router

__all__ = ["properties_router", "tenants_router", "dashboard_router", "rent_payments_router"]
