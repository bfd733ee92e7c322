# models/__init__.py
from .base import Base
from .building import Building
from .apartment import Apartment
from .flat import Flat
from .land import Land
from .tenant import Tenant
from .security_deposit import SecurityDeposit, DepositStatus
from .rent_payment import RentPayment, RentPaymentStatus

__all__ = [
     "Base",
     "Building",
     "Apartment",
     "Flat",
     "Land",
     "Tenant",
     "SecurityDeposit",
     "DepositStatus",
     "RentPayment",
     "RentPaymentStatus",
]
