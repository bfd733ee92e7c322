# services/tenant_service.py
"""
Tenant Service - the tenant submission flow and tenant lifecycle.

Every write follows the same order:
1. Resolve the chosen property (apartment in a building, or a flat)
2. Build the complete tenant record
3. Save the tenant and commit
4. Sync occupancy on the affected units and commit

Step 4 runs in its own transaction. If it fails the tenant stays saved,
the unit is left as it was and a warning notification is emitted.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Callable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from models import Tenant
from schemas.tenant import (
     TenantForm,
     TenantRecord,
     PropertyChoiceEnum,
     MoveInRequest,
     MoveOutRequest,
     TenantAnalytics,
)
from .assignment_resolver import resolve_assignment
from .deposit_service import DepositService
from .errors import NotFoundError, StoreError
from .notifications import Notifier
from .occupancy_service import OccupancySynchronizer
from .property_store import PropertyStore
from .rent_payment_service import RentPaymentService
from .tenant_builder import build_tenant_record
from .tenant_store import TenantStore, to_record

logger = logging.getLogger(__name__)

OCCUPANCY_SYNC_FAILED = "Tenant saved but failed to update property occupancy"

PropertyRef = Tuple[str, str]


def _property_ref(tenant: Tenant) -> Optional[PropertyRef]:
     if tenant.property_id and tenant.property_type:
          return tenant.property_type, tenant.property_id
     return None


class TenantService:
     """Orchestrates tenant writes and the occupancy sync that follows them."""

     def __init__(self, db: Session, notifier: Optional[Notifier] = None):
          self.db = db
          self.notifier = notifier or Notifier()
          self.properties = PropertyStore(db)
          self.tenants = TenantStore(db)
          self.occupancy = OccupancySynchronizer(db, self.properties, self.tenants)

     # ------------------------------------------------------------------
     # Reads
     # ------------------------------------------------------------------

     def list_tenants(self, active_only: bool = False) -> List[TenantRecord]:
          return [to_record(t) for t in self.tenants.get_tenants(active_only=active_only)]

     def get_tenant(self, tenant_id: str) -> TenantRecord:
          return to_record(self.tenants.get_tenant(tenant_id))

     def search(self, query: str) -> List[TenantRecord]:
          return [to_record(t) for t in self.tenants.search(query)]

     def expiring(self, days_ahead: int, today: Optional[date] = None) -> List[TenantRecord]:
          return [to_record(t) for t in self.tenants.get_expiring(days_ahead, today=today)]

     # ------------------------------------------------------------------
     # Form submission
     # ------------------------------------------------------------------

     def _load_candidates(self, form: TenantForm):
          """Load the records the resolver picks from."""
          apartments, flats = [], []
          if form.property_type == PropertyChoiceEnum.BUILDING and form.building_id:
               apartments = self.properties.get_apartments_by_building_id(form.building_id)
          elif form.property_type == PropertyChoiceEnum.FLAT:
               flats = self.properties.get_flats()
          return apartments, flats

     def submit_tenant(self, form: TenantForm, tenant_id: Optional[str] = None) -> TenantRecord:
          """
          Create a tenant, or update the tenant with tenant_id, from the form.

          Args:
               form: Validated form input
               tenant_id: Id of the tenant being edited, None to create

          Returns:
               The saved TenantRecord

          Raises:
               NotFoundError: If tenant_id does not exist
               StoreError / SQLAlchemyError: If the tenant save fails
          """
          existing_row = self.tenants.get_tenant(tenant_id) if tenant_id else None
          existing = to_record(existing_row) if existing_row is not None else None
          previous = _property_ref(existing_row) if existing_row is not None else None

          apartments, flats = self._load_candidates(form)
          assignment = resolve_assignment(form, apartments, flats)
          record = build_tenant_record(form, assignment, existing)

          tenant = self._commit_tenant_write(lambda: self.tenants.save_tenant(record), "save")
          verb = "updated" if existing else "added"
          self.notifier.success(f"Tenant {record.personal_info.full_name} {verb} successfully")

          self._sync_assignment(tenant, previous)
          return to_record(tenant)

     def remove_tenant(self, tenant_id: str) -> str:
          """Delete a tenant with its deposits and rent payments, then release its unit."""
          tenant = self.tenants.get_tenant(tenant_id)
          target = _property_ref(tenant)
          name = tenant.full_name

          def write():
               removed = self.tenants.delete_tenant(tenant_id)
               DepositService.delete_for_tenant(self.db, tenant_id)
               RentPaymentService.delete_for_tenant(self.db, tenant_id)
               return removed

          self._commit_tenant_write(write, "delete")
          self.notifier.success(f"Tenant {name} removed successfully")

          if target is not None:
               self._run_sync(lambda: self.occupancy.release(*target))
          return tenant_id

     # ------------------------------------------------------------------
     # Move-in / move-out
     # ------------------------------------------------------------------

     def move_in(self, tenant_id: str, request: MoveInRequest) -> TenantRecord:
          """
          Move a tenant into a unit.

          Activates the tenant, records the assignment, marks the unit
          occupied/leased and records the security deposit when there is one.
          """
          tenant = self.tenants.get_tenant(tenant_id)
          previous = _property_ref(tenant)
          property_type = request.property_type.value
          unit = self.properties.get_unit(property_type, request.property_id)
          if unit is None:
               raise NotFoundError(f"{property_type.capitalize()} with id \"{request.property_id}\" not found")

          move_in_date = request.move_in_date or date.today()
          patch = {
               "is_active": True,
               "move_in_date": move_in_date,
               "move_out_date": None,
               "property_id": unit.id,
               "property_type": property_type,
               "building_id": request.building_id or getattr(unit, "building_id", None),
          }

          def write():
               updated = self.tenants.update_tenant(tenant_id, patch)
               deposit = Decimal(str(updated.security_deposit or 0))
               held = DepositService.get_by_tenant(self.db, tenant_id)
               if deposit > 0 and (held is None or held.property_id != unit.id):
                    DepositService.record(self.db, tenant_id, unit.id, deposit, paid_date=move_in_date)
               return updated

          tenant = self._commit_tenant_write(write, "move in")
          self.notifier.success(f"{tenant.full_name} moved in")

          self._sync_assignment(tenant, previous)
          return to_record(tenant)

     def move_out(self, tenant_id: str, request: MoveOutRequest) -> TenantRecord:
          """Deactivate a tenant and release their unit."""
          tenant = self.tenants.get_tenant(tenant_id)
          target = _property_ref(tenant)
          patch = {"is_active": False, "move_out_date": request.move_out_date or date.today()}

          tenant = self._commit_tenant_write(lambda: self.tenants.update_tenant(tenant_id, patch), "move out")
          self.notifier.success(f"{tenant.full_name} moved out")

          if target is not None:
               self._run_sync(lambda: self.occupancy.release(*target))
          return to_record(tenant)

     def analytics(self, tenant_id: str, today: Optional[date] = None) -> TenantAnalytics:
          tenant = self.tenants.get_tenant(tenant_id)
          end = tenant.move_out_date or today or date.today()
          duration = max((end - tenant.move_in_date).days, 0) if tenant.move_in_date else 0
          deposit = DepositService.get_by_tenant(self.db, tenant_id)
          total_paid, average_rent, payment_count = RentPaymentService.tenant_summary(self.db, tenant)
          return TenantAnalytics(
               tenant_id=tenant.id,
               rent_amount=tenant.rent_amount,
               total_rent_paid=total_paid,
               average_monthly_rent=average_rent,
               payment_count=payment_count,
               tenancy_duration_days=duration,
               document_count=len(tenant.documents or []),
               reference_count=len(tenant.references or []),
               security_deposit_status=deposit.status.value if deposit else None,
               security_deposit_balance=DepositService.balance(deposit) if deposit else None,
          )

     # ------------------------------------------------------------------
     # Helpers
     # ------------------------------------------------------------------

     def _commit_tenant_write(self, write: Callable[[], Tenant], action: str) -> Tenant:
          """Run a tenant write and commit it; failures abort the whole operation."""
          try:
               tenant = write()
               self.db.commit()
          except (StoreError, SQLAlchemyError) as exc:
               self.db.rollback()
               logger.error("Tenant %s failed: %s", action, exc)
               self.notifier.error(f"Failed to {action} tenant")
               raise
          return tenant

     def _sync_assignment(self, tenant: Tenant, previous: Optional[PropertyRef]) -> None:
          """Release the unit a tenant left and occupy the one it now references."""
          target = _property_ref(tenant)

          if previous is not None and previous != target:
               self._run_sync(lambda: self.occupancy.release(*previous))

          if target is None or not tenant.is_active:
               return

          others = self.occupancy.other_active_tenants(target[0], target[1], tenant.id)
          if others:
               names = ", ".join(t.full_name for t in others)
               self.notifier.warning(
                    f"{target[0].capitalize()} {target[1]} already has an active tenant ({names}); "
                    f"it is now assigned to {tenant.full_name}"
               )
          self._run_sync(lambda: self.occupancy.mark_occupied(target[0], target[1], tenant.id))

     def _run_sync(self, action: Callable[[], object]) -> bool:
          """Run one occupancy update in its own transaction."""
          try:
               action()
               self.db.commit()
          except (StoreError, SQLAlchemyError) as exc:
               self.db.rollback()
               logger.warning("Occupancy sync failed: %s", exc)
               self.notifier.warning(OCCUPANCY_SYNC_FAILED)
               return False
          return True
