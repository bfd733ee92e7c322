# services/occupancy_service.py
"""
Occupancy Synchronizer - keeps unit occupancy flags in line with tenants.

A unit (apartment, flat, land) is occupied/leased if and only if at least
one active tenant references it. The tenant's property_id is the source of
truth; a unit's current_tenant_id is a back-reference for display that is
rebuilt from the tenants whenever it is touched.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from models import Tenant
from .property_store import PropertyStore, Unit
from .tenant_store import TenantStore

logger = logging.getLogger(__name__)


class OccupancySynchronizer:
     """Writes occupancy flags and back-references onto units."""

     def __init__(
          self,
          db: Session,
          property_store: Optional[PropertyStore] = None,
          tenant_store: Optional[TenantStore] = None,
     ):
          self.db = db
          self.properties = property_store or PropertyStore(db)
          self.tenants = tenant_store or TenantStore(db)

     def current_tenant_for(self, property_type: str, property_id: str) -> Optional[Tenant]:
          """Look up the active tenant of a unit instead of trusting the back-reference."""
          active = self.tenants.get_active_tenants_for(property_type, property_id)
          return active[0] if active else None

     def other_active_tenants(self, property_type: str, property_id: str, tenant_id: str) -> List[Tenant]:
          return [
               t for t in self.tenants.get_active_tenants_for(property_type, property_id)
               if t.id != tenant_id
          ]

     def mark_occupied(self, property_type: str, property_id: str, tenant_id: str) -> Unit:
          """Flag a unit occupied/leased by the given tenant."""
          unit = self.properties.get_unit(property_type, property_id)
          flag = unit.OCCUPANCY_FLAG if unit is not None else "is_occupied"
          updated = self.properties.update_unit(
               property_type,
               property_id,
               {flag: True, "current_tenant_id": tenant_id},
          )
          logger.info("%s %s marked occupied by tenant %s", property_type, property_id, tenant_id)
          return updated

     def release(self, property_type: str, property_id: str) -> Unit:
          """
          Clear a unit after its tenant left.

          Call after the tenant write. If another active tenant still
          references the unit, the unit stays occupied and points at them.
          """
          unit = self.properties.get_unit(property_type, property_id)
          flag = unit.OCCUPANCY_FLAG if unit is not None else "is_occupied"
          remaining = self.current_tenant_for(property_type, property_id)
          if remaining is not None:
               logger.warning(
                    "%s %s still referenced by active tenant %s; keeping it occupied",
                    property_type, property_id, remaining.id,
               )
               return self.properties.update_unit(
                    property_type,
                    property_id,
                    {flag: True, "current_tenant_id": remaining.id},
               )

          updated = self.properties.update_unit(
               property_type,
               property_id,
               {flag: False, "current_tenant_id": None},
          )
          logger.info("%s %s released", property_type, property_id)
          return updated

     def reconcile_all(self) -> Tuple[int, List[dict]]:
          """
          Recompute every unit's flag and back-reference from active tenants.

          Returns:
               (units_checked, corrections) where each correction describes
               the state a unit was moved to.
          """
          by_unit: Dict[Tuple[str, str], List[Tenant]] = defaultdict(list)
          for tenant in self.tenants.get_tenants(active_only=True):
               if tenant.property_id and tenant.property_type:
                    by_unit[(tenant.property_type, tenant.property_id)].append(tenant)

          corrections = []
          units = self.properties.get_all_units()
          for unit in units:
               occupants = sorted(
                    by_unit.get((unit.PROPERTY_TYPE, unit.id), []),
                    key=lambda t: t.updated_at,
                    reverse=True,
               )
               expected_flag = bool(occupants)
               expected_ref = occupants[0].id if occupants else None
               if len(occupants) > 1:
                    logger.warning(
                         "%s %s is referenced by %d active tenants: %s",
                         unit.PROPERTY_TYPE, unit.id, len(occupants), [t.id for t in occupants],
                    )

               if getattr(unit, unit.OCCUPANCY_FLAG) == expected_flag and unit.current_tenant_id == expected_ref:
                    continue

               self.properties.update_unit(
                    unit.PROPERTY_TYPE,
                    unit.id,
                    {unit.OCCUPANCY_FLAG: expected_flag, "current_tenant_id": expected_ref},
               )
               corrections.append({
                    "property_type": unit.PROPERTY_TYPE,
                    "property_id": unit.id,
                    "occupied": expected_flag,
                    "current_tenant_id": expected_ref,
               })

          referenced = {(u.PROPERTY_TYPE, u.id) for u in units}
          for (ptype, pid), tenants in by_unit.items():
               if (ptype, pid) not in referenced:
                    logger.warning("Tenants %s reference missing %s %s", [t.id for t in tenants], ptype, pid)

          if corrections:
               logger.info("Occupancy reconciliation corrected %d unit(s)", len(corrections))
          return len(units), corrections
