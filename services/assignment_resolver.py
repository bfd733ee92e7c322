# services/assignment_resolver.py
"""
Property Assignment Resolver.

Turns the property choice on a tenant form into a concrete unit:
building + apartment -> ("apartment", apartment_id), flat -> ("flat", flat_id).
Pure lookup over lists the caller has already loaded.
"""
import logging
from decimal import Decimal
from typing import NamedTuple, Optional, Sequence

from models import Apartment, Flat
from schemas.tenant import TenantForm, PropertyChoiceEnum

logger = logging.getLogger(__name__)


class PropertyAssignment(NamedTuple):
     property_id: Optional[str]
     property_type: Optional[str]  # "apartment" | "flat"
     building_id: Optional[str]
     rent_amount: Decimal

     @property
     def is_assigned(self) -> bool:
          return bool(self.property_id)


def _rent_is_blank(rent: Optional[Decimal]) -> bool:
     return rent is None or rent == 0


def resolve_assignment(
     form: TenantForm,
     apartments: Sequence[Apartment],
     flats: Sequence[Flat],
) -> PropertyAssignment:
     """
     Resolve the chosen unit and default the rent from it.

     A blank (or zero) rent on the form takes the unit's stored rent.
     If no concrete unit was chosen, or the chosen id is not among the
     loaded records, the tenant stays unassigned; this is not an error.
     """
     form_rent = form.monthly_rent if not _rent_is_blank(form.monthly_rent) else Decimal("0")

     unit = None
     property_type = None
     building_id = None

     if form.property_type == PropertyChoiceEnum.BUILDING and form.apartment_id:
          unit = next((apt for apt in apartments if apt.id == form.apartment_id), None)
          property_type = Apartment.PROPERTY_TYPE
          building_id = form.building_id
     elif form.property_type == PropertyChoiceEnum.FLAT and form.flat_id:
          unit = next((flat for flat in flats if flat.id == form.flat_id), None)
          property_type = Flat.PROPERTY_TYPE

     if unit is None:
          if property_type is not None:
               logger.info(
                    "Chosen %s not found among loaded records; tenant left unassigned",
                    property_type,
               )
          return PropertyAssignment(None, None, None, form_rent)

     rent = form_rent
     if _rent_is_blank(form.monthly_rent):
          rent = Decimal(str(unit.rent_amount or 0))

     return PropertyAssignment(unit.id, property_type, building_id or getattr(unit, "building_id", None), rent)
