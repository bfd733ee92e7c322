# services/property_store.py
"""
Property Store - data access for buildings, apartments, flats and lands.

Reads return ORM objects (or None); writes validate the merged record and
flush, leaving the commit to the caller. Lookups by unknown id on write
paths raise NotFoundError.
"""
import enum
import logging
from decimal import Decimal
from typing import Optional, List, Union

from sqlalchemy import or_
from sqlalchemy.orm import Session

from models import Building, Apartment, Flat, Land, Tenant
from .errors import NotFoundError, RecordValidationError

logger = logging.getLogger(__name__)

Unit = Union[Apartment, Flat, Land]

UNIT_MODELS = {
     Apartment.PROPERTY_TYPE: Apartment,
     Flat.PROPERTY_TYPE: Flat,
     Land.PROPERTY_TYPE: Land,
}


def _plain(value):
     """Unwrap enums so String columns receive plain values."""
     if isinstance(value, enum.Enum):
          return value.value
     if isinstance(value, list):
          return [_plain(v) for v in value]
     return value


def _blank(value) -> bool:
     return value is None or (isinstance(value, str) and not value.strip())


class PropertyStore:
     """Store for all property kinds, bound to one session."""

     def __init__(self, db: Session):
          self.db = db

     # ------------------------------------------------------------------
     # Generic helpers
     # ------------------------------------------------------------------

     def _apply_patch(self, obj, patch: dict, validator) -> None:
          model = type(obj)
          unknown = [key for key in patch if key not in model.__table__.columns]
          if unknown:
               raise RecordValidationError(
                    f"Unknown field(s) for {model.__name__}: {', '.join(sorted(unknown))}"
               )
          if "id" in patch and patch["id"] != obj.id:
               raise RecordValidationError(f"{model.__name__} id cannot be changed")

          merged = {c.key: getattr(obj, c.key) for c in model.__table__.columns}
          merged.update({k: _plain(v) for k, v in patch.items()})
          validator(merged)

          for key, value in patch.items():
               setattr(obj, key, _plain(value))
          self.db.flush()

     def _create(self, model, data: dict, validator):
          values = {k: _plain(v) for k, v in data.items()}
          if not values.get("id"):
               values.pop("id", None)
          elif self.db.get(model, values["id"]) is not None:
               raise RecordValidationError(f"{model.__name__} with id \"{values['id']}\" already exists")
          validator(values)
          obj = model(**values)
          self.db.add(obj)
          self.db.flush()
          return obj

     def _detach_tenants(self, property_type: str, property_ids: List[str]) -> int:
          """Clear the tenant -> property link for tenants of removed units."""
          if not property_ids:
               return 0
          count = (
               self.db.query(Tenant)
               .filter(Tenant.property_type == property_type, Tenant.property_id.in_(property_ids))
               .update(
                    {Tenant.property_id: None, Tenant.property_type: None, Tenant.building_id: None},
                    synchronize_session="fetch",
               )
          )
          if count:
               logger.info("Detached %d tenant(s) from removed %s(s) %s", count, property_type, property_ids)
          return count

     def get_unit(self, property_type: str, property_id: str) -> Optional[Unit]:
          model = UNIT_MODELS.get(property_type)
          if model is None:
               return None
          return self.db.get(model, property_id)

     def update_unit(self, property_type: str, property_id: str, patch: dict) -> Unit:
          if property_type == Apartment.PROPERTY_TYPE:
               return self.update_apartment(property_id, patch)
          if property_type == Flat.PROPERTY_TYPE:
               return self.update_flat(property_id, patch)
          if property_type == Land.PROPERTY_TYPE:
               return self.update_land(property_id, patch)
          raise RecordValidationError(f"Unknown property type \"{property_type}\"")

     def get_all_units(self) -> List[Unit]:
          return [*self.get_apartments(), *self.get_flats(), *self.get_lands()]

     # ------------------------------------------------------------------
     # Buildings
     # ------------------------------------------------------------------

     def get_buildings(self) -> List[Building]:
          return self.db.query(Building).order_by(Building.building_code, Building.name).all()

     def get_building_by_id(self, building_id: str) -> Optional[Building]:
          return self.db.get(Building, building_id)

     def get_building(self, building_id: str) -> Building:
          building = self.get_building_by_id(building_id)
          if building is None:
               raise NotFoundError(f"Building with id \"{building_id}\" not found")
          return building

     def create_building(self, data: dict) -> Building:
          return self._create(Building, data, self._validate_building)

     def update_building(self, building_id: str, patch: dict) -> Building:
          building = self.get_building(building_id)
          self._apply_patch(building, patch, self._validate_building)
          return building

     def delete_building(self, building_id: str) -> None:
          building = self.get_building(building_id)
          self._detach_tenants(Apartment.PROPERTY_TYPE, [apt.id for apt in building.apartments])
          self.db.delete(building)
          self.db.flush()

     @staticmethod
     def _validate_building(values: dict) -> None:
          if _blank(values.get("name")) or _blank(values.get("building_code")) or _blank(values.get("address")):
               raise RecordValidationError("Building must have name, building code, and address")

     # ------------------------------------------------------------------
     # Apartments
     # ------------------------------------------------------------------

     def get_apartments(self) -> List[Apartment]:
          return self.db.query(Apartment).all()

     def get_apartments_by_building_id(self, building_id: str) -> List[Apartment]:
          return (
               self.db.query(Apartment)
               .filter(Apartment.building_id == building_id)
               .order_by(Apartment.door_number)
               .all()
          )

     def get_apartment_by_id(self, apartment_id: str) -> Optional[Apartment]:
          return self.db.get(Apartment, apartment_id)

     def get_apartment(self, apartment_id: str) -> Apartment:
          apartment = self.get_apartment_by_id(apartment_id)
          if apartment is None:
               raise NotFoundError(f"Apartment with id \"{apartment_id}\" not found")
          return apartment

     def create_apartment(self, building_id: str, data: dict) -> Apartment:
          self.get_building(building_id)
          return self._create(Apartment, {**data, "building_id": building_id}, self._validate_apartment)

     def update_apartment(self, apartment_id: str, patch: dict) -> Apartment:
          apartment = self.get_apartment(apartment_id)
          self._apply_patch(apartment, patch, self._validate_apartment)
          return apartment

     def delete_apartment(self, apartment_id: str) -> None:
          apartment = self.get_apartment(apartment_id)
          self._detach_tenants(Apartment.PROPERTY_TYPE, [apartment.id])
          self.db.delete(apartment)
          self.db.flush()

     @staticmethod
     def _validate_apartment(values: dict) -> None:
          bedrooms = values.get("bedroom_count")
          if _blank(values.get("door_number")) or (bedrooms is not None and bedrooms < 0):
               raise RecordValidationError("Apartment must have a door number and non-negative bedroom count")

     # ------------------------------------------------------------------
     # Flats
     # ------------------------------------------------------------------

     def get_flats(self) -> List[Flat]:
          return self.db.query(Flat).order_by(Flat.name).all()

     def get_flat_by_id(self, flat_id: str) -> Optional[Flat]:
          return self.db.get(Flat, flat_id)

     def get_flat(self, flat_id: str) -> Flat:
          flat = self.get_flat_by_id(flat_id)
          if flat is None:
               raise NotFoundError(f"Flat with id \"{flat_id}\" not found")
          return flat

     def create_flat(self, data: dict) -> Flat:
          return self._create(Flat, data, self._validate_flat)

     def update_flat(self, flat_id: str, patch: dict) -> Flat:
          flat = self.get_flat(flat_id)
          self._apply_patch(flat, patch, self._validate_flat)
          return flat

     def delete_flat(self, flat_id: str) -> None:
          flat = self.get_flat(flat_id)
          self._detach_tenants(Flat.PROPERTY_TYPE, [flat.id])
          self.db.delete(flat)
          self.db.flush()

     @staticmethod
     def _validate_flat(values: dict) -> None:
          if _blank(values.get("name")) or _blank(values.get("address")) or _blank(values.get("door_number")):
               raise RecordValidationError("Flat must have name, address, and door number")

     # ------------------------------------------------------------------
     # Lands
     # ------------------------------------------------------------------

     def get_lands(self) -> List[Land]:
          return self.db.query(Land).order_by(Land.name).all()

     def get_land_by_id(self, land_id: str) -> Optional[Land]:
          return self.db.get(Land, land_id)

     def get_land(self, land_id: str) -> Land:
          land = self.get_land_by_id(land_id)
          if land is None:
               raise NotFoundError(f"Land with id \"{land_id}\" not found")
          return land

     def create_land(self, data: dict) -> Land:
          return self._create(Land, data, self._validate_land)

     def update_land(self, land_id: str, patch: dict) -> Land:
          land = self.get_land(land_id)
          self._apply_patch(land, patch, self._validate_land)
          return land

     def delete_land(self, land_id: str) -> None:
          land = self.get_land(land_id)
          self._detach_tenants(Land.PROPERTY_TYPE, [land.id])
          self.db.delete(land)
          self.db.flush()

     @staticmethod
     def _validate_land(values: dict) -> None:
          area = values.get("area")
          if (
               _blank(values.get("name"))
               or _blank(values.get("address"))
               or area is None
               or Decimal(str(area)) <= 0
          ):
               raise RecordValidationError("Land must have name, address, and positive area")

     # ------------------------------------------------------------------
     # Search
     # ------------------------------------------------------------------

     def search(self, query: str, kind: Optional[str] = None) -> dict:
          """
          Case-insensitive substring search.

          Buildings match on name/address/building code, flats on
          name/address/door number, lands on name/address/survey number.
          """
          like = f"%{query.strip().lower()}%"
          results = {"buildings": [], "flats": [], "lands": []}

          if kind in (None, "building"):
               results["buildings"] = (
                    self.db.query(Building)
                    .filter(or_(
                         Building.name.ilike(like),
                         Building.address.ilike(like),
                         Building.building_code.ilike(like),
                    ))
                    .all()
               )
          if kind in (None, "flat"):
               results["flats"] = (
                    self.db.query(Flat)
                    .filter(or_(
                         Flat.name.ilike(like),
                         Flat.address.ilike(like),
                         Flat.door_number.ilike(like),
                    ))
                    .all()
               )
          if kind in (None, "land"):
               results["lands"] = (
                    self.db.query(Land)
                    .filter(or_(
                         Land.name.ilike(like),
                         Land.address.ilike(like),
                         Land.survey_number.ilike(like),
                    ))
                    .all()
               )
          return results
