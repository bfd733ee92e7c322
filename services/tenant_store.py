# services/tenant_store.py
"""
Tenant Store - persistence for complete tenant records.

The API works with nested TenantRecord objects; the tenants table is flat.
to_record() / _columns_from_record() convert between the two.
"""
import logging
from datetime import date, timedelta
from typing import Optional, List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from models import Tenant
from schemas.tenant import (
     TenantRecord,
     PersonalInfo,
     ContactInfo,
     EmergencyContact,
     Identification,
     RentalAgreement,
)
from .errors import NotFoundError, RecordValidationError

logger = logging.getLogger(__name__)


def _enum_value(value):
     return getattr(value, "value", value)


def _columns_from_record(record: TenantRecord) -> dict:
     personal = record.personal_info
     contact = record.contact_info
     emergency = record.emergency_contact
     ident = record.identification
     agreement = record.rental_agreement
     return {
          "id": record.id,
          # Personal info
          "first_name": personal.first_name,
          "last_name": personal.last_name,
          "full_name": personal.full_name,
          "date_of_birth": personal.date_of_birth,
          "occupation": personal.occupation,
          "employer": personal.employer,
          "monthly_income": personal.monthly_income,
          "marital_status": _enum_value(personal.marital_status),
          "family_size": personal.family_size,
          "nationality": personal.nationality,
          "religion": personal.religion,
          # Contact info
          "phone": contact.phone,
          "email": contact.email,
          "address": contact.address,
          # Emergency contact
          "emergency_contact_name": emergency.name,
          "emergency_contact_relationship": emergency.relationship,
          "emergency_contact_phone": emergency.phone,
          "emergency_contact_email": emergency.email,
          "emergency_contact_address": emergency.address,
          # Identification
          "aadhar_number": ident.aadhar_number,
          "pan_number": ident.pan_number,
          "driving_license": ident.driving_license,
          "passport": ident.passport,
          "voter_id_number": ident.voter_id_number,
          # Rental agreement
          "agreement_number": agreement.agreement_number,
          "start_date": agreement.start_date,
          "end_date": agreement.end_date,
          "rent_amount": agreement.rent_amount,
          "security_deposit": agreement.security_deposit,
          "maintenance_charges": agreement.maintenance_charges,
          "rent_due_day": agreement.rent_due_day,
          "payment_method": _enum_value(agreement.payment_method),
          "late_fee_amount": agreement.late_fee_amount,
          "notice_period": agreement.notice_period,
          "renewal_terms": agreement.renewal_terms,
          "special_conditions": list(agreement.special_conditions),
          "references": [ref.model_dump(mode="json") for ref in record.references],
          "documents": [doc.model_dump(mode="json") for doc in record.documents],
          # Assignment and status
          "property_id": record.property_id,
          "property_type": _enum_value(record.property_type),
          "building_id": record.building_id,
          "move_in_date": record.move_in_date,
          "move_out_date": record.move_out_date,
          "is_active": record.is_active,
          "created_at": record.created_at,
          "updated_at": record.updated_at,
     }


def to_record(tenant: Tenant) -> TenantRecord:
     """Build the nested TenantRecord view of a tenants row."""
     return TenantRecord(
          id=tenant.id,
          personal_info=PersonalInfo(
               first_name=tenant.first_name or "",
               last_name=tenant.last_name or "",
               full_name=tenant.full_name,
               date_of_birth=tenant.date_of_birth,
               occupation=tenant.occupation,
               employer=tenant.employer,
               monthly_income=tenant.monthly_income,
               marital_status=tenant.marital_status,
               family_size=tenant.family_size,
               nationality=tenant.nationality,
               religion=tenant.religion,
          ),
          contact_info=ContactInfo(
               phone=tenant.phone,
               email=tenant.email,
               address=tenant.address,
          ),
          emergency_contact=EmergencyContact(
               name=tenant.emergency_contact_name or "",
               relationship=tenant.emergency_contact_relationship or "",
               phone=tenant.emergency_contact_phone or "",
               email=tenant.emergency_contact_email,
               address=tenant.emergency_contact_address,
          ),
          identification=Identification(
               aadhar_number=tenant.aadhar_number,
               pan_number=tenant.pan_number,
               driving_license=tenant.driving_license,
               passport=tenant.passport,
               voter_id_number=tenant.voter_id_number,
          ),
          rental_agreement=RentalAgreement(
               agreement_number=tenant.agreement_number,
               start_date=tenant.start_date,
               end_date=tenant.end_date,
               rent_amount=tenant.rent_amount,
               security_deposit=tenant.security_deposit,
               maintenance_charges=tenant.maintenance_charges,
               rent_due_day=tenant.rent_due_day,
               payment_method=tenant.payment_method,
               late_fee_amount=tenant.late_fee_amount,
               notice_period=tenant.notice_period,
               renewal_terms=tenant.renewal_terms,
               special_conditions=tenant.special_conditions or [],
          ),
          references=tenant.references or [],
          documents=tenant.documents or [],
          move_in_date=tenant.move_in_date,
          move_out_date=tenant.move_out_date,
          is_active=tenant.is_active,
          property_id=tenant.property_id,
          property_type=tenant.property_type,
          building_id=tenant.building_id,
          created_at=tenant.created_at,
          updated_at=tenant.updated_at,
     )


class TenantStore:
     """Store for tenant rows, bound to one session."""

     def __init__(self, db: Session):
          self.db = db

     def get_tenants(self, active_only: bool = False) -> List[Tenant]:
          query = self.db.query(Tenant)
          if active_only:
               query = query.filter(Tenant.is_active.is_(True))
          return query.order_by(Tenant.full_name).all()

     def get_tenant_by_id(self, tenant_id: str) -> Optional[Tenant]:
          return self.db.get(Tenant, tenant_id)

     def get_tenant(self, tenant_id: str) -> Tenant:
          tenant = self.get_tenant_by_id(tenant_id)
          if tenant is None:
               raise NotFoundError(f"Tenant with id \"{tenant_id}\" not found")
          return tenant

     def get_active_tenants_for(self, property_type: str, property_id: str) -> List[Tenant]:
          return (
               self.db.query(Tenant)
               .filter(
                    Tenant.property_type == property_type,
                    Tenant.property_id == property_id,
                    Tenant.is_active.is_(True),
               )
               .order_by(Tenant.updated_at.desc())
               .all()
          )

     def save_tenant(self, record: TenantRecord) -> Tenant:
          """Insert a new tenant, or overwrite the stored one with the same id."""
          self._validate(record)
          values = _columns_from_record(record)
          tenant = self.get_tenant_by_id(record.id)
          if tenant is None:
               tenant = Tenant(**values)
               self.db.add(tenant)
          else:
               for key, value in values.items():
                    setattr(tenant, key, value)
          self.db.flush()
          return tenant

     def update_tenant(self, tenant_id: str, patch: dict) -> Tenant:
          """Apply a flat column patch to an existing tenant."""
          tenant = self.get_tenant(tenant_id)
          unknown = [key for key in patch if key not in Tenant.__table__.columns]
          if unknown:
               raise RecordValidationError(f"Unknown tenant field(s): {', '.join(sorted(unknown))}")
          if "id" in patch and patch["id"] != tenant_id:
               raise RecordValidationError("Tenant id cannot be changed")
          for key, value in patch.items():
               setattr(tenant, key, _enum_value(value))
          self._validate(to_record(tenant))
          self.db.flush()
          return tenant

     def delete_tenant(self, tenant_id: str) -> Tenant:
          tenant = self.get_tenant(tenant_id)
          self.db.delete(tenant)
          self.db.flush()
          return tenant

     def replace_all(self, records: List[TenantRecord]) -> int:
          self.db.query(Tenant).delete(synchronize_session="fetch")
          for record in records:
               self.save_tenant(record)
          return len(records)

     # ------------------------------------------------------------------
     # Queries
     # ------------------------------------------------------------------

     def search(self, query: str) -> List[Tenant]:
          like = f"%{query.strip().lower()}%"
          return (
               self.db.query(Tenant)
               .filter(or_(
                    Tenant.full_name.ilike(like),
                    Tenant.occupation.ilike(like),
                    Tenant.phone.ilike(like),
                    Tenant.email.ilike(like),
                    Tenant.agreement_number.ilike(like),
                    Tenant.aadhar_number.ilike(like),
                    Tenant.pan_number.ilike(like),
               ))
               .order_by(Tenant.full_name)
               .all()
          )

     def get_expiring(self, days_ahead: int, today: Optional[date] = None) -> List[Tenant]:
          """Active tenants whose agreement ends on or before today + days_ahead."""
          cutoff = (today or date.today()) + timedelta(days=days_ahead)
          return (
               self.db.query(Tenant)
               .filter(Tenant.is_active.is_(True), Tenant.end_date <= cutoff)
               .order_by(Tenant.end_date)
               .all()
          )

     @staticmethod
     def _validate(record: TenantRecord) -> None:
          if (
               not record.id
               or not (record.personal_info.full_name or "").strip()
               or not (record.contact_info.phone or "").strip()
          ):
               raise RecordValidationError("Tenant must have id, full name, and phone number")
