# services/tenant_builder.py
"""
Tenant Record Builder.

Merges a submitted TenantForm with the existing tenant (when editing) into
a complete TenantRecord. Fields the simplified form does not edit are
carried over from the existing record, or defaulted on create.
"""
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

import config
from models.base import utcnow
from schemas.tenant import (
     TenantForm,
     TenantRecord,
     PersonalInfo,
     ContactInfo,
     EmergencyContact,
     Identification,
     RentalAgreement,
)
from .assignment_resolver import PropertyAssignment


def generate_tenant_id() -> str:
     return f"tenant_{uuid.uuid4().hex}"


def _split_name(full_name: str):
     parts = full_name.split()
     first = parts[0] if parts else ""
     last = " ".join(parts[1:])
     return first, last


def default_deposit(rent_amount: Decimal) -> Decimal:
     return Decimal(str(rent_amount)) * config.DEPOSIT_MULTIPLIER


def build_tenant_record(
     form: TenantForm,
     assignment: PropertyAssignment,
     existing: Optional[TenantRecord] = None,
     now: Optional[datetime] = None,
) -> TenantRecord:
     """
     Produce the complete tenant record for a form submission.

     Args:
          form: Validated form input
          assignment: Resolved property assignment (may be unassigned)
          existing: The stored tenant when editing, None when creating
          now: Save timestamp (defaults to the current UTC time)

     Returns:
          TenantRecord with id/created_at preserved on edit and
          updated_at set to now.
     """
     now = now or utcnow()
     first_name, last_name = _split_name(form.full_name)

     prior_personal = existing.personal_info if existing else None
     prior_agreement = existing.rental_agreement if existing else None

     # On edit a blank rent keeps the stored rent unless a new unit supplied one.
     rent_amount = Decimal(str(assignment.rent_amount))
     if prior_agreement and not form.monthly_rent and not assignment.is_assigned:
          rent_amount = Decimal(str(prior_agreement.rent_amount))

     if form.security_deposit:
          security_deposit = Decimal(str(form.security_deposit))
     elif prior_agreement and prior_agreement.security_deposit:
          security_deposit = Decimal(str(prior_agreement.security_deposit))
     else:
          security_deposit = default_deposit(rent_amount)

     personal_info = PersonalInfo(
          first_name=first_name,
          last_name=last_name,
          full_name=form.full_name,
          occupation=form.occupation,
          family_size=prior_personal.family_size if prior_personal else 1,
          nationality=prior_personal.nationality if prior_personal else config.DEFAULT_NATIONALITY,
          marital_status=prior_personal.marital_status if prior_personal else "single",
          date_of_birth=prior_personal.date_of_birth if prior_personal else None,
          employer=prior_personal.employer if prior_personal else None,
          monthly_income=prior_personal.monthly_income if prior_personal else None,
          religion=prior_personal.religion if prior_personal else None,
     )

     contact_info = ContactInfo(
          phone=form.phone,
          email=form.email or "",
          address=existing.contact_info.address if existing else "",
     )

     rental_agreement = RentalAgreement(
          agreement_number=form.agreement_number,
          start_date=form.start_date,
          end_date=form.end_date,
          rent_amount=rent_amount,
          security_deposit=security_deposit,
          rent_due_day=prior_agreement.rent_due_day if prior_agreement else config.DEFAULT_RENT_DUE_DAY,
          payment_method=prior_agreement.payment_method if prior_agreement else config.DEFAULT_PAYMENT_METHOD,
          notice_period=prior_agreement.notice_period if prior_agreement else config.DEFAULT_NOTICE_PERIOD_DAYS,
          maintenance_charges=prior_agreement.maintenance_charges if prior_agreement else None,
          late_fee_amount=prior_agreement.late_fee_amount if prior_agreement else None,
          renewal_terms=prior_agreement.renewal_terms if prior_agreement else None,
          special_conditions=list(prior_agreement.special_conditions) if prior_agreement else [],
     )

     # A newly resolved unit replaces the whole assignment; otherwise keep the old one.
     if assignment.is_assigned:
          property_id = assignment.property_id
          property_type = assignment.property_type
          building_id = assignment.building_id
     elif existing:
          property_id = existing.property_id
          property_type = existing.property_type
          building_id = existing.building_id
     else:
          property_id = property_type = building_id = None

     return TenantRecord(
          id=existing.id if existing else generate_tenant_id(),
          personal_info=personal_info,
          contact_info=contact_info,
          emergency_contact=existing.emergency_contact if existing else EmergencyContact(),
          identification=existing.identification if existing else Identification(),
          rental_agreement=rental_agreement,
          references=list(existing.references) if existing else [],
          documents=list(existing.documents) if existing else [],
          move_in_date=existing.move_in_date if existing else form.start_date,
          move_out_date=existing.move_out_date if existing else None,
          is_active=existing.is_active if existing else True,
          property_id=property_id,
          property_type=property_type,
          building_id=building_id,
          created_at=existing.created_at if existing else now,
          updated_at=now,
     )
