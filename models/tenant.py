# models/tenant.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, Boolean, JSON, Index
from .base import Base, utcnow


class Tenant(Base):
     """
     Tenant model - a person renting an apartment, flat or land parcel.

     property_id / property_type / building_id form the authoritative
     tenant -> property link. building_id is only set for apartments.
     """
     __tablename__ = "tenants"
     __table_args__ = (
          Index("ix_tenants_property_lookup", "property_id", "property_type", "is_active"),
     )

     id = Column(String(64), primary_key=True)

     # Personal info
     first_name = Column(String(100), nullable=False, default="")
     last_name = Column(String(100), nullable=False, default="")
     full_name = Column(String(255), nullable=False)
     date_of_birth = Column(Date, nullable=True)
     occupation = Column(String(100), nullable=False)
     employer = Column(String(255), nullable=True)
     monthly_income = Column(Numeric(12, 2), nullable=True)
     marital_status = Column(String(20), default="single", nullable=False)
     family_size = Column(Integer, default=1, nullable=False)
     nationality = Column(String(50), nullable=False)
     religion = Column(String(50), nullable=True)

     # Contact info
     phone = Column(String(20), nullable=False)
     email = Column(String(255), nullable=True)
     address = Column(Text, nullable=True)

     # Emergency contact
     emergency_contact_name = Column(String(255), nullable=True)
     emergency_contact_relationship = Column(String(100), nullable=True)
     emergency_contact_phone = Column(String(20), nullable=True)
     emergency_contact_email = Column(String(255), nullable=True)
     emergency_contact_address = Column(Text, nullable=True)

     # Identification
     aadhar_number = Column(String(12), nullable=True)
     pan_number = Column(String(10), nullable=True)
     driving_license = Column(String(20), nullable=True)
     passport = Column(String(20), nullable=True)
     voter_id_number = Column(String(20), nullable=True)

     # Rental agreement
     agreement_number = Column(String(50), nullable=False)
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)
     rent_amount = Column(Numeric(12, 2), nullable=False)
     security_deposit = Column(Numeric(12, 2), nullable=False)
     maintenance_charges = Column(Numeric(10, 2), nullable=True)
     rent_due_day = Column(Integer, nullable=False)  # day of month (1-31)
     payment_method = Column(String(20), default="bank_transfer", nullable=False)
     late_fee_amount = Column(Numeric(10, 2), nullable=True)
     notice_period = Column(Integer, default=30, nullable=False)  # days
     renewal_terms = Column(Text, nullable=True)
     special_conditions = Column(JSON, nullable=False, default=list)

     references = Column(JSON, nullable=False, default=list)
     documents = Column(JSON, nullable=False, default=list)

     # Property assignment
     property_id = Column(String(64), nullable=True, index=True)
     property_type = Column(String(20), nullable=True)  # apartment, flat, land
     building_id = Column(String(64), nullable=True, index=True)

     # Status
     move_in_date = Column(Date, nullable=False)
     move_out_date = Column(Date, nullable=True)
     is_active = Column(Boolean, default=True, nullable=False)

     # Timestamps
     created_at = Column(DateTime, default=utcnow, nullable=False)
     updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.full_name}', property={self.property_type}:{self.property_id})>"
