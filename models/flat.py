# models/flat.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, JSON
from .base import Base, TimestampMixin, generate_id


class Flat(TimestampMixin, Base):
     """
     Flat model - a standalone rental unit with no parent building.
     """
     __tablename__ = "flats"

     PROPERTY_TYPE = "flat"
     OCCUPANCY_FLAG = "is_occupied"

     id = Column(String(64), primary_key=True, default=generate_id)
     name = Column(String(255), nullable=False)
     door_number = Column(String(20), nullable=False)
     service_number = Column(String(50), nullable=True)
     address = Column(Text, nullable=False)
     description = Column(Text, nullable=True)
     bedroom_count = Column(Integer, nullable=False, default=1)
     bathroom_count = Column(Integer, nullable=False, default=1)
     area = Column(Numeric(10, 2), nullable=True)
     floor = Column(Integer, nullable=False, default=0)
     total_floors = Column(Integer, nullable=False, default=1)

     # Pricing
     rent_amount = Column(Numeric(12, 2), nullable=False, default=0)
     security_deposit = Column(Numeric(12, 2), nullable=False, default=0)

     # Occupancy
     is_occupied = Column(Boolean, default=False, nullable=False)
     current_tenant_id = Column(String(64), nullable=True, index=True)

     # Specifications
     furnished = Column(Boolean, default=False, nullable=False)
     parking = Column(Boolean, default=False, nullable=False)
     balcony = Column(Boolean, default=False, nullable=False)
     air_conditioning = Column(Boolean, default=False, nullable=False)
     power_backup = Column(Boolean, default=False, nullable=False)
     water_supply = Column(String(20), default="limited", nullable=False)
     internet_ready = Column(Boolean, default=False, nullable=False)
     society_name = Column(String(255), nullable=True)
     maintenance_charges = Column(Numeric(10, 2), nullable=True)
     additional_features = Column(JSON, nullable=False, default=list)
     images = Column(JSON, nullable=False, default=list)

     def __repr__(self):
          return f"<Flat(id={self.id}, name='{self.name}', occupied={self.is_occupied})>"
