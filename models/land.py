# models/land.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, JSON
from .base import Base, TimestampMixin, generate_id


class Land(TimestampMixin, Base):
     """
     Land model - a land parcel. Land is leased rather than occupied.
     """
     __tablename__ = "lands"

     PROPERTY_TYPE = "land"
     OCCUPANCY_FLAG = "is_leased"

     id = Column(String(64), primary_key=True, default=generate_id)
     name = Column(String(255), nullable=False)
     address = Column(Text, nullable=False)
     description = Column(Text, nullable=True)
     survey_number = Column(String(50), nullable=True)
     area = Column(Numeric(15, 2), nullable=False)
     area_unit = Column(String(10), default="sqft", nullable=False)  # sqft, acres, cents
     zoning = Column(String(20), default="residential", nullable=False)
     soil_type = Column(String(100), nullable=True)
     water_source = Column(String(100), nullable=True)
     road_access = Column(Boolean, default=True, nullable=False)
     electricity_connection = Column(Boolean, default=True, nullable=False)

     # Occupancy
     is_leased = Column(Boolean, default=False, nullable=False)
     current_tenant_id = Column(String(64), nullable=True, index=True)

     # Lease terms
     lease_type = Column(String(20), nullable=True)  # agricultural, commercial, residential
     rent_amount = Column(Numeric(12, 2), nullable=True)
     rent_frequency = Column(String(20), nullable=True)  # monthly, quarterly, yearly
     lease_security_deposit = Column(Numeric(12, 2), nullable=True)
     lease_duration = Column(Integer, nullable=True)  # years
     renewal_terms = Column(Text, nullable=True)
     restrictions = Column(JSON, nullable=False, default=list)
     images = Column(JSON, nullable=False, default=list)

     def __repr__(self):
          return f"<Land(id={self.id}, name='{self.name}', leased={self.is_leased})>"
