# models/apartment.py
from sqlalchemy import Column, Integer, String, Numeric, Boolean, JSON, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin, generate_id


class Apartment(TimestampMixin, Base):
     """
     Apartment model - an individual unit within a building.

     current_tenant_id is a display back-reference only; the tenant's
     property_id is the authoritative link.
     """
     __tablename__ = "apartments"

     PROPERTY_TYPE = "apartment"
     OCCUPANCY_FLAG = "is_occupied"

     id = Column(String(64), primary_key=True, default=generate_id)
     building_id = Column(
          String(64),
          ForeignKey("buildings.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )
     door_number = Column(String(20), nullable=False)  # D-No: 500, 501, etc.
     service_number = Column(String(50), nullable=True)  # Utilities service number
     floor = Column(Integer, nullable=False, default=0)
     bedroom_count = Column(Integer, nullable=False, default=1)
     bathroom_count = Column(Integer, nullable=False, default=1)
     area = Column(Numeric(10, 2), nullable=True)  # sq ft

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
     water_supply = Column(String(20), default="limited", nullable=False)  # 24x7, limited, tanker
     internet_ready = Column(Boolean, default=False, nullable=False)
     additional_features = Column(JSON, nullable=False, default=list)

     # Relationships
     building = relationship("Building", back_populates="apartments")

     def __repr__(self):
          return f"<Apartment(id={self.id}, door_number='{self.door_number}', occupied={self.is_occupied})>"
