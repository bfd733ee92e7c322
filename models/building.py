# models/building.py
from sqlalchemy import Column, Integer, String, Text, JSON
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin, generate_id


class Building(TimestampMixin, Base):
     """
     Building model - a block containing multiple apartments.
     Buildings themselves are never occupied; their apartments are.
     """
     __tablename__ = "buildings"

     id = Column(String(64), primary_key=True, default=generate_id)
     name = Column(String(255), nullable=False)
     building_code = Column(String(10), nullable=False)  # A, B, C, etc.
     address = Column(Text, nullable=False)
     description = Column(Text, nullable=True)
     total_floors = Column(Integer, nullable=False, default=1)
     total_apartments = Column(Integer, nullable=False, default=0)
     construction_year = Column(Integer, nullable=True)
     amenities = Column(JSON, nullable=False, default=list)
     images = Column(JSON, nullable=False, default=list)

     # Relationships
     apartments = relationship(
          "Apartment",
          back_populates="building",
          cascade="all, delete-orphan",
          order_by="Apartment.door_number",
     )

     def __repr__(self):
          return f"<Building(id={self.id}, name='{self.name}', code='{self.building_code}')>"

     @property
     def has_occupied_apartment(self) -> bool:
          return any(apt.is_occupied for apt in self.apartments)
