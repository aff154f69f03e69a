# models/property_type.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


# Reference data, seeded by migration and by seed.seed_property_types()
PROPERTY_TYPE_SEED = [
     (1, "residential"),
     (2, "commercial"),
     (3, "industrial"),
     (4, "raw land"),
     (5, "special purpose"),
]


class PropertyType(Base):
     """
     PropertyType model - fixed categorical label for a property. Read-only.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     type = Column(String(50), nullable=False)

     # Relationships
     properties = relationship("Property", back_populates="property_type", passive_deletes="all")

     def __repr__(self):
          return f"<PropertyType(id={self.id}, type='{self.type}')>"
