# models/property.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Property(Base):
     """
     Property model - a real-estate asset held by one owner, classified by one property type.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Foreign keys
     owner_id = Column(
          Integer,
          ForeignKey("owners.id", ondelete="RESTRICT"),
          nullable=False,
          index=True
     )
     property_type_id = Column(
          Integer,
          ForeignKey("property_types.id", ondelete="RESTRICT"),
          nullable=False,
          index=True
     )

     # Measurements
     property_length = Column(Numeric(18, 2), nullable=False)
     property_cost = Column(Numeric(18, 2), nullable=False)
     date_of_building = Column(DateTime(timezone=True), nullable=False)  # stored as UTC
     description = Column(String(1000), nullable=False, default="")

     # Address
     country = Column(String(100), nullable=False)
     city = Column(String(100), nullable=False)
     street = Column(String(200), nullable=False, default="")
     zip_code = Column(String(20), nullable=False, default="")

     # Relationships
     owner = relationship("Owner", back_populates="properties")
     property_type = relationship("PropertyType", back_populates="properties")

     def __repr__(self):
          return f"<Property(id={self.id}, owner_id={self.owner_id}, city='{self.city}')>"
