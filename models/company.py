# models/company.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base


class Company(Base):
     """
     Company model - a business entity registered to exactly one owner.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     owner_id = Column(
          Integer,
          ForeignKey("owners.id", ondelete="RESTRICT"),
          nullable=False,
          index=True
     )
     company_name = Column(String(200), nullable=False)
     company_site = Column(String(500), nullable=False, default="")

     # Relationships
     owner = relationship("Owner", back_populates="companies")

     def __repr__(self):
          return f"<Company(id={self.id}, name='{self.company_name}', owner_id={self.owner_id})>"
