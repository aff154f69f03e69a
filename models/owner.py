# models/owner.py
from sqlalchemy import Column, Integer, String, Boolean, false
from sqlalchemy.orm import relationship
from .base import Base


class Owner(Base):
     """
     Owner model - a person or entity holding properties and/or companies.

     is_company_contact is derived: it is switched on when the first company
     is registered for the owner and never switched off again.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Name
     first_name = Column(String(100), nullable=False)
     last_name = Column(String(100), nullable=False)

     # Contact
     email = Column(String(200), nullable=False)
     phone = Column(String(20), nullable=False)
     address = Column(String(500), nullable=False, default="")
     description = Column(String(1000), nullable=False, default="")

     is_company_contact = Column(Boolean, nullable=False, default=False, server_default=false())

     # Relationships
     # passive_deletes="all": the RESTRICT foreign keys decide, the ORM never nulls children
     companies = relationship("Company", back_populates="owner", passive_deletes="all")
     properties = relationship("Property", back_populates="owner", passive_deletes="all")

     def __repr__(self):
          return f"<Owner(id={self.id}, name='{self.first_name} {self.last_name}')>"
