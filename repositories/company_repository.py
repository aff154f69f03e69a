# repositories/company_repository.py
from typing import List

from sqlalchemy.orm import joinedload

from models import Company
from .base_repository import BaseRepository


class CompanyRepository(BaseRepository[Company]):
     """Repository for Company operations. Reads include the owner."""

     model = Company

     def _query(self):
          return self.db.query(Company).options(joinedload(Company.owner))

     def get_by_owner_id(self, owner_id: int) -> List[Company]:
          """Get all companies registered to an owner."""
          return (
               self._query()
               .filter(Company.owner_id == owner_id)
               .order_by(Company.id)
               .all()
          )
