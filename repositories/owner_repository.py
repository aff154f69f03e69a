# repositories/owner_repository.py
from models import Owner
from .base_repository import BaseRepository


class OwnerRepository(BaseRepository[Owner]):
     """Repository for Owner operations."""

     model = Owner
