# seed.py
"""
Reference data and bootstrap account seeding.

Run at application startup; both steps are idempotent.
"""
import logging
import os

from dotenv import load_dotenv
from sqlalchemy.orm import Session

from auth import hash_password
from models import PropertyType, User, PROPERTY_TYPE_SEED
from repositories import UserRepository

load_dotenv()

logger = logging.getLogger(__name__)

SEED_ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL", "admin@backendapi.com")
SEED_ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "Admin123!")


def seed_property_types(db: Session) -> int:
     """Insert missing property types. Returns how many were added."""
     existing = {row.id for row in db.query(PropertyType.id).all()}
     added = 0
     for type_id, label in PROPERTY_TYPE_SEED:
          if type_id not in existing:
               db.add(PropertyType(id=type_id, type=label))
               added += 1
     if added:
          db.flush()
          logger.info("Seeded %d property types", added)
     return added


def seed_admin_user(db: Session) -> bool:
     """Create the bootstrap admin account if missing. Returns True if created."""
     users = UserRepository(db)
     if users.get_by_email(SEED_ADMIN_EMAIL) is not None:
          return False
     users.create(
          User(
               email=SEED_ADMIN_EMAIL.strip().lower(),
               password=hash_password(SEED_ADMIN_PASSWORD),
               role="Admin",
          )
     )
     logger.info("Seeded admin user %s", SEED_ADMIN_EMAIL)
     return True


def seed_all(db: Session) -> None:
     seed_property_types(db)
     seed_admin_user(db)
