# repositories/user_repository.py
"""
User Repository for handling user-related database operations.
"""
from datetime import datetime, timezone
from typing import Optional

from models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
     """Repository for User operations."""

     model = User

     def get_by_email(self, email: str) -> Optional[User]:
          """Get user by email address (case-insensitive)."""
          return (
               self.db.query(User)
               .filter(User.email == email.strip().lower())
               .first()
          )

     def update_last_login(self, user: User) -> User:
          """Stamp the user's last successful login."""
          user.last_login_at = datetime.now(timezone.utc).replace(tzinfo=None)
          return self.update(user)
