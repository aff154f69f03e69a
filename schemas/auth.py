# schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
"""
from datetime import datetime
from typing import List, Optional
from pydantic import ConfigDict, EmailStr, Field

from .base import CamelModel


class RegisterRequest(CamelModel):
     email: EmailStr
     password: str = Field(..., min_length=6)


class LoginRequest(CamelModel):
     email: EmailStr
     password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
     """Issued bearer token."""
     token: str
     email: str
     roles: List[str]
     expires_at: datetime


class UserResponse(CamelModel):
     id: int
     email: str
     roles: List[str]
     created_at: datetime
     last_login_at: Optional[datetime] = None

     model_config = ConfigDict(from_attributes=True)
