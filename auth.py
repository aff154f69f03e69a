# auth.py
"""
JWT bearer authentication shared by all routers.

Tokens are HS256-signed with JWT_SECRET and carry the user's id, email and roles.
"""
import logging
import os
import uuid
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from dotenv import load_dotenv
from fastapi import HTTPException, Request, status
from jose import JWTError, jwt
from passlib.context import CryptContext

# Load .env
load_dotenv()

logger = logging.getLogger(__name__)

SECRET_KEY = os.getenv("JWT_SECRET", "change-me-in-production")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ISSUER = os.getenv("JWT_ISSUER", "property-registry")
AUDIENCE = os.getenv("JWT_AUDIENCE", "property-registry-clients")
EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "24"))

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     return pwd_context.verify(password, hashed)


def create_access_token(user_id: int, email: str, roles: List[str]) -> Tuple[str, datetime]:
     """
     Issue a signed token for a user.

     Returns:
          (token, expires_at)
     """
     expires_at = datetime.now(timezone.utc) + timedelta(hours=EXPIRE_HOURS)
     payload = {
          "sub": email,
          "id": user_id,
          "roles": roles,
          "jti": str(uuid.uuid4()),
          "iss": ISSUER,
          "aud": AUDIENCE,
          "exp": expires_at,
     }
     token = jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)
     return token, expires_at


def decode_token(token: str) -> Optional[dict]:
     try:
          return jwt.decode(
               token,
               SECRET_KEY,
               algorithms=[ALGORITHM],
               audience=AUDIENCE,
               issuer=ISSUER,
          )
     except JWTError as e:
          logger.info("Rejected bearer token: %s", e)
          return None


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing token")
     payload = decode_token(auth.split(" ", 1)[1])
     if payload is None:
          raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
     return payload
