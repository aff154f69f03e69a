# routers/auth.py
"""
Authentication routes: register, login, current user, logout.

Tokens are stateless; logout only acknowledges and the client drops the token.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from auth import create_access_token, hash_password, verify_password, verify_token
from database import get_session
from models import User
from repositories import UserRepository
from schemas.auth import RegisterRequest, LoginRequest, AuthResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])

DEFAULT_ROLE = "User"


def _already_registered() -> HTTPException:
     return HTTPException(
          status_code=status.HTTP_400_BAD_REQUEST,
          detail="Email already registered"
     )


def _issue_token(user: User) -> AuthResponse:
     roles = [user.role]
     token, expires_at = create_access_token(user.id, user.email, roles)
     return AuthResponse(token=token, email=user.email, roles=roles, expires_at=expires_at)


@router.post("/register", response_model=AuthResponse, summary="Register a new user")
def register(body: RegisterRequest, db: Session = Depends(get_session)):
     users = UserRepository(db)
     email = body.email.strip().lower()
     if users.get_by_email(email) is not None:
          raise _already_registered()

     # A concurrent registration can still win the race to the unique index
     try:
          user = users.create(User(email=email, password=hash_password(body.password), role=DEFAULT_ROLE))
          db.commit()
     except IntegrityError:
          db.rollback()
          raise _already_registered()

     logger.info("Registered user id=%s", user.id)
     return _issue_token(user)


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(body: LoginRequest, db: Session = Depends(get_session)):
     users = UserRepository(db)
     user = users.get_by_email(body.email)
     if user is None or not verify_password(body.password, user.password):
          raise HTTPException(
               status_code=status.HTTP_401_UNAUTHORIZED,
               detail="Invalid email or password"
          )

     users.update_last_login(user)
     db.commit()
     return _issue_token(user)


@router.get("/me", response_model=UserResponse, summary="Current user")
def me(db: Session = Depends(get_session), token: dict = Depends(verify_token)):
     user = UserRepository(db).get_by_email(token.get("sub", ""))
     if user is None:
          raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
     return UserResponse(
          id=user.id,
          email=user.email,
          roles=[user.role],
          created_at=user.created_at,
          last_login_at=user.last_login_at,
     )


@router.post("/logout", summary="Log out")
def logout(token: dict = Depends(verify_token)):
     return {"message": "Logged out successfully"}
