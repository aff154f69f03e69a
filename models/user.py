# models/user.py
from sqlalchemy import Column, Integer, String, DateTime, func
from .base import Base


class User(Base):
     """
     User model - API accounts authenticated with JWT bearer tokens.
     """

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)  # bcrypt hash
     role = Column(String(50), nullable=False, default="User")  # Admin, User
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     last_login_at = Column(DateTime, nullable=True)

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
