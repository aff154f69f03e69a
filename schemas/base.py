# schemas/base.py
"""
Shared pydantic configuration and field checks.

Field names are snake_case in Python and camelCase on the wire.
"""
import re
from typing import Optional

from pydantic import AnyHttpUrl, BaseModel, ConfigDict, EmailStr, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel


PHONE_PATTERN = re.compile(r"^[\d\s\+\-\(\)]+$")

_email_adapter = TypeAdapter(EmailStr)
_url_adapter = TypeAdapter(AnyHttpUrl)


class CamelModel(BaseModel):
     """Base schema: camelCase aliases, population by either name."""

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
     )


def check_required_text(value: str, label: str) -> str:
     if not value or not value.strip():
          raise ValueError(f"{label} is required")
     return value


def check_email(value: Optional[str]) -> Optional[str]:
     """Validate email format when a non-empty value is given."""
     if value:
          try:
               _email_adapter.validate_python(value)
          except ValidationError:
               raise ValueError("Invalid email format")
     return value


def check_phone(value: Optional[str]) -> Optional[str]:
     """Validate phone characters when a non-empty value is given."""
     if value and not PHONE_PATTERN.match(value):
          raise ValueError("Phone number contains invalid characters")
     return value


def check_site_url(value: Optional[str]) -> Optional[str]:
     """Validate an absolute http(s) URL when a non-empty value is given. The original string is kept."""
     if value:
          try:
               _url_adapter.validate_python(value)
          except ValidationError:
               raise ValueError("Company site must be a valid URL")
     return value
