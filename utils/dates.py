# utils/dates.py
from datetime import datetime, timezone


def to_utc(value: datetime) -> datetime:
     """
     Normalize a datetime to an aware UTC datetime.

     Naive values are taken to already be UTC and are only labelled as such;
     aware values are converted.
     """
     if value.tzinfo is None:
          return value.replace(tzinfo=timezone.utc)
     return value.astimezone(timezone.utc)


def utc_now() -> datetime:
     return datetime.now(timezone.utc)
