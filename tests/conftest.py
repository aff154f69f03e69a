# tests/conftest.py
"""
Shared fixtures.

Every test runs against a fresh in-memory SQLite database with the property
types seeded. The environment is set before any application module is
imported so database.engine is built for SQLite.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ.setdefault("JWT_SECRET", "test-secret")

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from auth import create_access_token
from database import SessionLocal, engine
from models import Base, Company, Owner, Property
from seed import seed_property_types


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    seed_property_types(session)
    session.commit()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db):
    from main import app

    return TestClient(app)


@pytest.fixture
def auth_headers():
    token, _ = create_access_token(1, "tester@example.com", ["Admin"])
    return {"Authorization": f"Bearer {token}"}


def make_owner(db, **overrides) -> Owner:
    values = dict(
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        phone="+44 20 7946 0000",
        address="12 St James's Square",
        description="",
        is_company_contact=False,
    )
    values.update(overrides)
    owner = Owner(**values)
    db.add(owner)
    db.commit()
    return owner


def make_company(db, owner: Owner, **overrides) -> Company:
    values = dict(owner_id=owner.id, company_name="Analytical Engines Ltd", company_site="")
    values.update(overrides)
    company = Company(**values)
    db.add(company)
    db.commit()
    return company


def make_property(db, owner: Owner, **overrides) -> Property:
    values = dict(
        owner_id=owner.id,
        property_type_id=1,
        property_length=Decimal("120.50"),
        property_cost=Decimal("250000.00"),
        date_of_building=datetime(2010, 5, 1, tzinfo=timezone.utc),
        description="",
        country="Canada",
        city="Toronto",
        street="",
        zip_code="",
    )
    values.update(overrides)
    prop = Property(**values)
    db.add(prop)
    db.commit()
    return prop
