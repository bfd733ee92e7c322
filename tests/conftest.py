"""Shared fixtures: an in-memory SQLite database, seeded properties and an API client."""

import os

# Must be set before database.py is imported so no MS SQL engine is built
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import Base, Building, Apartment, Flat, Land
from schemas.tenant import TenantForm


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seeded(db):
    """Building B1 with apartments A12 (15000) and A13 (14000), flat F1 (12000), land L1."""
    building = Building(id="B1", name="Lakeview Residency", building_code="A", address="12 MG Road")
    building.apartments = [
        Apartment(id="A12", door_number="12", floor=1, bedroom_count=2, rent_amount=Decimal("15000")),
        Apartment(id="A13", door_number="13", floor=1, bedroom_count=3, rent_amount=Decimal("14000")),
    ]
    flat = Flat(id="F1", name="Green Park Flat", door_number="4B", address="4 Park Street", rent_amount=Decimal("12000"))
    land = Land(id="L1", name="River Plot", address="Survey 42", survey_number="42/1", area=Decimal("2.5"), area_unit="acres")
    db.add_all([building, flat, land])
    db.commit()
    return db


@pytest.fixture
def make_form():
    """Build a TenantForm with sensible defaults; keyword arguments override."""
    def _make(**overrides):
        data = {
            "full_name": "Ravi Kumar",
            "phone": "9876543210",
            "email": "ravi@example.com",
            "occupation": "Engineer",
            "agreement_number": "AGR-001",
            "start_date": date(2026, 1, 1),
            "end_date": date(2026, 12, 31),
        }
        data.update(overrides)
        return TenantForm(**data)
    return _make


@pytest.fixture
def client(session_factory):
    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
