# tests/conftest.py
# ---------------------------------------------------------------------
# Ground rules:
# - In-memory SQLite, one shared connection (see database.py)
# - Environment is set before the app is imported
# - Schema is dropped and recreated for every test
# ---------------------------------------------------------------------

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_DIR"] = ""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from database import Base, SessionLocal, engine
from main import app
from models.items import Item
from models.parties import Party, PartyType


@pytest.fixture(autouse=True)
def _fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


# ---------- Master data ----------
@pytest.fixture
def customer(db):
    party = Party(name="Acme", mobile="9000000001", type=PartyType.CUSTOMER, opening_balance=Decimal("1000"))
    db.add(party)
    db.commit()
    db.refresh(party)
    return party


@pytest.fixture
def supplier(db):
    party = Party(name="Acme Supplies", mobile="9000000002", type=PartyType.SUPPLIER, opening_balance=Decimal("0"))
    db.add(party)
    db.commit()
    db.refresh(party)
    return party


@pytest.fixture
def widget(db):
    item = Item(name="Widget", unit="PCS", purchase_rate=Decimal("40"), sale_rate=Decimal("100"),
                tax_percent=Decimal("18"), stock=Decimal("10"))
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


@pytest.fixture
def day1():
    return date(2026, 4, 1)
