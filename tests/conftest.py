"""Shared test fixtures for the Vehicle Maintenance API."""

import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from maintenance_api.core.config import Settings
from maintenance_api.main import create_app

_SCHEMA_SQL = """
CREATE TABLE owned_vehicles (
    id INTEGER PRIMARY KEY,
    make TEXT NOT NULL,
    model TEXT NOT NULL,
    year INTEGER NOT NULL,
    mileage INTEGER NOT NULL
);

CREATE TABLE detailed_service_record (
    serviceid INTEGER NOT NULL,
    vehicleid INTEGER NOT NULL REFERENCES owned_vehicles(id),
    service_date TEXT NOT NULL,
    partcode TEXT NOT NULL,
    rate REAL NOT NULL,
    taxable_amount REAL NOT NULL,
    final_amount REAL NOT NULL
);
"""

VEHICLES = [
    {"id": 1, "make": "Royal Enfield", "model": "Classic 350", "year": 2021, "mileage": 15400},
    {"id": 2, "make": "Honda", "model": "Activa 6G", "year": 2022, "mileage": 8200},
    {"id": 7, "make": "Trek", "model": "FX 3", "year": 2023, "mileage": 1200},
]

SERVICE_RECORDS = [
    {"service_id": 1, "vehicle_id": 1, "service_date": "2024-01-15", "part_code": "OIL-20W50",
     "rate": 450.0, "taxable_amount": 381.36, "final_amount": 450.0},
    {"service_id": 2, "vehicle_id": 1, "service_date": "2024-03-02", "part_code": "BRK-PAD-F",
     "rate": 800.0, "taxable_amount": 677.97, "final_amount": 800.0},
    {"service_id": 1, "vehicle_id": 2, "service_date": "2024-02-10", "part_code": "AIR-FLT",
     "rate": 250.5, "taxable_amount": 212.29, "final_amount": 250.5},
]


def _make_db(path: Path, *, schema: bool = True, seed: bool = True) -> Path:
    conn = sqlite3.connect(path)
    try:
        if schema:
            conn.executescript(_SCHEMA_SQL)
        if schema and seed:
            conn.executemany(
                "INSERT INTO owned_vehicles (id, make, model, year, mileage) "
                "VALUES (:id, :make, :model, :year, :mileage)",
                VEHICLES,
            )
            conn.executemany(
                "INSERT INTO detailed_service_record "
                "(serviceid, vehicleid, service_date, partcode, rate, taxable_amount, final_amount) "
                "VALUES (:service_id, :vehicle_id, :service_date, :part_code, :rate, :taxable_amount, :final_amount)",
                SERVICE_RECORDS,
            )
        conn.commit()
    finally:
        conn.close()
    return path


def _settings_for(path: Path) -> Settings:
    return Settings(database_url=f"sqlite+aiosqlite:///{path}", app_env="test")


@pytest.fixture
def db_path(tmp_path) -> Path:
    """A SQLite store with both tables and the sample rows."""
    return _make_db(tmp_path / "maintenance.db")


@pytest.fixture
def settings(db_path) -> Settings:
    return _settings_for(db_path)


@pytest.fixture
def client(settings):
    """Client for an app whose lifespan connected to the seeded store."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def empty_client(tmp_path):
    """Client over a store with both tables but no rows."""
    path = _make_db(tmp_path / "empty.db", seed=False)
    with TestClient(create_app(_settings_for(path))) as c:
        yield c


@pytest.fixture
def broken_client(tmp_path):
    """Client over a reachable store that lacks the tables, so every statement fails."""
    path = _make_db(tmp_path / "bare.db", schema=False)
    with TestClient(create_app(_settings_for(path))) as c:
        yield c


@pytest.fixture
def offline_client(settings):
    """Client whose lifespan never ran, so no database handle was ever set."""
    return TestClient(create_app(settings))
