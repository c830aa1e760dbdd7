"""Shared fixtures: an in-memory SQLite database and catalog rows."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ADMIN_API_TOKEN", "test-admin-token")

from typing import Generator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from vuelatour.repositories.site import models  # noqa: E402,F401
from vuelatour.repositories.site.database import Base, SessionLocal, engine  # noqa: E402
from vuelatour.repositories.site.models import AirTour, Destination  # noqa: E402


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Fresh schema per test on the shared in-memory connection."""
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def catalog(db: Session) -> dict:
    """Two destinations and one tour, one destination inactive."""
    cozumel = Destination(
        slug="cozumel",
        name_es="Cozumel",
        name_en="Cozumel",
        display_order=0,
        aircraft_pricing=[
            {"aircraft_name": "Cessna 206", "max_passengers": 5, "price": 750},
            {"aircraft_name": "Grand Caravan", "max_passengers": 9, "price": 2500},
        ],
    )
    holbox = Destination(
        slug="holbox", name_es="Holbox", name_en="Holbox", display_order=1, is_active=False
    )
    tour = AirTour(
        slug="zona-hotelera",
        name_es="Zona Hotelera",
        name_en="Hotel Zone",
        display_order=0,
        price_from=399,
    )
    db.add_all([cozumel, holbox, tour])
    db.commit()
    return {"cozumel": cozumel, "holbox": holbox, "zona-hotelera": tour}
