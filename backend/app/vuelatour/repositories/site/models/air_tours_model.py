"""SQLAlchemy model for panoramic air tours."""

from sqlalchemy import JSON, TIMESTAMP, Boolean, Column, Integer, Numeric, String, Text
from sqlalchemy.sql import func

from vuelatour.repositories.site.database import Base


class AirTour(Base):  # type: ignore[misc]
    """An air tour with localized copy, highlights and pricing tiers."""

    __tablename__ = "air_tours"

    id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    name_es = Column(String(160), nullable=False)
    name_en = Column(String(160), nullable=False)
    description_es = Column(Text, nullable=True)
    description_en = Column(Text, nullable=True)
    long_description_es = Column(Text, nullable=True)
    long_description_en = Column(Text, nullable=True)
    duration = Column(String(60), nullable=True)
    price_from = Column(Numeric(10, 2), nullable=True)
    max_passengers = Column(Integer, nullable=True)
    image_url = Column(Text, nullable=True)
    highlights_es = Column(JSON, nullable=True)
    highlights_en = Column(JSON, nullable=True)
    departure_location_es = Column(String(160), nullable=True)
    departure_location_en = Column(String(160), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    display_order = Column(Integer, nullable=False, default=0)
    services_included = Column(JSON, nullable=True)
    features = Column(JSON, nullable=True)
    aircraft_pricing = Column(JSON, nullable=True)
    gallery_images = Column(JSON, nullable=True)
    meta_title_es = Column(String(200), nullable=True)
    meta_title_en = Column(String(200), nullable=True)
    meta_description_es = Column(Text, nullable=True)
    meta_description_en = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=False), nullable=True, onupdate=func.now())

    __mapper_args__ = {"eager_defaults": True}
