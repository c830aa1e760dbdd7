"""SQLAlchemy models for the services offered with destinations and tours."""

from sqlalchemy import Boolean, Column, Integer, String

from vuelatour.repositories.site.database import Base


class ServiceOptionMixin:
    """Columns shared by both service option tables."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(60), nullable=False, unique=True)
    label_es = Column(String(120), nullable=False)
    label_en = Column(String(120), nullable=False)
    icon = Column(String(40), nullable=False, default="CheckCircleIcon")
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)


class DestinationService(ServiceOptionMixin, Base):  # type: ignore[misc]
    """Service included with charter destinations (climate, luggage...)."""

    __tablename__ = "destination_services"


class TourService(ServiceOptionMixin, Base):  # type: ignore[misc]
    """Service included with air tours."""

    __tablename__ = "tour_services"
