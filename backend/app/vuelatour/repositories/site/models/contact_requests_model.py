"""SQLAlchemy model for leads captured by the quote/contact form."""

from sqlalchemy import TIMESTAMP, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from vuelatour.repositories.site.database import Base


class ContactRequest(Base):  # type: ignore[misc]
    """
    Represents one prospective customer inquiry.

    Only the charter or the tour column group is populated, matching
    `service_type`. `travel_date` and `return_date` hold a neutral midday UTC
    timestamp; only their date component is meaningful.
    """

    __tablename__ = "contact_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(120), nullable=False)
    email = Column(String(160), nullable=False)
    phone = Column(String(40), nullable=True)
    service_type = Column(String(10), nullable=True)
    message = Column(Text, nullable=True)
    status = Column(String(12), nullable=False, default="pending")

    departure_location = Column(String(60), nullable=True)
    departure_location_other = Column(String(160), nullable=True)
    destination = Column(String(120), nullable=True)
    destination_other = Column(String(160), nullable=True)
    return_date = Column(TIMESTAMP(timezone=True), nullable=True)
    return_time = Column(String(5), nullable=True)
    aircraft_selected = Column(String(120), nullable=True)

    tour = Column(String(120), nullable=True)
    number_of_passengers = Column(Integer, nullable=True)

    travel_date = Column(TIMESTAMP(timezone=True), nullable=True)
    departure_time = Column(String(5), nullable=True)

    destination_id = Column(
        Integer, ForeignKey("destinations.id", ondelete="SET NULL"), nullable=True
    )
    tour_id = Column(
        Integer, ForeignKey("air_tours.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(TIMESTAMP(timezone=False), server_default=func.now())

    destinations = relationship("Destination")
    air_tours = relationship("AirTour")

    __mapper_args__ = {"eager_defaults": True}
