"""SQLAlchemy model for the business contact details (single row)."""

from sqlalchemy import JSON, TIMESTAMP, Column, Integer, String, Text
from sqlalchemy.sql import func

from vuelatour.repositories.site.database import Base


class ContactInfo(Base):  # type: ignore[misc]
    """Address, phones, WhatsApp and social links shown on the site."""

    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    address_es = Column(Text, nullable=True)
    address_en = Column(Text, nullable=True)
    phones = Column(JSON, nullable=True)
    email = Column(String(160), nullable=True)
    hours_es = Column(String(200), nullable=True)
    hours_en = Column(String(200), nullable=True)
    whatsapp_number = Column(String(30), nullable=True)
    whatsapp_message_es = Column(Text, nullable=True)
    whatsapp_message_en = Column(Text, nullable=True)
    google_maps_embed = Column(Text, nullable=True)
    facebook_url = Column(Text, nullable=True)
    instagram_url = Column(Text, nullable=True)
    tiktok_url = Column(Text, nullable=True)
    youtube_url = Column(Text, nullable=True)
    updated_at = Column(
        TIMESTAMP(timezone=False), server_default=func.now(), onupdate=func.now()
    )

    __mapper_args__ = {"eager_defaults": True}
