"""SQLAlchemy model for curated site images."""

from sqlalchemy import Boolean, Column, Integer, String, Text

from vuelatour.repositories.site.database import Base


class SiteImage(Base):  # type: ignore[misc]
    """Image slot used by the public pages, grouped by category."""

    __tablename__ = "site_images"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(120), nullable=False)
    url = Column(Text, nullable=False)
    alt_es = Column(String(200), nullable=True)
    alt_en = Column(String(200), nullable=True)
    category = Column(String(60), nullable=True, index=True)
    is_primary = Column(Boolean, nullable=False, default=False)
    file_size = Column(Integer, nullable=True)
