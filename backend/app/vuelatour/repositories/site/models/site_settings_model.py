"""SQLAlchemy model for key/value site settings."""

from sqlalchemy import Column, Integer, String, Text

from vuelatour.repositories.site.database import Base


class SiteSetting(Base):  # type: ignore[misc]
    """A named site-wide setting such as `site_currency`."""

    __tablename__ = "site_settings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(80), nullable=False, unique=True)
    value = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
