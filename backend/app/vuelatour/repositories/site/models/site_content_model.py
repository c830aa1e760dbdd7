"""SQLAlchemy model for editable localized text blocks."""

from sqlalchemy import Column, Integer, String, Text

from vuelatour.repositories.site.database import Base


class SiteContent(Base):  # type: ignore[misc]
    """Localized text keyed by name and grouped by category."""

    __tablename__ = "site_content"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(120), nullable=False, unique=True)
    value_es = Column(Text, nullable=False, default="")
    value_en = Column(Text, nullable=False, default="")
    category = Column(String(60), nullable=True)
