"""CRUD helpers for services, images, content, contact info and settings."""

from typing import List, Optional

from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.base_crud import CRUDBase
from vuelatour.repositories.site.models.contact_info_model import ContactInfo
from vuelatour.repositories.site.models.services_model import (
    DestinationService,
    TourService,
)
from vuelatour.repositories.site.models.site_content_model import SiteContent
from vuelatour.repositories.site.models.site_images_model import SiteImage
from vuelatour.repositories.site.models.site_settings_model import SiteSetting


class CRUDServiceOption(CRUDBase):
    """Queries shared by both service option tables."""

    def list_ordered(self, db: Session) -> List:
        return self.list(db, self.model.display_order.asc(), self.model.id.asc())

    def list_active(self, db: Session) -> List:
        return (
            db.query(self.model)
            .filter(self.model.is_active.is_(True))
            .order_by(self.model.display_order.asc(), self.model.id.asc())
            .all()
        )


class CRUDDestinationService(CRUDServiceOption):
    model = DestinationService


class CRUDTourService(CRUDServiceOption):
    model = TourService


class CRUDSiteImage(CRUDBase):
    """Database access for site images."""

    model = SiteImage

    def list_ordered(self, db: Session) -> List[SiteImage]:
        return self.list(db, SiteImage.category.asc(), SiteImage.id.asc())

    def clear_primary(self, db: Session, category: Optional[str]) -> None:
        """Unset the primary flag on every image of `category`."""
        db.query(SiteImage).filter(SiteImage.category == category).update(
            {"is_primary": False}, synchronize_session="fetch"
        )
        db.commit()


class CRUDSiteContent(CRUDBase):
    """Database access for localized text blocks."""

    model = SiteContent

    def list_ordered(self, db: Session) -> List[SiteContent]:
        return self.list(db, SiteContent.category.asc(), SiteContent.key.asc())


class CRUDContactInfo(CRUDBase):
    """Database access for the single contact info row."""

    model = ContactInfo

    def get_current(self, db: Session) -> Optional[ContactInfo]:
        return db.query(ContactInfo).order_by(ContactInfo.id.asc()).first()


class CRUDSiteSetting(CRUDBase):
    """Database access for key/value settings."""

    model = SiteSetting

    def list_ordered(self, db: Session) -> List[SiteSetting]:
        return self.list(db, SiteSetting.key.asc())

    def get_by_key(self, db: Session, key: str) -> Optional[SiteSetting]:
        return db.query(SiteSetting).filter(SiteSetting.key == key).first()
