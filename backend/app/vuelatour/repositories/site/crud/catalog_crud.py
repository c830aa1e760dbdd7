"""CRUD helpers for destinations and air tours."""

from typing import List, Optional

from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.base_crud import CRUDBase
from vuelatour.repositories.site.models.air_tours_model import AirTour
from vuelatour.repositories.site.models.destinations_model import Destination


class CRUDCatalogItem(CRUDBase):
    """Queries shared by the slugged, orderable catalog tables."""

    def list_ordered(self, db: Session) -> List:
        return self.list(db, self.model.display_order.asc(), self.model.id.asc())

    def list_active(self, db: Session, exclude_slug: Optional[str] = None, limit: Optional[int] = None) -> List:
        """Active rows ordered by `display_order`, optionally without one slug."""
        query = db.query(self.model).filter(self.model.is_active.is_(True))
        if exclude_slug:
            query = query.filter(self.model.slug != exclude_slug)
        query = query.order_by(self.model.display_order.asc(), self.model.id.asc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_by_slug(self, db: Session, slug: str, active_only: bool = True):
        query = db.query(self.model).filter(self.model.slug == slug)
        if active_only:
            query = query.filter(self.model.is_active.is_(True))
        return query.first()


class CRUDDestination(CRUDCatalogItem):
    """Database access for destinations."""

    model = Destination


class CRUDAirTour(CRUDCatalogItem):
    """Database access for air tours."""

    model = AirTour
