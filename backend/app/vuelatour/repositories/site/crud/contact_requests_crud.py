"""CRUD helpers for leads (contact requests)."""

from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.orm import Session, joinedload

from vuelatour.repositories.site.crud.base_crud import CRUDBase
from vuelatour.repositories.site.models.contact_requests_model import ContactRequest


class CRUDContactRequest(CRUDBase):
    """Database access for leads."""

    model = ContactRequest

    def list_newest_first(self, db: Session, status: Optional[str] = None) -> List[ContactRequest]:
        """Leads with their joined destination/tour, newest first."""
        query = db.query(ContactRequest).options(
            joinedload(ContactRequest.destinations), joinedload(ContactRequest.air_tours)
        )
        if status:
            query = query.filter(ContactRequest.status == status)
        return query.order_by(desc(ContactRequest.created_at), desc(ContactRequest.id)).all()
