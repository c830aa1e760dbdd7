"""Counters shown on the admin dashboard."""

from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.catalog_crud import CRUDAirTour, CRUDDestination
from vuelatour.repositories.site.crud.contact_requests_crud import CRUDContactRequest
from vuelatour.repositories.site.crud.site_crud import CRUDSiteImage
from vuelatour.repositories.site.models.contact_requests_model import ContactRequest
from vuelatour.services.lead_form.fields import LeadStatus


class DashboardStats(BaseModel):
    images: int
    destinations: int
    tours: int
    messages: int
    pending_messages: int


class DashboardService:
    def __init__(
        self,
        images: CRUDSiteImage,
        destinations: CRUDDestination,
        tours: CRUDAirTour,
        messages: CRUDContactRequest,
    ) -> None:
        self.images = images
        self.destinations = destinations
        self.tours = tours
        self.messages = messages

    def stats(self, db: Session) -> DashboardStats:
        return DashboardStats(
            images=self.images.count(db),
            destinations=self.destinations.count(db),
            tours=self.tours.count(db),
            messages=self.messages.count(db),
            pending_messages=self.messages.count(
                db, ContactRequest.status == LeadStatus.PENDING.value
            ),
        )


def get_dashboard_service(
    images: CRUDSiteImage = Depends(),
    destinations: CRUDDestination = Depends(),
    tours: CRUDAirTour = Depends(),
    messages: CRUDContactRequest = Depends(),
) -> DashboardService:
    return DashboardService(images, destinations, tours, messages)
