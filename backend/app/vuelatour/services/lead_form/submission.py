"""Validate, persist and announce a lead submitted through the quote/contact form."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vuelatour.logger_config import get_logger
from vuelatour.repositories.site.crud.catalog_crud import CRUDAirTour, CRUDDestination
from vuelatour.repositories.site.crud.contact_requests_crud import CRUDContactRequest
from vuelatour.services.lead_form.analytics import AnalyticsTracker, get_analytics_tracker
from vuelatour.services.lead_form.fields import resolve_form_type
from vuelatour.services.lead_form.form_state import (
    BeginSubmit,
    FormStage,
    LeadFormState,
    RunValidation,
    SubmissionFailed,
    SubmissionSucceeded,
    reduce,
)
from vuelatour.services.lead_form.normalize import build_lead_record
from vuelatour.services.notifications.dispatcher import (
    NotificationDispatcher,
    get_notification_dispatcher,
)

logger = get_logger(__name__)

SUBMISSION_ERROR_MESSAGES: Dict[str, str] = {
    "es": "Error al enviar el mensaje. Por favor intenta de nuevo.",
    "en": "Error sending message. Please try again.",
}


def submission_error_message(locale: str) -> str:
    """Generic failure text shown to the visitor, Spanish by default."""
    return SUBMISSION_ERROR_MESSAGES.get(locale, SUBMISSION_ERROR_MESSAGES["es"])


class LeadSubmissionService:
    """Run one submission attempt of the lead form."""

    def __init__(
        self,
        repository: CRUDContactRequest,
        destinations: CRUDDestination,
        tours: CRUDAirTour,
        analytics: AnalyticsTracker,
        dispatcher: NotificationDispatcher,
    ) -> None:
        self.repository = repository
        self.destinations = destinations
        self.tours = tours
        self.analytics = analytics
        self.dispatcher = dispatcher

    def submit(self, db: Session, state: LeadFormState) -> LeadFormState:
        """
        Submit the form.

        Args:
            db (Session): The database session.
            state (LeadFormState): The form as the visitor left it.

        Returns:
            LeadFormState: `editing`/`collapsed` with field errors when
            validation fails, `error` with the localized message when the row
            could not be written, otherwise `success` carrying the new lead id.
        """
        state = reduce(state, BeginSubmit())
        if state.stage is not FormStage.VALIDATING:
            return state
        state = reduce(state, RunValidation())
        if state.stage is not FormStage.SUBMITTING:
            return state

        try:
            record = build_lead_record(
                state,
                self.destinations.list_active(db),
                self.tours.list_active(db),
            )
            lead = self.repository.create(db, record)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error("Could not store contact request: %s", e)
            return reduce(state, SubmissionFailed(submission_error_message(state.locale)))

        self._announce(state, lead.id)
        return reduce(state, SubmissionSucceeded(lead.id))

    def _announce(self, state: LeadFormState, lead_id: int) -> None:
        """Analytics event and team notification; failures are only logged."""
        try:
            self.analytics.track_lead(resolve_form_type(state.service_type), {"lead_id": lead_id})
        except Exception as e:
            logger.exception("Could not track lead %s: %s", lead_id, e)
        try:
            self.dispatcher.dispatch(self.notification_payload(state))
        except Exception as e:
            logger.exception("Could not schedule notification for lead %s: %s", lead_id, e)

    @staticmethod
    def notification_payload(state: LeadFormState) -> Dict[str, Any]:
        """Raw form values as the notification endpoint expects them."""
        payload = state.payload()
        payload["preSelectedPrice"] = state.preselected_price
        return payload


def get_lead_submission_service(
    repository: CRUDContactRequest = Depends(),
    destinations: CRUDDestination = Depends(),
    tours: CRUDAirTour = Depends(),
    analytics: AnalyticsTracker = Depends(get_analytics_tracker),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
) -> LeadSubmissionService:
    return LeadSubmissionService(repository, destinations, tours, analytics, dispatcher)
