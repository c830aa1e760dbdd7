"""Quote/contact form endpoints.

Serve the initial form state for a deep link and accept submissions.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from vuelatour.models.lead_models import FormDescriptor, Locale, QuoteResult, QuoteSubmission
from vuelatour.repositories.site.crud.catalog_crud import CRUDAirTour, CRUDDestination
from vuelatour.repositories.site.dependencies import get_db
from vuelatour.services.lead_form.form_state import FormStage, LeadFormState
from vuelatour.services.lead_form.form_view import (
    describe_form,
    describe_result,
    state_from_submission,
)
from vuelatour.services.lead_form.submission import (
    LeadSubmissionService,
    get_lead_submission_service,
)

lead_router = APIRouter(prefix="/contact", tags=["Contact"])


@lead_router.get("/form")
def get_form(
    destination: Optional[str] = None,
    tour: Optional[str] = None,
    aircraft: Optional[str] = None,
    price: Optional[str] = None,
    locale: Locale = "es",
    db: Session = Depends(get_db),
    destinations: CRUDDestination = Depends(),
    tours: CRUDAirTour = Depends(),
) -> FormDescriptor:
    """
    Initial form state for the contact page.

    Args:
        destination, tour, aircraft, price: Deep-link parameters; a destination
        or tour locks the service type and the pre-selected item.
        locale (str): `es` or `en`.

    Returns:
        FormDescriptor with locked fields, required fields and selector options.
    """
    state = LeadFormState.from_query(destination, tour, aircraft, price, locale)
    return describe_form(state, destinations.list_active(db), tours.list_active(db))


@lead_router.post(
    "/quote",
    responses={
        200: {"model": QuoteResult, "description": "Lead recorded"},
        422: {"model": QuoteResult, "description": "Field errors"},
        503: {"model": QuoteResult, "description": "Lead could not be stored"},
    },
)
def submit_quote(
    submission: QuoteSubmission,
    db: Session = Depends(get_db),
    service: LeadSubmissionService = Depends(get_lead_submission_service),
) -> JSONResponse:
    """Validate and store a lead, then notify the team in the background."""
    try:
        state = state_from_submission(submission)
    except KeyError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    result = service.submit(db, state)
    body = describe_result(result).model_dump(mode="json")
    if result.stage is FormStage.SUCCESS:
        return JSONResponse(status_code=status.HTTP_200_OK, content=body)
    if result.stage is FormStage.ERROR:
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body)
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)
