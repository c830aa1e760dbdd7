"""Base models for the quote/contact form controllers."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from vuelatour.services.lead_form.fields import ServiceType

Locale = Literal["es", "en"]


class FormPrefill(BaseModel):
    """Deep-link parameters the form was opened with."""

    destination: Optional[str] = None
    tour: Optional[str] = None
    aircraft: Optional[str] = None
    price: Optional[str] = None


class QuoteSubmission(BaseModel):
    """Data model for a submitted quote/contact form."""

    locale: Locale = "es"
    prefill: FormPrefill = Field(default_factory=FormPrefill)
    service_type: Optional[ServiceType] = Field(
        default=None, description="Chosen branch; ignored when the prefill locks it."
    )
    values: Dict[str, Any] = Field(default_factory=dict, description="Form field values by name.")


class SelectOption(BaseModel):
    value: str
    label: str


class FormOptions(BaseModel):
    """Choices offered by the form selectors."""

    departure_locations: List[str]
    time_slots: List[str]
    destinations: List[SelectOption]
    tours: List[SelectOption]
    min_passengers: int
    max_passengers: int


class FormDescriptor(BaseModel):
    """Data model for the initial state of the form."""

    stage: str
    locale: Locale
    service_type: Optional[ServiceType] = None
    values: Dict[str, Any]
    locked: List[str]
    preselected_price: Optional[str] = None
    visible_fields: List[str]
    required_fields: List[str]
    options: FormOptions


class FieldErrorModel(BaseModel):
    field: str
    code: str


class QuoteResult(BaseModel):
    """Data model for the response of a form submission."""

    stage: str = Field(..., description="success, editing/collapsed (invalid) or error.")
    lead_id: Optional[int] = None
    field_errors: List[FieldErrorModel] = []
    error: Optional[str] = None
