"""Pydantic schemas for leads (contact requests)."""

from datetime import date, datetime
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, EmailStr, Field, StringConstraints, field_validator

from vuelatour.services.lead_form.dates import read_stored_date

LeadStatusLiteral = Literal["pending", "contacted", "completed"]


class ContactRequestCreate(BaseModel):
    """Normalized row written by the lead submission."""

    name: Annotated[str, StringConstraints(min_length=1, max_length=120)]
    email: EmailStr
    phone: Optional[Annotated[str, StringConstraints(max_length=40)]] = None
    service_type: Optional[Literal["charter", "tour"]] = None
    message: Optional[str] = None
    status: LeadStatusLiteral = "pending"

    departure_location: Optional[str] = None
    departure_location_other: Optional[str] = None
    destination: Optional[str] = None
    destination_other: Optional[str] = None
    return_date: Optional[datetime] = None
    return_time: Optional[str] = None
    aircraft_selected: Optional[str] = None

    tour: Optional[str] = None
    number_of_passengers: Optional[int] = Field(default=None, ge=1, le=20)

    travel_date: Optional[datetime] = None
    departure_time: Optional[str] = None

    destination_id: Optional[int] = None
    tour_id: Optional[int] = None


class ContactRequestStatusUpdate(BaseModel):
    """Status change made by an admin operator."""

    status: LeadStatusLiteral


class ContactRequestScheduleUpdate(BaseModel):
    """Travel/return schedule correction made by an admin operator."""

    travel_date: Optional[date] = None
    departure_time: Optional[str] = None
    return_date: Optional[date] = None
    return_time: Optional[str] = None


class CatalogReference(BaseModel):
    """Joined name and slug of the destination or tour a lead points to."""

    name_es: str
    name_en: str
    slug: str

    model_config = {"from_attributes": True}


class ContactRequestResponse(BaseModel):
    """A stored lead as shown in the admin messages panel."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    service_type: Optional[str] = None
    message: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None

    departure_location: Optional[str] = None
    departure_location_other: Optional[str] = None
    destination: Optional[str] = None
    destination_other: Optional[str] = None
    return_date: Optional[date] = None
    return_time: Optional[str] = None
    aircraft_selected: Optional[str] = None
    tour: Optional[str] = None
    number_of_passengers: Optional[int] = None
    travel_date: Optional[date] = None
    departure_time: Optional[str] = None
    destination_id: Optional[int] = None
    tour_id: Optional[int] = None

    destinations: Optional[CatalogReference] = None
    air_tours: Optional[CatalogReference] = None

    model_config = {"from_attributes": True}

    @field_validator("travel_date", "return_date", mode="before")
    @classmethod
    def _calendar_day(cls, value: object) -> Optional[date]:
        return read_stored_date(value)
