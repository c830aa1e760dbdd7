"""Base models for the notification controller."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field


class QuoteNotificationPayload(BaseModel):
    """Lead values as captured by the form, plus the quoted display price."""

    name: str = Field(..., description="Name of the client.")
    email: EmailStr = Field(..., description="Email of the client, used as reply-to.")
    phone: Optional[str] = None
    message: Optional[str] = None

    service_type: Optional[Literal["charter", "tour"]] = Field(
        default=None, description="Branch of the lead; null for a general contact."
    )

    destination: Optional[str] = None
    destination_other: Optional[str] = None
    departure_location: Optional[str] = None
    departure_location_other: Optional[str] = None
    travel_date: Optional[str] = Field(default=None, description="Calendar day, YYYY-MM-DD.")
    departure_time: Optional[str] = None
    return_date: Optional[str] = None
    return_time: Optional[str] = None
    aircraft_selected: Optional[str] = None

    tour: Optional[str] = None
    number_of_passengers: Optional[Union[int, str]] = None

    pre_selected_price: Optional[Union[str, int, float]] = Field(
        default=None,
        alias="preSelectedPrice",
        description="Price shown to the client when the form was opened from a pricing tier.",
    )

    model_config = {"populate_by_name": True}

    @property
    def is_charter(self) -> bool:
        return self.service_type == "charter"


class NotificationResponse(BaseModel):
    """Data model for a delivered notification."""

    success: bool = Field(..., description="Always true when the email was accepted.")
    id: Optional[str] = Field(default=None, description="Provider message id.")
