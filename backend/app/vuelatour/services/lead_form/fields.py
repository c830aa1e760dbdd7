"""Field vocabulary of the quote/contact form."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Tuple

OTHER = "other"


class ServiceType(str, Enum):
    """Top-level branch of a lead."""

    CHARTER = "charter"
    TOUR = "tour"


class LeadStatus(str, Enum):
    """Follow-up status set by admin operators."""

    PENDING = "pending"
    CONTACTED = "contacted"
    COMPLETED = "completed"


class FormType(str, Enum):
    """Analytics tag for a submitted form."""

    CHARTER_QUOTE = "charter_quote"
    TOUR_QUOTE = "tour_quote"
    CONTACT = "contact"


DEPARTURE_LOCATIONS: Tuple[str, ...] = (
    "cancun",
    "playa-del-carmen",
    "tulum",
    "cozumel",
    "holbox",
    "chetumal",
    "merida",
    OTHER,
)

# Hourly slots, 06:00 through 20:00.
TIME_SLOTS: Tuple[str, ...] = tuple(f"{hour:02d}:00" for hour in range(6, 21))

MIN_PASSENGERS = 1
MAX_PASSENGERS = 20

CONTACT_FIELDS: Tuple[str, ...] = ("name", "email", "phone", "message")
SHARED_TRIP_FIELDS: FrozenSet[str] = frozenset({"travel_date", "departure_time"})
CHARTER_FIELDS: FrozenSet[str] = frozenset(
    {
        "departure_location",
        "departure_location_other",
        "destination",
        "destination_other",
        "travel_date",
        "departure_time",
        "return_date",
        "return_time",
        "aircraft_selected",
    }
)
TOUR_FIELDS: FrozenSet[str] = frozenset(
    {"tour", "number_of_passengers", "travel_date", "departure_time"}
)
CHARTER_ONLY_FIELDS: FrozenSet[str] = CHARTER_FIELDS - SHARED_TRIP_FIELDS
TOUR_ONLY_FIELDS: FrozenSet[str] = TOUR_FIELDS - SHARED_TRIP_FIELDS
ALL_FIELDS: FrozenSet[str] = frozenset(CONTACT_FIELDS) | CHARTER_FIELDS | TOUR_FIELDS

# Selector -> free-text field required when the selector is "other".
OTHER_FIELDS = {
    "departure_location": "departure_location_other",
    "destination": "destination_other",
}


def branch_fields(service_type: ServiceType | None) -> FrozenSet[str]:
    """Trip fields that belong to `service_type`."""
    if service_type is ServiceType.CHARTER:
        return CHARTER_FIELDS
    if service_type is ServiceType.TOUR:
        return TOUR_FIELDS
    return frozenset()


def exclusive_fields(service_type: ServiceType | None) -> FrozenSet[str]:
    """Trip fields that belong to `service_type` and to no other branch."""
    if service_type is ServiceType.CHARTER:
        return CHARTER_ONLY_FIELDS
    if service_type is ServiceType.TOUR:
        return TOUR_ONLY_FIELDS
    return frozenset()


def resolve_form_type(service_type: ServiceType | None) -> FormType:
    """Map the chosen branch to its analytics tag."""
    if service_type is ServiceType.CHARTER:
        return FormType.CHARTER_QUOTE
    if service_type is ServiceType.TOUR:
        return FormType.TOUR_QUOTE
    return FormType.CONTACT
