"""Turn a validated form state into the row written to `contact_requests`."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Protocol

from vuelatour.repositories.site.schemas.contact_requests_schema import (
    ContactRequestCreate,
)
from vuelatour.services.lead_form.dates import to_storage_date
from vuelatour.services.lead_form.fields import OTHER, ServiceType
from vuelatour.services.lead_form.form_state import LeadFormState
from vuelatour.services.lead_form.requirements import is_blank


class SluggedItem(Protocol):
    id: Any
    slug: str


def resolve_catalog_id(slug: Optional[str], items: Iterable[SluggedItem]) -> Optional[int]:
    """Return the id of the item with `slug`, or None when nothing matches."""
    if is_blank(slug) or slug == OTHER:
        return None
    for item in items:
        if item.slug == slug:
            return item.id  # type: ignore[no-any-return]
    return None


def _text(values: Dict[str, Any], name: str) -> Optional[str]:
    value = values.get(name)
    if is_blank(value):
        return None
    return str(value).strip()


def build_lead_record(
    state: LeadFormState,
    destinations: Iterable[SluggedItem],
    tours: Iterable[SluggedItem],
) -> ContactRequestCreate:
    """
    Build the normalized lead row.

    Every field outside the chosen branch is written as null, `*_other`
    fields only survive when their selector is `other`, and catalog slugs that
    no longer match a loaded item keep their text but get a null foreign key.
    """
    values = dict(state.values)
    record: Dict[str, Any] = {
        "name": _text(values, "name"),
        "email": _text(values, "email"),
        "phone": _text(values, "phone"),
        "message": _text(values, "message"),
        "service_type": state.service_type.value if state.service_type else None,
        "status": "pending",
    }

    if state.service_type is not None:
        record["travel_date"] = to_storage_date(_text(values, "travel_date"))
        record["departure_time"] = _text(values, "departure_time")

    if state.service_type is ServiceType.CHARTER:
        location = _text(values, "departure_location")
        destination = _text(values, "destination")
        return_date = _text(values, "return_date")
        record.update(
            {
                "departure_location": location,
                "departure_location_other": (
                    _text(values, "departure_location_other") if location == OTHER else None
                ),
                "destination": destination,
                "destination_other": (
                    _text(values, "destination_other") if destination == OTHER else None
                ),
                "destination_id": resolve_catalog_id(destination, destinations),
                "return_date": to_storage_date(return_date),
                "return_time": _text(values, "return_time") if return_date else None,
                "aircraft_selected": _text(values, "aircraft_selected"),
            }
        )
    elif state.service_type is ServiceType.TOUR:
        tour = _text(values, "tour")
        passengers = values.get("number_of_passengers")
        record.update(
            {
                "tour": tour,
                "tour_id": resolve_catalog_id(tour, tours),
                "number_of_passengers": None if is_blank(passengers) else int(passengers),
            }
        )

    return ContactRequestCreate(**record)
