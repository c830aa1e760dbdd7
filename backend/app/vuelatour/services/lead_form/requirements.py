"""
Required-field policy and validation of the quote/contact form.

The required set is a pure function of the service type and the values of
the dependent selectors, so the same rules drive the rendered form, the
validation pass and the tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, List, Mapping, Optional

from pydantic import EmailStr, TypeAdapter, ValidationError

from vuelatour.services.lead_form.dates import parse_calendar_date
from vuelatour.services.lead_form.fields import (
    DEPARTURE_LOCATIONS,
    MAX_PASSENGERS,
    MIN_PASSENGERS,
    OTHER,
    OTHER_FIELDS,
    TIME_SLOTS,
    ServiceType,
)

EMAIL_ADAPTER: TypeAdapter[EmailStr] = TypeAdapter(EmailStr)

BASE_REQUIRED: FrozenSet[str] = frozenset({"name", "email"})
QUOTE_REQUIRED: FrozenSet[str] = BASE_REQUIRED | {"phone", "service_type"}


@dataclass(frozen=True)
class FieldError:
    """A single validation failure on one field."""

    field: str
    code: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "code": self.code}


def is_blank(value: Any) -> bool:
    """Return True for values the form treats as not filled in."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def required_fields(
    service_type: Optional[ServiceType], values: Mapping[str, Any]
) -> FrozenSet[str]:
    """Return the names of the fields that must be filled in."""
    if service_type is None:
        return BASE_REQUIRED

    required = set(QUOTE_REQUIRED)
    if service_type is ServiceType.CHARTER:
        required |= {"travel_date", "departure_time", "departure_location", "destination"}
        for selector, other_field in OTHER_FIELDS.items():
            if values.get(selector) == OTHER:
                required.add(other_field)
        if not is_blank(values.get("return_date")):
            required.add("return_time")
    elif service_type is ServiceType.TOUR:
        required |= {"tour", "number_of_passengers", "travel_date", "departure_time"}
    return frozenset(required)


def is_valid_email(value: Any) -> bool:
    """Same rules as the `EmailStr` fields the lead and notification models use."""
    try:
        EMAIL_ADAPTER.validate_python(str(value).strip())
    except ValidationError:
        return False
    return True


def _check_date(field: str, value: Any) -> Optional[FieldError]:
    try:
        parse_calendar_date(value)
    except (TypeError, ValueError):
        return FieldError(field, "invalid")
    return None


def validate(
    service_type: Optional[ServiceType], values: Mapping[str, Any]
) -> List[FieldError]:
    """Validate the form values, returning every error found (empty when valid)."""
    errors: List[FieldError] = []
    required = required_fields(service_type, values)

    for field in sorted(required):
        if field == "service_type":
            if service_type is None:
                errors.append(FieldError(field, "required"))
            continue
        if is_blank(values.get(field)):
            errors.append(FieldError(field, "required"))

    failed = {error.field for error in errors}

    email = values.get("email")
    if "email" not in failed and not is_blank(email) and not is_valid_email(email):
        errors.append(FieldError("email", "invalid"))

    if service_type is ServiceType.CHARTER:
        location = values.get("departure_location")
        if not is_blank(location) and location not in DEPARTURE_LOCATIONS:
            errors.append(FieldError("departure_location", "invalid"))
        return_date = values.get("return_date")
        if not is_blank(return_date):
            error = _check_date("return_date", return_date)
            if error:
                errors.append(error)
        return_time = values.get("return_time")
        if not is_blank(return_time) and return_time not in TIME_SLOTS:
            errors.append(FieldError("return_time", "invalid"))

    if service_type is ServiceType.TOUR:
        passengers = values.get("number_of_passengers")
        if "number_of_passengers" not in failed and not is_blank(passengers):
            try:
                if isinstance(passengers, bool):
                    raise TypeError("booleans are not passenger counts")
                count = int(passengers)
            except (TypeError, ValueError):
                errors.append(FieldError("number_of_passengers", "invalid"))
            else:
                if isinstance(passengers, float) and not passengers.is_integer():
                    errors.append(FieldError("number_of_passengers", "invalid"))
                elif not MIN_PASSENGERS <= count <= MAX_PASSENGERS:
                    errors.append(FieldError("number_of_passengers", "out_of_range"))

    if service_type is not None:
        travel_date = values.get("travel_date")
        if "travel_date" not in failed and not is_blank(travel_date):
            error = _check_date("travel_date", travel_date)
            if error:
                errors.append(error)
        departure_time = values.get("departure_time")
        if "departure_time" not in failed and not is_blank(departure_time):
            if departure_time not in TIME_SLOTS:
                errors.append(FieldError("departure_time", "invalid"))

    return errors
