"""Test the normalization of a form state into a lead row."""

from datetime import datetime, timezone
from types import SimpleNamespace

from vuelatour.services.lead_form.fields import ServiceType
from vuelatour.services.lead_form.form_state import (
    ChooseServiceType,
    LeadFormState,
    SetField,
    reduce,
)
from vuelatour.services.lead_form.normalize import build_lead_record, resolve_catalog_id

DESTINATIONS = [SimpleNamespace(id=1, slug="cozumel"), SimpleNamespace(id=2, slug="holbox")]
TOURS = [SimpleNamespace(id=10, slug="zona-hotelera")]


def state_with(service_type: ServiceType, **values: object) -> LeadFormState:
    state = reduce(LeadFormState(), ChooseServiceType(service_type))
    for name, value in values.items():
        state = reduce(state, SetField(name, value))
    return state


class TestResolveCatalogId:
    def test_match(self) -> None:
        assert resolve_catalog_id("holbox", DESTINATIONS) == 2

    def test_silent_miss(self) -> None:
        assert resolve_catalog_id("tulum", DESTINATIONS) is None

    def test_other_and_blank(self) -> None:
        assert resolve_catalog_id("other", DESTINATIONS) is None
        assert resolve_catalog_id("", DESTINATIONS) is None


class TestBuildLeadRecord:
    """Test cases for build_lead_record."""

    def test_charter_record(self) -> None:
        # Arrange
        state = state_with(
            ServiceType.CHARTER,
            name=" Ana ",
            email="ana@x.com",
            phone="555",
            departure_location="other",
            departure_location_other="Valladolid",
            destination="cozumel",
            travel_date="2025-03-10",
            departure_time="09:00",
            return_date="2025-03-12",
            return_time="17:00",
        )

        # Act
        record = build_lead_record(state, DESTINATIONS, TOURS)

        # Assert
        assert record.name == "Ana"
        assert record.service_type == "charter"
        assert record.status == "pending"
        assert record.destination_id == 1
        assert record.departure_location_other == "Valladolid"
        assert record.destination_other is None
        assert record.travel_date == datetime(2025, 3, 10, 12, tzinfo=timezone.utc)
        assert record.return_date == datetime(2025, 3, 12, 12, tzinfo=timezone.utc)
        assert record.return_time == "17:00"
        assert record.tour is None
        assert record.tour_id is None
        assert record.number_of_passengers is None

    def test_tour_record_nulls_charter_branch(self) -> None:
        state = state_with(
            ServiceType.TOUR,
            name="Ana",
            email="ana@x.com",
            tour="zona-hotelera",
            number_of_passengers="3",
            travel_date="2025-06-01",
        )

        record = build_lead_record(state, DESTINATIONS, TOURS)

        assert record.tour_id == 10
        assert record.number_of_passengers == 3
        assert record.destination is None
        assert record.destination_id is None
        assert record.departure_location is None
        assert record.return_date is None

    def test_unknown_slug_keeps_text(self) -> None:
        state = state_with(ServiceType.TOUR, name="Ana", email="ana@x.com", tour="deleted-tour")

        record = build_lead_record(state, DESTINATIONS, TOURS)

        assert record.tour == "deleted-tour"
        assert record.tour_id is None

    def test_general_contact_has_no_trip_fields(self) -> None:
        state = LeadFormState()
        for name, value in {"name": "Ana", "email": "ana@x.com", "message": "Hola"}.items():
            state = reduce(state, SetField(name, value))

        record = build_lead_record(state, DESTINATIONS, TOURS)

        assert record.service_type is None
        assert record.message == "Hola"
        assert record.travel_date is None
