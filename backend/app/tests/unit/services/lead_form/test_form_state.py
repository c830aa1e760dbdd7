"""Test the lead form state and its reducer."""

import pytest

from vuelatour.services.lead_form.fields import ServiceType
from vuelatour.services.lead_form.form_state import (
    BeginSubmit,
    ChooseServiceType,
    FormStage,
    InvalidTransition,
    LeadFormState,
    Reset,
    RunValidation,
    SetField,
    SubmissionFailed,
    SubmissionSucceeded,
    reduce,
)


def fill(state: LeadFormState, **values: object) -> LeadFormState:
    for name, value in values.items():
        state = reduce(state, SetField(name, value))
    return state


class TestFromQuery:
    """Test cases for LeadFormState.from_query."""

    def test_destination_locks_charter(self) -> None:
        # Act
        state = LeadFormState.from_query(destination="cozumel", aircraft="Cessna 206", price="750")

        # Assert
        assert state.stage is FormStage.EDITING
        assert state.service_type is ServiceType.CHARTER
        assert state.get("destination") == "cozumel"
        assert state.get("aircraft_selected") == "Cessna 206"
        assert state.locked == {"service_type", "destination"}
        assert state.preselected_price == "750"

    def test_tour_locks_tour(self) -> None:
        state = LeadFormState.from_query(tour="zona-hotelera", locale="en")

        assert state.service_type is ServiceType.TOUR
        assert state.locked == {"service_type", "tour"}
        assert state.locale == "en"

    def test_destination_wins_over_tour(self) -> None:
        state = LeadFormState.from_query(destination="cozumel", tour="zona-hotelera")

        assert state.service_type is ServiceType.CHARTER
        assert state.get("tour") is None

    def test_no_parameters_is_collapsed(self) -> None:
        state = LeadFormState.from_query()

        assert state.stage is FormStage.COLLAPSED
        assert state.locked == frozenset()


class TestReduce:
    """Test cases for reduce."""

    def test_switching_branch_clears_exclusive_fields(self) -> None:
        # Arrange
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.CHARTER))
        state = fill(
            state,
            name="Ana",
            destination="other",
            destination_other="Isla Mujeres",
            return_date="2025-03-12",
            travel_date="2025-03-10",
        )

        # Act
        state = reduce(state, ChooseServiceType(ServiceType.TOUR))

        # Assert
        assert state.get("destination") is None
        assert state.get("destination_other") is None
        assert state.get("return_date") is None
        assert state.get("name") == "Ana"
        assert state.get("travel_date") == "2025-03-10"
        assert "destination_other" not in state.payload()

    def test_switching_back_clears_tour_fields(self) -> None:
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.TOUR))
        state = fill(state, tour="zona-hotelera", number_of_passengers=3)

        state = reduce(state, ChooseServiceType(ServiceType.CHARTER))

        assert state.get("tour") is None
        assert state.get("number_of_passengers") is None

    def test_locked_fields_ignore_edits(self) -> None:
        state = LeadFormState.from_query(destination="cozumel")

        state = reduce(state, SetField("destination", "holbox"))
        state = reduce(state, ChooseServiceType(ServiceType.TOUR))

        assert state.get("destination") == "cozumel"
        assert state.service_type is ServiceType.CHARTER

    def test_leaving_other_clears_free_text(self) -> None:
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.CHARTER))
        state = fill(state, departure_location="other", departure_location_other="Valladolid")

        state = reduce(state, SetField("departure_location", "tulum"))

        assert state.get("departure_location_other") is None

    def test_clearing_return_date_clears_return_time(self) -> None:
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.CHARTER))
        state = fill(state, return_date="2025-03-12", return_time="10:00")

        state = reduce(state, SetField("return_date", ""))

        assert state.get("return_time") is None

    def test_fields_of_other_branch_are_ignored(self) -> None:
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.TOUR))

        state = reduce(state, SetField("destination", "cozumel"))

        assert state.get("destination") is None

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(KeyError):
            reduce(LeadFormState(), SetField("credit_card", "4111"))

    def test_state_is_not_mutated(self) -> None:
        original = reduce(LeadFormState(), ChooseServiceType(ServiceType.TOUR))

        reduce(original, SetField("tour", "zona-hotelera"))

        assert original.get("tour") is None

    def test_validation_failure_returns_to_editing(self) -> None:
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.TOUR))

        state = reduce(reduce(state, BeginSubmit()), RunValidation())

        assert state.stage is FormStage.EDITING
        assert {error.field for error in state.field_errors} >= {"name", "email", "tour"}

    def test_full_cycle_success_and_reset(self) -> None:
        # Arrange
        state = reduce(LeadFormState(locale="en"), ChooseServiceType(ServiceType.TOUR))
        state = fill(
            state,
            name="Ana",
            email="ana@x.com",
            phone="555",
            tour="zona-hotelera",
            number_of_passengers=3,
            travel_date="2025-06-01",
            departure_time="09:00",
        )

        # Act
        state = reduce(reduce(state, BeginSubmit()), RunValidation())
        submitting = state
        state = reduce(state, SubmissionSucceeded(lead_id=7))

        # Assert
        assert submitting.stage is FormStage.SUBMITTING
        assert state.stage is FormStage.SUCCESS
        assert state.lead_id == 7
        assert reduce(state, BeginSubmit()) is state
        reset = reduce(state, Reset())
        assert reset.stage is FormStage.COLLAPSED
        assert reset.locale == "en"
        assert dict(reset.values) == {}

    def test_error_is_retryable_and_keeps_values(self) -> None:
        state = reduce(LeadFormState(), ChooseServiceType(ServiceType.TOUR))
        state = fill(state, name="Ana")
        state = LeadFormState(
            stage=FormStage.SUBMITTING, service_type=state.service_type, values=state.values
        )

        state = reduce(state, SubmissionFailed("boom"))
        assert state.stage is FormStage.ERROR
        assert state.get("name") == "Ana"

        state = reduce(state, SetField("phone", "555"))
        assert state.stage is FormStage.EDITING
        assert state.error is None

    def test_outcome_outside_submitting_is_invalid(self) -> None:
        with pytest.raises(InvalidTransition):
            reduce(LeadFormState(), SubmissionSucceeded(1))
