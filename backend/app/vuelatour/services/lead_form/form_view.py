"""Translate between the HTTP form models and `LeadFormState`."""

from typing import Any, Iterable

from vuelatour.models.lead_models import (
    FieldErrorModel,
    FormDescriptor,
    FormOptions,
    QuoteResult,
    QuoteSubmission,
    SelectOption,
)
from vuelatour.services.catalog.display import localized
from vuelatour.services.lead_form.fields import (
    DEPARTURE_LOCATIONS,
    MAX_PASSENGERS,
    MIN_PASSENGERS,
    OTHER,
    TIME_SLOTS,
)
from vuelatour.services.lead_form.form_state import (
    ChooseServiceType,
    LeadFormState,
    SetField,
    reduce,
)


def state_from_submission(submission: QuoteSubmission) -> LeadFormState:
    """
    Replay a submitted form through the reducer.

    Raises:
        KeyError: If `values` names a field the form does not have.
    """
    prefill = submission.prefill
    state = LeadFormState.from_query(
        destination=prefill.destination,
        tour=prefill.tour,
        aircraft=prefill.aircraft,
        price=prefill.price,
        locale=submission.locale,
    )
    if submission.service_type is not None:
        state = reduce(state, ChooseServiceType(submission.service_type))
    # Selectors first so their "other" text fields are visible when set.
    for name, value in sorted(submission.values.items(), key=lambda item: item[0].endswith("_other")):
        state = reduce(state, SetField(name, value))
    return state


def _options(items: Iterable[Any], locale: str) -> list:
    return [SelectOption(value=item.slug, label=localized(item, "name", locale) or item.slug) for item in items]


def describe_form(state: LeadFormState, destinations: Iterable[Any], tours: Iterable[Any]) -> FormDescriptor:
    """Everything the page needs to render the form for `state`."""
    destination_options = _options(destinations, state.locale)
    destination_options.append(
        SelectOption(value=OTHER, label="Other" if state.locale == "en" else "Otro")
    )
    return FormDescriptor(
        stage=state.stage.value,
        locale=state.locale,
        service_type=state.service_type,
        values=dict(state.values),
        locked=sorted(state.locked),
        preselected_price=state.preselected_price,
        visible_fields=sorted(state.visible_fields),
        required_fields=sorted(state.required),
        options=FormOptions(
            departure_locations=list(DEPARTURE_LOCATIONS),
            time_slots=list(TIME_SLOTS),
            destinations=destination_options,
            tours=_options(tours, state.locale),
            min_passengers=MIN_PASSENGERS,
            max_passengers=MAX_PASSENGERS,
        ),
    )


def describe_result(state: LeadFormState) -> QuoteResult:
    return QuoteResult(
        stage=state.stage.value,
        lead_id=state.lead_id,
        field_errors=[FieldErrorModel(**error.as_dict()) for error in state.field_errors],
        error=state.error,
    )
