"""
Immutable state of the quote/contact form and the reducer that advances it.

Stages::

    collapsed -> editing -> validating -> submitting -> success
                    ^                         |
                    +------- error <----------+

`success` is left through `Reset`, which returns to `collapsed`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple, Union

from vuelatour.services.lead_form.fields import (
    ALL_FIELDS,
    CONTACT_FIELDS,
    OTHER,
    OTHER_FIELDS,
    ServiceType,
    branch_fields,
    exclusive_fields,
)
from vuelatour.services.lead_form.requirements import (
    FieldError,
    is_blank,
    required_fields,
    validate,
)


class FormStage(str, Enum):
    """Where the form is in its lifecycle."""

    COLLAPSED = "collapsed"
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransition(ValueError):
    """Raised when an intent does not apply to the current stage."""


def _freeze(values: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values))


def _idle_stage(service_type: Optional[ServiceType]) -> FormStage:
    return FormStage.COLLAPSED if service_type is None else FormStage.EDITING


@dataclass(frozen=True)
class LeadFormState:
    """Snapshot of the form. Never mutated; `reduce` returns a new one."""

    stage: FormStage = FormStage.COLLAPSED
    locale: str = "es"
    service_type: Optional[ServiceType] = None
    values: Mapping[str, Any] = field(default_factory=lambda: _freeze({}))
    locked: FrozenSet[str] = frozenset()
    preselected_price: Optional[str] = None
    field_errors: Tuple[FieldError, ...] = ()
    error: Optional[str] = None
    lead_id: Optional[int] = None

    @classmethod
    def from_query(
        cls,
        destination: Optional[str] = None,
        tour: Optional[str] = None,
        aircraft: Optional[str] = None,
        price: Optional[str] = None,
        locale: str = "es",
    ) -> "LeadFormState":
        """Build the initial state from the deep-link query parameters.

        A destination pre-selects a charter, a tour pre-selects a tour; in both
        cases the service type and the pre-selected item are locked.
        """
        values: Dict[str, Any] = {}
        locked: FrozenSet[str] = frozenset()
        service_type: Optional[ServiceType] = None

        if not is_blank(destination):
            service_type = ServiceType.CHARTER
            values["destination"] = destination
            if not is_blank(aircraft):
                values["aircraft_selected"] = aircraft
            locked = frozenset({"service_type", "destination"})
        elif not is_blank(tour):
            service_type = ServiceType.TOUR
            values["tour"] = tour
            locked = frozenset({"service_type", "tour"})

        return cls(
            stage=_idle_stage(service_type),
            locale=locale,
            service_type=service_type,
            values=_freeze(values),
            locked=locked,
            preselected_price=None if is_blank(price) else price,
        )

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    @property
    def visible_fields(self) -> FrozenSet[str]:
        """Fields rendered for the current service type."""
        return frozenset(CONTACT_FIELDS) | branch_fields(self.service_type)

    @property
    def required(self) -> FrozenSet[str]:
        return required_fields(self.service_type, self.values)

    def payload(self) -> Dict[str, Any]:
        """Raw values of the visible fields plus the service type."""
        data: Dict[str, Any] = {
            name: value
            for name, value in self.values.items()
            if name in self.visible_fields and not is_blank(value)
        }
        data["service_type"] = self.service_type.value if self.service_type else None
        return data


@dataclass(frozen=True)
class ChooseServiceType:
    service_type: Optional[ServiceType]


@dataclass(frozen=True)
class SetField:
    name: str
    value: Any


@dataclass(frozen=True)
class BeginSubmit:
    pass


@dataclass(frozen=True)
class RunValidation:
    pass


@dataclass(frozen=True)
class SubmissionSucceeded:
    lead_id: Optional[int] = None


@dataclass(frozen=True)
class SubmissionFailed:
    message: str


@dataclass(frozen=True)
class Reset:
    pass


Intent = Union[
    ChooseServiceType,
    SetField,
    BeginSubmit,
    RunValidation,
    SubmissionSucceeded,
    SubmissionFailed,
    Reset,
]

_EDITABLE_STAGES = frozenset({FormStage.COLLAPSED, FormStage.EDITING, FormStage.ERROR})


def _choose_service_type(state: LeadFormState, intent: ChooseServiceType) -> LeadFormState:
    if "service_type" in state.locked or state.stage not in _EDITABLE_STAGES:
        return state
    if intent.service_type == state.service_type:
        return state

    stale = exclusive_fields(state.service_type)
    values = {name: value for name, value in state.values.items() if name not in stale}
    return replace(
        state,
        stage=_idle_stage(intent.service_type),
        service_type=intent.service_type,
        values=_freeze(values),
        field_errors=(),
        error=None,
    )


def _set_field(state: LeadFormState, intent: SetField) -> LeadFormState:
    if intent.name not in ALL_FIELDS:
        raise KeyError(f"Unknown form field: {intent.name}")
    if state.stage not in _EDITABLE_STAGES or intent.name in state.locked:
        return state
    if intent.name not in state.visible_fields:
        return state

    values = dict(state.values)
    values[intent.name] = intent.value

    other_field = OTHER_FIELDS.get(intent.name)
    if other_field and intent.value != OTHER:
        values.pop(other_field, None)
    if intent.name == "return_date" and is_blank(intent.value):
        values.pop("return_time", None)

    stage = _idle_stage(state.service_type) if state.stage is FormStage.ERROR else state.stage
    return replace(state, stage=stage, values=_freeze(values), error=None)


def _begin_submit(state: LeadFormState) -> LeadFormState:
    if state.stage not in _EDITABLE_STAGES:
        return state
    return replace(state, stage=FormStage.VALIDATING, error=None)


def _run_validation(state: LeadFormState) -> LeadFormState:
    if state.stage is not FormStage.VALIDATING:
        raise InvalidTransition(f"Cannot validate from stage {state.stage.value}")
    errors = tuple(validate(state.service_type, state.values))
    if errors:
        return replace(state, stage=_idle_stage(state.service_type), field_errors=errors)
    return replace(state, stage=FormStage.SUBMITTING, field_errors=())


def reduce(state: LeadFormState, intent: Intent) -> LeadFormState:
    """Return the state that results from applying `intent` to `state`."""
    if isinstance(intent, ChooseServiceType):
        return _choose_service_type(state, intent)
    if isinstance(intent, SetField):
        return _set_field(state, intent)
    if isinstance(intent, BeginSubmit):
        return _begin_submit(state)
    if isinstance(intent, RunValidation):
        return _run_validation(state)
    if isinstance(intent, SubmissionSucceeded):
        if state.stage is not FormStage.SUBMITTING:
            raise InvalidTransition(f"Cannot succeed from stage {state.stage.value}")
        return replace(state, stage=FormStage.SUCCESS, lead_id=intent.lead_id, error=None)
    if isinstance(intent, SubmissionFailed):
        if state.stage is not FormStage.SUBMITTING:
            raise InvalidTransition(f"Cannot fail from stage {state.stage.value}")
        return replace(state, stage=FormStage.ERROR, error=intent.message)
    if isinstance(intent, Reset):
        return LeadFormState(locale=state.locale)
    raise TypeError(f"Unsupported intent: {intent!r}")
