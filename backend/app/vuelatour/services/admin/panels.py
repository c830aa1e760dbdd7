"""Admin panels for each back-office table."""

from __future__ import annotations

from collections import OrderedDict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.catalog_crud import CRUDAirTour, CRUDDestination
from vuelatour.repositories.site.crud.contact_requests_crud import CRUDContactRequest
from vuelatour.repositories.site.crud.site_crud import (
    CRUDContactInfo,
    CRUDDestinationService,
    CRUDServiceOption,
    CRUDSiteContent,
    CRUDSiteImage,
    CRUDSiteSetting,
    CRUDTourService,
)
from vuelatour.repositories.site.schemas.catalog_schema import (
    AirTourResponse,
    DestinationResponse,
)
from vuelatour.repositories.site.schemas.contact_requests_schema import (
    ContactRequestResponse,
    ContactRequestScheduleUpdate,
)
from vuelatour.repositories.site.schemas.site_schema import (
    ContactInfoPayload,
    ContactInfoResponse,
    ServiceOptionResponse,
    SiteContentResponse,
    SiteImageResponse,
    SiteSettingResponse,
)
from vuelatour.services.admin.panel import (
    NOT_FOUND_ERROR,
    SAVE_ERROR,
    UPDATE_ERROR,
    AdminPanel,
    CommandResult,
    PanelState,
)
from vuelatour.services.catalog.defaults import (
    DEFAULT_AIRCRAFT_PRICING,
    DEFAULT_BENEFITS,
    DEFAULT_FEATURES,
    DEFAULT_SERVICES_INCLUDED,
)
from vuelatour.services.catalog.display import SUPPORTED_CURRENCIES
from vuelatour.services.catalog.icons import ServiceIcon
from vuelatour.services.lead_form.dates import to_storage_datetime
from vuelatour.services.lead_form.fields import LeadStatus

PRIMARY_IMAGE_ERROR = "Error al establecer imagen principal"
CURRENCY_ERROR = "Moneda no válida"
CURRENCY_SETTING_KEY = "site_currency"


class CatalogPanel(AdminPanel):
    """Destinations or tours, created with the default pricing and copy."""

    orderable = True
    selling_points_field = "benefits"
    selling_points_default: List[Dict[str, str]] = DEFAULT_BENEFITS

    def prepare_create(self, state: PanelState, payload: BaseModel) -> BaseModel:
        payload = super().prepare_create(state, payload)
        data = payload.model_dump()
        if not data.get("aircraft_pricing"):
            data["aircraft_pricing"] = DEFAULT_AIRCRAFT_PRICING
        if data.get("services_included") is None:
            data["services_included"] = DEFAULT_SERVICES_INCLUDED
        if not data.get(self.selling_points_field):
            data[self.selling_points_field] = self.selling_points_default
        return type(payload).model_validate(data)


class DestinationsPanel(CatalogPanel):
    def __init__(self, repository: CRUDDestination) -> None:
        super().__init__(repository, DestinationResponse)


class ToursPanel(CatalogPanel):
    selling_points_field = "features"
    selling_points_default = DEFAULT_FEATURES

    def __init__(self, repository: CRUDAirTour) -> None:
        super().__init__(repository, AirTourResponse)


class ServicesPanel(AdminPanel):
    """Service options; icon names outside the known set become CheckCircleIcon."""

    orderable = True

    def __init__(self, repository: CRUDServiceOption) -> None:
        super().__init__(repository, ServiceOptionResponse)

    def prepare_create(self, state: PanelState, payload: BaseModel) -> BaseModel:
        payload = super().prepare_create(state, payload)
        return payload.model_copy(update={"icon": ServiceIcon.resolve(payload.icon).value})  # type: ignore[attr-defined]

    def update(self, db: Session, state: PanelState, item_id: int, payload: BaseModel) -> CommandResult:
        fields = payload.model_dump(exclude_unset=True)
        if "icon" in fields:
            fields["icon"] = ServiceIcon.resolve(fields["icon"]).value
        return self.write(db, state, item_id, SAVE_ERROR, **fields)


class ImagesPanel(AdminPanel):
    """Site images grouped by category, at most one primary per category."""

    def __init__(self, repository: CRUDSiteImage) -> None:
        super().__init__(repository, SiteImageResponse)

    def sort_key(self, item: Any) -> Any:
        return (item.category or "", item.id)

    def set_primary(self, db: Session, state: PanelState, item_id: int) -> CommandResult:
        """Unset every primary image of the category, then mark `item_id`."""
        image = state.find(item_id)
        if image is None:
            return CommandResult(state=state, error=NOT_FOUND_ERROR)
        try:
            self.repository.clear_primary(db, image.category)
            self.repository.update_by_id(db, item_id, is_primary=True)
        except SQLAlchemyError as e:
            return self._fail(db, state, PRIMARY_IMAGE_ERROR, e)

        items = tuple(
            item.model_copy(update={"is_primary": item.id == item_id})
            if item.category == image.category
            else item
            for item in state.items
        )
        return CommandResult(state=PanelState(items), item=PanelState(items).find(item_id))


class ContentPanel(AdminPanel):
    """Localized text blocks."""

    def __init__(self, repository: CRUDSiteContent) -> None:
        super().__init__(repository, SiteContentResponse)

    def sort_key(self, item: Any) -> Any:
        return (item.category or "", item.key)

    @staticmethod
    def grouped(state: PanelState) -> Dict[str, List[SiteContentResponse]]:
        groups: Dict[str, List[SiteContentResponse]] = OrderedDict()
        for item in state.items:
            groups.setdefault(item.category or "general", []).append(item)
        return groups


class MessagesPanel(AdminPanel):
    """Leads, newest first. Only status and schedule are editable."""

    def __init__(self, repository: CRUDContactRequest) -> None:
        super().__init__(repository, ContactRequestResponse)

    def _rows(self, db: Session) -> Any:
        return self.repository.list_newest_first(db)

    def _sorted(self, items: Any) -> Tuple[ContactRequestResponse, ...]:
        return tuple(
            sorted(items, key=lambda item: (item.created_at or datetime.min, item.id), reverse=True)
        )

    @staticmethod
    def filter(state: PanelState, status: Optional[str] = None) -> Tuple[ContactRequestResponse, ...]:
        if not status or status == "all":
            return state.items
        return tuple(item for item in state.items if item.status == status)

    @staticmethod
    def pending_count(state: PanelState) -> int:
        return sum(1 for item in state.items if item.status == LeadStatus.PENDING.value)

    def change_status(self, db: Session, state: PanelState, item_id: int, status: LeadStatus) -> CommandResult:
        return self.write(db, state, item_id, UPDATE_ERROR, status=LeadStatus(status).value)

    def edit_schedule(
        self, db: Session, state: PanelState, item_id: int, schedule: ContactRequestScheduleUpdate
    ) -> CommandResult:
        """Rewrite travel/return date and time, dates in the midday-UTC storage format."""
        return self.write(
            db,
            state,
            item_id,
            UPDATE_ERROR,
            travel_date=to_storage_datetime(schedule.travel_date),
            departure_time=schedule.departure_time or None,
            return_date=to_storage_datetime(schedule.return_date),
            return_time=(schedule.return_time or None) if schedule.return_date else None,
        )


class ContactInfoPanel(AdminPanel):
    """The single contact info row."""

    def __init__(self, repository: CRUDContactInfo) -> None:
        super().__init__(repository, ContactInfoResponse)

    def save(self, db: Session, state: PanelState, payload: ContactInfoPayload) -> CommandResult:
        """Update the existing row or insert the first one. Blank phones are dropped."""
        phones = [phone for phone in payload.phones if phone.display.strip() and phone.link.strip()]
        payload = payload.model_copy(update={"phones": phones})
        current = self.repository.get_current(db)
        if current is None:
            return self.create(db, state, payload)
        return self.write(db, state, current.id, SAVE_ERROR, **payload.model_dump())


class SettingsPanel(AdminPanel):
    """Key/value site settings."""

    def __init__(self, repository: CRUDSiteSetting) -> None:
        super().__init__(repository, SiteSettingResponse)

    def sort_key(self, item: Any) -> Any:
        return item.key

    def update_value(self, db: Session, state: PanelState, key: str, value: str) -> CommandResult:
        if key == CURRENCY_SETTING_KEY and value not in SUPPORTED_CURRENCIES:
            return CommandResult(state=state, error=CURRENCY_ERROR)
        setting = next((item for item in state.items if item.key == key), None)
        if setting is None:
            return CommandResult(state=state, error=NOT_FOUND_ERROR)
        return self.write(db, state, setting.id, SAVE_ERROR, value=value)


def get_destinations_panel(repository: CRUDDestination = Depends()) -> DestinationsPanel:
    return DestinationsPanel(repository)


def get_tours_panel(repository: CRUDAirTour = Depends()) -> ToursPanel:
    return ToursPanel(repository)


def get_destination_services_panel(
    repository: CRUDDestinationService = Depends(),
) -> ServicesPanel:
    return ServicesPanel(repository)


def get_tour_services_panel(repository: CRUDTourService = Depends()) -> ServicesPanel:
    return ServicesPanel(repository)


def get_images_panel(repository: CRUDSiteImage = Depends()) -> ImagesPanel:
    return ImagesPanel(repository)


def get_content_panel(repository: CRUDSiteContent = Depends()) -> ContentPanel:
    return ContentPanel(repository)


def get_messages_panel(repository: CRUDContactRequest = Depends()) -> MessagesPanel:
    return MessagesPanel(repository)


def get_contact_info_panel(repository: CRUDContactInfo = Depends()) -> ContactInfoPanel:
    return ContactInfoPanel(repository)


def get_settings_panel(repository: CRUDSiteSetting = Depends()) -> SettingsPanel:
    return SettingsPanel(repository)
