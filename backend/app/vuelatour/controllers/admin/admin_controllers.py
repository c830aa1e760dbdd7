"""Back-office endpoints, all guarded by the admin token."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from vuelatour.controllers.admin.auth import require_admin
from vuelatour.controllers.admin.panel_routes import register_panel_routes, unwrap
from vuelatour.repositories.site.dependencies import get_db
from vuelatour.repositories.site.schemas.catalog_schema import (
    AirTourCreate,
    AirTourResponse,
    AirTourUpdate,
    DestinationCreate,
    DestinationResponse,
    DestinationUpdate,
)
from vuelatour.repositories.site.schemas.contact_requests_schema import (
    ContactRequestResponse,
    ContactRequestScheduleUpdate,
    ContactRequestStatusUpdate,
)
from vuelatour.repositories.site.schemas.site_schema import (
    ContactInfoPayload,
    ContactInfoResponse,
    ServiceOptionCreate,
    ServiceOptionResponse,
    ServiceOptionUpdate,
    SiteContentCreate,
    SiteContentResponse,
    SiteContentUpdate,
    SiteImageCreate,
    SiteImageResponse,
    SiteImageUpdate,
    SiteSettingResponse,
    SiteSettingUpdate,
)
from vuelatour.services.admin.dashboard import (
    DashboardService,
    DashboardStats,
    get_dashboard_service,
)
from vuelatour.services.admin.panels import (
    ContactInfoPanel,
    ContentPanel,
    ImagesPanel,
    MessagesPanel,
    SettingsPanel,
    get_contact_info_panel,
    get_content_panel,
    get_destination_services_panel,
    get_destinations_panel,
    get_images_panel,
    get_messages_panel,
    get_settings_panel,
    get_tour_services_panel,
    get_tours_panel,
)
from vuelatour.services.lead_form.fields import LeadStatus

admin_router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])

destinations_router = APIRouter(prefix="/destinations")
register_panel_routes(
    destinations_router, get_destinations_panel, DestinationResponse, DestinationCreate, DestinationUpdate
)

tours_router = APIRouter(prefix="/tours")
register_panel_routes(tours_router, get_tours_panel, AirTourResponse, AirTourCreate, AirTourUpdate)

destination_services_router = APIRouter(prefix="/services/destinations")
register_panel_routes(
    destination_services_router,
    get_destination_services_panel,
    ServiceOptionResponse,
    ServiceOptionCreate,
    ServiceOptionUpdate,
)

tour_services_router = APIRouter(prefix="/services/tours")
register_panel_routes(
    tour_services_router,
    get_tour_services_panel,
    ServiceOptionResponse,
    ServiceOptionCreate,
    ServiceOptionUpdate,
)

images_router = APIRouter(prefix="/images")


@images_router.post("/{item_id}/primary", response_model=SiteImageResponse)
def set_primary_image(
    item_id: int, db: Session = Depends(get_db), panel: ImagesPanel = Depends(get_images_panel)
) -> Any:
    """Make the image the primary one of its category."""
    return unwrap(panel.set_primary(db, panel.load(db), item_id))


register_panel_routes(images_router, get_images_panel, SiteImageResponse, SiteImageCreate, SiteImageUpdate)

content_router = APIRouter(prefix="/content")


@content_router.get("/grouped", response_model=Dict[str, List[SiteContentResponse]])
def grouped_content(
    db: Session = Depends(get_db), panel: ContentPanel = Depends(get_content_panel)
) -> Any:
    return panel.grouped(panel.load(db))


register_panel_routes(
    content_router, get_content_panel, SiteContentResponse, SiteContentCreate, SiteContentUpdate
)

messages_router = APIRouter(prefix="/messages")


class MessagesListResponse(BaseModel):
    """Data model for the messages panel."""

    items: List[ContactRequestResponse]
    pending: int


@messages_router.get("", response_model=MessagesListResponse)
def list_messages(
    status_filter: Optional[LeadStatus] = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
    panel: MessagesPanel = Depends(get_messages_panel),
) -> Any:
    """Leads newest first, optionally filtered by status."""
    state = panel.load(db)
    status_value = status_filter.value if status_filter else None
    return MessagesListResponse(
        items=list(panel.filter(state, status_value)), pending=panel.pending_count(state)
    )


@messages_router.patch("/{item_id}/status", response_model=ContactRequestResponse)
def change_message_status(
    item_id: int,
    payload: ContactRequestStatusUpdate,
    db: Session = Depends(get_db),
    panel: MessagesPanel = Depends(get_messages_panel),
) -> Any:
    return unwrap(panel.change_status(db, panel.load(db), item_id, LeadStatus(payload.status)))


@messages_router.patch("/{item_id}/schedule", response_model=ContactRequestResponse)
def edit_message_schedule(
    item_id: int,
    payload: ContactRequestScheduleUpdate,
    db: Session = Depends(get_db),
    panel: MessagesPanel = Depends(get_messages_panel),
) -> Any:
    return unwrap(panel.edit_schedule(db, panel.load(db), item_id, payload))


@messages_router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(
    item_id: int, db: Session = Depends(get_db), panel: MessagesPanel = Depends(get_messages_panel)
) -> Response:
    unwrap(panel.delete(db, panel.load(db), item_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


contact_info_router = APIRouter(prefix="/contact-info")


@contact_info_router.get("", response_model=Optional[ContactInfoResponse])
def read_contact_info(
    db: Session = Depends(get_db), panel: ContactInfoPanel = Depends(get_contact_info_panel)
) -> Any:
    items = panel.load(db).items
    return items[0] if items else None


@contact_info_router.put("", response_model=ContactInfoResponse)
def save_contact_info(
    payload: ContactInfoPayload,
    db: Session = Depends(get_db),
    panel: ContactInfoPanel = Depends(get_contact_info_panel),
) -> Any:
    return unwrap(panel.save(db, panel.load(db), payload))


settings_router = APIRouter(prefix="/settings")


@settings_router.get("", response_model=List[SiteSettingResponse])
def list_settings(
    db: Session = Depends(get_db), panel: SettingsPanel = Depends(get_settings_panel)
) -> Any:
    return list(panel.load(db).items)


@settings_router.put("/{key}", response_model=SiteSettingResponse)
def update_setting(
    key: str,
    payload: SiteSettingUpdate,
    db: Session = Depends(get_db),
    panel: SettingsPanel = Depends(get_settings_panel),
) -> Any:
    return unwrap(panel.update_value(db, panel.load(db), key, payload.value))


@admin_router.get("/dashboard", response_model=DashboardStats)
def dashboard(
    db: Session = Depends(get_db), service: DashboardService = Depends(get_dashboard_service)
) -> Any:
    return service.stats(db)


for _router in (
    destinations_router,
    tours_router,
    destination_services_router,
    tour_services_router,
    images_router,
    content_router,
    messages_router,
    contact_info_router,
    settings_router,
):
    admin_router.include_router(_router)
