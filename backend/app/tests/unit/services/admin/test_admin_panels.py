"""Test the command-style admin panels."""

from datetime import date
from types import SimpleNamespace
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.catalog_crud import CRUDDestination
from vuelatour.repositories.site.crud.contact_requests_crud import CRUDContactRequest
from vuelatour.repositories.site.crud.site_crud import (
    CRUDContactInfo,
    CRUDDestinationService,
    CRUDSiteImage,
    CRUDSiteSetting,
)
from vuelatour.repositories.site.models import ContactRequest, SiteImage, SiteSetting
from vuelatour.repositories.site.schemas.catalog_schema import (
    DestinationCreate,
    DestinationResponse,
    DestinationUpdate,
)
from vuelatour.repositories.site.schemas.contact_requests_schema import (
    ContactRequestScheduleUpdate,
)
from vuelatour.repositories.site.schemas.site_schema import (
    ContactInfoPayload,
    PhoneNumber,
    ServiceOptionCreate,
)
from vuelatour.services.admin.panel import PanelState
from vuelatour.services.admin.panels import (
    ContactInfoPanel,
    DestinationsPanel,
    ImagesPanel,
    MessagesPanel,
    ServicesPanel,
    SettingsPanel,
)
from vuelatour.services.catalog.defaults import DEFAULT_AIRCRAFT_PRICING
from vuelatour.services.lead_form.fields import LeadStatus


def destination(item_id: int, order: int) -> DestinationResponse:
    return DestinationResponse(
        id=item_id, slug=f"d{item_id}", name_es=f"D{item_id}", name_en=f"D{item_id}", display_order=order
    )


class TestMove:
    """Test cases for reordering with two sequential writes."""

    def setup_method(self) -> None:
        self.db = MagicMock(spec=Session)
        self.repository = MagicMock(spec=CRUDDestination)
        self.repository.model = SimpleNamespace(__tablename__="destinations")
        self.panel = DestinationsPanel(self.repository)
        self.state = PanelState((destination(1, 0), destination(2, 1), destination(3, 2)))

    def test_move_up_swaps_with_previous(self) -> None:
        # Arrange
        self.repository.update_by_id.return_value = 1

        # Act
        result = self.panel.move(self.db, self.state, 2, "up")

        # Assert
        assert result.ok
        assert [item.id for item in result.state.items] == [1, 3, 2]
        assert [item.display_order for item in result.state.items] == [0, 1, 2]
        assert self.repository.update_by_id.call_args_list[0].args == (self.db, 3)
        assert self.repository.update_by_id.call_args_list[0].kwargs == {"display_order": 1}
        assert self.repository.update_by_id.call_args_list[1].kwargs == {"display_order": 2}

    def test_second_write_failure_keeps_local_state(self) -> None:
        # Arrange
        self.repository.update_by_id.side_effect = [
            1,
            OperationalError("UPDATE", {}, Exception("db down")),
        ]

        # Act
        result = self.panel.move(self.db, self.state, 2, "up")

        # Assert
        assert not result.ok
        assert result.error == "Error al reordenar"
        assert result.state is self.state
        assert [(item.id, item.display_order) for item in result.state.items] == [(1, 0), (2, 1), (3, 2)]
        assert self.repository.update_by_id.call_count == 2
        self.db.rollback.assert_called_once()

    def test_move_past_the_edge_is_a_no_op(self) -> None:
        result = self.panel.move(self.db, self.state, 0, "up")

        assert result.ok
        assert result.state is self.state
        self.repository.update_by_id.assert_not_called()


class TestDestinationsPanel:
    """Test cases for destination commands against the database."""

    def setup_method(self) -> None:
        self.panel = DestinationsPanel(CRUDDestination())

    def test_create_fills_defaults_and_order(self, db: Session, catalog: dict) -> None:
        # Arrange
        state = self.panel.load(db)

        # Act
        result = self.panel.create(db, state, DestinationCreate(slug="tulum", name_es="Tulum", name_en="Tulum"))

        # Assert
        assert result.ok
        assert result.item.display_order == 2
        assert result.item.aircraft_pricing[0].price_usd == DEFAULT_AIRCRAFT_PRICING[0]["price_usd"]
        assert result.item.services_included == ["climate", "luggage", "water", "photos", "sanitizer", "safety"]
        assert len(result.item.benefits) == 4
        assert len(result.state.items) == 3

    def test_duplicate_slug_is_reported(self, db: Session, catalog: dict) -> None:
        state = self.panel.load(db)

        result = self.panel.create(db, state, DestinationCreate(slug="cozumel", name_es="X", name_en="X"))

        assert result.error == "Ya existe un elemento con esa clave"
        assert result.state is state

    def test_update_toggle_and_delete(self, db: Session, catalog: dict) -> None:
        state = self.panel.load(db)
        cozumel_id = catalog["cozumel"].id

        updated = self.panel.update(db, state, cozumel_id, DestinationUpdate(flight_time="35 min"))
        toggled = self.panel.toggle_active(db, updated.state, cozumel_id)
        deleted = self.panel.delete(db, toggled.state, cozumel_id)

        assert updated.item.flight_time == "35 min"
        assert toggled.item.is_active is False
        assert [item.slug for item in deleted.state.items] == ["holbox"]

    def test_missing_row(self, db: Session, catalog: dict) -> None:
        state = self.panel.load(db)

        assert self.panel.delete(db, state, 999).error == "Elemento no encontrado"


def test_service_icon_is_normalized(db: Session) -> None:
    panel = ServicesPanel(CRUDDestinationService())

    result = panel.create(
        db, panel.load(db), ServiceOptionCreate(key="drinks", label_es="Bebidas", label_en="Drinks", icon="Rocket")
    )

    assert result.item.icon == "CheckCircleIcon"


class TestMessagesPanel:
    """Test cases for the messages panel."""

    def setup_method(self) -> None:
        self.panel = MessagesPanel(CRUDContactRequest())

    def seed(self, db: Session) -> None:
        db.add_all(
            [
                ContactRequest(name="Ana", email="ana@x.com", service_type="tour"),
                ContactRequest(name="Luis", email="luis@x.com", service_type="charter", status="contacted"),
            ]
        )
        db.commit()

    def test_newest_first_filter_and_pending(self, db: Session) -> None:
        self.seed(db)

        state = self.panel.load(db)

        assert [item.name for item in state.items] == ["Luis", "Ana"]
        assert [item.name for item in self.panel.filter(state, "pending")] == ["Ana"]
        assert self.panel.pending_count(state) == 1

    def test_change_status(self, db: Session) -> None:
        self.seed(db)
        state = self.panel.load(db)
        ana = next(item for item in state.items if item.name == "Ana")

        result = self.panel.change_status(db, state, ana.id, LeadStatus.COMPLETED)

        assert result.item.status == "completed"
        assert self.panel.pending_count(result.state) == 0

    def test_edit_schedule_keeps_calendar_day(self, db: Session) -> None:
        self.seed(db)
        state = self.panel.load(db)
        luis = state.items[0]

        result = self.panel.edit_schedule(
            db,
            state,
            luis.id,
            ContactRequestScheduleUpdate(travel_date=date(2025, 3, 10), departure_time="09:00", return_time="18:00"),
        )

        assert result.item.travel_date == date(2025, 3, 10)
        assert result.item.departure_time == "09:00"
        assert result.item.return_date is None
        assert result.item.return_time is None


def test_set_primary_image(db: Session) -> None:
    # Arrange
    db.add_all(
        [
            SiteImage(key="hero-1", url="a.jpg", category="hero", is_primary=True),
            SiteImage(key="hero-2", url="b.jpg", category="hero"),
            SiteImage(key="logo", url="c.png", category="logo", is_primary=True),
        ]
    )
    db.commit()
    panel = ImagesPanel(CRUDSiteImage())
    state = panel.load(db)
    hero_2 = next(item for item in state.items if item.key == "hero-2")

    # Act
    result = panel.set_primary(db, state, hero_2.id)

    # Assert
    primaries = {item.key for item in panel.load(db).items if item.is_primary}
    assert primaries == {"hero-2", "logo"}
    assert {item.key for item in result.state.items if item.is_primary} == {"hero-2", "logo"}


def test_currency_setting_is_restricted(db: Session) -> None:
    db.add(SiteSetting(key="site_currency", value="USD"))
    db.commit()
    panel = SettingsPanel(CRUDSiteSetting())
    state = panel.load(db)

    rejected = panel.update_value(db, state, "site_currency", "EUR")
    accepted = panel.update_value(db, state, "site_currency", "MXN")

    assert rejected.error == "Moneda no válida"
    assert accepted.item.value == "MXN"


def test_contact_info_save_inserts_then_updates(db: Session) -> None:
    panel = ContactInfoPanel(CRUDContactInfo())
    payload = ContactInfoPayload(
        email="info@vuelatour.com",
        phones=[PhoneNumber(display="998 000 0000", link="+529980000000"), PhoneNumber(display=" ", link="")],
    )

    created = panel.save(db, panel.load(db), payload)
    updated = panel.save(db, created.state, payload.model_copy(update={"hours_es": "9 a 18"}))

    assert created.item.phones == [PhoneNumber(display="998 000 0000", link="+529980000000")]
    assert updated.item.id == created.item.id
    assert updated.item.hours_es == "9 a 18"
    assert len(updated.state.items) == 1
