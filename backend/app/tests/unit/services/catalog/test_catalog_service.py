"""Test the catalog read path against the database."""

from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.catalog_crud import CRUDAirTour, CRUDDestination
from vuelatour.repositories.site.crud.site_crud import (
    CRUDContactInfo,
    CRUDDestinationService,
    CRUDSiteSetting,
    CRUDTourService,
)
from vuelatour.repositories.site.models import DestinationService, SiteSetting
from vuelatour.services.catalog.catalog_service import CatalogService, get_catalog_service


def build_service() -> CatalogService:
    return get_catalog_service(
        CRUDDestination(),
        CRUDAirTour(),
        CRUDDestinationService(),
        CRUDTourService(),
        CRUDSiteSetting(),
        CRUDContactInfo(),
    )


class TestCatalogService:
    """Test cases for CatalogService."""

    def setup_method(self) -> None:
        self.service = build_service()

    def test_lists_only_active_destinations(self, db: Session, catalog: dict) -> None:
        # Act
        cards = self.service.list_destinations(db, "es")

        # Assert
        assert [card.slug for card in cards] == ["cozumel"]
        assert cards[0].min_price == 750
        assert cards[0].passengers_badge == 5
        assert cards[0].price_label == "$750"

    def test_inactive_destination_detail_is_hidden(self, db: Session, catalog: dict) -> None:
        assert self.service.get_destination(db, "holbox", "es") is None

    def test_destination_detail(self, db: Session, catalog: dict) -> None:
        # Arrange
        db.add(DestinationService(key="photos", label_es="Fotos", label_en="Photos", icon="Nope"))
        db.commit()
        catalog["cozumel"].services_included = ["photos"]
        db.commit()

        # Act
        detail = self.service.get_destination(db, "cozumel", "en")

        # Assert
        assert detail is not None
        assert [tier.aircraft_name for tier in detail.pricing] == ["Cessna 206", "Grand Caravan"]
        assert detail.pricing[0].contact_url == "/en/contact?destination=cozumel&aircraft=Cessna+206&price=750"
        assert [(s.key, s.label, s.icon) for s in detail.services] == [("photos", "Photos", "CheckCircleIcon")]
        assert detail.gallery_images == []
        assert len(detail.benefits) == 4
        assert detail.others == []

    def test_tour_detail_defaults(self, db: Session, catalog: dict) -> None:
        detail = self.service.get_tour(db, "zona-hotelera", "en")

        assert detail is not None
        assert detail.min_price == 399
        assert detail.departure_location == "Cancún Airport"
        assert [benefit.key for benefit in detail.benefits] == ["views", "comfort", "memories", "expert"]

    def test_tour_tier_links_open_the_tour_form(self, db: Session, catalog: dict) -> None:
        # Arrange
        tour = catalog["zona-hotelera"]
        tour.aircraft_pricing = [{"aircraft_name": "Cessna 206", "max_passengers": 5, "price": 399}]
        db.commit()

        # Act
        detail = self.service.get_tour(db, "zona-hotelera", "en")

        # Assert
        assert detail.pricing[0].contact_url == (
            "/en/contact?tour=zona-hotelera&aircraft=Cessna+206&price=399"
        )
        assert detail.contact_url == "/en/contact?tour=zona-hotelera"

    def test_currency_setting(self, db: Session, catalog: dict) -> None:
        assert self.service.currency(db) == "USD"

        db.add(SiteSetting(key="site_currency", value="MXN"))
        db.commit()

        assert self.service.currency(db) == "MXN"
        assert self.service.list_destinations(db, "es")[0].currency == "MXN"
