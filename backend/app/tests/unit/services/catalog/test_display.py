"""Test the catalog display rules."""

from types import SimpleNamespace

import pytest

from vuelatour.repositories.site.schemas.catalog_schema import AircraftPricing
from vuelatour.services.catalog.defaults import DEFAULT_BENEFITS, DEFAULT_FEATURES
from vuelatour.services.catalog.display import (
    benefits_for,
    features_for,
    format_price,
    gallery_to_show,
    localized,
    long_description,
    min_display_price,
    min_passengers_badge,
    other_items,
    services_for,
    tier_contact_link,
)
from vuelatour.services.catalog.icons import ServiceIcon

TWO_TIERS = {
    "aircraft_pricing": [
        {"aircraft_name": "Cessna 206", "price": 750, "max_passengers": 5},
        {"aircraft_name": "Grand Caravan", "price": 2500, "max_passengers": 9},
    ],
    "price_from": 1200,
    "max_passengers": 9,
}


class TestPricing:
    """Test cases for the price and capacity badge."""

    def test_cheapest_tier_drives_price_and_badge(self) -> None:
        assert min_display_price(TWO_TIERS) == 750
        assert min_passengers_badge(TWO_TIERS) == 5

    def test_badge_follows_cheapest_even_if_listed_last(self) -> None:
        item = {
            "aircraft_pricing": [
                {"aircraft_name": "Grand Caravan", "price_usd": 2500, "max_passengers": 9},
                {"aircraft_name": "Cessna 206", "price_usd": 750, "max_passengers": 5},
            ]
        }

        assert min_passengers_badge(item) == 5

    def test_flat_price_without_tiers(self) -> None:
        item = SimpleNamespace(aircraft_pricing=[], price_from=1200, max_passengers=7)

        assert min_display_price(item) == 1200
        assert min_passengers_badge(item) == 7

    def test_no_price_at_all(self) -> None:
        item = {"aircraft_pricing": None, "price_from": None, "max_passengers": None}

        assert min_display_price(item) is None
        assert min_passengers_badge(item) == 5


class TestGallery:
    def test_only_curated_gallery_is_shown(self) -> None:
        assert gallery_to_show({"gallery_images": ["a.jpg", "", "b.jpg"], "image_url": "hero.jpg"}) == [
            "a.jpg",
            "b.jpg",
        ]

    @pytest.mark.parametrize("gallery", [None, []])
    def test_no_fallback_to_hero_image(self, gallery: object) -> None:
        assert gallery_to_show({"gallery_images": gallery, "image_url": "hero.jpg"}) == []


class TestLocalizedCopy:
    def test_english_with_spanish_fallback(self) -> None:
        item = {"name_es": "Zona Hotelera", "name_en": "", "description_es": "Corto"}

        assert localized(item, "name", "en") == "Zona Hotelera"
        assert localized({"name_es": "a", "name_en": "b"}, "name", "en") == "b"

    def test_long_description_falls_back_to_short(self) -> None:
        item = {"description_es": "Corto", "long_description_es": None}

        assert long_description(item, "es") == "Corto"

    def test_benefits_and_features_defaults(self) -> None:
        assert benefits_for({"benefits": []}) == DEFAULT_BENEFITS
        assert features_for({}) == DEFAULT_FEATURES
        custom = [{"key": "x", "title_es": "X", "title_en": "X", "desc_es": "", "desc_en": ""}]
        assert benefits_for({"benefits": custom}) == custom


def test_services_filtered_by_selection() -> None:
    services = [SimpleNamespace(key=key) for key in ("climate", "water", "photos")]

    selected = services_for({"services_included": ["photos", "climate"]}, services)

    assert [service.key for service in selected] == ["climate", "photos"]
    assert services_for({"services_included": None}, services) == []


@pytest.mark.parametrize(
    "value, currency, expected",
    [
        (750, "USD", "$750"),
        (1500.5, "MXN", "$1,501"),
        (12345, "EUR", "$12,345"),
        (None, "USD", "-"),
    ],
)
def test_format_price(value: object, currency: str, expected: str) -> None:
    assert format_price(value, currency) == expected


def test_tier_contact_link() -> None:
    tier = AircraftPricing(aircraft_name="Cessna 206", max_passengers=5, price=750)

    assert (
        tier_contact_link("en", "cozumel", tier)
        == "/en/contact?destination=cozumel&aircraft=Cessna+206&price=750"
    )
    assert (
        tier_contact_link("es", "zona-hotelera", tier, "tour")
        == "/es/contact?tour=zona-hotelera&aircraft=Cessna+206&price=750"
    )


def test_other_items_excludes_current() -> None:
    items = [{"slug": slug} for slug in ("a", "b", "c", "d", "e")]

    assert [item["slug"] for item in other_items(items, "b")] == ["a", "c", "d"]


def test_service_icon_fallback() -> None:
    assert ServiceIcon.resolve("CameraIcon") is ServiceIcon.CAMERA
    assert ServiceIcon.resolve("RocketIcon") is ServiceIcon.CHECK_CIRCLE
    assert ServiceIcon.resolve(None) is ServiceIcon.CHECK_CIRCLE
