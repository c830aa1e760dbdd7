"""Read path of the public catalog: localized list and detail views."""

from typing import Any, List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from vuelatour.repositories.site.crud.catalog_crud import CRUDAirTour, CRUDDestination
from vuelatour.repositories.site.crud.site_crud import (
    CRUDContactInfo,
    CRUDDestinationService,
    CRUDSiteSetting,
    CRUDTourService,
)
from vuelatour.repositories.site.models.contact_info_model import ContactInfo
from vuelatour.repositories.site.schemas.catalog_view_schema import (
    BenefitView,
    CatalogCard,
    CatalogDetail,
    PricingTierView,
    ServiceView,
)
from vuelatour.services.catalog import display
from vuelatour.services.catalog.defaults import DEFAULT_TOUR_DEPARTURE
from vuelatour.services.catalog.icons import ServiceIcon

CURRENCY_SETTING_KEY = "site_currency"
OTHER_ITEMS_LIMIT = 3


class CatalogService:
    """Build the localized views of destinations and air tours."""

    def __init__(
        self,
        destinations: CRUDDestination,
        tours: CRUDAirTour,
        destination_services: CRUDDestinationService,
        tour_services: CRUDTourService,
        settings: CRUDSiteSetting,
        contact_info: CRUDContactInfo,
    ) -> None:
        self.destinations = destinations
        self.tours = tours
        self.destination_services = destination_services
        self.tour_services = tour_services
        self.settings = settings
        self.contact_info = contact_info

    def currency(self, db: Session) -> str:
        """Display currency from `site_settings`, USD unless set to MXN."""
        setting = self.settings.get_by_key(db, CURRENCY_SETTING_KEY)
        if setting and setting.value in display.SUPPORTED_CURRENCIES:
            return setting.value  # type: ignore[no-any-return]
        return display.DEFAULT_CURRENCY

    def list_destinations(self, db: Session, locale: str) -> List[CatalogCard]:
        currency = self.currency(db)
        return [
            self._card(item, locale, currency) for item in self.destinations.list_active(db)
        ]

    def list_tours(self, db: Session, locale: str) -> List[CatalogCard]:
        currency = self.currency(db)
        return [self._card(item, locale, currency) for item in self.tours.list_active(db)]

    def get_destination(self, db: Session, slug: str, locale: str) -> Optional[CatalogDetail]:
        """
        Detail view of an active destination.

        Args:
            db (Session): The database session.
            slug (str): The destination slug.
            locale (str): `es` or `en`.

        Returns:
            Optional[CatalogDetail]: None when no active destination has `slug`.
        """
        item = self.destinations.get_by_slug(db, slug)
        if item is None:
            return None
        currency = self.currency(db)
        others = self.destinations.list_active(db, exclude_slug=slug, limit=OTHER_ITEMS_LIMIT)
        return self._detail(
            item,
            locale,
            currency,
            services=self.destination_services.list_active(db),
            benefits=display.benefits_for(item),
            others=others,
            kind="destination",
        )

    def get_tour(self, db: Session, slug: str, locale: str) -> Optional[CatalogDetail]:
        """Detail view of an active air tour, or None."""
        item = self.tours.get_by_slug(db, slug)
        if item is None:
            return None
        currency = self.currency(db)
        others = self.tours.list_active(db, exclude_slug=slug, limit=OTHER_ITEMS_LIMIT)
        detail = self._detail(
            item,
            locale,
            currency,
            services=self.tour_services.list_active(db),
            benefits=display.features_for(item),
            others=others,
            kind="tour",
        )
        detail.highlights = list(getattr(item, f"highlights_{locale}", None) or item.highlights_es or [])
        detail.departure_location = display.localized(
            item, "departure_location", locale
        ) or DEFAULT_TOUR_DEPARTURE.get(locale, DEFAULT_TOUR_DEPARTURE["es"])
        return detail

    def get_contact_info(self, db: Session) -> Optional[ContactInfo]:
        return self.contact_info.get_current(db)

    def _card(self, item: Any, locale: str, currency: str) -> CatalogCard:
        price = display.min_display_price(item)
        return CatalogCard(
            slug=item.slug,
            name=display.localized(item, "name", locale) or item.slug,
            description=display.localized(item, "description", locale),
            image_url=item.image_url,
            flight_time=getattr(item, "flight_time", None),
            duration=getattr(item, "duration", None),
            min_price=price,
            price_label=display.format_price(price, currency),
            passengers_badge=display.min_passengers_badge(item),
            currency=currency,
        )

    def _detail(
        self,
        item: Any,
        locale: str,
        currency: str,
        services: List[Any],
        benefits: List[dict],
        others: List[Any],
        kind: str,
    ) -> CatalogDetail:
        card = self._card(item, locale, currency)
        pricing = [
            PricingTierView(
                aircraft_name=tier.aircraft_name,
                max_passengers=tier.max_passengers,
                price_usd=tier.price_usd,
                price_label=display.format_price(tier.price_usd, currency),
                notes=tier.notes_en if locale == "en" and tier.notes_en else tier.notes_es,
                contact_url=display.tier_contact_link(locale, item.slug, tier, kind),
            )
            for tier in display.pricing_tiers(item)
        ]
        return CatalogDetail(
            **card.model_dump(),
            long_description=display.long_description(item, locale),
            gallery_images=display.gallery_to_show(item),
            pricing=pricing,
            benefits=[
                BenefitView(
                    key=benefit["key"],
                    title=display.localized(benefit, "title", locale) or "",
                    description=display.localized(benefit, "desc", locale) or "",
                )
                for benefit in benefits
            ],
            services=[
                ServiceView(
                    key=service.key,
                    label=display.localized(service, "label", locale) or service.key,
                    icon=ServiceIcon.resolve(service.icon).value,
                )
                for service in display.services_for(item, services)
            ],
            contact_url=display.contact_link(locale, item.slug, kind),
            meta_title=display.localized(item, "meta_title", locale),
            meta_description=display.localized(item, "meta_description", locale),
            others=[self._card(other, locale, currency) for other in others],
        )


def get_catalog_service(
    destinations: CRUDDestination = Depends(),
    tours: CRUDAirTour = Depends(),
    destination_services: CRUDDestinationService = Depends(),
    tour_services: CRUDTourService = Depends(),
    settings: CRUDSiteSetting = Depends(),
    contact_info: CRUDContactInfo = Depends(),
) -> CatalogService:
    return CatalogService(
        destinations, tours, destination_services, tour_services, settings, contact_info
    )
