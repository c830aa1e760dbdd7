"""Seed helper for local development."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vuelatour.repositories.site.database import SessionLocal
from vuelatour.repositories.site.models import (
    AirTour,
    ContactInfo,
    Destination,
    DestinationService,
    SiteSetting,
    TourService,
)
from vuelatour.services.catalog.defaults import (
    DEFAULT_AIRCRAFT_PRICING,
    DEFAULT_BENEFITS,
    DEFAULT_FEATURES,
    DEFAULT_SERVICES_INCLUDED,
)

logger = logging.getLogger(__name__)

DEMO_DESTINATIONS = [
    {
        "slug": "cozumel",
        "name_es": "Cozumel",
        "name_en": "Cozumel",
        "description_es": "La isla más grande del Caribe mexicano, a minutos de Cancún.",
        "description_en": "The largest island of the Mexican Caribbean, minutes from Cancún.",
        "flight_time": "35 min",
        "price_from": 750,
        "max_passengers": 5,
        "display_order": 0,
        "aircraft_pricing": [
            {"aircraft_name": "Cessna 206", "max_passengers": 5, "price_usd": 750,
             "notes_es": DEFAULT_AIRCRAFT_PRICING[0]["notes_es"],
             "notes_en": DEFAULT_AIRCRAFT_PRICING[0]["notes_en"]},
            {"aircraft_name": "Cessna Grand Caravan", "max_passengers": 9, "price_usd": 2500,
             "notes_es": DEFAULT_AIRCRAFT_PRICING[0]["notes_es"],
             "notes_en": DEFAULT_AIRCRAFT_PRICING[0]["notes_en"]},
        ],
    },
    {
        "slug": "holbox",
        "name_es": "Holbox",
        "name_en": "Holbox",
        "description_es": "Isla sin autos, ideal para ver tiburón ballena.",
        "description_en": "Car-free island, ideal for whale shark sightings.",
        "flight_time": "25 min",
        "price_from": 850,
        "max_passengers": 5,
        "display_order": 1,
        "aircraft_pricing": DEFAULT_AIRCRAFT_PRICING,
    },
    {
        "slug": "chichen-itza",
        "name_es": "Chichén Itzá",
        "name_en": "Chichen Itza",
        "description_es": "Visita una de las maravillas del mundo moderno en un día.",
        "description_en": "Visit one of the new wonders of the world in a day.",
        "flight_time": "50 min",
        "price_from": 1400,
        "max_passengers": 5,
        "display_order": 2,
    },
]

DEMO_TOURS = [
    {
        "slug": "zona-hotelera",
        "name_es": "Zona Hotelera de Cancún",
        "name_en": "Cancún Hotel Zone",
        "description_es": "Sobrevuela la laguna Nichupté y las playas de la zona hotelera.",
        "description_en": "Fly over Nichupté lagoon and the Hotel Zone beaches.",
        "duration": "30 min",
        "price_from": 399,
        "max_passengers": 5,
        "display_order": 0,
        "highlights_es": ["Laguna Nichupté", "Playa Delfines", "Isla Mujeres"],
        "highlights_en": ["Nichupté Lagoon", "Delfines Beach", "Isla Mujeres"],
        "departure_location_es": "Aeropuerto de Cancún",
        "departure_location_en": "Cancún Airport",
    },
    {
        "slug": "tulum-costa",
        "name_es": "Costa de Tulum",
        "name_en": "Tulum Coastline",
        "description_es": "Ruinas mayas frente al mar vistas desde el aire.",
        "description_en": "Seaside Mayan ruins seen from the air.",
        "duration": "60 min",
        "price_from": 799,
        "max_passengers": 5,
        "display_order": 1,
    },
]

DEMO_SERVICES = [
    ("climate", "Aire acondicionado", "Air conditioning", "SunIcon"),
    ("luggage", "Equipaje incluido", "Luggage included", "CheckCircleIcon"),
    ("water", "Agua embotellada", "Bottled water", "SparklesIcon"),
    ("photos", "Fotos del vuelo", "Flight photos", "CameraIcon"),
    ("sanitizer", "Cabina sanitizada", "Sanitized cabin", "ShieldCheckIcon"),
    ("safety", "Seguro de pasajero", "Passenger insurance", "ShieldCheckIcon"),
]


def _seed_catalog(db: Session) -> None:
    for data in DEMO_DESTINATIONS:
        db.add(
            Destination(
                services_included=DEFAULT_SERVICES_INCLUDED,
                benefits=DEFAULT_BENEFITS,
                **data,
            )
        )
    for data in DEMO_TOURS:
        db.add(
            AirTour(
                services_included=DEFAULT_SERVICES_INCLUDED,
                features=DEFAULT_FEATURES,
                aircraft_pricing=DEFAULT_AIRCRAFT_PRICING,
                **data,
            )
        )
    for order, (key, label_es, label_en, icon) in enumerate(DEMO_SERVICES):
        service = dict(key=key, label_es=label_es, label_en=label_en, icon=icon, display_order=order)
        db.add(DestinationService(**service))
        db.add(TourService(**service))


def seed_demo_data() -> None:
    """Populate the catalog, contact info and settings when the catalog is empty."""
    db: Session = SessionLocal()
    try:
        existing = db.query(Destination).count()
        if existing:
            logger.info("Catalog already present (%d destinations). Skipping.", existing)
            return

        logger.info("Creating demo destinations, tours and services.")
        _seed_catalog(db)
        db.add(
            ContactInfo(
                address_es="Aeropuerto Internacional de Cancún, Quintana Roo, México",
                address_en="Cancún International Airport, Quintana Roo, Mexico",
                email="info@vuelatour.com",
                phones=[{"display": "+52 998 000 0000", "link": "+529980000000"}],
                hours_es="Lunes a domingo, 7:00 a 19:00",
                hours_en="Monday to Sunday, 7:00 am to 7:00 pm",
                whatsapp_number="529980000000",
                whatsapp_message_es="Hola, me interesa cotizar un vuelo",
                whatsapp_message_en="Hi, I would like a flight quote",
            )
        )
        db.add(
            SiteSetting(key="site_currency", value="USD", description="Display currency (USD or MXN)")
        )
        db.commit()
        logger.info("Demo data inserted with success.")
    except SQLAlchemyError as exc:
        logger.error("Failed to seed demo data: %s", exc)
        db.rollback()
    finally:
        db.close()


if __name__ == "__main__":  # pragma: no cover
    seed_demo_data()
