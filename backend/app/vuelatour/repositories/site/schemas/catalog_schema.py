"""
Pydantic schemas for catalog items (destinations and air tours).

Pricing tiers, benefits and features are stored as JSON arrays on the
catalog rows; the models below validate their shape on the way in and out.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AliasChoices, BaseModel, Field, StringConstraints

Slug = Annotated[
    str, StringConstraints(min_length=1, max_length=120, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
]


class AircraftPricing(BaseModel):
    """One aircraft-specific price/capacity/notes entry."""

    aircraft_name: str
    max_passengers: int = Field(..., ge=1)
    price_usd: float = Field(..., ge=0, validation_alias=AliasChoices("price_usd", "price"))
    notes_es: str = ""
    notes_en: str = ""


class Benefit(BaseModel):
    """Localized selling point shown on a detail page."""

    key: str
    title_es: str
    title_en: str
    desc_es: str
    desc_en: str


class CatalogItemBase(BaseModel):
    """Fields shared by destinations and air tours."""

    slug: Slug
    name_es: Annotated[str, StringConstraints(min_length=1, max_length=160)]
    name_en: Annotated[str, StringConstraints(min_length=1, max_length=160)]
    description_es: Optional[str] = None
    description_en: Optional[str] = None
    long_description_es: Optional[str] = None
    long_description_en: Optional[str] = None
    price_from: Optional[Decimal] = None
    max_passengers: Optional[int] = None
    image_url: Optional[str] = None
    is_active: bool = True
    display_order: int = 0
    services_included: Optional[List[str]] = None
    aircraft_pricing: Optional[List[AircraftPricing]] = None
    gallery_images: Optional[List[str]] = None
    meta_title_es: Optional[str] = None
    meta_title_en: Optional[str] = None
    meta_description_es: Optional[str] = None
    meta_description_en: Optional[str] = None


class DestinationCreate(CatalogItemBase):
    """Payload required to create a destination."""

    flight_time: Optional[str] = None
    benefits: Optional[List[Benefit]] = None


class DestinationUpdate(BaseModel):
    """Fields allowed to update on a destination."""

    slug: Optional[Slug] = None
    name_es: Optional[str] = None
    name_en: Optional[str] = None
    description_es: Optional[str] = None
    description_en: Optional[str] = None
    long_description_es: Optional[str] = None
    long_description_en: Optional[str] = None
    flight_time: Optional[str] = None
    price_from: Optional[Decimal] = None
    max_passengers: Optional[int] = None
    image_url: Optional[str] = None
    services_included: Optional[List[str]] = None
    benefits: Optional[List[Benefit]] = None
    aircraft_pricing: Optional[List[AircraftPricing]] = None
    gallery_images: Optional[List[str]] = None
    meta_title_es: Optional[str] = None
    meta_title_en: Optional[str] = None
    meta_description_es: Optional[str] = None
    meta_description_en: Optional[str] = None


class DestinationResponse(DestinationCreate):
    """A stored destination."""

    id: int
    slug: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AirTourCreate(CatalogItemBase):
    """Payload required to create an air tour."""

    duration: Optional[str] = None
    highlights_es: Optional[List[str]] = None
    highlights_en: Optional[List[str]] = None
    departure_location_es: Optional[str] = None
    departure_location_en: Optional[str] = None
    features: Optional[List[Benefit]] = None


class AirTourUpdate(BaseModel):
    """Fields allowed to update on an air tour."""

    slug: Optional[Slug] = None
    name_es: Optional[str] = None
    name_en: Optional[str] = None
    description_es: Optional[str] = None
    description_en: Optional[str] = None
    long_description_es: Optional[str] = None
    long_description_en: Optional[str] = None
    duration: Optional[str] = None
    price_from: Optional[Decimal] = None
    max_passengers: Optional[int] = None
    image_url: Optional[str] = None
    highlights_es: Optional[List[str]] = None
    highlights_en: Optional[List[str]] = None
    departure_location_es: Optional[str] = None
    departure_location_en: Optional[str] = None
    services_included: Optional[List[str]] = None
    features: Optional[List[Benefit]] = None
    aircraft_pricing: Optional[List[AircraftPricing]] = None
    gallery_images: Optional[List[str]] = None
    meta_title_es: Optional[str] = None
    meta_title_en: Optional[str] = None
    meta_description_es: Optional[str] = None
    meta_description_en: Optional[str] = None


class AirTourResponse(AirTourCreate):
    """A stored air tour."""

    id: int
    slug: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
