"""Localized, display-ready shapes returned by the public catalog endpoints."""

from typing import List, Optional

from pydantic import BaseModel


class PricingTierView(BaseModel):
    aircraft_name: str
    max_passengers: int
    price_usd: float
    price_label: str
    notes: str = ""
    contact_url: str


class BenefitView(BaseModel):
    key: str
    title: str
    description: str


class ServiceView(BaseModel):
    key: str
    label: str
    icon: str


class CatalogCard(BaseModel):
    """One item of a catalog list page."""

    slug: str
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    flight_time: Optional[str] = None
    duration: Optional[str] = None
    min_price: Optional[float] = None
    price_label: str = "-"
    passengers_badge: int
    currency: str = "USD"


class CatalogDetail(CatalogCard):
    """A catalog detail page."""

    long_description: Optional[str] = None
    gallery_images: List[str] = []
    pricing: List[PricingTierView] = []
    benefits: List[BenefitView] = []
    services: List[ServiceView] = []
    highlights: List[str] = []
    departure_location: Optional[str] = None
    contact_url: str
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    others: List[CatalogCard] = []
