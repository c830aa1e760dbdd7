"""
Display rules shared by catalog list and detail pages.

Every helper is a pure function of one loaded catalog item (an ORM row, a
response schema or a plain dict), so list and detail views compute the same
price, badge and gallery.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union
from urllib.parse import urlencode

from vuelatour.repositories.site.schemas.catalog_schema import AircraftPricing
from vuelatour.services.catalog.defaults import (
    DEFAULT_BENEFITS,
    DEFAULT_FEATURES,
    DEFAULT_MAX_PASSENGERS,
)

SUPPORTED_CURRENCIES = ("USD", "MXN")
DEFAULT_CURRENCY = "USD"
DEFAULT_LOCALE = "es"

Number = Union[int, float, Decimal]


def _field(item: Any, name: str, default: Any = None) -> Any:
    if isinstance(item, dict):
        return item.get(name, default)
    return getattr(item, name, default)


def pricing_tiers(item: Any) -> List[AircraftPricing]:
    """The item's pricing tiers, accepting either `price_usd` or `price`."""
    tiers = _field(item, "aircraft_pricing") or []
    return [
        tier if isinstance(tier, AircraftPricing) else AircraftPricing.model_validate(tier)
        for tier in tiers
    ]


def cheapest_tier(item: Any) -> Optional[AircraftPricing]:
    """Lowest-priced tier; the first one listed wins a tie."""
    tiers = pricing_tiers(item)
    if not tiers:
        return None
    return min(tiers, key=lambda tier: tier.price_usd)


def min_display_price(item: Any) -> Optional[float]:
    """Minimum tier price, or the flat `price_from` when there are no tiers."""
    tier = cheapest_tier(item)
    if tier is not None:
        return tier.price_usd
    price_from = _field(item, "price_from")
    return float(price_from) if price_from is not None else None


def min_passengers_badge(item: Any) -> int:
    """Capacity of the cheapest tier, which is what "from $X" refers to."""
    tier = cheapest_tier(item)
    if tier is not None:
        return tier.max_passengers
    return _field(item, "max_passengers") or DEFAULT_MAX_PASSENGERS


def gallery_to_show(item: Any) -> List[str]:
    """Curated gallery images; empty when an admin never set any."""
    return [url for url in (_field(item, "gallery_images") or []) if url]


def localized(item: Any, field: str, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    """`<field>_<locale>`, falling back to the Spanish copy when empty."""
    value = _field(item, f"{field}_{locale}")
    if value:
        return value  # type: ignore[no-any-return]
    return _field(item, f"{field}_{DEFAULT_LOCALE}")


def long_description(item: Any, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    """Long markdown description, or the short one when none was written."""
    return localized(item, "long_description", locale) or localized(item, "description", locale)


def benefits_for(item: Any) -> List[Dict[str, Any]]:
    return list(_field(item, "benefits") or DEFAULT_BENEFITS)


def features_for(item: Any) -> List[Dict[str, Any]]:
    return list(_field(item, "features") or DEFAULT_FEATURES)


def services_for(item: Any, services: Iterable[Any]) -> List[Any]:
    """Active services whose key the item lists, in the services' own order."""
    selected = set(_field(item, "services_included") or [])
    return [service for service in services if _field(service, "key") in selected]


def format_price(value: Optional[Number], currency: str = DEFAULT_CURRENCY) -> str:
    """`$1,500` style price without decimals; `-` when there is no price."""
    if value is None or value == 0:
        return "-"
    if currency not in SUPPORTED_CURRENCIES:
        currency = DEFAULT_CURRENCY
    amount = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${amount:,}"


def tier_contact_link(
    locale: str, slug: str, tier: AircraftPricing, kind: str = "destination"
) -> str:
    """Deep link into the contact form with the tier pre-selected.

    `kind` is `destination` or `tour` and names the query parameter that
    carries `slug`, so tour tiers open the tour branch of the form.
    """
    price = Decimal(str(tier.price_usd)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    query = urlencode(
        {kind: slug, "aircraft": tier.aircraft_name, "price": str(price)}
    )
    return f"/{locale}/contact?{query}"


def contact_link(locale: str, slug: str, kind: str = "destination") -> str:
    return f"/{locale}/contact?{urlencode({kind: slug})}"


def other_items(items: Sequence[Any], slug: str, limit: int = 3) -> List[Any]:
    """Up to `limit` items other than the one being shown."""
    return [item for item in items if _field(item, "slug") != slug][:limit]
