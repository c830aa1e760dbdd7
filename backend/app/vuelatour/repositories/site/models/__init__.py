"""SQLAlchemy models registered on the declarative base."""

from .air_tours_model import AirTour
from .contact_info_model import ContactInfo
from .contact_requests_model import ContactRequest
from .destinations_model import Destination
from .services_model import DestinationService, TourService
from .site_content_model import SiteContent
from .site_images_model import SiteImage
from .site_settings_model import SiteSetting

__all__ = [
    "AirTour",
    "ContactInfo",
    "ContactRequest",
    "Destination",
    "DestinationService",
    "SiteContent",
    "SiteImage",
    "SiteSetting",
    "TourService",
]
