"""Pydantic schemas for services, images, content, contact info and settings."""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, StringConstraints


class ServiceOptionCreate(BaseModel):
    """Payload required to create a service option."""

    key: Annotated[str, StringConstraints(min_length=1, max_length=60)]
    label_es: Annotated[str, StringConstraints(min_length=1, max_length=120)]
    label_en: Annotated[str, StringConstraints(min_length=1, max_length=120)]
    icon: str = "CheckCircleIcon"
    display_order: int = 0
    is_active: bool = True


class ServiceOptionUpdate(BaseModel):
    """Fields allowed to update on a service option."""

    key: Optional[str] = None
    label_es: Optional[str] = None
    label_en: Optional[str] = None
    icon: Optional[str] = None


class ServiceOptionResponse(ServiceOptionCreate):
    """A stored service option."""

    id: int

    model_config = {"from_attributes": True}


class SiteImageCreate(BaseModel):
    """Payload required to register a site image."""

    key: Annotated[str, StringConstraints(min_length=1, max_length=120)]
    url: str
    alt_es: Optional[str] = None
    alt_en: Optional[str] = None
    category: Optional[str] = None
    is_primary: bool = False
    file_size: Optional[int] = None


class SiteImageUpdate(BaseModel):
    """Fields allowed to update on a site image."""

    key: Optional[str] = None
    url: Optional[str] = None
    alt_es: Optional[str] = None
    alt_en: Optional[str] = None
    category: Optional[str] = None
    file_size: Optional[int] = None


class SiteImageResponse(SiteImageCreate):
    """A stored site image."""

    id: int

    model_config = {"from_attributes": True}


class SiteContentCreate(BaseModel):
    """Payload required to create a localized text block."""

    key: Annotated[str, StringConstraints(min_length=1, max_length=120)]
    value_es: str = ""
    value_en: str = ""
    category: Optional[str] = None


class SiteContentUpdate(BaseModel):
    """Fields allowed to update on a text block."""

    key: Optional[str] = None
    value_es: Optional[str] = None
    value_en: Optional[str] = None
    category: Optional[str] = None


class SiteContentResponse(SiteContentCreate):
    """A stored text block."""

    id: int

    model_config = {"from_attributes": True}


class PhoneNumber(BaseModel):
    """A phone as displayed and as dialed."""

    display: str
    link: str


class ContactInfoPayload(BaseModel):
    """Editable contact details."""

    address_es: Optional[str] = None
    address_en: Optional[str] = None
    phones: List[PhoneNumber] = []
    email: Optional[str] = None
    hours_es: Optional[str] = None
    hours_en: Optional[str] = None
    whatsapp_number: Optional[str] = None
    whatsapp_message_es: Optional[str] = None
    whatsapp_message_en: Optional[str] = None
    google_maps_embed: Optional[str] = None
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    tiktok_url: Optional[str] = None
    youtube_url: Optional[str] = None


class ContactInfoResponse(ContactInfoPayload):
    """Stored contact details."""

    id: int
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SiteSettingUpdate(BaseModel):
    """New value for a setting."""

    value: str


class SiteSettingResponse(BaseModel):
    """A stored setting."""

    id: int
    key: str
    value: str
    description: Optional[str] = None

    model_config = {"from_attributes": True}
