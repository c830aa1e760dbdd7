"""Closed set of icons a service option may reference."""

from enum import Enum
from typing import Optional


class ServiceIcon(str, Enum):
    """Icon names understood by the site. Unknown names resolve to CHECK_CIRCLE."""

    CHECK_CIRCLE = "CheckCircleIcon"
    SHIELD_CHECK = "ShieldCheckIcon"
    SUN = "SunIcon"
    SPARKLES = "SparklesIcon"
    CAMERA = "CameraIcon"
    USER_GROUP = "UserGroupIcon"
    HEART = "HeartIcon"
    STAR = "StarIcon"
    BOLT = "BoltIcon"
    FIRE = "FireIcon"

    @classmethod
    def resolve(cls, name: Optional[str]) -> "ServiceIcon":
        try:
            return cls(name)
        except ValueError:
            return cls.CHECK_CIRCLE
