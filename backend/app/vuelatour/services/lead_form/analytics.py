"""Analytics events emitted by the lead form."""

from __future__ import annotations

from typing import Any, Dict, Optional

from vuelatour.logger_config import get_logger
from vuelatour.services.lead_form.fields import FormType

logger = get_logger(__name__)


class AnalyticsTracker:
    """Record conversion events. The default sink is the application log."""

    EVENT_NAME = "generate_lead"

    def track_lead(self, form_type: FormType, params: Optional[Dict[str, Any]] = None) -> None:
        logger.info(
            "analytics event=%s form_type=%s params=%s",
            self.EVENT_NAME,
            form_type.value,
            params or {},
        )


def get_analytics_tracker() -> AnalyticsTracker:
    return AnalyticsTracker()
