"""Compose and send the new-lead notification email."""

from __future__ import annotations

from typing import List, Optional

from configs import get_settings
from vuelatour.logger_config import get_logger
from vuelatour.services.notifications.email_template import (
    build_subject,
    render_quote_email,
)
from vuelatour.services.notifications.resend_client import ResendClient
from vuelatour.models.notification_models import QuoteNotificationPayload

logger = get_logger(__name__)


class NotificationError(Exception):
    """The email provider rejected or never received the message."""


class NotificationService:
    """Send the internal email announcing a new lead."""

    def __init__(self, client: ResendClient, sender: str, recipients: List[str]) -> None:
        self.client = client
        self.sender = sender
        self.recipients = recipients

    def send_quote_notification(self, payload: QuoteNotificationPayload) -> Optional[str]:
        """
        Render and send the email for `payload`.

        Args:
            payload (QuoteNotificationPayload): Raw lead values plus the quoted price.

        Returns:
            Optional[str]: The provider message id.

        Raises:
            NotificationError: If the provider call failed.
        """
        result = self.client.send_email(
            sender=self.sender,
            to=self.recipients,
            subject=build_subject(payload),
            html=render_quote_email(payload),
            reply_to=payload.email,
        )
        if "error" in result:
            logger.error("Lead notification failed for %s: %s", payload.email, result["error"])
            raise NotificationError(result["error"])

        logger.info("Lead notification sent (id=%s)", result.get("id"))
        return result.get("id")


def get_notification_service() -> NotificationService:
    settings = get_settings()
    client = ResendClient(settings.RESEND_API_KEY, settings.RESEND_API_URL)
    return NotificationService(client, settings.NOTIFICATION_FROM, settings.NOTIFICATION_TO)
