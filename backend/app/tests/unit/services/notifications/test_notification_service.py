"""Test the notification service and its Resend client."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from vuelatour.models.notification_models import QuoteNotificationPayload
from vuelatour.services.notifications.notification_service import (
    NotificationError,
    NotificationService,
)
from vuelatour.services.notifications.resend_client import ResendClient


class TestNotificationService:
    """Test cases for NotificationService."""

    def setup_method(self) -> None:
        self.client = MagicMock(spec=ResendClient)
        self.service = NotificationService(
            self.client, "Vuelatour <notificaciones@notify.vuelatour.com>", ["info@vuelatour.com"]
        )
        self.payload = QuoteNotificationPayload(
            name="Ana", email="ana@x.com", service_type="tour", tour="zona-hotelera"
        )

    def test_send_returns_provider_id(self) -> None:
        # Arrange
        self.client.send_email.return_value = {"id": "email_123"}

        # Act
        result = self.service.send_quote_notification(self.payload)

        # Assert
        assert result == "email_123"
        kwargs = self.client.send_email.call_args.kwargs
        assert kwargs["to"] == ["info@vuelatour.com"]
        assert kwargs["reply_to"] == "ana@x.com"
        assert kwargs["subject"] == "Nueva Cotización: Tour Zona Hotelera - Ana"
        assert "<!DOCTYPE html>" in kwargs["html"]

    def test_provider_error_raises(self) -> None:
        self.client.send_email.return_value = {"error": "HTTP error: 422"}

        with pytest.raises(NotificationError):
            self.service.send_quote_notification(self.payload)


class TestResendClient:
    """Test cases for ResendClient."""

    def setup_method(self) -> None:
        self.client = ResendClient("re_test", "https://api.resend.com/emails")

    @patch("vuelatour.services.notifications.resend_client.requests.post")
    def test_send_email_posts_payload(self, mock_post: MagicMock) -> None:
        # Arrange
        mock_post.return_value.json.return_value = {"id": "email_123"}

        # Act
        result = self.client.send_email("from@x.com", ["to@x.com"], "Hi", "<p>Hi</p>", "ana@x.com")

        # Assert
        assert result == {"id": "email_123"}
        _, kwargs = mock_post.call_args
        assert kwargs["headers"] == {"Authorization": "Bearer re_test"}
        assert kwargs["json"]["reply_to"] == "ana@x.com"
        assert kwargs["json"]["to"] == ["to@x.com"]

    @patch("vuelatour.services.notifications.resend_client.requests.post")
    def test_connection_error_is_returned(self, mock_post: MagicMock) -> None:
        mock_post.side_effect = requests.exceptions.ConnectionError("refused")

        result = self.client.send_email("from@x.com", ["to@x.com"], "Hi", "<p>Hi</p>")

        assert "Connection error" in result["error"]

    @patch("vuelatour.services.notifications.resend_client.requests.post")
    def test_http_error_is_returned(self, mock_post: MagicMock) -> None:
        response = MagicMock(status_code=422)
        mock_post.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError(
            "422", response=response
        )

        result = self.client.send_email("from@x.com", ["to@x.com"], "Hi", "<p>Hi</p>")

        assert result["status"] == 422

    def test_missing_api_key(self) -> None:
        client = ResendClient(None, "https://api.resend.com/emails")

        assert client.send_email("from@x.com", ["to@x.com"], "Hi", "<p>Hi</p>") == {
            "error": "Missing Resend API key"
        }
