"""HTTP client for the Resend transactional email API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from vuelatour.logger_config import get_logger


class ResendClient:
    """Thin wrapper around the Resend `POST /emails` endpoint."""

    def __init__(self, api_key: Optional[str], api_url: str, timeout: int = 30) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.logger = get_logger(__name__)

    def send_email(
        self,
        sender: str,
        to: List[str],
        subject: str,
        html: str,
        reply_to: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Send one email. Returns the provider JSON or an `{"error": ...}` dict."""
        if not self.api_key:
            self.logger.error("RESEND_API_KEY is not configured")
            return {"error": "Missing Resend API key"}

        payload: Dict[str, Any] = {"from": sender, "to": to, "subject": subject, "html": html}
        if reply_to:
            payload["reply_to"] = reply_to
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            response = requests.post(
                self.api_url, headers=headers, json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()  # type: ignore[no-any-return]
        except requests.exceptions.HTTPError as http_err:
            self.logger.error("Resend returned an HTTP error: %s", http_err)
            status = getattr(http_err.response, "status_code", None)
            return {"error": f"HTTP error: {http_err}", "status": status}
        except requests.exceptions.ConnectionError as conn_err:
            self.logger.error("Could not connect to Resend: %s", conn_err)
            return {"error": f"Connection error: {conn_err}"}
        except requests.exceptions.Timeout as timeout_err:
            self.logger.error("Timeout while sending email through Resend: %s", timeout_err)
            return {"error": f"Timeout error: {timeout_err}"}
        except requests.exceptions.RequestException as req_err:
            self.logger.error("Unexpected error while calling Resend: %s", req_err)
            return {"error": f"Request error: {req_err}"}
