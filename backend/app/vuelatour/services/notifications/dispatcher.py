"""Fire-and-forget delivery of new-lead payloads to the notification endpoint."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from functools import lru_cache
from typing import Any, Dict, Optional

import requests

from configs import get_settings
from vuelatour.logger_config import get_logger

logger = get_logger(__name__)


class NotificationDispatcher:
    """
    Post lead payloads to `/api/send-notification` from a worker thread.

    `dispatch` returns the future for observability only. Callers never wait on
    it: the outcome is logged by a done-callback and nothing is retried.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: int = 15,
        executor: Optional[ThreadPoolExecutor] = None,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.executor = executor or ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="lead-notify"
        )

    def dispatch(self, payload: Dict[str, Any]) -> Future:
        """Schedule the HTTP call and return immediately."""
        future = self.executor.submit(self._post, payload)
        future.add_done_callback(self._log_outcome)
        return future

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = requests.post(self.endpoint_url, json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()  # type: ignore[no-any-return]

    def _log_outcome(self, future: Future) -> None:
        error = future.exception()
        if error is not None:
            logger.warning("Lead notification could not be delivered: %s", error)
            return
        result = future.result()
        logger.info("Lead notification delivered (id=%s)", result.get("id"))


@lru_cache
def get_notification_dispatcher() -> NotificationDispatcher:
    """Shared dispatcher built from the settings."""
    settings = get_settings()
    executor = ThreadPoolExecutor(
        max_workers=settings.NOTIFICATION_WORKERS, thread_name_prefix="lead-notify"
    )
    return NotificationDispatcher(
        endpoint_url=settings.NOTIFICATION_ENDPOINT_URL,
        timeout=settings.NOTIFICATION_TIMEOUT_SECONDS,
        executor=executor,
    )
