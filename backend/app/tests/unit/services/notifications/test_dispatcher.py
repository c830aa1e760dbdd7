"""Test the fire-and-forget notification dispatcher."""

from concurrent.futures import Future
from unittest.mock import MagicMock, patch

from uvicorn.logging import DefaultFormatter

from vuelatour.services.notifications import dispatcher as dispatcher_module
from vuelatour.services.notifications.dispatcher import NotificationDispatcher


class TestNotificationDispatcher:
    """Test cases for NotificationDispatcher."""

    def setup_method(self) -> None:
        self.executor = MagicMock()
        self.dispatcher = NotificationDispatcher(
            "http://localhost:8000/api/send-notification", timeout=5, executor=self.executor
        )

    def test_dispatch_submits_and_returns_future(self) -> None:
        # Arrange
        future: Future = Future()
        self.executor.submit.return_value = future

        # Act
        result = self.dispatcher.dispatch({"name": "Ana"})

        # Assert
        assert result is future
        self.executor.submit.assert_called_once_with(self.dispatcher._post, {"name": "Ana"})

    @patch("vuelatour.services.notifications.dispatcher.requests.post")
    def test_post_sends_json(self, mock_post: MagicMock) -> None:
        mock_post.return_value.json.return_value = {"success": True, "id": "email_1"}

        result = self.dispatcher._post({"name": "Ana"})

        assert result == {"success": True, "id": "email_1"}
        mock_post.assert_called_once_with(
            "http://localhost:8000/api/send-notification", json={"name": "Ana"}, timeout=5
        )

    def test_failure_is_only_logged(self) -> None:
        # Arrange
        future: Future = Future()
        future.set_exception(ConnectionError("refused"))

        # Act
        with patch.object(dispatcher_module.logger, "warning") as mock_warning:
            self.dispatcher._log_outcome(future)

        # Assert
        mock_warning.assert_called_once()

    def test_success_is_logged(self) -> None:
        future: Future = Future()
        future.set_result({"success": True, "id": "email_1"})

        with patch.object(dispatcher_module.logger, "info") as mock_info:
            self.dispatcher._log_outcome(future)

        mock_info.assert_called_once_with("Lead notification delivered (id=%s)", "email_1")

    def test_logs_through_shared_formatter(self) -> None:
        logger = dispatcher_module.logger

        assert logger.name == "vuelatour.services.notifications.dispatcher"
        assert isinstance(logger.handlers[0].formatter, DefaultFormatter)
