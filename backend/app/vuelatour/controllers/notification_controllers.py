"""Endpoint that emails the team about a new lead."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from vuelatour.logger_config import get_logger
from vuelatour.models.notification_models import (
    NotificationResponse,
    QuoteNotificationPayload,
)
from vuelatour.services.notifications.notification_service import (
    NotificationError,
    NotificationService,
    get_notification_service,
)

logger = get_logger(__name__)

notification_router = APIRouter(prefix="/api", tags=["Notifications"])


@notification_router.post(
    "/send-notification",
    responses={
        200: {"model": NotificationResponse, "description": "Email accepted"},
        500: {"description": "Email could not be sent"},
    },
)
def send_notification(
    payload: QuoteNotificationPayload,
    notification_service: NotificationService = Depends(get_notification_service),
) -> JSONResponse:
    """
    Render and send the new-lead email.

    Args:
        payload (QuoteNotificationPayload): Lead values plus `preSelectedPrice`.

    Returns:
        `{success: true, id}`, or `{error}` with status 500.
    """
    try:
        message_id = notification_service.send_quote_notification(payload)
    except NotificationError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error al enviar notificación"},
        )
    except Exception as e:
        logger.exception("Unexpected error while sending lead notification: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error interno del servidor"},
        )
    return JSONResponse(
        content=NotificationResponse(success=True, id=message_id).model_dump()
    )
