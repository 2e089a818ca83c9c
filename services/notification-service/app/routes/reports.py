"""
Report Notification Routes
Emails the administrator when a listing is reported
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
import logging

from app.models.report import ReportNotificationRequest, ReportNotificationResponse, ErrorResponse
from app.utils.config import get_resend_config
from app.utils.resend_client import get_resend_client, EmailMessage
from app.services.template_service import get_template_service

router = APIRouter()
logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error(status_code: int, error: str, details: str = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.api_route("/", methods=ALLOWED_METHODS)
async def send_report_notification(request: Request):
    """
    Send a report notification

    Validates the report payload, renders the notification email and
    delivers it to the administrator. Only POST is accepted.
    """
    try:
        if request.method != "POST":
            return _error(405, "Method not allowed")

        payload = await request.json()

        if (
            not isinstance(payload, dict)
            or not payload.get("id")
            or not payload.get("listing")
            or not payload.get("reporter")
        ):
            return _error(400, "Missing required data")

        resend_config = get_resend_config()
        if not resend_config.resend_api_key:
            logger.error("RESEND_API_KEY not configured")
            return _error(500, "Email service not configured")

        try:
            report = ReportNotificationRequest.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Invalid report payload: {e}")
            return _error(400, "Invalid report data")

        rendered = get_template_service().render_report_notification(report)

        email_message = EmailMessage(
            to_emails=[resend_config.admin_email],
            subject=rendered["subject"],
            html_content=rendered["html_content"],
            from_email=resend_config.default_from_email
        )

        result = await get_resend_client().send_email(email_message)

        response = ReportNotificationResponse(
            message="Report notification sent successfully",
            email_id=result.get("id")
        )
        return JSONResponse(status_code=200, content=response.model_dump(by_alias=True))

    except Exception as e:
        logger.error(f"Error sending report notification: {e}")
        return _error(500, "Failed to send notification", str(e))
