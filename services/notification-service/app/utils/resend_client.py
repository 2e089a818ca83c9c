"""
Resend Client
HTTP client for the Resend email API
"""

import httpx
import logging
from typing import List, Optional, Dict, Any

from app.utils.config import get_resend_config

logger = logging.getLogger(__name__)


class ResendError(Exception):
    """Raised when the email API rejects a send"""

    def __init__(self, message: str, status_code: Optional[int] = None, response_text: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class EmailMessage:
    """Email message container"""

    def __init__(
        self,
        to_emails: List[str],
        subject: str,
        html_content: str,
        from_email: Optional[str] = None
    ):
        self.to_emails = to_emails if isinstance(to_emails, list) else [to_emails]
        self.subject = subject
        self.html_content = html_content
        self.from_email = from_email

        # Validation
        if not self.to_emails:
            raise ValueError("At least one recipient email is required")
        if not self.subject:
            raise ValueError("Subject is required")
        if not self.html_content:
            raise ValueError("HTML content is required")

    def to_payload(self, default_from: str) -> Dict[str, Any]:
        """Build the JSON body expected by the API"""
        return {
            "from": self.from_email or default_from,
            "to": self.to_emails,
            "subject": self.subject,
            "html": self.html_content
        }


class ResendClient:
    """Single-shot sender, no retries"""

    def __init__(self, config=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or get_resend_config()
        self.timeout = httpx.Timeout(self.config.resend_timeout)
        self._transport = transport

    async def send_email(self, email_message: EmailMessage) -> Dict[str, Any]:
        """
        Send an email through the API

        Args:
            email_message: Email message to send

        Returns:
            Parsed JSON response, including the provider's email ``id``

        Raises:
            ResendError: If the API key is missing or the API answers non-2xx
        """
        if not self.config.resend_api_key:
            raise ResendError("Email service not configured")

        payload = email_message.to_payload(self.config.default_from_email)
        headers = {
            "Authorization": f"Bearer {self.config.resend_api_key}",
            "Content-Type": "application/json"
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.post(self.config.resend_api_url, json=payload, headers=headers)

            if not response.is_success:
                error_text = response.text
                logger.error(f"Resend API error: {error_text}")
                raise ResendError(
                    f"Email service error: {response.status_code}",
                    status_code=response.status_code,
                    response_text=error_text
                )

            result = response.json()

        logger.info(f"Email sent successfully: {result}")
        return result


def get_resend_client() -> ResendClient:
    """Get a Resend client bound to the current configuration"""
    return ResendClient()
