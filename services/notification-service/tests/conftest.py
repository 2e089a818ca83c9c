"""
Pytest fixtures for notification service tests
"""

import json
import pytest
import httpx
from unittest.mock import MagicMock
from typing import Dict, Any, List


@pytest.fixture
def sample_report_data() -> Dict[str, Any]:
    """Report payload as posted by the web app"""
    return {
        "id": "report-123",
        "reporter_id": "user-456",
        "listing_id": "listing-789",
        "reason": "Artículo falso",
        "description": "El vendedor no responde",
        "created_at": "2025-01-03T14:05:09Z",
        "listing": {
            "title": "iPhone 14 Pro",
            "price": 499.99,
            "user_id": "user-111",
        },
        "reporter": {
            "display_name": "Ana Torres",
        },
    }


@pytest.fixture
def mock_resend_config():
    """Mock Resend configuration"""
    config = MagicMock()
    config.resend_api_key = "re_test_key"
    config.resend_api_url = "https://api.resend.com/emails"
    config.resend_timeout = 10.0
    config.default_from_email = "MercaTech <noreply@mercatech-pr.com>"
    config.admin_email = "admin@mercatech-pr.com"
    config.is_configured.return_value = True
    return config


@pytest.fixture
def mock_app_config():
    """Mock application configuration"""
    config = MagicMock()
    config.platform_name = "MercaTech"
    config.site_url = "https://mercatech-pr.netlify.app"
    config.service_name = "notification-service"
    config.service_version = "1.0.0"
    return config


class RecordingTransport:
    """httpx mock transport that records outbound requests"""

    def __init__(self, status_code: int = 200, body: Any = None):
        self.status_code = status_code
        self.body = body if body is not None else {"id": "email-abc"}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def resend_transport():
    """Transport answering like a successful send"""
    return RecordingTransport()


@pytest.fixture
def make_resend_transport():
    """Factory for transports answering with a given status and body"""
    return RecordingTransport
