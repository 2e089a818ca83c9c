"""
Unit tests for API routes
"""

import pytest
from unittest.mock import AsyncMock, patch, MagicMock
from fastapi.testclient import TestClient


class TestReportNotificationRoute:
    """Test the report notification endpoint"""

    @pytest.fixture
    def client(self):
        from app.main import app
        return TestClient(app)

    @pytest.fixture
    def send_with(self, client, mock_resend_config):
        """Post a payload with the email API routed to a mock transport"""
        from app.utils.resend_client import ResendClient

        def _send(payload, transport, config=mock_resend_config):
            resend_client = ResendClient(config=config, transport=transport.transport)
            with patch("app.routes.reports.get_resend_config", return_value=config):
                with patch("app.routes.reports.get_resend_client", return_value=resend_client):
                    return client.post("/", json=payload)

        return _send

    def test_send_report_success(self, send_with, sample_report_data, resend_transport):
        """Valid payload sends one email and returns its id"""
        response = send_with(sample_report_data, resend_transport)

        assert response.status_code == 200
        data = response.json()
        assert data == {
            "success": True,
            "message": "Report notification sent successfully",
            "emailId": "email-abc"
        }
        assert len(resend_transport.requests) == 1

    def test_outbound_body_contents(self, send_with, sample_report_data, resend_transport):
        """Outbound email carries listing title, reporter and formatted price"""
        send_with(sample_report_data, resend_transport)

        request = resend_transport.requests[0]
        body = resend_transport.last_json
        assert str(request.url) == "https://api.resend.com/emails"
        assert request.headers["Authorization"] == "Bearer re_test_key"
        assert body["from"] == "MercaTech <noreply@mercatech-pr.com>"
        assert body["to"] == ["admin@mercatech-pr.com"]
        assert body["subject"] == "🚨 Nuevo Reporte - iPhone 14 Pro"
        assert "iPhone 14 Pro" in body["html"]
        assert "Ana Torres" in body["html"]
        assert "$499.99" in body["html"]
        assert "https://mercatech-pr.netlify.app/listing/listing-789" in body["html"]

    @pytest.mark.parametrize("missing", ["id", "listing", "reporter"])
    def test_missing_required_data(self, send_with, sample_report_data, resend_transport, missing):
        """Missing id, listing or reporter is rejected before any send"""
        del sample_report_data[missing]

        response = send_with(sample_report_data, resend_transport)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required data"}
        assert resend_transport.requests == []

    def test_invalid_sub_object(self, send_with, sample_report_data, resend_transport):
        """Sub-objects that do not validate are rejected"""
        sample_report_data["listing"] = {"title": "iPhone", "price": "gratis"}

        response = send_with(sample_report_data, resend_transport)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid report data"}
        assert resend_transport.requests == []

    @pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "OPTIONS"])
    def test_method_not_allowed(self, client, sample_report_data, method):
        """Anything but POST is refused regardless of body"""
        response = client.request(method, "/", json=sample_report_data)

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}

    def test_cors_preflight_not_allowed(self, client):
        """Preflight requests get no CORS handling"""
        response = client.options("/", headers={
            "Origin": "https://mercatech-pr.netlify.app",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "content-type",
        })

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert "access-control-allow-origin" not in response.headers

    def test_api_key_not_configured(self, send_with, sample_report_data, resend_transport,
                                    mock_resend_config):
        """Missing API key is a configuration error and nothing is sent"""
        mock_resend_config.resend_api_key = None

        response = send_with(sample_report_data, resend_transport)

        assert response.status_code == 500
        assert "configured" in response.json()["error"]
        assert resend_transport.requests == []

    def test_email_api_failure(self, send_with, sample_report_data, make_resend_transport):
        """Non-2xx from the email API becomes a 500 with details"""
        transport = make_resend_transport(status_code=422, body='{"message": "Invalid `to` field"}')

        response = send_with(sample_report_data, transport)

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to send notification"
        assert data["details"] == "Email service error: 422"

    def test_invalid_json_body(self, client, mock_resend_config):
        """Unparseable body is reported as a failure"""
        with patch("app.routes.reports.get_resend_config", return_value=mock_resend_config):
            response = client.post(
                "/",
                content="not json",
                headers={"Content-Type": "application/json"}
            )

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to send notification"
        assert "details" in response.json()

    def test_send_uses_rendered_template(self, client, sample_report_data, mock_resend_config):
        """Route passes the rendered subject and body to the sender"""
        with patch("app.routes.reports.get_resend_config", return_value=mock_resend_config):
            with patch("app.routes.reports.get_template_service") as mock_get_template:
                with patch("app.routes.reports.get_resend_client") as mock_get_client:
                    mock_template_svc = MagicMock()
                    mock_template_svc.render_report_notification.return_value = {
                        "subject": "Subject",
                        "html_content": "<p>Body</p>"
                    }
                    mock_get_template.return_value = mock_template_svc

                    mock_resend = MagicMock()
                    mock_resend.send_email = AsyncMock(return_value={"id": "email-xyz"})
                    mock_get_client.return_value = mock_resend

                    response = client.post("/", json=sample_report_data)

        assert response.status_code == 200
        assert response.json()["emailId"] == "email-xyz"
        email_message = mock_resend.send_email.call_args.args[0]
        assert email_message.subject == "Subject"
        assert email_message.html_content == "<p>Body</p>"
        assert email_message.to_emails == ["admin@mercatech-pr.com"]


class TestHealthRoutes:
    """Test health endpoints"""

    @pytest.fixture
    def client(self):
        from app.main import app
        return TestClient(app)

    def test_health_check(self, client):
        response = client.get("/health/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_configured(self, client, mock_resend_config):
        with patch("app.routes.health.get_resend_config", return_value=mock_resend_config):
            response = client.get("/health/detailed")

        data = response.json()
        assert data["status"] == "healthy"
        assert data["components"]["email"]["config"]["RESEND_API_KEY"] == "***"

    def test_detailed_health_degraded_without_key(self, client, mock_resend_config):
        mock_resend_config.is_configured.return_value = False
        with patch("app.routes.health.get_resend_config", return_value=mock_resend_config):
            response = client.get("/health/detailed")

        data = response.json()
        assert data["status"] == "degraded"
        assert data["components"]["email"]["status"] == "unhealthy"

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
