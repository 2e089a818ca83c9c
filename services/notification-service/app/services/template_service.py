"""
Template Service
Jinja2 file rendering for notification emails
"""

import os
import logging
from typing import Dict, Any, Optional
from datetime import datetime

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.models.report import ReportNotificationRequest
from app.utils.config import get_app_config
from app.utils.formatting import format_price, format_timestamp

logger = logging.getLogger(__name__)

REPORT_TEMPLATE = "reports/report_notification.html.j2"


class TemplateService:
    """Template service for file-based Jinja2 templates"""

    def __init__(self, templates_dir: str = None):
        app_config = get_app_config()

        self.templates_dir = templates_dir or os.path.join(
            os.path.dirname(__file__), "..", "templates"
        )

        self.jinja_env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(['html', 'xml', 'j2']),
            trim_blocks=True,
            lstrip_blocks=True
        )

        self.site_url = app_config.site_url

        # Default template variables available to all templates
        self.default_variables = {
            "platform_name": app_config.platform_name,
            "site_url": app_config.site_url,
            "current_year": datetime.now().year,
        }

    def render(self, template_path: str, variables: Dict[str, Any]) -> str:
        """Render a template file with variables merged over the defaults"""
        template_vars = {
            **self.default_variables,
            **variables
        }
        template = self.jinja_env.get_template(template_path)
        return template.render(**template_vars)

    def listing_url(self, listing_id: Optional[str]) -> str:
        """Deep link to a listing page"""
        return f"{self.site_url}/listing/{listing_id}"

    def render_report_notification(self, report: ReportNotificationRequest) -> Dict[str, str]:
        """Render subject and HTML body for a report notification"""
        subject = f"🚨 Nuevo Reporte - {report.listing.title}"

        html_content = self.render(REPORT_TEMPLATE, {
            "report": report,
            "price": format_price(report.listing.price),
            "created_at": format_timestamp(report.created_at),
            "listing_url": self.listing_url(report.listing_id),
        })

        return {
            "subject": subject,
            "html_content": html_content
        }


# Global instance
_template_service: Optional[TemplateService] = None


def get_template_service() -> TemplateService:
    """Get template service singleton"""
    global _template_service
    if _template_service is None:
        _template_service = TemplateService()
    return _template_service
