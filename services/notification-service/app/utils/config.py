"""
Configuration Management
Environment-based configuration for the email API and application settings
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator
import logging

logger = logging.getLogger(__name__)


class ResendConfig(BaseSettings):
    """Resend email API configuration"""

    # Secret, required for sending
    resend_api_key: Optional[str] = None

    resend_api_url: str = "https://api.resend.com/emails"
    resend_timeout: float = 10.0

    # Email defaults
    default_from_email: str = "MercaTech <noreply@mercatech-pr.com>"
    admin_email: str = "admin@mercatech-pr.com"

    class Config:
        env_prefix = ""
        case_sensitive = False

    @field_validator('resend_timeout')
    @classmethod
    def validate_resend_timeout(cls, v):
        if v < 1:
            raise ValueError('Resend timeout must be at least 1 second')
        return v

    def is_configured(self) -> bool:
        """Check if the API key is present"""
        return bool(self.resend_api_key)

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(f"Resend API: {self.resend_api_url}")
        logger.info(f"API key: {'Yes' if self.is_configured() else 'No'}")
        logger.info(f"From: {self.default_from_email}")
        logger.info(f"Admin recipient: {self.admin_email}")


class AppConfig(BaseSettings):
    """Application Configuration"""

    # Service info
    service_name: str = "notification-service"
    service_version: str = "1.0.0"
    debug: bool = False

    # Platform info
    platform_name: str = "MercaTech"
    site_url: str = "https://mercatech-pr.netlify.app"

    class Config:
        env_prefix = "APP_"
        case_sensitive = False

    @field_validator('site_url')
    @classmethod
    def validate_site_url(cls, v):
        return v.rstrip('/')


# Global configuration instances
_resend_config: Optional[ResendConfig] = None
_app_config: Optional[AppConfig] = None


def get_resend_config() -> ResendConfig:
    """Get Resend configuration instance"""
    global _resend_config
    if _resend_config is None:
        _resend_config = ResendConfig()
    return _resend_config


def get_app_config() -> AppConfig:
    """Get application configuration instance"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def validate_configuration() -> bool:
    """Validate all configuration settings"""
    try:
        resend_config = get_resend_config()
        app_config = get_app_config()

        resend_config.log_config()
        logger.info(f"Site URL: {app_config.site_url}")

        if not resend_config.is_configured():
            logger.warning("RESEND_API_KEY not configured, report notifications will fail")

        logger.info("Configuration validation completed")
        return True

    except Exception as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
