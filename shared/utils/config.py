"""
Configuration Management
Environment-based configuration for the hosted auth/database provider
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator
import logging

logger = logging.getLogger(__name__)


class SupabaseConfig(BaseSettings):
    """Supabase project configuration"""

    supabase_url: str = ""
    supabase_anon_key: str = ""

    # Public origin of the web app, used for OAuth redirects
    site_url: str = "https://mercatech-pr.netlify.app"
    auth_callback_path: str = "/auth/callback"

    # Table holding one profile row per auth user
    profiles_table: str = "profiles"

    class Config:
        env_prefix = ""
        case_sensitive = False

    @field_validator('site_url')
    @classmethod
    def validate_site_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('Site URL must start with http:// or https://')
        return v.rstrip('/')

    @property
    def redirect_url(self) -> str:
        """Fixed OAuth callback URL"""
        return f"{self.site_url}{self.auth_callback_path}"

    def is_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(f"Supabase URL: {self.supabase_url or '(not set)'}")
        logger.info(f"Anon key: {'Yes' if self.supabase_anon_key else 'No'}")
        logger.info(f"OAuth redirect: {self.redirect_url}")


_supabase_config: Optional[SupabaseConfig] = None


def get_supabase_config() -> SupabaseConfig:
    """Get Supabase configuration instance"""
    global _supabase_config
    if _supabase_config is None:
        _supabase_config = SupabaseConfig()
    return _supabase_config
