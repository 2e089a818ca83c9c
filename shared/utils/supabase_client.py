"""
Supabase Client Configuration
Single shared client for auth and table access
"""

from supabase import create_client, Client
from typing import Optional
import logging

from .config import SupabaseConfig, get_supabase_config

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Supabase client wrapper used by the session adapter"""

    def __init__(self, config: Optional[SupabaseConfig] = None):
        self.config = config or get_supabase_config()
        self.client: Optional[Client] = None

        if self.config.is_configured():
            try:
                self.client = create_client(self.config.supabase_url, self.config.supabase_anon_key)
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                logger.error(f"Failed to initialize Supabase client: {e}")
                self.client = None
        else:
            logger.warning("Supabase credentials not found in environment")

    def get_client(self) -> Optional[Client]:
        """Get Supabase client instance"""
        return self.client

    def is_available(self) -> bool:
        """Check if Supabase is available and configured"""
        return self.client is not None


# Global Supabase client instance
_supabase_client: Optional[SupabaseClient] = None


def get_supabase_client() -> SupabaseClient:
    """Get Supabase client singleton"""
    global _supabase_client
    if _supabase_client is None:
        _supabase_client = SupabaseClient()
    return _supabase_client
