"""
Shared utilities for MercaTech PR

This package contains configuration, logging and provider client helpers.
"""

from .logger import setup_logging, get_logger, init_logging
from .config import SupabaseConfig, get_supabase_config
from .supabase_client import SupabaseClient, get_supabase_client

__all__ = [
    "setup_logging",
    "get_logger",
    "init_logging",
    "SupabaseConfig",
    "get_supabase_config",
    "SupabaseClient",
    "get_supabase_client",
]

__version__ = "1.0.0"
