"""
Client-side state for MercaTech PR
"""

from .auth import (
    AuthState,
    AuthStore,
    AuthService,
    AuthError,
    AuthenticationRequiredError,
    SupabaseUnavailableError,
    auth,
    get_auth_service,
)

__all__ = [
    "AuthState",
    "AuthStore",
    "AuthService",
    "AuthError",
    "AuthenticationRequiredError",
    "SupabaseUnavailableError",
    "auth",
    "get_auth_service",
]
