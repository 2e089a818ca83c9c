"""
Pytest fixtures for shared package tests
"""

import pytest
from unittest.mock import MagicMock
from typing import Dict, Any


@pytest.fixture
def sample_profile_row() -> Dict[str, Any]:
    """Profile row as returned by PostgREST"""
    return {
        "id": "user-123",
        "display_name": "Carlos Rivera",
        "municipio": "Bayamón",
        "contact_preference": "WhatsApp",
        "contact_info": "787-555-0100",
        "avatar_url": None,
        "is_admin": False,
        "created_at": "2025-01-01T00:00:00+00:00",
        "updated_at": "2025-01-01T00:00:00+00:00",
    }


@pytest.fixture
def mock_user():
    """Auth user object"""
    user = MagicMock()
    user.id = "user-123"
    user.email = "carlos@example.com"
    return user


@pytest.fixture
def mock_session(mock_user):
    """Auth session object"""
    session = MagicMock()
    session.user = mock_user
    session.access_token = "access-token"
    return session


@pytest.fixture
def mock_supabase():
    """Mock Supabase client with chainable table queries"""
    client = MagicMock()
    client.auth.get_session.return_value = None
    client.auth.get_user.return_value = None
    return client


@pytest.fixture
def profiles_query(mock_supabase):
    """Shortcut to the select(...).eq(...).single() chain"""
    return mock_supabase.table.return_value.select.return_value.eq.return_value.single.return_value
