"""
Shared data schemas for MercaTech PR

This package contains the marketplace data model used by every component.
"""

from .marketplace import (
    Municipio,
    Category,
    Condition,
    ContactPreference,
    MUNICIPIOS,
    CATEGORIES,
    CONDITIONS,
    CONTACT_PREFERENCES,
    Profile,
    Listing,
    Favorite,
    Report,
    CreateListingForm,
    ProfileSetupForm,
    ProfileUpdate,
    ReportForm,
)

__all__ = [
    "Municipio",
    "Category",
    "Condition",
    "ContactPreference",
    "MUNICIPIOS",
    "CATEGORIES",
    "CONDITIONS",
    "CONTACT_PREFERENCES",
    "Profile",
    "Listing",
    "Favorite",
    "Report",
    "CreateListingForm",
    "ProfileSetupForm",
    "ProfileUpdate",
    "ReportForm",
]

__version__ = "1.0.0"
