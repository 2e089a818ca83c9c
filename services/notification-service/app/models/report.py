"""
Report Models
Pydantic models for the report notification endpoint
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ListingSummary(BaseModel):
    """Listing fields joined into the report payload"""
    title: str
    price: float
    user_id: Optional[str] = None


class ReporterSummary(BaseModel):
    """Reporter fields joined into the report payload"""
    display_name: str


class ReportNotificationRequest(BaseModel):
    """Body posted when a listing is reported"""
    id: str
    reporter_id: Optional[str] = None
    listing_id: Optional[str] = None
    reason: str = ""
    description: Optional[str] = None
    created_at: datetime
    listing: ListingSummary
    reporter: ReporterSummary


class ReportNotificationResponse(BaseModel):
    """Successful send"""
    success: bool = True
    message: str
    email_id: Optional[str] = Field(None, serialization_alias="emailId")


class ErrorResponse(BaseModel):
    """Error body"""
    error: str
    details: Optional[str] = None
