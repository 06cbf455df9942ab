from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any
from enum import Enum


class ContactSubmission(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None  # Empty phone is stored as None
    message: str


class OutboundEmail(BaseModel):
    """Message handed to the email provider"""
    model_config = ConfigDict(populate_by_name=True)

    from_email: str = Field(..., alias="from")
    to: str
    reply_to: Optional[str] = None
    subject: str
    html: str
    text: str


class EmailDispatchResult(BaseModel):
    success: bool
    id: Optional[str] = None
    error: Optional[str] = None


class ContactOutcome(str, Enum):
    DELIVERED = "delivered"
    VALIDATION_ERROR = "validation_error"
    CONFIGURATION_ERROR = "configuration_error"
    DISPATCH_ERROR = "dispatch_error"
    INTERNAL_ERROR = "internal_error"


class ContactSuccessResponse(BaseModel):
    success: bool = True
    message: str


class ContactErrorResponse(BaseModel):
    success: bool = False
    error: str


class ContactResult(BaseModel):
    """Terminal state of one submission and the response it produces"""
    outcome: ContactOutcome
    status_code: int
    body: Dict[str, Any]
