# models/submissions.py
from typing import Literal, Optional

from pydantic import BaseModel


class LeadRequestCreate(BaseModel):
    request_type: Literal["order", "demo"]
    full_name: str
    email: str
    product_name: Optional[str] = None
    phone_number: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    company_name: Optional[str] = None  # company buyers only
    aadhar_number: Optional[str] = None  # individual buyers only
    pan_number: Optional[str] = None
    message: Optional[str] = None
    quantity: Optional[int] = 1
    status: Optional[str] = "pending"


class LeadRequest(LeadRequestCreate):
    id: int
    created_at: Optional[str] = None


class ApplicationCreate(BaseModel):
    name: str
    email: str
    position: Optional[str] = None


class Application(ApplicationCreate):
    id: int
    created_at: Optional[str] = None


class SubscriptionCreate(BaseModel):
    email: str


class Subscription(SubscriptionCreate):
    id: int
    created_at: Optional[str] = None
