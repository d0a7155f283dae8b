# api/subscription/schemas.py
from pydantic import BaseModel, Field


# REQUEST SCHEMAS
class SubscriptionRequest(BaseModel):
    """Request body for POST /subscribe"""
    email: str = Field(..., min_length=1)
