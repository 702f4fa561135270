"""
Pydantic schemas for Order operations
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime, timezone
from enum import Enum

class OrderStatus(str, Enum):
    # Only COMPLETED is ever assigned; the others are part of the wire type
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"

class OrderItem(BaseModel):
    """Line item of a direct order"""
    product: str = Field("", description="Product name")
    quantity: int = Field(..., ge=0, description="Number of units")
    price: float = Field(..., ge=0, description="Unit price")

class Order(BaseModel):
    """Order as returned by the order service"""
    id: str = Field(..., description="Locally generated base-36 identifier")
    amount: float
    status: OrderStatus = OrderStatus.COMPLETED
    payment_method: str = Field(..., alias="paymentMethod")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    items: Optional[List[OrderItem]] = None

    class Config:
        populate_by_name = True

class OrderResult(BaseModel):
    """Outcome of creating a direct order"""
    success: bool
    data: Optional[Order] = None
    error: Optional[str] = None
