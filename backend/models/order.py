from pydantic import BaseModel, Field
from typing import List
from enum import Enum as PyEnum

class OrderStatus(str, PyEnum):
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"

    @classmethod
    def has_value(cls, value) -> bool:
        return isinstance(value, str) and value in cls._value2member_map_

class OrderDish(BaseModel):
    """Line item: a dish reference plus quantity. Other dish fields are kept as sent."""
    quantity: int = Field(..., gt=0)

    class Config:
        extra = "allow"

class Order(BaseModel):
    id: str
    deliverTo: str = Field(..., min_length=1)
    mobileNumber: str = Field(..., min_length=1)
    status: OrderStatus = OrderStatus.PENDING
    dishes: List[OrderDish] = Field(..., min_length=1)

    class Config:
        use_enum_values = True
