from pydantic import BaseModel, Field
from typing import List, Optional, Union
from models.order import OrderDish, OrderStatus

class DishInput(BaseModel):
    """Accepted dish payload: exactly the writable fields"""
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    price: Union[int, float]

class OrderInput(BaseModel):
    deliverTo: str = Field(..., min_length=1)
    mobileNumber: str = Field(..., min_length=1)
    status: Optional[OrderStatus] = None
    dishes: List[OrderDish] = Field(..., min_length=1)

    class Config:
        use_enum_values = True

class ErrorResponse(BaseModel):
    error: str
