from pydantic import BaseModel, Field
from typing import Union

class Dish(BaseModel):
    id: str
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    price: Union[int, float]
