# app/models.py
from datetime import datetime
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field

class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    description: str
    price: Union[int, Annotated[float, Field(allow_inf_nan=False)]]
    stock: Union[int, Annotated[float, Field(allow_inf_nan=False)]]
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

class DeleteResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str
    service: str
    products: int
