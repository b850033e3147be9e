from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str


class OrderCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    item: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)


class Order(BaseModel):
    id: str
    item: str
    quantity: int
    created_at: datetime


class OrdersResponse(BaseModel):
    orders: list[Order]
