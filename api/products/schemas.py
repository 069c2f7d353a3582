"""
Pydantic schemas for product endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class AddProductRequest(BaseModel):
    name: str
    # inf/NaN would be stored but could never be listed as JSON again.
    price: float = Field(..., allow_inf_nan=False)
    in_stock: bool


class ProductResponse(BaseModel):
    id: int
    name: str
    price: float
    in_stock: bool
