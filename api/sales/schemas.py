"""
Pydantic schemas for sale endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel

from core.schema import Int4


class AddSaleRequest(BaseModel):
    product_id: Int4
    discount: Int4
    # Stored as given; no date parsing.
    start_date: str
    end_date: str


class SaleResponse(BaseModel):
    id: int
    product_id: int | None
    discount: int | None
    start_date: str | None
    end_date: str | None
