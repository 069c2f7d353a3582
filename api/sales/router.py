"""
Sale API endpoints.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from core.db import get_pool
from core.result import Err
from core.schema import INT4_MAX, INT4_MIN

from . import repository, schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sales", response_model=list[schemas.SaleResponse])
async def get_sales(pool: asyncpg.Pool = Depends(get_pool)) -> Response:
    result = await repository.list_sales(pool)
    if isinstance(result, Err):
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(
        [schemas.SaleResponse(**row).model_dump() for row in result.value]
    )


@router.post("/add-sale", response_class=PlainTextResponse)
async def add_sale(
    sale: schemas.AddSaleRequest,
    pool: asyncpg.Pool = Depends(get_pool),
) -> Response:
    result = await service.add_sale(
        pool,
        product_id=sale.product_id,
        discount=sale.discount,
        start_date=sale.start_date,
        end_date=sale.end_date,
    )
    if isinstance(result, Err):
        if isinstance(result.error, service.ProductNotFoundError):
            return PlainTextResponse(result.message, status_code=status.HTTP_400_BAD_REQUEST)
        return PlainTextResponse(
            result.message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    logger.info("sale_added id=%s product_id=%s", result.value, sale.product_id)
    return PlainTextResponse("Sale added successfully")


@router.delete("/delete-sale/{sale_id}", response_class=PlainTextResponse)
async def delete_sale(
    sale_id: int = Path(..., ge=INT4_MIN, le=INT4_MAX),
    pool: asyncpg.Pool = Depends(get_pool),
) -> Response:
    result = await repository.delete_sale(pool, sale_id)
    if isinstance(result, Err):
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse("Sale deleted successfully")
