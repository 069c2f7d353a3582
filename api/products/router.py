"""
Product API endpoints.
"""

from __future__ import annotations

import logging

import asyncpg
from fastapi import APIRouter, Depends, Path, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from core.db import get_pool
from core.result import Err
from core.schema import INT4_MAX, INT4_MIN

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/products", response_model=list[schemas.ProductResponse])
async def get_products(pool: asyncpg.Pool = Depends(get_pool)) -> Response:
    result = await repository.list_products(pool)
    if isinstance(result, Err):
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(
        [schemas.ProductResponse(**row).model_dump() for row in result.value]
    )


@router.post("/add-product", response_class=PlainTextResponse)
async def add_product(
    product: schemas.AddProductRequest,
    pool: asyncpg.Pool = Depends(get_pool),
) -> Response:
    logger.debug("add_product_received payload=%r", product)
    result = await repository.insert_product(
        pool,
        name=product.name,
        price=product.price,
        in_stock=product.in_stock,
    )
    if isinstance(result, Err):
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.info("product_added id=%s", result.value)
    return PlainTextResponse("Product added successfully")


@router.delete("/delete-product/{product_id}", response_class=PlainTextResponse)
async def delete_product(
    product_id: int = Path(..., ge=INT4_MIN, le=INT4_MAX),
    pool: asyncpg.Pool = Depends(get_pool),
) -> Response:
    result = await repository.delete_product(pool, product_id)
    if isinstance(result, Err):
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse("Product deleted successfully")
