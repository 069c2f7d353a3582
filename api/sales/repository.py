"""
Sale persistence (raw SQL).
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.result import STORE_ERRORS, Err, Ok, Result

logger = logging.getLogger(__name__)


async def list_sales(pool: asyncpg.Pool) -> Result[list[dict[str, Any]]]:
    try:
        rows = await db.fetch_all(
            pool,
            """
            SELECT id, product_id, discount, start_date, end_date
            FROM sales
            """,
        )
    except STORE_ERRORS as exc:
        logger.exception("list_sales_failed")
        return Err(exc)
    return Ok(rows)


async def insert_sale(
    pool: asyncpg.Pool,
    *,
    product_id: int,
    discount: int,
    start_date: str,
    end_date: str,
) -> Result[int]:
    """
    Insert a sale row. The caller is expected to have checked the product.

    A foreign key violation here is reported like any other store error.
    """
    try:
        row = await db.fetch_one(
            pool,
            """
            INSERT INTO sales (product_id, discount, start_date, end_date)
            VALUES ($1, $2, $3, $4)
            RETURNING id
            """,
            product_id,
            discount,
            start_date,
            end_date,
        )
    except STORE_ERRORS as exc:
        logger.exception("add_sale_failed product_id=%s", product_id)
        return Err(exc)
    if row is None:
        return Err(RuntimeError("Insert returned no row."), "Failed to insert sale.")
    return Ok(int(row["id"]))


async def delete_sale(pool: asyncpg.Pool, sale_id: int) -> Result[None]:
    try:
        await db.execute(
            pool,
            """
            DELETE FROM sales
            WHERE id = $1
            """,
            sale_id,
        )
    except STORE_ERRORS as exc:
        logger.exception("delete_sale_failed sale_id=%s", sale_id)
        return Err(exc)
    return Ok(None)
