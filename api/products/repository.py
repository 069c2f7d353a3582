"""
Product persistence (raw SQL).

Store failures are logged here and returned as `Err`; nothing raises to the
router.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import db
from core.result import STORE_ERRORS, Err, Ok, Result

logger = logging.getLogger(__name__)


async def list_products(pool: asyncpg.Pool) -> Result[list[dict[str, Any]]]:
    try:
        rows = await db.fetch_all(
            pool,
            """
            SELECT id, name, price, in_stock
            FROM products
            """,
        )
    except STORE_ERRORS as exc:
        logger.exception("list_products_failed")
        return Err(exc)
    return Ok(rows)


async def insert_product(
    pool: asyncpg.Pool,
    *,
    name: str,
    price: float,
    in_stock: bool,
) -> Result[int]:
    """
    Insert a product and return the store-assigned id.
    """
    try:
        row = await db.fetch_one(
            pool,
            """
            INSERT INTO products (name, price, in_stock)
            VALUES ($1, $2, $3)
            RETURNING id
            """,
            name,
            price,
            in_stock,
        )
    except STORE_ERRORS as exc:
        logger.exception("add_product_failed name=%r", name)
        return Err(exc)
    if row is None:
        return Err(RuntimeError("Insert returned no row."), "Failed to insert product.")
    return Ok(int(row["id"]))


async def product_exists(pool: asyncpg.Pool, product_id: int) -> Result[bool]:
    try:
        row = await db.fetch_one(
            pool,
            """
            SELECT id
            FROM products
            WHERE id = $1
            """,
            product_id,
        )
    except STORE_ERRORS as exc:
        logger.exception("check_product_failed product_id=%s", product_id)
        return Err(exc)
    return Ok(row is not None)


async def delete_product(pool: asyncpg.Pool, product_id: int) -> Result[None]:
    # Unconditional: deleting a missing id is still a success.
    try:
        await db.execute(
            pool,
            """
            DELETE FROM products
            WHERE id = $1
            """,
            product_id,
        )
    except STORE_ERRORS as exc:
        logger.exception("delete_product_failed product_id=%s", product_id)
        return Err(exc)
    return Ok(None)
