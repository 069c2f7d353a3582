"""
Sale creation flow.

Creating a sale is two statements: an existence check on the product, then the
insert. They do not share a transaction, so a product deleted in between can
still slip through; the foreign key on `sales.product_id` then rejects the
insert and the caller sees a generic insert failure.
"""

from __future__ import annotations

import asyncpg

from core.result import Err, Ok, Result
from products import repository as products_repository

from . import repository

PRODUCT_MISSING_MESSAGE = "Product does not exist"
CHECK_FAILED_MESSAGE = "Error checking product existence"
INSERT_FAILED_MESSAGE = "Error adding sale"


class ProductNotFoundError(LookupError):
    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} does not exist.")
        self.product_id = product_id


async def add_sale(
    pool: asyncpg.Pool,
    *,
    product_id: int,
    discount: int,
    start_date: str,
    end_date: str,
) -> Result[int]:
    exists = await products_repository.product_exists(pool, product_id)
    if isinstance(exists, Err):
        return Err(exists.error, CHECK_FAILED_MESSAGE)
    if not exists.value:
        return Err(ProductNotFoundError(product_id), PRODUCT_MISSING_MESSAGE)

    inserted = await repository.insert_sale(
        pool,
        product_id=product_id,
        discount=discount,
        start_date=start_date,
        end_date=end_date,
    )
    if isinstance(inserted, Err):
        return Err(inserted.error, INSERT_FAILED_MESSAGE)
    return Ok(inserted.value)
