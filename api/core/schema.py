"""
Startup schema bootstrap.

There is no migration versioning: tables are created if absent and left alone
otherwise. Errors propagate so the lifespan aborts startup.
"""

from __future__ import annotations

import logging
from typing import Annotated

import asyncpg
from pydantic import Field

from . import db

logger = logging.getLogger(__name__)

# Range of the INTEGER / SERIAL columns below.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1

Int4 = Annotated[int, Field(ge=INT4_MIN, le=INT4_MAX)]

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id          SERIAL PRIMARY KEY,
    name        TEXT NOT NULL,
    price       DOUBLE PRECISION NOT NULL,
    in_stock    BOOLEAN NOT NULL
);

CREATE TABLE IF NOT EXISTS sales (
    id          SERIAL PRIMARY KEY,
    product_id  INTEGER REFERENCES products(id),
    discount    INTEGER,
    start_date  TEXT,
    end_date    TEXT
);
"""


async def init_schema(pool: asyncpg.Pool) -> None:
    # No bind args, so asyncpg sends both statements in one simple query.
    await db.execute(pool, SCHEMA_SQL)
    logger.info("schema_ready tables=products,sales")
