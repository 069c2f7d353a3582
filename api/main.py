import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, settings
from core.logging_setup import configure_logging
from core.schema import init_schema
from products.router import router as products_router
from sales.router import router as sales_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; a schema failure here aborts startup.
    pool = await db.create_pool()
    try:
        await init_schema(pool)
        app.state.pool = pool
        yield
    finally:
        app.state.pool = None
        await db.close_pool(pool)


def create_app() -> FastAPI:
    app = FastAPI(title="storefront-api", lifespan=lifespan)

    # Any origin, method and header.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products_router, tags=["products"])
    app.include_router(sales_router, tags=["sales"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


settings.load_env()
configure_logging()

app = create_app()


def run() -> None:
    import uvicorn

    host, port = settings.api_host(), settings.api_port()
    logger.info("starting host=%s port=%s", host, port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
