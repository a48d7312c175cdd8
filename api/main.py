from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from core import config, db
from core.logging_config import setup_logging
from customers import router as customers_router
from customers.repository import CustomerStore, InMemoryCustomerStore, PostgresCustomerStore

API_PREFIX = "/api/v1"

logger = logging.getLogger(__name__)


async def _open_store(backend: str) -> CustomerStore:
    if backend == config.STORE_MEMORY:
        return InMemoryCustomerStore()

    await db.init_pool()
    store = PostgresCustomerStore()
    try:
        await store.init_schema()
    except Exception:
        # Leave no half-open pool behind for the next init_pool().
        await db.close_pool()
        raise
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    backend = config.store_backend()
    app.state.customer_store = await _open_store(backend)
    logger.info("customer_store_ready backend=%s", backend)
    try:
        yield
    finally:
        app.state.customer_store = None
        if backend == config.STORE_POSTGRES:
            await db.close_pool()


def create_app() -> FastAPI:
    setup_logging(config.log_level())

    app = FastAPI(title="customer-service", lifespan=lifespan)

    # Allow local frontend dev servers to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(customers_router.router, prefix=API_PREFIX, tags=["customers"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "customer-service api"}

    return app


app = create_app()


def run() -> None:
    uvicorn.run("main:app", host=config.api_host(), port=config.api_port())
