"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from payment_instructions.api.errors import register_exception_handlers
from payment_instructions.api.router import api_router
from payment_instructions.config import get_settings
from payment_instructions.logging_config import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging on startup; the service holds no other resources."""

    logger = configure_logging(get_settings())
    logger.info("application-startup: %s", app.title)
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.include_router(api_router)
app.include_router(api_router, prefix=settings.api_v1_prefix)
register_exception_handlers(app)


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    """Simple endpoint for uptime checks."""

    return {"status": "ok"}
