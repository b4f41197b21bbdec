from __future__ import annotations

from datetime import date

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from payment_instructions.api.deps import get_clock
from payment_instructions.api.errors import register_exception_handlers
from payment_instructions.api.router import api_router
from payment_instructions.config import get_settings
from payment_instructions.processor.service import PaymentInstructionService
from payment_instructions.schemas.payment import Account

TODAY = date(2025, 6, 15)


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("TIMEZONE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def service(today: date) -> PaymentInstructionService:
    """Service pinned to a fixed calendar day."""

    return PaymentInstructionService(clock=lambda: today)


@pytest.fixture
def accounts() -> list[Account]:
    return [
        Account(id="A001", balance=1000, currency="NGN"),
        Account(id="B002", balance=200, currency="NGN"),
        Account(id="C003", balance=50, currency="usd"),
    ]


@pytest.fixture
def api_app(today: date) -> FastAPI:
    """Build API app with a fixed clock."""

    app = FastAPI()
    app.include_router(api_router)
    app.include_router(api_router, prefix="/api/v1")
    register_exception_handlers(app)

    app.dependency_overrides[get_clock] = lambda: (lambda: today)
    return app


@pytest_asyncio.fixture
async def api_client(api_app: FastAPI) -> httpx.AsyncClient:
    """ASGI client for API integration tests."""

    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
