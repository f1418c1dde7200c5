import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app
from currency_converter.services.rates import CurrencyConverterService, RateStore


@pytest.fixture
def store() -> RateStore:
    return RateStore()


@pytest.fixture
def service() -> CurrencyConverterService:
    """Service pre-loaded with the default USD->CAD->GBP->EUR chain."""
    return CurrencyConverterService(seed_defaults=True)


@pytest.fixture
def settings() -> Settings:
    return Settings(debug=False, seed_default_rates=True, enable_rate_updates=True)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    app = create_app(settings_override=settings)
    return TestClient(app)
