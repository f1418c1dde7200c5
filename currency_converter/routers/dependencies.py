from fastapi import HTTPException, Request

from currency_converter.core.config import Settings
from currency_converter.services.rates import CurrencyConverterService


def get_converter_service(request: Request) -> CurrencyConverterService:
    return request.app.state.converter_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_updates_enabled(request: Request) -> bool:
    settings = get_app_settings(request)
    if not settings.enable_rate_updates:
        raise HTTPException(status_code=403, detail="rate updates are disabled")
    return True
