from fastapi import APIRouter, Depends

from currency_converter.services.rates import CurrencyConverterService

from .dependencies import get_converter_service

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness check with current edge count")
async def health(svc: CurrencyConverterService = Depends(get_converter_service)):
    return {"status": "ok", "edges": len(svc.store)}
