from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from currency_converter.models import RateEdgeOut, RatesUpdatePayload, RatesUpdateResult
from currency_converter.services.rates import CurrencyConverterService

from .dependencies import get_converter_service, require_updates_enabled

"""Rates router: read and maintain the in-memory rate graph.

Endpoints (writes guarded by settings.enable_rate_updates):
    - GET /rates              -> list every edge
    - PUT /rates              -> insert or replace edges {rates: [...]}
    - DELETE /rates           -> clear the graph
    - POST /rates/defaults    -> clear and reload the default seed

In-memory only; a process restart drops every update.
"""

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=List[RateEdgeOut], summary="List all rate edges")
async def list_rates(svc: CurrencyConverterService = Depends(get_converter_service)):
    return [RateEdgeOut(**edge._asdict()) for edge in svc.list_rates()]


@router.put("", response_model=RatesUpdateResult, summary="Insert or replace rates")
async def update_rates(
    payload: RatesUpdatePayload,
    _: bool = Depends(require_updates_enabled),
    svc: CurrencyConverterService = Depends(get_converter_service),
):
    try:
        updated = svc.update_configuration(edge.as_tuple() for edge in payload.rates)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return RatesUpdateResult(updated=updated)


@router.delete("", summary="Clear every rate")
async def clear_rates(
    _: bool = Depends(require_updates_enabled),
    svc: CurrencyConverterService = Depends(get_converter_service),
):
    svc.clear_configuration()
    return {"status": "cleared"}


@router.post(
    "/defaults", response_model=RatesUpdateResult, summary="Reset to the default rates"
)
async def reset_defaults(
    _: bool = Depends(require_updates_enabled),
    svc: CurrencyConverterService = Depends(get_converter_service),
):
    return RatesUpdateResult(updated=svc.reset_to_defaults())
