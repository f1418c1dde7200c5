from fastapi import APIRouter, Depends

from currency_converter.models import ConvertIn, ConvertOut
from currency_converter.services.rates import CurrencyConverterService

from .dependencies import get_converter_service

router = APIRouter(prefix="/convert", tags=["convert"])


@router.post("", response_model=ConvertOut, summary="Convert an amount between currencies")
async def convert(
    payload: ConvertIn,
    svc: CurrencyConverterService = Depends(get_converter_service),
):
    # NoConversionPathError propagates to the app-level handler (404)
    result = svc.convert_detailed(
        payload.from_currency, payload.to_currency, payload.amount
    )
    return ConvertOut.from_result(result)
