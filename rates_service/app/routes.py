from typing import Dict, List

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query

from history_service import build_history
from logger import logger
from schemas import ConversionResult, HistoryPoint, HistoryRange
from tcmb_service import TODAY_URL, RatesUnavailableError, build_rate_table, fetch_currencies, get_http_client

router = APIRouter(tags=["Rates"])


async def load_today_rates(client: httpx.AsyncClient) -> Dict[str, float]:
    try:
        currencies = await fetch_currencies(client, TODAY_URL)
    except RatesUnavailableError as e:
        logger.error("Could not load today's rates", extra={"url": e.url, "error": e.message})
        raise HTTPException(status_code=502, detail="Could not load exchange rates")
    return build_rate_table(currencies)


@router.get("/rates", response_model=Dict[str, float])
async def get_rates(client: httpx.AsyncClient = Depends(get_http_client)):
    rates = await load_today_rates(client)
    logger.info("Returned today's rates", extra={"currencies": len(rates)})
    return rates


@router.get("/history", response_model=List[HistoryPoint])
async def get_history(
    base_currency: str = Query("TRY", alias="baseCurrency", min_length=3, max_length=3),
    target_currency: str = Query("USD", alias="targetCurrency", min_length=3, max_length=3),
    range_: HistoryRange = Query(HistoryRange.ONE_DAY, alias="range"),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return await build_history(client, base_currency, target_currency, range_)


@router.get("/convert", response_model=ConversionResult)
async def convert(
    from_currency: str = Query(..., alias="from", min_length=3, max_length=3),
    to_currency: str = Query(..., alias="to", min_length=3, max_length=3),
    amount: float = Query(1, gt=0),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    from_currency = from_currency.upper()
    to_currency = to_currency.upper()
    rates = await load_today_rates(client)
    for code in (from_currency, to_currency):
        if code not in rates:
            logger.warning("Conversion requested for unknown currency", extra={"currency": code})
            raise HTTPException(status_code=404, detail=f"Unknown currency {code}")

    unit_rate = rates[from_currency] / rates[to_currency]
    logger.info(
        "Converted amount",
        extra={"from_currency": from_currency, "to_currency": to_currency, "amount": amount},
    )
    return ConversionResult(
        from_currency=from_currency,
        to_currency=to_currency,
        amount=amount,
        result=round(amount * unit_rate, 2),
        unit_rate=round(unit_rate, 4),
    )
