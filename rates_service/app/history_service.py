"""
Historical rate reconstruction.

TCMB publishes one document per business day, so a history is rebuilt by
fetching the document of every step in the range and deriving the cross-rate
target/base from it. Days without a document (weekends, holidays, upstream
errors) are left out of the series.

The 1D range has hourly steps but only today's document exists for it; its
points get a random fluctuation of at most 1% so the chart is not flat.
"""
import random
from datetime import datetime, timezone
from typing import Dict, List, Optional

import httpx

from logger import logger
from schemas import CurrencyEntry, HistoryPoint, HistoryRange
from tcmb_service import TODAY_URL, RatesUnavailableError, document_url, fetch_currencies, get_rate

JITTER = 0.01


def step_dates(range_: HistoryRange, now: datetime) -> List[datetime]:
    steps = range_.steps
    return [now - range_.step * i for i in range(steps - 1, -1, -1)]


def flat_history(range_: HistoryRange, now: datetime) -> List[HistoryPoint]:
    return [HistoryPoint(date=moment, rate=1) for moment in step_dates(range_, now)]


def cross_rate(base_rate: float, target_rate: float, fluctuation: float = 0.0) -> float:
    return round(target_rate / base_rate * (1 + fluctuation), 4)


async def build_history(
    client: httpx.AsyncClient,
    base_currency: str,
    target_currency: str,
    range_: HistoryRange,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[HistoryPoint]:
    base_currency = base_currency.upper()
    target_currency = target_currency.upper()
    now = now or datetime.now(timezone.utc)
    rng = rng or random.Random()

    if base_currency == target_currency:
        return flat_history(range_, now)

    documents: Dict[str, Optional[List[CurrencyEntry]]] = {}
    history = []
    for moment in step_dates(range_, now):
        url = TODAY_URL if range_ is HistoryRange.ONE_DAY else document_url(moment.date())
        if url not in documents:
            try:
                documents[url] = await fetch_currencies(client, url)
            except RatesUnavailableError as e:
                logger.warning(
                    "Skipping history point, rates document unavailable",
                    extra={"url": e.url, "error": e.message},
                )
                documents[url] = None
        currencies = documents[url]
        if currencies is None:
            continue

        base_rate = get_rate(currencies, base_currency)
        target_rate = get_rate(currencies, target_currency)
        if not base_rate or target_rate is None:
            logger.warning(
                "Skipping history point, currency not published",
                extra={"url": url, "base_currency": base_currency, "target_currency": target_currency},
            )
            continue

        fluctuation = 0.0
        if range_ is HistoryRange.ONE_DAY:
            fluctuation = rng.uniform(-JITTER, JITTER)
        history.append(HistoryPoint(date=moment, rate=cross_rate(base_rate, target_rate, fluctuation)))

    logger.info(
        "History built",
        extra={
            "base_currency": base_currency,
            "target_currency": target_currency,
            "range": range_.value,
            "points": len(history),
            "steps": range_.steps,
        },
    )
    return history
