"""Access to the daily exchange rate documents published by TCMB."""
from datetime import date
from typing import Dict, List, Optional
import xml.etree.ElementTree as ET

import httpx

from config import LOCAL_CURRENCY, TCMB_BASE_URL, TCMB_TIMEOUT
from logger import logger
from schemas import CurrencyEntry

TODAY_URL = f"{TCMB_BASE_URL}/today.xml"


class RatesUnavailableError(Exception):
    def __init__(self, url: str, message: str):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.message = message


async def get_http_client():
    client = httpx.AsyncClient(timeout=TCMB_TIMEOUT, follow_redirects=True)
    try:
        yield client
    finally:
        await client.aclose()


def document_url(day: date) -> str:
    return f"{TCMB_BASE_URL}/{day:%Y%m}/{day:%d%m%Y}.xml"


def parse_currencies(xml_text: str) -> List[CurrencyEntry]:
    root = ET.fromstring(xml_text)
    if root.tag != "Tarih_Date":
        raise ValueError(f"unexpected root element <{root.tag}>")
    return [
        CurrencyEntry(
            code=el.get("CurrencyCode", ""),
            forex_selling=el.findtext("ForexSelling"),
            banknote_selling=el.findtext("BanknoteSelling"),
        )
        for el in root.findall("Currency")
        if el.get("CurrencyCode")
    ]


async def fetch_currencies(client: httpx.AsyncClient, url: str) -> List[CurrencyEntry]:
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        raise RatesUnavailableError(url, str(e)) from e
    try:
        currencies = parse_currencies(response.text)
    except (ET.ParseError, ValueError) as e:
        raise RatesUnavailableError(url, f"invalid document: {e}") from e
    logger.debug("Rates document loaded", extra={"url": url, "currencies": len(currencies)})
    return currencies


def _selling_rate(entry: CurrencyEntry) -> Optional[float]:
    # Some currencies only publish a banknote rate
    rate_str = (entry.forex_selling or "").strip() or (entry.banknote_selling or "").strip()
    if not rate_str:
        return None
    try:
        rate = float(rate_str.replace(",", "."))
    except ValueError:
        return None
    if rate <= 0:
        return None
    return rate


def get_rate(currencies: List[CurrencyEntry], code: str) -> Optional[float]:
    if code == LOCAL_CURRENCY:
        return 1.0
    entry = next((c for c in currencies if c.code == code), None)
    if entry is None:
        return None
    return _selling_rate(entry)


def build_rate_table(currencies: List[CurrencyEntry]) -> Dict[str, float]:
    rates = {LOCAL_CURRENCY: 1.0}
    for entry in currencies:
        rate = _selling_rate(entry)
        if rate is None:
            continue
        rates[entry.code] = rate
    return rates
