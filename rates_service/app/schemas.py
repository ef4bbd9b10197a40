from datetime import datetime, timedelta
from enum import Enum

from typing import Optional

from pydantic import BaseModel, Field


class HistoryRange(str, Enum):
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    ONE_YEAR = "1Y"

    @property
    def steps(self) -> int:
        return {
            HistoryRange.ONE_DAY: 25,
            HistoryRange.ONE_WEEK: 7,
            HistoryRange.ONE_MONTH: 30,
            HistoryRange.ONE_YEAR: 365,
        }[self]

    @property
    def step(self) -> timedelta:
        if self is HistoryRange.ONE_DAY:
            return timedelta(hours=1)
        return timedelta(days=1)


class HistoryPoint(BaseModel):
    date: datetime
    rate: float


class ConversionResult(BaseModel):
    from_currency: str
    to_currency: str
    amount: float = Field(gt=0)
    result: float
    unit_rate: float


class CurrencyEntry(BaseModel):
    code: str
    forex_selling: Optional[str] = None
    banknote_selling: Optional[str] = None
