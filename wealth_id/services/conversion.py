from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import List, Mapping

from wealth_id.models.constants import COUNTRY_BASE_RATES
from wealth_id.models.conversion import ConversionRecord, CountryRate
from wealth_id.services.money import round2
from wealth_id.services.validation import ConversionRequest

"""Credit score conversion between countries.

A score is normalized to the US baseline by dividing by the source country's
baseline factor, then rescaled by the target country's factor. Rounding
(round2) is applied once, here.
"""


def get_base_rate(
    country: str, rates: Mapping[str, float] = COUNTRY_BASE_RATES
) -> float:
    """Return the baseline factor for ``country``; KeyError if unknown."""
    return rates[country]


def list_country_rates(
    rates: Mapping[str, float] = COUNTRY_BASE_RATES,
) -> List[CountryRate]:
    return [CountryRate(code=code, base_rate=rate) for code, rate in rates.items()]


def convert_score(
    country_from: str,
    country_to: str,
    score: float,
    rates: Mapping[str, float] = COUNTRY_BASE_RATES,
) -> float:
    normalized = score / get_base_rate(country_from, rates)
    return round2(normalized * get_base_rate(country_to, rates))


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def new_record_id() -> str:
    return str(uuid.uuid4())


def build_record(request: ConversionRequest) -> ConversionRecord:
    converted = convert_score(request.country_from, request.country_to, request.score)
    return ConversionRecord(
        id=new_record_id(),
        timestamp=utc_now_iso(),
        country_from=request.country_from,
        country_to=request.country_to,
        original_score=request.score,
        converted_score=converted,
    )
