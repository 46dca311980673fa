"""Conversion request validation.

Checks run in a fixed order and the first failure wins:

1. ``countryFrom``, ``countryTo`` present and not blank, ``score`` numeric
2. ``countryFrom`` is a known country code
3. ``countryTo`` is a known country code
4. ``score_min <= score <= score_max`` (both bounds inclusive)

Booleans are not accepted as scores and numeric strings are not coerced.
NaN and infinite scores fail the range check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from wealth_id.core.errors import (
    InvalidCountryFromError,
    InvalidCountryToError,
    MissingFieldsError,
    ScoreOutOfRangeError,
)
from wealth_id.models.constants import COUNTRY_BASE_RATES


@dataclass(frozen=True)
class ConversionRequest:
    country_from: str
    country_to: str
    score: float


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_blank(value: Any) -> bool:
    """Absent, null, false, empty string, zero or NaN. Empty lists and objects are not blank."""
    if value is None or value is False or value == "":
        return True
    return _is_number(value) and (value == 0 or value != value)


def validate_conversion_request(
    payload: Mapping[str, Any],
    score_min: float = 0,
    score_max: float = 1000,
) -> ConversionRequest:
    if not isinstance(payload, Mapping):
        raise MissingFieldsError()
    country_from = payload.get("countryFrom")
    country_to = payload.get("countryTo")
    score = payload.get("score")

    if _is_blank(country_from) or _is_blank(country_to) or not _is_number(score):
        raise MissingFieldsError()
    if not isinstance(country_from, str) or country_from not in COUNTRY_BASE_RATES:
        raise InvalidCountryFromError()
    if not isinstance(country_to, str) or country_to not in COUNTRY_BASE_RATES:
        raise InvalidCountryToError()
    if not score_min <= score <= score_max:
        raise ScoreOutOfRangeError(score_min, score_max)

    return ConversionRequest(country_from=country_from, country_to=country_to, score=score)
