from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, status

from wealth_id.core.config import Settings
from wealth_id.models.conversion import ConversionRecord, CountryRate
from wealth_id.services.conversion import build_record, list_country_rates
from wealth_id.services.history import ConversionHistory
from wealth_id.services.validation import validate_conversion_request

"""Conversion router.

Endpoints:
    - POST /api/convert    -> validate, convert, record {countryFrom, countryTo, score}
    - GET  /api/history    -> up to `history_capacity` records, most recent first
    - GET  /api/countries  -> supported country codes with baseline factors
"""

router = APIRouter(prefix="/api", tags=["conversions"])
logger = logging.getLogger("wealth_id.conversions")


def get_history(request: Request) -> ConversionHistory:
    return request.app.state.history


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post(
    "/convert",
    response_model=ConversionRecord,
    status_code=status.HTTP_201_CREATED,
    summary="Convert a credit score between countries",
)
async def convert(
    payload: Any = Body(None),
    history: ConversionHistory = Depends(get_history),
    settings: Settings = Depends(get_app_settings),
):
    conversion = validate_conversion_request(
        payload, score_min=settings.score_min, score_max=settings.score_max
    )
    record = history.append(build_record(conversion))
    logger.info(
        "converted %s %s -> %s %s",
        record.original_score,
        record.country_from,
        record.converted_score,
        record.country_to,
    )
    return record


@router.get(
    "/history",
    response_model=List[ConversionRecord],
    summary="Recent conversions, most recent first",
)
async def list_history(history: ConversionHistory = Depends(get_history)):
    return history.recent()


@router.get(
    "/countries",
    response_model=List[CountryRate],
    summary="Supported countries and their baseline factors",
)
async def list_countries():
    return list_country_rates()
