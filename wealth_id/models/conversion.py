from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConversionRecord(BaseModel):
    """Result of one accepted conversion request. Immutable once created."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str
    timestamp: str = Field(..., description="UTC ISO-8601 creation time")
    country_from: str
    country_to: str
    original_score: float
    converted_score: float


class CountryRate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str
    base_rate: float = Field(..., gt=0)


class HealthStatus(BaseModel):
    status: str
    timestamp: str
