"""Domain constants for score conversion.

Baseline factors are static per-country scalars used to normalize a score to
the US baseline and rescale it for the target country. They are not currency
or statistical calibrations.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

COUNTRY_BASE_RATES: Mapping[str, float] = MappingProxyType(
    {
        "US": 1.0,
        "UK": 0.9,
        "India": 0.8,
        "Canada": 0.95,
    }
)
VALID_COUNTRIES: Tuple[str, ...] = tuple(COUNTRY_BASE_RATES)
