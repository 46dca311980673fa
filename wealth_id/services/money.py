"""Score rounding.

Converted scores are reported to two decimal places. Ties round half-up on
the shortest decimal form of the float, so 2.675 becomes 2.68 even though
its binary value sits slightly below the tie.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))
