import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

def parse_number(text: str) -> Optional[float]:
    """Parse a form field as a finite float, or None when it is blank or not numeric."""
    if text is None:
        return None
    text = str(text).strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None

def round_half_up(value: float, places: int = 0) -> float:
    # Half away from zero on the last kept digit; float round() is banker's rounding.
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
