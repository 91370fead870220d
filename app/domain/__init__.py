"""Domain models representing normalized draw results."""

from .models import Amount, DateValue, DrawResult, PrizeTier

__all__ = [
    "Amount",
    "DateValue",
    "DrawResult",
    "PrizeTier",
]
