"""Typed domain representations shared by ingestion, services, and the API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

Amount = int | float | Decimal
DateValue = str | date


@dataclass(frozen=True, slots=True)
class PrizeTier:
    """One prize bracket as reported by the lottery authority.

    ``range_code`` follows the upstream ``faixa`` numbering where 1 is the
    six-hit jackpot, 2 is five hits, and 3 is four hits.
    """

    description: str | None = None
    range_code: int | None = None
    winner_count: int | None = None
    prize_amount: Amount | None = None


@dataclass(frozen=True, slots=True)
class DrawResult:
    """Canonical draw record, independent of the payload shape it came from."""

    contest_number: int | None = None
    draw_date: DateValue | None = None
    winning_numbers: tuple[int, ...] = ()
    is_rolled_over: bool = False
    draw_location_name: str | None = None
    draw_location_region: str | None = None
    next_contest_estimated_prize: Amount | None = None
    next_contest_accumulated_prize: Amount | None = None
    special_accumulated_prize: Amount | None = None
    zero_five_accumulated_prize: Amount | None = None
    zero_five_contest_number: int | None = None
    next_contest_number: int | None = None
    next_contest_date: DateValue | None = None
    total_collected: Amount | None = None
    prize_tiers: tuple[PrizeTier, ...] = ()
