"""Prize tier lookup for the six-number draw."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from app.domain import Amount, PrizeTier

SUPPORTED_HIT_COUNTS: tuple[int, ...] = (6, 5, 4)
JACKPOT_HIT_COUNT = 6


@dataclass(frozen=True, slots=True)
class TierSummary:
    """Display values for one hit-count, whether or not a tier was reported."""

    hit_count: int
    tier: PrizeTier | None
    winner_count: int
    prize_amount: Amount

    @property
    def has_winners(self) -> bool:
        return self.winner_count > 0

    @property
    def label(self) -> str:
        return f"{self.hit_count} acertos"


def _matches(tier: PrizeTier, hit_count: int) -> bool:
    description = (tier.description or "").lower()
    if f"{hit_count} acertos" in description:
        return True
    return tier.range_code == 7 - hit_count


def resolve_tier(tiers: Iterable[PrizeTier] | None, hit_count: int) -> PrizeTier | None:
    """Return the first tier describing ``hit_count`` matches, or ``None``.

    A tier matches when its lower-cased description contains
    ``"<hit_count> acertos"``, or failing that when its range code equals
    ``7 - hit_count``.
    """

    if hit_count not in SUPPORTED_HIT_COUNTS:
        raise ValueError(
            f"hit_count must be one of {', '.join(str(value) for value in SUPPORTED_HIT_COUNTS)}"
        )
    if not tiers:
        return None
    for tier in tiers:
        if _matches(tier, hit_count):
            return tier
    return None


def summarize_tier(tiers: Sequence[PrizeTier] | None, hit_count: int) -> TierSummary:
    tier = resolve_tier(tiers, hit_count)
    if tier is None:
        return TierSummary(hit_count=hit_count, tier=None, winner_count=0, prize_amount=0)
    return TierSummary(
        hit_count=hit_count,
        tier=tier,
        winner_count=tier.winner_count or 0,
        prize_amount=tier.prize_amount if tier.prize_amount is not None else 0,
    )


def summarize_tiers(tiers: Sequence[PrizeTier] | None) -> tuple[TierSummary, ...]:
    return tuple(summarize_tier(tiers, hit_count) for hit_count in SUPPORTED_HIT_COUNTS)
