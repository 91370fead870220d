"""Composition of the adapter, tier resolver, and formatter into a display view."""

from __future__ import annotations

from loguru import logger

from app.core.config import get_settings
from app.domain import DrawResult
from app.schemas import PrizeTierView, ResultView
from app.services.formatting import Formatter, get_formatter
from app.services.tiers import TierSummary, summarize_tiers
from ingestion.normalize import adapt_payload
from ingestion.service import ResultState

ROLLED_OVER_HEADLINE = "Acumulou!"
WON_HEADLINE = "Saiu!"


class ResultUnavailableError(RuntimeError):
    """The results collaborator reported an error; the message is shown verbatim."""


def _tier_view(summary: TierSummary, formatter: Formatter) -> PrizeTierView:
    return PrizeTierView(
        hit_count=summary.hit_count,
        label=summary.label,
        winner_count=summary.winner_count,
        prize_amount=formatter.format_currency(summary.prize_amount),
        has_winners=summary.has_winners,
    )


def present_result(result: DrawResult, formatter: Formatter | None = None) -> ResultView:
    formatter = formatter or get_formatter()
    money = formatter.format_currency
    return ResultView(
        contest_number=result.contest_number,
        draw_date=formatter.format_date(result.draw_date),
        status=ROLLED_OVER_HEADLINE if result.is_rolled_over else WON_HEADLINE,
        is_rolled_over=result.is_rolled_over,
        draw_location_name=result.draw_location_name,
        draw_location_region=result.draw_location_region,
        winning_numbers=list(result.winning_numbers),
        next_contest_number=result.next_contest_number,
        next_contest_date=formatter.format_date(result.next_contest_date),
        next_contest_estimated_prize=money(result.next_contest_estimated_prize),
        next_contest_accumulated_prize=money(result.next_contest_accumulated_prize),
        zero_five_contest_number=result.zero_five_contest_number,
        zero_five_accumulated_prize=money(result.zero_five_accumulated_prize),
        special_accumulated_prize=money(result.special_accumulated_prize),
        total_collected=money(result.total_collected),
        prize_tiers=[_tier_view(summary, formatter) for summary in summarize_tiers(result.prize_tiers)],
        search_url=str(get_settings().results_search_url),
    )


def present_state(state: ResultState, formatter: Formatter | None = None) -> ResultView | None:
    """Turn a retrieval snapshot into a view.

    Returns ``None`` while the payload is still loading or when it holds no
    usable draw. Raises ``ResultUnavailableError`` when retrieval failed.
    """

    if state.loading:
        return None
    if state.error:
        raise ResultUnavailableError(state.error)
    result = adapt_payload(state.data)
    if result is None:
        return None
    logger.debug("Presenting contest {}", result.contest_number)
    return present_result(result, formatter)
