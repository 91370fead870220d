from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from .client import CaixaResultsClient


@dataclass(frozen=True, slots=True)
class ResultState:
    """Snapshot of a results retrieval: the raw payload, in-flight flag, or error."""

    data: Any = None
    loading: bool = False
    error: str | None = None

    @classmethod
    def pending(cls) -> "ResultState":
        return cls(loading=True)


def _fetch(client: CaixaResultsClient, contest: int | None) -> Any:
    if contest is None:
        return client.fetch_latest()
    return client.fetch_contest(contest)


def load_results(
    *, contest: int | None = None, client: CaixaResultsClient | None = None
) -> ResultState:
    """Fetch a raw results payload and wrap the outcome in a ``ResultState``.

    Transport and HTTP status failures are reported through ``error`` rather
    than raised. A caller-supplied client is left open.
    """

    try:
        if client is not None:
            payload = _fetch(client, contest)
        else:
            with CaixaResultsClient() as owned_client:
                payload = _fetch(owned_client, contest)
    except httpx.HTTPError as exc:
        logger.error("Failed to load Mega-Sena results (contest={}): {}", contest, exc)
        return ResultState(error=str(exc))
    except ValueError as exc:
        # Raised for malformed JSON bodies as well as invalid contest numbers.
        logger.error("Unusable Mega-Sena results response (contest={}): {}", contest, exc)
        return ResultState(error=str(exc))

    logger.info("Loaded Mega-Sena results (contest={})", contest or "latest")
    return ResultState(data=payload)
