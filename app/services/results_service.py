"""Read-only facade used by the API and scripts to obtain display-ready results."""

from __future__ import annotations

from app.schemas import ResultView
from app.services.formatting import Formatter, get_formatter
from app.services.presenter import present_state
from ingestion.client import CaixaResultsClient
from ingestion.service import load_results


class ResultsService:
    def __init__(
        self,
        client: CaixaResultsClient | None = None,
        formatter: Formatter | None = None,
    ) -> None:
        self._client = client
        self._formatter = formatter or get_formatter()

    def latest(self) -> ResultView | None:
        state = load_results(client=self._client)
        return present_state(state, self._formatter)

    def contest(self, contest_number: int) -> ResultView | None:
        state = load_results(contest=contest_number, client=self._client)
        return present_state(state, self._formatter)
