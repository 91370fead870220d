from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from app.core.config import settings


class CaixaResultsClient:
    """Thin wrapper around the public Caixa lottery results endpoint."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        results_path: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or str(settings.results_api_base_url)
        self.results_path = (results_path or settings.results_path).rstrip("/")
        self.timeout = timeout or settings.request_timeout_seconds
        self.client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def _get(self, path: str) -> Any:
        logger.info("Caixa GET {}", path)
        response = self.client.get(path)
        response.raise_for_status()
        return response.json()

    def fetch_latest(self) -> Any:
        return self._get(self.results_path)

    def fetch_contest(self, contest_number: int) -> Any:
        if contest_number <= 0:
            raise ValueError("contest_number must be a positive integer")
        return self._get(f"{self.results_path}/{contest_number}")

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "CaixaResultsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
