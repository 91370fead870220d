from __future__ import annotations

import httpx
import pytest

from ingestion.client import CaixaResultsClient
from ingestion.normalize import adapt_payload


@pytest.mark.network
def test_caixa_client_live_fetches_latest_draw():
    client = CaixaResultsClient()
    try:
        payload = client.fetch_latest()
    except (httpx.HTTPError, ValueError) as exc:
        pytest.skip(f"Caixa API unavailable: {exc}")
    finally:
        client.close()

    result = adapt_payload(payload)
    assert result is not None, "Caixa API returned no usable draw"
    assert result.contest_number, "draw payload missing contest number"
    assert len(result.winning_numbers) == 6
    assert result.prize_tiers, "draw payload missing prize tiers"
