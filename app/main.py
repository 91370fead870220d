from __future__ import annotations

from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Path
from fastapi.responses import RedirectResponse

from . import schemas
from .core.config import settings
from .services.presenter import ResultUnavailableError
from .services.results_service import ResultsService

app = FastAPI(title="Mega-Sena Results API", version="0.1.0", debug=settings.debug)

_ERROR_RESPONSES = {
    404: {"model": schemas.ErrorDetail, "description": "No draw result available"},
    502: {"model": schemas.ErrorDetail, "description": "Upstream results service failed"},
}


@app.get("/healthz", tags=["system"])
def healthcheck() -> dict[str, str]:
    """Basic readiness probe consumed by infrastructure monitors."""

    return {"status": "ok"}


def _results_service() -> ResultsService:
    """Provide the results service wired with a fresh upstream client per request."""

    return ResultsService()


def _render(load) -> schemas.ResultView:
    try:
        view = load()
    except ResultUnavailableError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if view is None:
        raise HTTPException(status_code=404, detail="Result not found")
    return view


@app.get("/results/search", tags=["results"], response_class=RedirectResponse)
def search_results():
    """Send the user to the official page for looking up other contests."""

    return RedirectResponse(str(settings.results_search_url))


@app.get(
    "/results/latest",
    response_model=schemas.ResultView,
    responses=_ERROR_RESPONSES,
    tags=["results"],
)
def latest_result(service: ResultsService = Depends(_results_service)):
    """Return the most recent draw, normalized and formatted for display."""

    return _render(service.latest)


@app.get(
    "/results/{contest}",
    response_model=schemas.ResultView,
    responses=_ERROR_RESPONSES,
    tags=["results"],
)
def contest_result(
    contest: Annotated[int, Path(ge=1, description="Contest number")],
    service: ResultsService = Depends(_results_service),
):
    """Return a specific draw by contest number."""

    return _render(lambda: service.contest(contest))
