"""FastAPI application entrypoint for solscrape service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .. import __version__
from ..errors import ScrapeError
from ..models import AggregationResult
from ..scraper import Scraper


class ScrapeRequest(BaseModel):
    source: str
    local: bool = False
    destination: Optional[str] = None
    output_name: Optional[str] = None
    include_lib: bool = False
    include_test: bool = False
    include_script: bool = False
    no_headers: bool = False


class ScrapeResponse(BaseModel):
    output_path: str
    file_count: int
    line_count: int
    files_processed: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_scraper() -> Scraper:
    return Scraper()


def create_app(scraper_factory: Callable[[], Scraper] = _default_scraper) -> FastAPI:
    """Create the FastAPI application exposing the scrape pipeline."""
    app = FastAPI(title="Solscrape Service", version=__version__)

    async def get_scraper() -> Scraper:
        return scraper_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/scrape", response_model=ScrapeResponse)
    async def scrape(
        payload: ScrapeRequest,
        scraper: Scraper = Depends(get_scraper),
    ) -> ScrapeResponse:
        def _run_scrape() -> AggregationResult:
            return scraper.scrape(
                payload.source,
                local=payload.local,
                destination=payload.destination,
                output_name=payload.output_name,
                include_lib=payload.include_lib,
                include_test=payload.include_test,
                include_script=payload.include_script,
                no_headers=payload.no_headers,
            )

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run_scrape)
        return ScrapeResponse(
            output_path=str(result.output_path),
            file_count=result.file_count,
            line_count=result.line_count,
            files_processed=list(result.files_processed),
        )

    @app.exception_handler(FileNotFoundError)
    async def file_not_found_handler(_: Any, exc: FileNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ScrapeError)
    async def scrape_error_handler(_: Any, exc: ScrapeError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover - integration path
    try:
        import uvicorn
    except ModuleNotFoundError as exc:
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install solscrape[service]`."
        ) from exc

    uvicorn.run(create_app(), host=host, port=port)
