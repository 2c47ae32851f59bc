"""FastAPI dashboard server for the Scamwatch intelligence store."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from scamwatch import __version__
from scamwatch.agents.analyst import analyze_entry
from scamwatch.config import Settings
from scamwatch.dashboard import compute_stats, filter_entries, format_currency, format_usd
from scamwatch.models import (
    ALL_CATEGORIES,
    PLATFORMS,
    IntelligenceEntry,
    ScamCategory,
    SearchParams,
)
from scamwatch.pipeline import ResearchNotEligibleError, run_initial_load, run_research
from scamwatch.services.generation import GenerationClient, create_generation_client
from scamwatch.store import IntelligenceStore

logger = logging.getLogger(__name__)


class ResearchRequest(BaseModel):
    query: str | None = None
    category: str | None = None
    platform: str | None = None
    date_range: str | None = None
    count: int | None = Field(default=None, ge=1)


class AnalysisRequest(BaseModel):
    query_context: str | None = None


def _entry_payload(entry: IntelligenceEntry) -> dict[str, Any]:
    return entry.model_dump(mode="json", by_alias=True)


def _table_row(entry: IntelligenceEntry) -> dict[str, Any]:
    """Row shown in the entry table."""
    impact = entry.financial_impact
    return {
        "id": entry.id,
        "category": entry.category.value,
        "platform": entry.platform,
        "reported_loss_usd": impact.reported_loss_usd,
        "reported_loss_display": format_usd(impact.reported_loss_usd),
        "severity": entry.severity.value,
        "confidence": impact.confidence,
    }


def create_app(
    settings: Settings,
    client: GenerationClient | None = None,
    store: IntelligenceStore | None = None,
) -> FastAPI:
    """Build the API around one generation client and one store.

    Without an injected client one is created from settings, which fails
    when no API key is configured.
    """
    client = client or create_generation_client(settings)
    store = store if store is not None else IntelligenceStore.seeded()

    async def initial_load() -> int:
        added = await run_initial_load(client, store, settings.generation)
        logger.info(f"Initial load complete: {added} entries generated")
        return added

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Seed data is served while the startup batch generates in the background
        if settings.api.initial_load:
            app.state.initial_load = asyncio.create_task(initial_load())
        yield

        task: asyncio.Task | None = app.state.initial_load
        if task is None:
            return
        if not task.done():
            logger.info("Cancelling unfinished initial load")
            task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error(f"Initial load failed: {e}", exc_info=True)

    app = FastAPI(title="Scamwatch Intelligence API", version=__version__, lifespan=lifespan)
    app.state.store = store
    app.state.client = client
    app.state.settings = settings
    app.state.initial_load = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health")
    async def health(request: Request):
        task: asyncio.Task | None = request.app.state.initial_load
        return {
            "status": "ok",
            "entries": len(request.app.state.store),
            "loading": task is not None and not task.done(),
        }

    @app.get("/api/config")
    async def get_config(request: Request):
        """Return non-secret configuration values."""
        s: Settings = request.app.state.settings
        return {
            "model": s.generation.model,
            "output_mode": s.generation.output_mode,
            "initial_count": s.generation.initial_count,
            "research_count": s.generation.research_count,
            "gemini_api_key_set": bool(s.gemini_api_key),
            "categories": [ALL_CATEGORIES] + [c.value for c in ScamCategory],
            "platforms": PLATFORMS,
        }

    @app.get("/api/stats")
    async def get_stats(request: Request):
        """Dashboard aggregates with display-formatted totals."""
        stats = compute_stats(request.app.state.store.snapshot())
        return {
            **stats.model_dump(),
            "display": {
                "total_reported_loss": format_currency(stats.total_reported_loss),
                "total_recovered": format_currency(stats.total_recovered),
                "average_loss": format_currency(stats.average_loss),
            },
        }

    @app.get("/api/entries")
    async def list_entries(
        request: Request,
        search: str = "",
        category: str | None = Query(default=None),
    ):
        """Entry table filtered by search term and category."""
        entries = filter_entries(request.app.state.store.snapshot(), search, category)
        return [_table_row(e) for e in entries]

    @app.get("/api/entries/{entry_id}")
    async def get_entry(request: Request, entry_id: str):
        entry = request.app.state.store.get(entry_id)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"Entry {entry_id} not found")
        return _entry_payload(entry)

    @app.post("/api/entries/{entry_id}/analysis")
    async def analyze(request: Request, entry_id: str, body: AnalysisRequest):
        entry = request.app.state.store.get(entry_id)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"Entry {entry_id} not found")
        analysis = await analyze_entry(request.app.state.client, entry, body.query_context)
        return {"id": entry_id, "analysis": analysis}

    @app.post("/api/research")
    async def research(request: Request, body: ResearchRequest):
        """Generate a filtered batch, append it and return the executive summary."""
        s: Settings = request.app.state.settings
        params = SearchParams(
            count=body.count or s.generation.research_count,
            query=body.query,
            category=body.category,
            platform=body.platform,
            date_range=body.date_range,
        )
        try:
            outcome = await run_research(
                request.app.state.client, request.app.state.store, params, s.generation
            )
        except ResearchNotEligibleError as e:
            raise HTTPException(status_code=422, detail=str(e))

        return {
            "summary": outcome.summary,
            "entries": [_entry_payload(e) for e in outcome.entries],
            "total_entries": len(request.app.state.store),
        }

    return app
