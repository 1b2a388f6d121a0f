"""FastAPI web server for hrcard."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

from hrcard import CardRenderer, CardConfig, __version__
from hrcard.core.orchestrator import normalize_username
from hrcard.core.renderer import render_error_card
from hrcard.exceptions import HrcardError, MissingIdentifierError
from hrcard.logging import get_logger

SVG_MEDIA_TYPE = "image/svg+xml"
CARD_CACHE_CONTROL = "public, max-age=600"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class ConfigResponse(BaseModel):
    """Current renderer configuration."""

    acquisition_mode: str = Field(
        ...,
        description="Where profile data comes from. "
        "'structured' calls the JSON endpoints, 'unstructured' scrapes the rendered profile page.",
        json_schema_extra={"example": "structured", "enum": ["structured", "unstructured"]},
    )
    upstream_base_url: str = Field(
        ...,
        description="Base URL of the upstream service.",
        json_schema_extra={"example": "https://www.hackerrank.com"},
    )
    cache_backend: str = Field(
        ...,
        description="Cache for rendered cards. Options: 'memory' (process-local), 'none' (disabled).",
        json_schema_extra={"example": "memory", "enum": ["memory", "none"]},
    )
    cache_ttl_seconds: int = Field(
        ...,
        description="Age after which a cached card is re-rendered.",
        json_schema_extra={"example": 600},
    )
    cache_max_entries: int = Field(
        ...,
        description="Maximum number of cached cards; the oldest is evicted first.",
        json_schema_extra={"example": 1024},
    )
    log_level: str = Field(
        ...,
        description="Logging verbosity level. Options: 'DEBUG', 'INFO', 'WARNING', 'ERROR'.",
        json_schema_extra={"example": "INFO", "enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
    )


# Global renderer instance, shares one cache across requests
_renderer: Optional[CardRenderer] = None
_log = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage renderer lifecycle."""
    global _renderer
    _renderer = CardRenderer(CardConfig())
    await _renderer.__aenter__()
    yield
    await _renderer.__aexit__(None, None, None)
    _renderer = None


app = FastAPI(
    title="hrcard API",
    description="HackerRank achievement card renderer",
    version=__version__,
    lifespan=lifespan,
)


def _svg_response(markup: str, cache_control: str | None = None) -> Response:
    headers = {"Cache-Control": cache_control} if cache_control else None
    return Response(content=markup, media_type=SVG_MEDIA_TYPE, headers=headers)


async def _render(username: str) -> Response:
    if not normalize_username(username):
        raise MissingIdentifierError("Missing username parameter")

    try:
        markup = await _renderer.render(username)
    except HrcardError as e:
        _log.error("render_failed", username=username, error=str(e))
        return _svg_response(render_error_card(str(e)))
    except Exception as e:
        # The card endpoint always answers with an image
        _log.exception("render_crashed", username=username)
        return _svg_response(render_error_card(str(e) or type(e).__name__))

    return _svg_response(markup, CARD_CACHE_CONTROL)


@app.exception_handler(MissingIdentifierError)
async def missing_identifier_handler(request, exc: MissingIdentifierError):
    return PlainTextResponse(str(exc), status_code=400)


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
    )


@app.get("/api/card", tags=["Cards"], response_class=Response)
async def card_query(username: str = Query("", description="HackerRank username")):
    """
    Render the achievement card for a profile.

    Always answers with an SVG: failures produce an error card.
    """
    return await _render(username)


@app.get("/api/card/{username}", tags=["Cards"], response_class=Response)
async def card_path(username: str):
    """Render the achievement card for a profile given in the path."""
    return await _render(username)


@app.get("/api/config", response_model=ConfigResponse, tags=["System"])
async def get_default_config():
    """
    Get renderer configuration.

    **Configuration is set via environment variables** with the `HRCARD_` prefix:
    - `HRCARD_ACQUISITION_MODE=unstructured`
    - `HRCARD_CACHE_TTL_SECONDS=300`
    """
    config = _renderer.config if _renderer else CardConfig()
    return ConfigResponse(
        acquisition_mode=config.acquisition_mode.value,
        upstream_base_url=config.upstream_base_url,
        cache_backend=config.cache_backend.value,
        cache_ttl_seconds=config.cache_ttl_seconds,
        cache_max_entries=config.cache_max_entries,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
