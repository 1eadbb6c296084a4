"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from tidemark.config import load_config
from tidemark.engine import ENGINE_VERSION
from tidemark.models.assessment import AssessmentInput  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from tidemark.config import ResilienceConfig
    from tidemark.engine import AssessmentEngine

logger = logging.getLogger(__name__)


def _format_error_path(loc: tuple[Any, ...] | list[Any]) -> str:
    """Render a pydantic error location as a dotted field path."""
    parts = [str(p) for p in loc]
    if parts and parts[0] == "body":
        parts = parts[1:]
    return ".".join(parts) or "body"


def create_app(
    *,
    engine: AssessmentEngine | None = None,
    config: ResilienceConfig | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from ``config`` on first
        request to /api/assess.
    config
        Optional configuration. Defaults to ``load_config()``, which reads
        the environment.
    """
    config = config or load_config()
    logging.getLogger("tidemark").setLevel(config.log_level)

    app = FastAPI(title="Tidemark", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine
    app.state.config = config

    def _get_engine() -> AssessmentEngine:
        eng: AssessmentEngine | None = app.state.engine
        if eng is not None:
            return eng
        # Lazy-create from configuration
        from tidemark.api.deps import create_engine

        eng = create_engine(app.state.config)
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # Error handlers
    # ------------------------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [
            {
                "path": _format_error_path(err.get("loc", ())),
                "message": err.get("msg", ""),
            }
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request data", "details": details},
        )

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "healthy", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/assess
    # ------------------------------------------------------------------

    @app.post("/api/assess", response_model=None)
    def assess(assessment: AssessmentInput) -> dict[str, Any] | JSONResponse:
        try:
            result = _get_engine().assess(assessment)
        except Exception:
            logger.exception("Assessment error")
            return JSONResponse(
                status_code=500,
                content={
                    "error": "Internal server error",
                    "message": "Failed to process assessment request",
                },
            )
        return result.to_response_dict()

    return app
