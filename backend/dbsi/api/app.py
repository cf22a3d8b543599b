"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from dbsi.api.deps import Services, create_services, load_settings  # noqa: E402
from dbsi.data.labels import BUILDING_USE_LABELS  # noqa: E402
from dbsi.engine import ENGINE_VERSION  # noqa: E402
from dbsi.exceptions import (  # noqa: E402
    InputValidationError,
    ReportRenderingError,
    UnknownSectionError,
)
from dbsi.models.project import ProjectContext  # noqa: E402
from dbsi.models.result import SectionResult  # noqa: E402

logger = logging.getLogger(__name__)


class EvaluateRequest(BaseModel):
    """Body of POST /api/sections/{section_id}/evaluate."""

    project: dict[str, Any]
    input: dict[str, Any] = Field(default_factory=dict)


class ReportRequest(BaseModel):
    """Body of POST /api/report and /api/report/pdf."""

    project: dict[str, Any]
    results: list[SectionResult] = Field(default_factory=list)


def create_app(*, services: Services | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    services
        Optional pre-built collaborators for dependency injection (e.g.
        tests). If not provided, they are created from environment settings.
    """
    settings = load_settings()
    app = FastAPI(title="DB-SI Calculator", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.services = services or create_services(settings)

    def _services() -> Services:
        svc: Services = app.state.services
        return svc

    def _project(data: dict[str, Any]) -> ProjectContext:
        return ProjectContext.from_form(data)

    @app.exception_handler(InputValidationError)
    async def _validation_error(_request: Any, exc: InputValidationError) -> JSONResponse:
        logger.info("Rejected input: %s", exc)
        return JSONResponse(
            status_code=422,
            content={
                "detail": str(exc),
                "section": exc.section,
                "fields": list(exc.fields),
            },
        )

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/sections
    # ------------------------------------------------------------------

    @app.get("/api/sections")
    def sections() -> list[dict[str, Any]]:
        calculator = _services().calculator
        listing: list[dict[str, Any]] = []
        for section_id in calculator.sections:
            evaluator = calculator.evaluator(section_id)
            listing.append({
                "id": section_id.value,
                "title": evaluator.title,
                "accepted_uses": [
                    {"value": use.value, "label": BUILDING_USE_LABELS[use]}
                    for use in sorted(evaluator.accepted_uses)
                ],
            })
        return listing

    # ------------------------------------------------------------------
    # POST /api/project/validate
    # ------------------------------------------------------------------

    @app.post("/api/project/validate")
    def validate_project(project: dict[str, Any]) -> dict[str, Any]:
        return _project(project).model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/sections/{section_id}/evaluate
    # ------------------------------------------------------------------

    @app.post("/api/sections/{section_id}/evaluate")
    def evaluate(section_id: str, body: EvaluateRequest) -> dict[str, Any]:
        context = _project(body.project)
        try:
            result = _services().calculator.evaluate(section_id, context, body.input)
        except UnknownSectionError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {
            "result": result.model_dump(mode="json"),
            "compliance": result.compliance,
            "calculations": [
                {"label": label, "value": value} for label, value in result.calculations()
            ],
        }

    # ------------------------------------------------------------------
    # POST /api/report
    # ------------------------------------------------------------------

    @app.post("/api/report")
    def report(body: ReportRequest) -> dict[str, Any]:
        context = _project(body.project)
        model = _services().aggregator.aggregate(context, body.results)
        return model.to_export_dict()

    # ------------------------------------------------------------------
    # POST /api/report/pdf
    # ------------------------------------------------------------------

    @app.post("/api/report/pdf")
    def report_pdf(body: ReportRequest) -> Response:
        svc = _services()
        context = _project(body.project)
        model = svc.aggregator.aggregate(context, body.results)
        try:
            rendered = svc.renderer.render(model)
        except ReportRenderingError as exc:
            logger.exception("Report rendering failed")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return Response(
            content=rendered.content,
            media_type="application/pdf",
            headers={
                "Content-Disposition": f'attachment; filename="{rendered.filename}"',
            },
        )

    return app
