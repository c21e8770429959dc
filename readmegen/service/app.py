"""FastAPI application entrypoint for readmegen service mode."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI, Query
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..composer import Composer, ReadmeGenerationError
from ..config import ReadmeGenConfig, load_config
from ..export.github import ExportError, GitHubExporter
from ..logging import get_logger
from ..markdown.badges import SUGGESTED_TECHNOLOGIES, SUPPORTED_LICENSES
from ..models import ProjectDescription, TemplateType
from ..sections.constants import sections_for

_GITHUB_REPO_PATTERN = r"^(https?://github\.com/[\w-]+/[\w-]+)?$"
_GITHUB_EXPORT_PATTERN = r"^https?://github\.com/[\w-]+/[\w-]+.*$"
_DEMO_URL_PATTERN = r"^(https?://.*)?$"

logger = get_logger("service")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateRequest(_CamelModel):
    project_name: str = Field(min_length=1, max_length=100)
    tagline: Optional[str] = Field(default=None, max_length=200)
    description: str = Field(min_length=10, max_length=2000)
    template_type: Optional[TemplateType] = None
    technologies: List[str] = Field(default_factory=list)
    features: Optional[str] = Field(default=None, max_length=1000)
    installation: Optional[str] = Field(default=None, max_length=1000)
    usage: Optional[str] = Field(default=None, max_length=1000)
    license: Optional[str] = Field(default=None, max_length=50)
    author: Optional[str] = Field(default=None, max_length=100)
    repository_url: Optional[str] = Field(default=None, pattern=_GITHUB_REPO_PATTERN)
    demo_url: Optional[str] = Field(default=None, pattern=_DEMO_URL_PATTERN)
    include_badges: bool = True
    include_table_of_contents: bool = False
    include_contributing: bool = True
    include_license: bool = True
    include_screenshots: bool = False

    def to_project(self) -> ProjectDescription:
        return ProjectDescription(**self.model_dump())


class GenerateResponse(BaseModel):
    status: str
    markdown: Optional[str] = None
    error: Optional[str] = None


class ExportRequest(_CamelModel):
    repository_url: str = Field(min_length=1, pattern=_GITHUB_EXPORT_PATTERN)
    readme_content: str = Field(min_length=1)
    github_token: str = Field(min_length=1)


class HealthResponse(BaseModel):
    status: str


def _default_composer() -> Composer:
    return Composer()


def _exporter_from_config(config: ReadmeGenConfig) -> Callable[[], GitHubExporter]:
    def _factory() -> GitHubExporter:
        return GitHubExporter(
            api_url=config.github.api_url,
            default_token=config.github.token,
            request_timeout=config.github.request_timeout,
        )

    return _factory


def create_app(
    composer_factory: Callable[[], Composer] = _default_composer,
    exporter_factory: Optional[Callable[[], GitHubExporter]] = None,
    *,
    config: Optional[ReadmeGenConfig] = None,
) -> FastAPI:
    """Create the FastAPI application exposing README generation and export."""
    if exporter_factory is None:
        exporter_factory = _exporter_from_config(config or load_config(Path.cwd()))

    app = FastAPI(title="README Generator Service", version="1.0.0")

    async def get_composer() -> Composer:
        return composer_factory()

    async def get_exporter() -> GitHubExporter:
        return exporter_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/api/generate", response_model=GenerateResponse, response_model_exclude_none=True)
    async def generate(
        payload: GenerateRequest,
        composer: Composer = Depends(get_composer),
    ) -> Any:
        logger.info("Received README generation request for project: %s", payload.project_name)
        try:
            markdown = composer.compose(payload.to_project())
        except ReadmeGenerationError as exc:
            return JSONResponse(
                status_code=400, content={"status": "error", "error": str(exc)}
            )
        return GenerateResponse(status="success", markdown=markdown)

    @app.post("/api/export")
    def export(
        payload: ExportRequest,
        exporter: GitHubExporter = Depends(get_exporter),
    ) -> Any:
        # Sync handler: FastAPI runs it in the threadpool so blocking HTTP stays off the loop.
        logger.info("Received GitHub export request for repository: %s", payload.repository_url)
        try:
            outcome = exporter.export(
                payload.repository_url, payload.readme_content, payload.github_token
            )
        except ExportError as exc:
            logger.error("GitHub export failed: %s", exc)
            return JSONResponse(
                status_code=500, content={"status": "error", "error": str(exc)}
            )
        return {"status": "success", "message": outcome.message}

    @app.get("/api/validate-token")
    def validate_token(
        token: str = Query(...),
        exporter: GitHubExporter = Depends(get_exporter),
    ) -> Dict[str, bool]:
        try:
            valid = exporter.validate_token(token)
        except ExportError as exc:
            logger.warning("Token validation failed: %s", exc)
            valid = False
        return {"valid": valid}

    @app.get("/api/templates")
    async def templates() -> Dict[str, Any]:
        return {
            "types": [template.value for template in TemplateType],
            "sections": {
                template.value: list(sections_for(template)) for template in TemplateType
            },
            "technologies": list(SUGGESTED_TECHNOLOGIES),
            "licenses": list(SUPPORTED_LICENSES),
        }

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        _: Any, exc: RequestValidationError
    ) -> JSONResponse:
        errors: Dict[str, str] = {}
        for error in exc.errors():
            location = [str(part) for part in error.get("loc", ()) if part != "body"]
            field = ".".join(location) or "body"
            errors[field] = str(error.get("msg", "Invalid value"))
        return JSONResponse(status_code=400, content={"status": "error", "errors": errors})

    return app


def run_service(
    host: str = "0.0.0.0", port: int = 8000, *, config: Optional[ReadmeGenConfig] = None
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app(config=config)
    uvicorn.run(app, host=host, port=port)
