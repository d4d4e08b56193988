"""FastAPI application exposing README generation over HTTP."""

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel
from typing import Any, Dict, List, Optional
import logging
from datetime import datetime, timezone

from dotenv import load_dotenv

from ..agents.orchestrator import ReadmePipeline, ReadmeResult
from ..core.config import load_config
from ..core.errors import (
    ConfigurationError,
    GenerationFailed,
    InvalidGenerationResponse,
    ReadmeGenError,
    RepositoryFetchError,
    RepositoryNotFound,
    ValidationError,
)
from ..core.logging import setup_logging
from ..services.prompt_library import TEMPLATES, parse_archetype
from ..tools.repo_url import resolve_target
from .export import README_FILENAME, README_MEDIA_TYPE, export_text

logger = logging.getLogger(__name__)

load_dotenv()

app = FastAPI(title="README Generator", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error class -> HTTP status
ERROR_STATUS = [
    (ValidationError, 400),
    (RepositoryNotFound, 404),
    (RepositoryFetchError, 502),
    (GenerationFailed, 502),
    (InvalidGenerationResponse, 502),
    (ConfigurationError, 500),
]


class ReadmeRequest(BaseModel):
    """README generation request. Give either repo_url or username + repo."""
    username: Optional[str] = None
    repo: Optional[str] = None
    repo_url: Optional[str] = None
    template: Optional[str] = None


class ReadmeResponse(BaseModel):
    """Generated README with the archetype that drove it."""
    readme: str
    template: str
    detected_template: str
    repository: Dict[str, Any]


class TemplateInfo(BaseModel):
    id: str
    name: str
    description: str
    icon: str


@app.on_event("startup")
async def startup_event():
    """Initialize logging from configuration."""
    config = load_config()
    setup_logging(config.logging.level, structured=config.logging.structured)
    logger.info("Application started")


def get_pipeline() -> ReadmePipeline:
    """Build a fresh pipeline per request; nothing is shared between requests."""
    return ReadmePipeline.from_config(load_config())


def _status_for(error: ReadmeGenError) -> int:
    for error_class, status in ERROR_STATUS:
        if isinstance(error, error_class):
            return status
    return 500


async def _generate(request: ReadmeRequest, pipeline: ReadmePipeline) -> ReadmeResult:
    try:
        target = resolve_target(request.username, request.repo, request.repo_url)
        archetype = parse_archetype(request.template)
        return await pipeline.run(target, archetype)
    except ReadmeGenError as e:
        raise HTTPException(status_code=_status_for(e), detail=str(e)) from e


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


@app.get("/templates", response_model=List[TemplateInfo])
async def list_templates():
    """List the README templates that can be selected."""
    return [
        TemplateInfo(id=label.value, name=t.name, description=t.description, icon=t.icon)
        for label, t in TEMPLATES.items()
    ]


@app.post("/readme", response_model=ReadmeResponse)
async def generate_readme(request: ReadmeRequest, pipeline: ReadmePipeline = Depends(get_pipeline)):
    """Fetch repository details and generate a README."""
    result = await _generate(request, pipeline)
    facts = result.facts
    return ReadmeResponse(
        readme=result.readme,
        template=result.archetype.value,
        detected_template=result.detected_archetype.value,
        repository={
            "owner": facts.owner,
            "name": facts.name,
            "html_url": facts.html_url,
            "description": facts.description,
            "language": facts.language,
            "stargazers_count": facts.stargazers_count,
            "forks_count": facts.forks_count,
        }
    )


@app.post("/readme/download")
async def download_readme(request: ReadmeRequest, pipeline: ReadmePipeline = Depends(get_pipeline)):
    """Generate a README and return it as a README.md attachment."""
    result = await _generate(request, pipeline)
    return Response(
        content=export_text(result.readme),
        media_type=README_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{README_FILENAME}"'}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
