"""Core data types and Pydantic models."""

from enum import Enum
from typing import List, Dict, Optional, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime


class ArchetypeLabel(str, Enum):
    """Documentation archetype that selects the README instruction block."""
    COMPREHENSIVE = "comprehensive"
    STARTUP = "startup"
    OPEN_SOURCE = "open_source"
    LIBRARY = "library"
    PORTFOLIO = "portfolio"
    ACADEMIC = "academic"
    ENTERPRISE = "enterprise"
    MINIMALIST = "minimalist"


class RepoTarget(BaseModel):
    """Owner/name pair identifying a GitHub repository."""
    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Repository owner login")
    repo: str = Field(..., description="Repository name")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class PackageManifest(BaseModel):
    """The parts of a decoded package.json the generator cares about.

    Off-type values are dropped field by field so one odd entry does not
    discard the whole manifest.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    version: Optional[str] = None
    scripts: Dict[str, str] = Field(default_factory=dict)
    dependencies: Dict[str, str] = Field(default_factory=dict)
    dev_dependencies: Dict[str, str] = Field(default_factory=dict, alias="devDependencies")
    workspaces: Optional[Any] = None

    @field_validator("name", "version", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> Optional[str]:
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return str(value)
        return None

    @field_validator("scripts", "dependencies", "dev_dependencies", mode="before")
    @classmethod
    def string_entries(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, dict):
            return {}
        return {k: v for k, v in value.items() if isinstance(k, str) and isinstance(v, str)}


class RepositoryFacts(BaseModel):
    """Consolidated, read-only metadata gathered for one generation request."""
    model_config = ConfigDict(frozen=True)

    # Identity
    owner: str = Field(default="", description="Owner login")
    name: str = Field(default="", description="Repository name")
    html_url: str = Field(default="", description="Canonical repository URL")
    homepage: Optional[str] = Field(None, description="Project homepage")

    # Descriptive
    description: Optional[str] = Field(None, description="Free-text description")
    topics: List[str] = Field(default_factory=list, description="Topic tags")
    language: Optional[str] = Field(None, description="Primary language")
    languages: Dict[str, int] = Field(default_factory=dict, description="Language to byte count")

    # Popularity / activity
    stargazers_count: int = 0
    forks_count: int = 0
    open_issues_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    releases: List[str] = Field(default_factory=list, description="Release tags, most recent first")
    contributors: List[str] = Field(default_factory=list, description="Contributor logins")

    license_name: Optional[str] = None

    # Top-level presence flags
    has_package_json: bool = False
    has_requirements: bool = False
    has_dockerfile: bool = False
    has_makefile: bool = False
    has_gemfile: bool = False
    has_composer_json: bool = False
    has_setup_py: bool = False

    package_manifest: Optional[PackageManifest] = None
    files: List[str] = Field(default_factory=list, description="Top-level file and directory names")
