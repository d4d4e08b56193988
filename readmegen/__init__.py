"""Generate README files for GitHub repositories with Gemini."""

from .analysis.classifier import classify
from .agents.orchestrator import PipelineState, ReadmePipeline, ReadmeResult
from .core.types import ArchetypeLabel, RepoTarget, RepositoryFacts
from .services.readme_generator import ReadmeGenerator
from .tools.github import GitHubClient, fetch_repo_details
from .tools.repo_url import parse_github_url, resolve_target

__version__ = "0.1.0"

__all__ = [
    "ArchetypeLabel",
    "GitHubClient",
    "PipelineState",
    "ReadmeGenerator",
    "ReadmePipeline",
    "ReadmeResult",
    "RepoTarget",
    "RepositoryFacts",
    "classify",
    "fetch_repo_details",
    "parse_github_url",
    "resolve_target",
]
