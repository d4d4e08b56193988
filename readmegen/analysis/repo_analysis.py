"""Derived analysis values fed into the README prompt.

Turns raw repository facts into display values: language distribution,
installation method, complexity tier, activity and framework/deployment
detection.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from ..core.types import RepositoryFacts


class RepoAnalysis(BaseModel):
    """Analysis values derived from repository facts."""

    language_distribution: str
    tech_stack: str
    installation_method: str
    run_commands: str
    complexity: str
    file_count: int
    is_actively_maintained: bool
    has_tests: bool
    has_ci: bool
    has_docs: bool
    is_monorepo: bool
    has_docker: bool
    has_api: bool
    frameworks: List[str]
    deployment: List[str]


ACTIVE_WINDOW = timedelta(days=90)
MAX_DISTRIBUTION_LANGUAGES = 5
MAX_SCRIPT_COMMANDS = 3

# Dependency name -> display name, in reporting order
FRAMEWORK_DEPENDENCIES = [
    ("react", "React"),
    ("vue", "Vue.js"),
    ("angular", "Angular"),
    ("express", "Express.js"),
    ("next", "Next.js"),
    ("nuxt", "Nuxt.js"),
    ("svelte", "Svelte"),
    ("fastapi", "FastAPI"),
    ("django", "Django"),
    ("flask", "Flask"),
]

# File name fragment -> deployment target, in reporting order
DEPLOYMENT_MARKERS = [
    ("Dockerfile", "Docker"),
    ("docker-compose", "Docker Compose"),
    ("vercel.json", "Vercel"),
    ("netlify.toml", "Netlify"),
    (".github/workflows", "GitHub Actions"),
    ("heroku", "Heroku"),
]


def language_distribution(languages: Dict[str, int]) -> str:
    """Format the top languages by share of total bytes.

    >>> language_distribution({"JavaScript": 300, "Python": 100})
    'JavaScript (75.0%), Python (25.0%)'
    """
    total = sum(languages.values())
    if not languages or total <= 0:
        return "Unknown"

    ranked = sorted(languages.items(), key=lambda item: item[1], reverse=True)
    return ", ".join(
        f"{lang} ({bytes_ / total * 100:.1f}%)"
        for lang, bytes_ in ranked[:MAX_DISTRIBUTION_LANGUAGES]
    )


def installation_method(facts: RepositoryFacts) -> Tuple[str, str]:
    """Pick the installation method and example run commands.

    Precedence: package.json, requirements.txt, Gemfile, composer.json,
    Makefile. Returns empty strings when nothing matches.
    """
    if facts.has_package_json:
        scripts = facts.package_manifest.scripts if facts.package_manifest else {}
        commands = ", ".join(
            f"npm run {script}" for script in list(scripts)[:MAX_SCRIPT_COMMANDS]
        )
        return "npm/yarn", commands
    if facts.has_requirements:
        return "pip", "python main.py or python app.py"
    if facts.has_gemfile:
        return "bundle", "bundle exec ruby app.rb"
    if facts.has_composer_json:
        return "composer", "php index.php"
    if facts.has_makefile:
        return "make", "make, make install, make run"
    return "", ""


def complexity_tier(file_count: int) -> str:
    if file_count > 50:
        return "Complex"
    if file_count > 20:
        return "Medium"
    return "Simple"


def is_actively_maintained(updated_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
    """True when the last update falls within the past 90 days."""
    if updated_at is None:
        return False
    now = now or datetime.now(timezone.utc)
    if updated_at.tzinfo is None:
        updated_at = updated_at.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return updated_at > now - ACTIVE_WINDOW


def detect_frameworks(facts: RepositoryFacts) -> List[str]:
    manifest = facts.package_manifest
    if manifest is None or not manifest.dependencies:
        return []
    return [
        display for dependency, display in FRAMEWORK_DEPENDENCIES
        if dependency in manifest.dependencies
    ]


def detect_deployment(facts: RepositoryFacts) -> List[str]:
    deployment = [
        target for marker, target in DEPLOYMENT_MARKERS
        if _any_file_contains(facts.files, marker)
    ]
    if facts.package_manifest and "build" in facts.package_manifest.scripts:
        deployment.append("Static Build")
    return deployment


def _any_file_contains(files: List[str], *fragments: str) -> bool:
    return any(fragment in f for f in files for fragment in fragments)


def analyze_repository(facts: RepositoryFacts, now: Optional[datetime] = None) -> RepoAnalysis:
    """Compute every derived value used by the README prompt.

    Args:
        facts: Repository facts
        now: Reference time for the activity check (default: current UTC time)

    Returns:
        RepoAnalysis for the repository
    """
    files = facts.files
    manifest = facts.package_manifest
    method, commands = installation_method(facts)

    return RepoAnalysis(
        language_distribution=language_distribution(facts.languages),
        tech_stack=", ".join(facts.languages),
        installation_method=method,
        run_commands=commands,
        complexity=complexity_tier(len(files)),
        file_count=len(files),
        is_actively_maintained=is_actively_maintained(facts.updated_at, now),
        has_tests=(
            _any_file_contains(files, "test", "spec")
            or (facts.has_package_json and manifest is not None and "test" in manifest.scripts)
        ),
        has_ci=_any_file_contains(files, ".github", ".travis", "jenkins"),
        has_docs=_any_file_contains(files, "docs", "documentation"),
        is_monorepo=(
            _any_file_contains(files, "packages", "workspaces")
            or bool(manifest and manifest.workspaces)
        ),
        has_docker=facts.has_dockerfile or _any_file_contains(files, "docker-compose"),
        has_api=(
            "api" in (facts.description or "").lower()
            or _any_file_contains(files, "swagger", "openapi")
        ),
        frameworks=detect_frameworks(facts),
        deployment=detect_deployment(facts),
    )
