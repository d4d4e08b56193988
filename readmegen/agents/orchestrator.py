"""Pipeline that chains Fetch → Classify → Generate for one repository."""

import asyncio
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ..analysis.classifier import classify
from ..core.config import AppConfig
from ..core.errors import ReadmeGenError
from ..core.logging import get_logger
from ..core.types import ArchetypeLabel, RepoTarget, RepositoryFacts
from ..services.gemini import GeminiClient
from ..services.readme_generator import ReadmeGenerator
from ..tools.github import GitHubClient

logger = get_logger(__name__)


class PipelineState(str, Enum):
    """Lifecycle of a single generation request."""
    IDLE = "idle"
    FETCHING = "fetching"
    CLASSIFYING = "classifying"
    GENERATING = "generating"
    DONE = "done"
    FAILED = "failed"


class ReadmeResult(BaseModel):
    """Outcome of a successful pipeline run."""

    target: RepoTarget
    facts: RepositoryFacts
    detected_archetype: ArchetypeLabel
    archetype: ArchetypeLabel
    readme: str


class ReadmePipeline:
    """Runs one README generation per call, with no retries.

    The first failure moves the pipeline to ``FAILED`` and is re-raised
    unchanged. Starting a new run clears the previous result and error.
    """

    def __init__(self, github: GitHubClient, generator: ReadmeGenerator):
        self.github = github
        self.generator = generator
        self.state = PipelineState.IDLE
        self.result: Optional[ReadmeResult] = None
        self.error: Optional[Exception] = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "ReadmePipeline":
        github = GitHubClient(
            base_url=config.github.api_base_url,
            token=config.github.token
        )
        gemini = GeminiClient(
            api_key=config.gemini.api_key,
            base_url=config.gemini.api_base_url
        )
        return cls(github, ReadmeGenerator(gemini))

    def _transition(self, state: PipelineState, target: RepoTarget) -> None:
        logger.debug(
            f"{target.full_name}: {self.state.value} -> {state.value}",
            extra={"owner": target.owner, "repo": target.repo, "state": state.value}
        )
        self.state = state

    async def run(
        self,
        target: RepoTarget,
        archetype: Optional[ArchetypeLabel] = None
    ) -> ReadmeResult:
        """Fetch, classify and generate a README for ``target``.

        Args:
            target: Repository to document
            archetype: Optional override for the detected archetype

        Returns:
            ReadmeResult with facts, archetypes and generated text
        """
        self.result = None
        self.error = None
        self.state = PipelineState.IDLE

        try:
            self._transition(PipelineState.FETCHING, target)
            facts = await self.github.fetch_repo_details(target.owner, target.repo)

            self._transition(PipelineState.CLASSIFYING, target)
            detected = classify(facts)
            effective = archetype or detected

            self._transition(PipelineState.GENERATING, target)
            readme = await self.generator.generate(facts, effective)

            result = ReadmeResult(
                target=target,
                facts=facts,
                detected_archetype=detected,
                archetype=effective,
                readme=readme
            )
        except ReadmeGenError as e:
            self.error = e
            self._transition(PipelineState.FAILED, target)
            logger.error(f"README generation for {target.full_name} failed: {e}")
            raise
        except Exception as e:
            self.error = e
            self._transition(PipelineState.FAILED, target)
            logger.exception(f"Unexpected error generating README for {target.full_name}")
            raise

        self.result = result
        self._transition(PipelineState.DONE, target)
        return self.result

    def run_sync(
        self,
        target: RepoTarget,
        archetype: Optional[ArchetypeLabel] = None
    ) -> ReadmeResult:
        return asyncio.run(self.run(target, archetype))
