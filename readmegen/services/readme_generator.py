"""Generate a README for a repository from its facts."""

from datetime import datetime
from typing import Optional
import logging

from ..analysis.classifier import classify
from ..analysis.repo_analysis import analyze_repository
from ..core.types import ArchetypeLabel, RepositoryFacts
from .gemini import GeminiClient
from .prompt_library import build_readme_prompt

logger = logging.getLogger(__name__)


def resolve_archetype(
    facts: RepositoryFacts,
    archetype: Optional[ArchetypeLabel] = None
) -> ArchetypeLabel:
    """Return the explicit override, or the classifier's label."""
    return archetype if archetype is not None else classify(facts)


class ReadmeGenerator:
    """Builds the README prompt and submits it to Gemini."""

    def __init__(self, client: GeminiClient):
        self.client = client

    def build_prompt(
        self,
        facts: RepositoryFacts,
        archetype: Optional[ArchetypeLabel] = None,
        now: Optional[datetime] = None
    ) -> str:
        effective = resolve_archetype(facts, archetype)
        analysis = analyze_repository(facts, now=now)
        return build_readme_prompt(facts, effective, analysis)

    async def generate(
        self,
        facts: RepositoryFacts,
        archetype: Optional[ArchetypeLabel] = None
    ) -> str:
        """Generate README markdown for a repository.

        Args:
            facts: Repository facts
            archetype: Optional override for automatic classification

        Returns:
            Generated text, unmodified
        """
        effective = resolve_archetype(facts, archetype)
        logger.info(
            f"Generating {effective.value} README for {facts.owner}/{facts.name}",
            extra={"owner": facts.owner, "repo": facts.name, "archetype": effective.value}
        )
        prompt = self.build_prompt(facts, effective)
        return await self.client.generate_content(prompt)
