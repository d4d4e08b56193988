"""Heuristic repository archetype detection.

Each indicator is an independent boolean test over the repository's
description, name, topics and language breakdown. Indicators are checked in a
fixed priority order and the first one that fires decides the archetype.
"""

from typing import Callable, Iterable, List, Tuple

from ..core.types import ArchetypeLabel, RepositoryFacts


class _Signals:
    """Normalized views of the facts used by the indicators."""

    def __init__(self, facts: RepositoryFacts):
        self.description = (facts.description or "").lower()
        self.name = (facts.name or "").lower()
        self.topics = {(topic or "").lower() for topic in facts.topics}
        self.languages = set(facts.languages)
        self.has_requirements = facts.has_requirements
        self.has_dockerfile = facts.has_dockerfile

    def description_has(self, terms: Iterable[str]) -> bool:
        return any(term in self.description for term in terms)

    def name_has(self, terms: Iterable[str]) -> bool:
        return any(term in self.name for term in terms)

    def uses_language(self, languages: Iterable[str]) -> bool:
        return any(language in self.languages for language in languages)


def is_library(s: _Signals) -> bool:
    return s.description_has(("library", "package", "sdk", "api")) or s.name_has(("lib", "sdk"))


def is_framework(s: _Signals) -> bool:
    return s.description_has(("framework", "boilerplate", "template", "starter"))


def is_web_app(s: _Signals) -> bool:
    return (
        s.description_has(("web app", "website", "dashboard"))
        or s.uses_language(("JavaScript", "TypeScript", "HTML"))
    )


def is_mobile_app(s: _Signals) -> bool:
    return (
        s.description_has(("mobile", "android", "ios", "react native"))
        or s.uses_language(("Swift", "Kotlin"))
    )


def is_data_science(s: _Signals) -> bool:
    return (
        s.description_has(("data", "machine learning", "ai", "analysis"))
        or ("Python" in s.languages and s.has_requirements)
    )


def is_dev_tool(s: _Signals) -> bool:
    return s.description_has(("tool", "cli", "utility", "dev")) or s.name_has(("cli", "tool"))


def is_game(s: _Signals) -> bool:
    return (
        s.description_has(("game", "gaming"))
        or "game" in s.topics
        or s.uses_language(("C#", "C++"))
    )


def is_academic(s: _Signals) -> bool:
    return (
        s.description_has(("research", "paper", "thesis", "academic"))
        or "research" in s.topics
    )


def is_enterprise(s: _Signals) -> bool:
    return (
        (s.has_dockerfile and "Java" in s.languages)
        or s.description_has(("enterprise", "corporate", "business"))
    )


def is_portfolio(s: _Signals) -> bool:
    return s.description_has(("portfolio", "showcase")) or s.name_has(("portfolio",))


def is_web_or_mobile_app(s: _Signals) -> bool:
    return is_web_app(s) or is_mobile_app(s)


# Highest priority first. Several indicators share a label on purpose.
INDICATOR_PRIORITY: List[Tuple[Callable[[_Signals], bool], ArchetypeLabel]] = [
    (is_library, ArchetypeLabel.LIBRARY),
    (is_academic, ArchetypeLabel.ACADEMIC),
    (is_enterprise, ArchetypeLabel.ENTERPRISE),
    (is_portfolio, ArchetypeLabel.PORTFOLIO),
    (is_data_science, ArchetypeLabel.LIBRARY),
    (is_framework, ArchetypeLabel.OPEN_SOURCE),
    (is_dev_tool, ArchetypeLabel.OPEN_SOURCE),
    (is_web_or_mobile_app, ArchetypeLabel.STARTUP),
    (is_game, ArchetypeLabel.PORTFOLIO),
]

DEFAULT_ARCHETYPE = ArchetypeLabel.COMPREHENSIVE


def classify(facts: RepositoryFacts) -> ArchetypeLabel:
    """Infer the documentation archetype for a repository.

    Args:
        facts: Repository facts

    Returns:
        The label of the highest-priority indicator that fires, or
        ``comprehensive`` when none does
    """
    signals = _Signals(facts)
    for indicator, label in INDICATOR_PRIORITY:
        if indicator(signals):
            return label
    return DEFAULT_ARCHETYPE
