"""Resolve user input into a repository owner/name pair."""

import re
from typing import Optional

from ..core.errors import ValidationError
from ..core.types import RepoTarget

GITHUB_URL_PATTERN = re.compile(r"github\.com/([^/]+)/([^/?#]+)")


def parse_github_url(url: str) -> Optional[RepoTarget]:
    """Extract owner and repository from a GitHub URL.

    Accepts forms such as ``https://github.com/octocat/Hello-World`` and
    ``git@github.com/octocat/Hello-World.git``.

    Args:
        url: Repository URL

    Returns:
        Parsed target, or None when the URL does not name a repository
    """
    clean_url = re.sub(r"\.git$", "", url.strip())
    match = GITHUB_URL_PATTERN.search(clean_url)
    if not match:
        return None
    return RepoTarget(owner=match.group(1), repo=match.group(2))


def resolve_target(
    username: Optional[str] = None,
    repo: Optional[str] = None,
    repo_url: Optional[str] = None
) -> RepoTarget:
    """Validate either a repository URL or separate username/repo fields.

    URL mode is used whenever ``repo_url`` is not None.

    Raises:
        ValidationError: Input is missing or malformed
    """
    if repo_url is not None:
        if not repo_url.strip():
            raise ValidationError("Please enter a GitHub repository URL")
        target = parse_github_url(repo_url)
        if target is None:
            raise ValidationError(
                "Invalid GitHub URL format. Please use: https://github.com/username/repository"
            )
        return target

    if not (username or "").strip() or not (repo or "").strip():
        raise ValidationError("Please enter both username and repository name")
    return RepoTarget(owner=username.strip(), repo=repo.strip())
