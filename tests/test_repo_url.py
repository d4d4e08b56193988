"""Tests for repository input parsing."""

import pytest

from readmegen.core.errors import ValidationError
from readmegen.core.types import RepoTarget
from readmegen.tools.repo_url import parse_github_url, resolve_target


class TestParseGithubUrl:
    """Tests for URL parsing."""

    @pytest.mark.parametrize("url", [
        "https://github.com/octocat/Hello-World",
        "https://github.com/octocat/Hello-World.git",
        "http://www.github.com/octocat/Hello-World/tree/main/docs",
        "github.com/octocat/Hello-World",
        "  https://github.com/octocat/Hello-World  ",
    ])
    def test_parses_owner_and_repo(self, url):
        """Owner and repo are the first two path segments after github.com/."""
        assert parse_github_url(url) == RepoTarget(owner="octocat", repo="Hello-World")

    @pytest.mark.parametrize("url", [
        "not-a-url",
        "https://gitlab.com/octocat/Hello-World",
        "https://github.com/octocat",
        "",
    ])
    def test_rejects_malformed_urls(self, url):
        """URLs without owner and repo do not parse."""
        assert parse_github_url(url) is None


class TestResolveTarget:
    """Tests for input validation."""

    def test_url_mode(self):
        target = resolve_target(repo_url="https://github.com/octocat/Hello-World.git")
        assert target.full_name == "octocat/Hello-World"

    def test_invalid_url(self):
        """Malformed URLs fail before any network call."""
        with pytest.raises(ValidationError, match="Invalid GitHub URL format"):
            resolve_target(repo_url="not-a-url")

    def test_empty_url(self):
        with pytest.raises(ValidationError, match="Please enter a GitHub repository URL"):
            resolve_target(repo_url="   ")

    def test_separate_fields(self):
        target = resolve_target(username=" octocat ", repo="Hello-World")
        assert target == RepoTarget(owner="octocat", repo="Hello-World")

    @pytest.mark.parametrize("username,repo", [
        ("octocat", ""),
        ("", "Hello-World"),
        (None, None),
        ("  ", "Hello-World"),
    ])
    def test_separate_fields_required(self, username, repo):
        with pytest.raises(ValidationError, match="Please enter both username and repository name"):
            resolve_target(username=username, repo=repo)
