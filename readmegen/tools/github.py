"""GitHub API client for gathering repository facts."""

import asyncio
import base64
import json
from typing import Any, Dict, List, Optional

import httpx
import logging

from ..core.errors import RepositoryFetchError, RepositoryNotFound
from ..core.types import PackageManifest, RepositoryFacts

logger = logging.getLogger(__name__)

GITHUB_API_BASE_URL = "https://api.github.com"

MAX_CONTRIBUTORS = 10
MAX_RELEASES = 5

# Top-level file name -> presence flag on RepositoryFacts
PRESENCE_FILES = {
    "package.json": "has_package_json",
    "requirements.txt": "has_requirements",
    "Dockerfile": "has_dockerfile",
    "Makefile": "has_makefile",
    "Gemfile": "has_gemfile",
    "composer.json": "has_composer_json",
    "setup.py": "has_setup_py",
}


class GitHubClient:
    """Client for the GitHub REST API v3."""

    def __init__(
        self,
        base_url: str = GITHUB_API_BASE_URL,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "readmegen",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            transport=self.transport
        )

    async def fetch_repo_details(self, owner: str, repo: str) -> RepositoryFacts:
        """Fetch and consolidate everything known about a repository.

        The primary lookup is fatal on failure. The languages, contributors,
        releases and contents lookups run concurrently and fall back to empty
        values on a non-success response.

        Args:
            owner: Repository owner login
            repo: Repository name

        Returns:
            Consolidated repository facts

        Raises:
            RepositoryNotFound: Primary lookup returned a non-success status
            RepositoryFetchError: Network failure during the lookups
        """
        path = f"/repos/{owner}/{repo}"

        async with self._client() as client:
            try:
                response = await client.get(path)
            except httpx.HTTPError as e:
                raise RepositoryFetchError(f"Failed to fetch repository details: {e}") from e

            if not response.is_success:
                raise RepositoryNotFound(
                    f"Failed to fetch repository details: "
                    f"{response.status_code} {response.reason_phrase}"
                )

            try:
                repo_data = response.json()
            except ValueError as e:
                raise RepositoryFetchError(f"Failed to fetch repository details: {e}") from e
            if not isinstance(repo_data, dict):
                raise RepositoryFetchError(
                    f"Failed to fetch repository details: unexpected "
                    f"{type(repo_data).__name__} body"
                )

            results = await asyncio.gather(
                self._get_optional(client, f"{path}/languages", {}),
                self._get_optional(client, f"{path}/contributors", []),
                self._get_optional(client, f"{path}/releases", []),
                self._get_optional(client, f"{path}/contents", []),
                return_exceptions=True
            )
            for result in results:
                if isinstance(result, Exception):
                    raise RepositoryFetchError(
                        f"Failed to fetch repository details: {result}"
                    ) from result
                if isinstance(result, BaseException):
                    raise result
            languages, contributors, releases, contents = results

            files = [
                item["name"] for item in contents
                if isinstance(item, dict) and item.get("name")
            ]
            flags = {flag: name in files for name, flag in PRESENCE_FILES.items()}

            manifest = None
            if flags["has_package_json"]:
                manifest = await self._fetch_package_manifest(client, path)

        logger.info(
            f"Fetched {owner}/{repo}: {len(languages)} languages, "
            f"{len(files)} top-level entries"
        )
        return _assemble_facts(
            repo_data,
            languages=languages,
            contributors=contributors,
            releases=releases,
            files=files,
            flags=flags,
            manifest=manifest
        )

    async def _get_optional(self, client: httpx.AsyncClient, path: str, default: Any) -> Any:
        """GET an auxiliary resource, returning ``default`` unless it succeeds."""
        response = await client.get(path)
        if not response.is_success:
            logger.warning(f"Optional lookup {path} failed: {response.status_code}")
            return default
        try:
            data = response.json()
        except ValueError:
            logger.warning(f"Optional lookup {path} returned an undecodable body")
            return default
        if not isinstance(data, type(default)):
            logger.warning(f"Optional lookup {path} returned unexpected {type(data).__name__}")
            return default
        return data

    async def _fetch_package_manifest(
        self,
        client: httpx.AsyncClient,
        path: str
    ) -> Optional[PackageManifest]:
        """Retrieve and decode package.json. Failures are logged, never raised."""
        try:
            response = await client.get(f"{path}/contents/package.json")
            if not response.is_success:
                logger.warning(f"Could not fetch package.json: {response.status_code}")
                return None
            payload = response.json()
            decoded = base64.b64decode(payload["content"])
            return PackageManifest.model_validate(json.loads(decoded))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Could not fetch package.json: {e}")
            return None


def _assemble_facts(
    repo_data: Dict[str, Any],
    languages: Dict[str, int],
    contributors: List[Any],
    releases: List[Any],
    files: List[str],
    flags: Dict[str, bool],
    manifest: Optional[PackageManifest]
) -> RepositoryFacts:
    """Build the facts record from raw GitHub payloads."""
    owner = repo_data.get("owner") or {}
    license_info = repo_data.get("license") or {}

    return RepositoryFacts(
        owner=owner.get("login") or "",
        name=repo_data.get("name") or "",
        html_url=repo_data.get("html_url") or "",
        homepage=repo_data.get("homepage") or None,
        description=repo_data.get("description"),
        topics=repo_data.get("topics") or [],
        language=repo_data.get("language"),
        languages=languages,
        stargazers_count=repo_data.get("stargazers_count") or 0,
        forks_count=repo_data.get("forks_count") or 0,
        open_issues_count=repo_data.get("open_issues_count") or 0,
        created_at=repo_data.get("created_at"),
        updated_at=repo_data.get("updated_at"),
        releases=[
            r["tag_name"] for r in releases[:MAX_RELEASES]
            if isinstance(r, dict) and r.get("tag_name")
        ],
        contributors=[
            c["login"] for c in contributors[:MAX_CONTRIBUTORS]
            if isinstance(c, dict) and c.get("login")
        ],
        license_name=license_info.get("name"),
        package_manifest=manifest,
        files=files,
        **flags
    )


def fetch_repo_details(
    owner: str,
    repo: str,
    client: Optional[GitHubClient] = None
) -> RepositoryFacts:
    """Synchronous wrapper around :meth:`GitHubClient.fetch_repo_details`."""
    client = client or GitHubClient()
    return asyncio.run(client.fetch_repo_details(owner, repo))
