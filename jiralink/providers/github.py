"""GitHub REST API v3 host."""

import httpx

from jiralink.providers.base import PullRequestHost
from jiralink.settings import ActionSettings

BASE_URL = "https://api.github.com"


class GitHubHost(PullRequestHost):
    def __init__(self, settings: ActionSettings) -> None:
        self._base_url = (settings.api_url or BASE_URL).rstrip("/")
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if settings.github_token:
            self._headers["Authorization"] = f"Bearer {settings.github_token.get_secret_value()}"

    def _patch(self, path: str, body: dict) -> httpx.Response:
        return httpx.patch(
            f"{self._base_url}{path}",
            headers=self._headers,
            json=body,
            timeout=30,
        )

    def update_pull_request(self, owner: str, repo: str, number: int, body: str) -> int:
        # Status is reported by the caller; a failed update is not an exception here.
        response = self._patch(f"/repos/{owner}/{repo}/pulls/{number}", {"body": body})
        return response.status_code
