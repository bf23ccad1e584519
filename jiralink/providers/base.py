"""Abstract base class for pull request hosts."""

from abc import ABC, abstractmethod


class PullRequestHost(ABC):
    @abstractmethod
    def update_pull_request(self, owner: str, repo: str, number: int, body: str) -> int:
        """Replace the pull request description, returning the HTTP status code."""
