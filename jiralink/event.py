"""Read the triggering pull request out of the GitHub Actions event payload."""

import json
from pathlib import Path

from jiralink.models import PullRequestSnapshot


def _owner_repo(repository: str | None, payload: dict) -> tuple[str, str]:
    """Resolve (owner, repo) from GITHUB_REPOSITORY, else from the payload."""
    if repository and "/" in repository:
        owner, repo = repository.split("/", 1)
        return owner, repo
    repo_node = payload.get("repository") or {}
    owner = (repo_node.get("owner") or {}).get("login")
    name = repo_node.get("name")
    if not owner or not name:
        raise RuntimeError("Cannot resolve the repository: GITHUB_REPOSITORY is not set and the event has no repository.")
    return owner, name


def snapshot_from_payload(payload: dict, repository: str | None = None) -> PullRequestSnapshot | None:
    """Build a snapshot from a decoded event payload.

    Returns None when the event is not about a pull request.
    """
    pr = payload.get("pull_request")
    if not pr:
        return None
    owner, repo = _owner_repo(repository, payload)
    return PullRequestSnapshot(
        number=pr["number"],
        title=pr.get("title") or "",
        body=pr.get("body") or "",
        owner=owner,
        repo=repo,
        branch=(pr.get("head") or {}).get("ref"),
    )


def load_snapshot(event_path: Path | None, repository: str | None = None) -> PullRequestSnapshot | None:
    if event_path is None:
        raise RuntimeError("GITHUB_EVENT_PATH is not set. Is this running inside a GitHub Actions workflow?")
    payload = json.loads(event_path.read_text(encoding="utf-8"))
    return snapshot_from_payload(payload, repository)
