"""Shared test fixtures."""

import pytest

from jiralink.models import PullRequestSnapshot
from jiralink.providers.base import PullRequestHost
from jiralink.settings import ActionSettings

_RUNNER_ENV = (
    "INPUT_GITHUB-TOKEN",
    "INPUT_JIRA-ACCOUNT",
    "INPUT_TICKET-REGEX",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
    "GITHUB_API_URL",
)


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the environment they run in (CI sets GITHUB_*)."""
    for name in _RUNNER_ENV:
        monkeypatch.delenv(name, raising=False)


class FakeHost(PullRequestHost):
    def __init__(self, status: int = 200) -> None:
        self.status = status
        self.calls: list[dict] = []

    def update_pull_request(self, owner: str, repo: str, number: int, body: str) -> int:
        self.calls.append({"owner": owner, "repo": repo, "pull_number": number, "body": body})
        return self.status


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def settings() -> ActionSettings:
    return ActionSettings(
        github_token="abc123",  # type: ignore[arg-type]
        jira_account="account",
        ticket_regex=r"(\[([A-Z]+-\d+|HOTFIX|ADHOC)\] -)|WIP",
    )


@pytest.fixture
def snapshot() -> PullRequestSnapshot:
    return PullRequestSnapshot(
        number=123,
        title="[ABC-1234] - title",
        body="body",
        owner="Someone",
        repo="repo",
        branch="ABC-1234-some-feature",
    )
