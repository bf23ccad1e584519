"""Shared pydantic models: the contract between event loading, reconciliation and main.py."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PullRequestSnapshot(BaseModel):
    """The triggering pull request as delivered in the event payload."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str = ""
    body: str = ""
    owner: str
    repo: str
    branch: str | None = None  # head ref, e.g. ENG-123-fix-null-check


class ReconciledBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    body: str
    changed: bool


class SyncStatus(str, Enum):
    SKIPPED = "skipped"  # event carried no pull request
    MISSING_INPUTS = "missing_inputs"
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    UPDATE_FAILED = "update_failed"


class SyncOutcome(BaseModel):
    """Returned by sync_pull_request: what happened and the body that was sent."""

    model_config = ConfigDict(frozen=True)

    status: SyncStatus
    body: str | None = None
    http_status: int | None = None
