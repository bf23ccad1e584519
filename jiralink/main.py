"""jiralink CLI: the action entry point plus local helpers."""

import re
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from jiralink import workflow
from jiralink.body import reconcile
from jiralink.event import load_snapshot
from jiralink.models import PullRequestSnapshot, ReconciledBody, SyncOutcome, SyncStatus
from jiralink.providers.base import PullRequestHost
from jiralink.providers.github import GitHubHost
from jiralink.settings import ActionSettings, missing_inputs_message
from jiralink.ticket import build_link, detect, existing_link_pattern, extract_identifier, link_for_title

app = typer.Typer(help="jiralink: keep a pull request's Jira ticket link in sync with its title", no_args_is_help=True)

HTTP_STATUS_OK = 200

HostFactory = Callable[[ActionSettings], PullRequestHost]


def get_host(settings: ActionSettings) -> PullRequestHost:
    return GitHubHost(settings)


# ---------------------------------------------------------------------------
# Reconciliation
# ---------------------------------------------------------------------------


def reconcile_snapshot(snapshot: PullRequestSnapshot, account: str, ticket_regex: str) -> ReconciledBody:
    """Work out the description the pull request should have."""
    link = None
    if detect(snapshot.title, re.compile(ticket_regex)):
        identifier = extract_identifier(snapshot.title)
        workflow.debug(f"Ticket pattern matched title {snapshot.title!r}, identifier: {identifier or '(none)'}")
        if identifier:
            link = build_link(account, identifier)
    else:
        workflow.debug(f"Ticket pattern did not match title {snapshot.title!r}")
    return reconcile(snapshot.body, link, existing_link_pattern(account))


def sync_pull_request(
    settings: ActionSettings,
    snapshot: PullRequestSnapshot | None,
    host_factory: HostFactory = get_host,
) -> SyncOutcome:
    """Bring the pull request description in line with the ticket in its title.

    Reports missing inputs and failed updates through workflow commands and
    returns normally; anything else propagates to the caller.
    """
    if snapshot is None:
        return SyncOutcome(status=SyncStatus.SKIPPED)

    missing = settings.missing_inputs()
    if missing:
        workflow.warning(missing_inputs_message(missing))
        return SyncOutcome(status=SyncStatus.MISSING_INPUTS)

    reconciled = reconcile_snapshot(snapshot, settings.jira_account, settings.ticket_regex)
    if not reconciled.changed:
        workflow.debug("Pull request description is already up to date")
        return SyncOutcome(status=SyncStatus.UNCHANGED)

    host = host_factory(settings)
    status = host.update_pull_request(snapshot.owner, snapshot.repo, snapshot.number, reconciled.body)
    if status != HTTP_STATUS_OK:
        workflow.error(f"Updating the pull request has failed with {status}")
        return SyncOutcome(status=SyncStatus.UPDATE_FAILED, body=reconciled.body, http_status=status)

    workflow.debug(f"Updated description of {snapshot.owner}/{snapshot.repo}#{snapshot.number}")
    return SyncOutcome(status=SyncStatus.UPDATED, body=reconciled.body, http_status=status)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command("run")
def run_cmd() -> None:
    """Sync the triggering pull request (GitHub Actions entry point)."""
    try:
        settings = ActionSettings()
        snapshot = load_snapshot(settings.event_path, settings.repository)
        sync_pull_request(settings, snapshot)
    except Exception as exc:
        workflow.set_failed(str(exc) or type(exc).__name__)


@app.command("preview")
def preview(
    title: Annotated[str, typer.Option("--title", "-t", help="Pull request title")],
    account: Annotated[str, typer.Option("--account", "-a", help="Jira account (<account>.atlassian.net)")],
    pattern: Annotated[str, typer.Option("--pattern", "-p", help="Ticket detection regex")],
    body: Annotated[str, typer.Option("--body", "-b", help="Current pull request description")] = "",
    body_file: Annotated[
        Path | None,
        typer.Option("--body-file", help="Read the current description from a file"),
    ] = None,
) -> None:
    """Show the description jiralink would write, without calling GitHub."""
    if body_file:
        body = body_file.read_text(encoding="utf-8")

    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        rprint(f"[red]Invalid pattern: {escape(str(exc))}[/red]")
        raise typer.Exit(1)

    link = link_for_title(title, compiled, account)
    reconciled = reconcile(body, link, existing_link_pattern(account))

    if reconciled.changed:
        rprint("[green]✓[/green] Description would be updated:")
    else:
        rprint("[dim]Description is unchanged.[/dim]")
    # Plain echo: the link block's brackets would be read as rich markup
    typer.echo(reconciled.body)


@app.command("config-show")
def config_show() -> None:
    """Show resolved action inputs (masks the token)."""
    settings = ActionSettings()

    def mask(val: str | None) -> str:
        if val is None:
            return "[dim](not set)[/dim]"
        if len(val) <= 5:
            return "***"
        return f"...{val[-5:]}"

    table = Table(title="jiralink Configuration")
    table.add_column("Field", style="bold")
    table.add_column("Value")

    table.add_row("github-token", mask(settings.github_token.get_secret_value() if settings.github_token else None))
    table.add_row("jira-account", escape(settings.jira_account) or "[dim](not set)[/dim]")
    table.add_row("ticket-regex", escape(settings.ticket_regex) or "[dim](not set)[/dim]")
    table.add_row("event_path", escape(str(settings.event_path)) if settings.event_path else "[dim](not set)[/dim]")
    table.add_row("repository", escape(settings.repository or "") or "[dim](not set)[/dim]")
    table.add_row("api_url", escape(settings.api_url))

    rprint(table)

    missing = settings.missing_inputs()
    if missing:
        rprint(f"[yellow]{missing_inputs_message(missing)}[/yellow]")
