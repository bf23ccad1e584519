"""Reconcile a pull request description with its Jira link block."""

import re

from jiralink.models import ReconciledBody


def reconcile(body: str, link: str | None, existing: re.Pattern[str]) -> ReconciledBody:
    """Return the description with at most one up-to-date link block.

    Only the first existing block is considered. An existing block is replaced
    when a new link is available and kept as-is otherwise; it is never removed.
    Without an existing block the new link is appended after a blank line.
    """
    match = existing.search(body)

    if match:
        if link is None or match.group(0) == link:
            return ReconciledBody(body=body, changed=False)
        updated = body[: match.start()] + link + body[match.end() :]
        return ReconciledBody(body=updated, changed=True)

    if link is None:
        return ReconciledBody(body=body, changed=False)

    content = body.rstrip()
    updated = f"{content}\n\n{link}" if content else link
    return ReconciledBody(body=updated, changed=True)
