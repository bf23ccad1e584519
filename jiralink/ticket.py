"""Ticket detection in pull request titles and canonical Jira link construction."""

import re

LINK_TEXT = "Jira ticket"

# Jira issue keys: project key, hyphen, issue number (ENG-123)
IDENTIFIER_PATTERN = re.compile(r"[A-Z]+-\d+")


def detect(title: str, pattern: str | re.Pattern[str]) -> bool:
    """Return True if the detection pattern matches anywhere in the title.

    The match value is never used as the identifier: the pattern may also match
    markers such as WIP or HOTFIX that carry no ticket at all. A zero-length
    match, e.g. from an optional group like "(WIP)?", does not count.
    """
    match = re.search(pattern, title)
    return match is not None and match.group(0) != ""


def extract_identifier(title: str) -> str | None:
    """Return the first ENG-123 shaped identifier in the title, if any."""
    match = IDENTIFIER_PATTERN.search(title)
    return match.group(0) if match else None


def ticket_url(account: str, identifier: str) -> str:
    return f"https://{account}.atlassian.net/browse/{identifier}"


def build_link(account: str, identifier: str) -> str:
    """Render the markdown link block for a ticket.

    ENG-123 on account "acme" → **[Jira ticket](https://acme.atlassian.net/browse/ENG-123)**
    """
    return f"**[{LINK_TEXT}]({ticket_url(account, identifier)})**"


def existing_link_pattern(account: str) -> re.Pattern[str]:
    """Pattern matching a link block for this account, whatever ticket it points at."""
    url = re.escape(ticket_url(account, "")) + IDENTIFIER_PATTERN.pattern
    return re.compile(rf"\*\*\[{re.escape(LINK_TEXT)}\]\({url}\)\*\*")


def link_for_title(title: str, pattern: str | re.Pattern[str], account: str) -> str | None:
    """Return the link block implied by the title, or None if it names no ticket."""
    if not detect(title, pattern):
        return None
    identifier = extract_identifier(title)
    if identifier is None:
        return None
    return build_link(account, identifier)
