"""GitHub Actions workflow commands (::debug::, ::warning::, ::error::).

The runner parses these from stdout and turns them into log levels and
annotations on the run summary.
"""

import typer


def _escape(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _command(name: str, message: str) -> None:
    typer.echo(f"::{name}::{_escape(message)}")


def debug(message: str) -> None:
    _command("debug", message)


def warning(message: str) -> None:
    _command("warning", message)


def error(message: str) -> None:
    _command("error", message)


def set_failed(message: str) -> None:
    """Report a fatal error and exit with code 1."""
    error(message)
    raise typer.Exit(1)
