"""Action inputs and runner environment, resolved through pydantic-settings."""

from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

INPUT_GITHUB_TOKEN = "github-token"
INPUT_JIRA_ACCOUNT = "jira-account"
INPUT_TICKET_REGEX = "ticket-regex"


def _input_env(name: str) -> str:
    # The runner exposes `with:` inputs as INPUT_<NAME>, upper-cased, hyphens kept
    return f"INPUT_{name.upper()}"


class ActionSettings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Action inputs
    github_token: SecretStr | None = Field(default=None, validation_alias=_input_env(INPUT_GITHUB_TOKEN))
    jira_account: str = Field(default="", validation_alias=_input_env(INPUT_JIRA_ACCOUNT))
    ticket_regex: str = Field(default="", validation_alias=_input_env(INPUT_TICKET_REGEX))

    # Runner environment
    event_path: Path | None = Field(default=None, validation_alias="GITHUB_EVENT_PATH")
    repository: str | None = Field(default=None, validation_alias="GITHUB_REPOSITORY")  # owner/repo
    api_url: str = Field(default="https://api.github.com", validation_alias="GITHUB_API_URL")

    @field_validator("jira_account", "ticket_regex", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("github_token", mode="before")
    @classmethod
    def _strip_token(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or None
        return value

    def missing_inputs(self) -> list[str]:
        """Names of required inputs that are empty, in declaration order."""
        required = {
            INPUT_JIRA_ACCOUNT: self.jira_account,
            INPUT_TICKET_REGEX: self.ticket_regex,
        }
        return [name for name, value in required.items() if not value]


def missing_inputs_message(names: list[str]) -> str:
    plural = "s" if len(names) > 1 else ""
    return f"Missing required input{plural}: {', '.join(names)}"
