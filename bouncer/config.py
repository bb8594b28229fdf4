"""Configuration loading from YAML and environment.

Secrets (tokens) are taken from environment variables or from files
(Docker secrets). Never put real tokens in config files committed to the
repo.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WARNING_MESSAGE = (
    "Hey @{assignee}, you have been assigned on this issue for more than {days} days!\n"
    "Maybe you should consider un-assigning yourself and let other people try to solve this issue."
)
DEFAULT_UNASSIGN_MESSAGE = "Sorry @{assignee} you have been assigned on this issue for more than {days} days!"


class ConfigError(ValueError):
    """Raised when a required option is missing or invalid."""

    pass


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = _current_env.get(env_key)
    if value:
        return value.strip()
    file_path = _current_env.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


# Injected by load_config so validators can read env/file
_current_env: dict[str, str] = {}


class BotConfig(BaseSettings):
    """Bot identity and target repo."""

    model_config = SettingsConfigDict(env_prefix="BOT_", extra="ignore")

    github_username: str | None = Field(
        default=None, description="Bot GitHub login (its own comments suppress re-bouncing)"
    )
    repository: str | None = Field(default=None, description="Target repo e.g. octocat/hello-world")


class GitHubConfig(BaseSettings):
    """GitHub API settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="PAT or app token; use env or secret file")
    api_url: str = Field(default="https://api.github.com", description="API base URL")
    web_url: str = Field(default="https://github.com", description="Web base URL for issue links")


class BouncerConfig(BaseSettings):
    """Staleness threshold, request tuning and run modes."""

    model_config = SettingsConfigDict(env_prefix="BOUNCER_", extra="ignore")

    days_before_unassign: int = Field(default=14, ge=1, description="Days an issue may stay assigned")
    requests_timeout: int = Field(default=5000, ge=1, description="Per-request timeout in milliseconds")
    issues_per_page: int = Field(default=100, ge=1, le=100, description="Page size for list calls")
    # Parallel comment/event fetches (env: BOUNCER_MAX_WORKERS)
    max_workers: int = Field(default=8, ge=1, le=32, description="Concurrent fetches")
    dry_run: bool = Field(default=False, description="Log only, no comments or unassignment")
    comment_only: bool = Field(default=False, description="Post a warning, keep the assignee")
    warning_message: str = Field(default=DEFAULT_WARNING_MESSAGE, description="Comment-only text")
    unassign_message: str = Field(default=DEFAULT_UNASSIGN_MESSAGE, description="Unassignment text")


class SchedulerConfig(BaseSettings):
    """Scheduler (loop mode) settings."""

    model_config = SettingsConfigDict(env_prefix="SCHEDULER_", extra="ignore")

    interval_seconds: int = Field(default=86400, ge=60, description="Seconds between bounce passes")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    bot: BotConfig = Field(default_factory=BotConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    bouncer: BouncerConfig = Field(default_factory=BouncerConfig)
    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    @property
    def repo_owner(self) -> str:
        return (self.bot.repository or "").split("/", 1)[0]

    @property
    def repo_name(self) -> str:
        parts = (self.bot.repository or "").split("/", 1)
        return parts[1] if len(parts) == 2 else ""


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE. A missing file yields
    a config built from environment variables only.
    """
    global _current_env
    import os

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    # Env overrides for nested values (e.g. BOT_REPOSITORY)
    bot_raw = raw.get("bot") or {}
    if _current_env.get("BOT_REPOSITORY"):
        bot_raw = {**bot_raw, "repository": _current_env.get("BOT_REPOSITORY")}

    return AppConfig(
        bot=BotConfig(**bot_raw),
        github=GitHubConfig(**(raw.get("github") or {})),
        bouncer=BouncerConfig(**(raw.get("bouncer") or {})),
        scheduler=SchedulerConfig(**(raw.get("scheduler") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )


def validate_config(config: AppConfig) -> None:
    """Fail fast when a required option is missing or a template is broken.

    Raises:
        ConfigError: listing every missing or malformed option.
    """
    problems: list[str] = []
    if not config.github_token_resolved:
        problems.append("github.token (or GITHUB_TOKEN / GITHUB_TOKEN_FILE)")
    if not config.bot.github_username:
        problems.append("bot.github_username")
    if not config.repo_owner or not config.repo_name or "/" in config.repo_name:
        problems.append("bot.repository (owner/repo)")
    for name in ("warning_message", "unassign_message"):
        template = getattr(config.bouncer, name)
        try:
            template.format(assignee="octocat", days=config.bouncer.days_before_unassign)
        except (KeyError, IndexError, ValueError) as e:
            problems.append(f"bouncer.{name} (only {{assignee}} and {{days}} allowed: {e!r})")
    if problems:
        raise ConfigError("Missing or invalid option value: " + ", ".join(problems))
