"""Configuration loading for github-activity."""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_EVENT_LIMIT = 5
DEFAULT_AVATAR_SIZE = 16
DEFAULT_GRAVATAR_URL = "https://gravatar.com/avatar/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class Config:
    github_token: str = ""
    api_url: str = DEFAULT_API_URL
    event_limit: int = DEFAULT_EVENT_LIMIT
    avatar_size: int = DEFAULT_AVATAR_SIZE
    gravatar_url: str = DEFAULT_GRAVATAR_URL
    show_avatars: bool = True
    reverse_commits: bool = True
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.event_limit < 1:
            raise ValueError(f"event_limit must be at least 1, got {self.event_limit}")


def load_config() -> Config:
    return Config(
        github_token=os.environ.get("GITHUB_TOKEN", ""),
        api_url=os.environ.get("ACTIVITY_API_URL", DEFAULT_API_URL).rstrip("/"),
        event_limit=int(os.environ.get("ACTIVITY_EVENT_LIMIT", DEFAULT_EVENT_LIMIT)),
        avatar_size=int(os.environ.get("ACTIVITY_AVATAR_SIZE", DEFAULT_AVATAR_SIZE)),
        gravatar_url=os.environ.get("ACTIVITY_GRAVATAR_URL", DEFAULT_GRAVATAR_URL),
        show_avatars=_env_flag("ACTIVITY_SHOW_AVATARS", True),
        reverse_commits=_env_flag("ACTIVITY_REVERSE_COMMITS", True),
        timeout=float(os.environ.get("ACTIVITY_TIMEOUT", DEFAULT_TIMEOUT)),
        log_level=os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
    )
