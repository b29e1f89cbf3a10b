from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_BASE_URL = "https://api.chess.com/pub"
DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "hikaru/0.1.0"
DEFAULT_MAX_WORKERS = 1


def _read_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    return float(value)


def _read_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    return int(value)


def _raise_on_unexpected_kwargs(kwargs: dict[str, object]) -> None:
    if kwargs:
        unexpected = next(iter(kwargs))
        raise TypeError(f"get_settings() got an unexpected keyword argument '{unexpected}'")


@dataclass(slots=True)
class Settings:
    """Runtime configuration for Chess.com downloads.

    Attributes:
        api_base_url: Root of the Published-Data API, without trailing slash.
        request_timeout: Per-request timeout in seconds.
        user_agent: User-Agent header sent with every request.
        max_workers: Archive fetch parallelism per user; 1 fetches sequentially.
    """

    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        self.api_base_url = self.api_base_url.rstrip("/")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @property
    def archives_url_template(self) -> str:
        """Return the archive index URL template for this API root."""
        return f"{self.api_base_url}/player/{{username}}/games/archives"


def get_settings(**overrides: object) -> Settings:
    """Return a Settings instance built from the environment.

    Keyword overrides take precedence over environment values.

    Example:
        >>> get_settings(max_workers=4).max_workers
        4
    """
    load_dotenv()
    values: dict[str, object] = {
        "api_base_url": os.getenv("HIKARU_API_BASE_URL", DEFAULT_API_BASE_URL),
        "request_timeout": _read_float("HIKARU_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT),
        "user_agent": os.getenv("HIKARU_USER_AGENT", DEFAULT_USER_AGENT),
        "max_workers": _read_int("HIKARU_MAX_WORKERS", DEFAULT_MAX_WORKERS),
    }
    for name in list(values):
        if name in overrides:
            values[name] = overrides.pop(name)
    _raise_on_unexpected_kwargs(overrides)
    return Settings(**values)  # type: ignore[arg-type]
