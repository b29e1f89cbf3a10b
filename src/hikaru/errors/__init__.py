"""Custom error types used in hikaru."""

from __future__ import annotations

from enum import StrEnum


class FetchStage(StrEnum):
    """Which download stage a fetch error came from."""

    ARCHIVE_INDEX = "archive_index"
    ARCHIVE = "archive"


class HikaruError(Exception):
    """Base class for every error raised by hikaru."""


class ChesscomFetchError(HikaruError):
    """A Chess.com request failed at a known stage and URL."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        stage: FetchStage,
        username: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.stage = stage
        self.username = username

    def __str__(self) -> str:
        return f"{self.args[0]} [stage={self.stage}, url={self.url}]"


class TransportError(ChesscomFetchError):
    """The request could not be completed or returned an error status."""

    def __init__(
        self,
        message: str,
        *,
        url: str,
        stage: FetchStage,
        username: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, url=url, stage=stage, username=username)
        self.status_code = status_code


class DecodeError(ChesscomFetchError):
    """The response body is not valid text."""


class SchemaError(ChesscomFetchError):
    """The response body does not match the endpoint's JSON schema."""


class PerspectiveError(HikaruError, ValueError):
    """The requested username played neither side of a game."""

    def __init__(self, username: str, game_url: str) -> None:
        super().__init__(
            f"{username!r} is neither the white nor the black player of {game_url} "
            "(usernames are compared case-sensitively)"
        )
        self.username = username
        self.game_url = game_url


__all__ = [
    "ChesscomFetchError",
    "DecodeError",
    "FetchStage",
    "HikaruError",
    "PerspectiveError",
    "SchemaError",
    "TransportError",
]
