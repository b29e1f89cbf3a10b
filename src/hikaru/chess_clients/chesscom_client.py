from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

import requests
from pydantic import BaseModel, ValidationError

from hikaru.chess_clients.chesscom_archive import ChesscomArchive, ChesscomArchiveIndex
from hikaru.chess_clients.chesscom_raw_game import ChesscomRawGame
from hikaru.config import DEFAULT_API_BASE_URL, Settings, get_settings
from hikaru.errors import DecodeError, FetchStage, SchemaError, TransportError
from hikaru.utils import funclogger, get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

ARCHIVES_URL = DEFAULT_API_BASE_URL + "/player/{username}/games/archives"

__all__ = [
    "ARCHIVES_URL",
    "ChesscomClient",
    "ChesscomClientContext",
    "_request_headers",
    "build_client",
]


def _request_headers(settings: Settings) -> dict[str, str]:
    """Build the headers sent with every Chess.com request.

    Args:
        settings: Active settings.

    Returns:
        Header mapping.
    """

    return {"User-Agent": settings.user_agent, "Accept": "application/json"}


@dataclass(slots=True)
class ChesscomClientContext:
    """Shared context for Chess.com API calls.

    Attributes:
        settings: Settings used for API calls.
        logger: Logger for client-specific messages.
    """

    settings: Settings
    logger: logging.Logger


class ChesscomClient:
    """Client for the Chess.com Published-Data game archive endpoints.

    Each public method issues exactly one GET request. Failures are raised as
    `TransportError`, `DecodeError` or `SchemaError` tagged with the stage and
    URL that failed; nothing is retried.
    """

    def __init__(self, context: ChesscomClientContext) -> None:
        """Initialize the client with shared context.

        Args:
            context: Client context containing settings and logger.
        """

        self._context = context

    @property
    def settings(self) -> Settings:
        """Expose the settings from the context."""

        return self._context.settings

    @property
    def logger(self) -> logging.Logger:
        """Expose the logger from the context."""

        return self._context.logger

    def archive_index_url(self, username: str) -> str:
        """Return the archive index URL for a username."""

        return self.settings.archives_url_template.format(username=username)

    @funclogger
    def fetch_archive_index(self, username: str) -> list[str]:
        """Fetch the monthly archive URLs for a player.

        Args:
            username: Chess.com username.

        Returns:
            Archive URLs in the order the API lists them (oldest first).

        Raises:
            TransportError: When the request fails or returns an error status.
            DecodeError: When the body is not valid text.
            SchemaError: When the body is not an ``{"archives": [...]}`` object.

        Example:
            >>> client.fetch_archive_index("hikaru")[0]
            'https://api.chess.com/pub/player/hikaru/games/2014/01'
        """

        url = self.archive_index_url(username)
        text = self._get_text(url, FetchStage.ARCHIVE_INDEX, username)
        index = self._parse(ChesscomArchiveIndex, text, url, FetchStage.ARCHIVE_INDEX, username)
        if not index.archives:
            self.logger.info("No archives returned for %s", username)
        else:
            self.logger.info("Found %s archives for %s", len(index.archives), username)
        return list(index.archives)

    @funclogger
    def fetch_archive_games(
        self,
        archive_url: str,
        username: str | None = None,
    ) -> list[ChesscomRawGame]:
        """Fetch every game in one monthly archive.

        Args:
            archive_url: Archive endpoint URL.
            username: Player the archive belongs to, used for error context.

        Returns:
            Games in API order, unfiltered.

        Raises:
            TransportError: When the request fails or returns an error status.
            DecodeError: When the body is not valid text.
            SchemaError: When the body is not a ``{"games": [...]}`` object
                whose entries all match `ChesscomRawGame`.
        """

        text = self._get_text(archive_url, FetchStage.ARCHIVE, username)
        archive = self._parse(ChesscomArchive, text, archive_url, FetchStage.ARCHIVE, username)
        self.logger.debug("Fetched %s games from %s", len(archive.games), archive_url)
        return list(archive.games)

    def _get_text(self, url: str, stage: FetchStage, username: str | None) -> str:
        """GET a URL and return its body decoded as text.

        Args:
            url: URL to request.
            stage: Stage label attached to any error.
            username: Player being downloaded, if known.

        Returns:
            Decoded response body.
        """

        self.logger.debug("GET %s", url)
        try:
            response = requests.get(
                url,
                headers=_request_headers(self.settings),
                timeout=self.settings.request_timeout,
            )
            body = response.content
        except requests.RequestException as exc:
            self.logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(
                f"Request failed: {exc}", url=url, stage=stage, username=username
            ) from exc
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            self.logger.warning("Chess.com returned HTTP %s for %s", response.status_code, url)
            raise TransportError(
                f"HTTP {response.status_code}",
                url=url,
                stage=stage,
                username=username,
                status_code=response.status_code,
            ) from exc
        encoding = response.encoding or "utf-8"
        try:
            return body.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            self.logger.warning("Could not decode %s as %s", url, encoding)
            raise DecodeError(
                f"Response body is not valid {encoding} text",
                url=url,
                stage=stage,
                username=username,
            ) from exc

    def _parse(
        self,
        model_cls: type[T],
        text: str,
        url: str,
        stage: FetchStage,
        username: str | None,
    ) -> T:
        """Validate a JSON body against an endpoint schema.

        Args:
            model_cls: Schema model for the endpoint.
            text: Decoded body.
            url: URL the body came from.
            stage: Stage label attached to any error.
            username: Player being downloaded, if known.

        Returns:
            Validated model instance.
        """

        try:
            return model_cls.model_validate_json(text)
        except ValidationError as exc:
            self.logger.warning(
                "Unexpected %s payload from %s (%s errors)", stage, url, exc.error_count()
            )
            raise SchemaError(
                f"Response does not match the {model_cls.__name__} schema: {exc}",
                url=url,
                stage=stage,
                username=username,
            ) from exc


def build_client(settings: Settings | None = None) -> ChesscomClient:
    """Return a Chess.com client for the given settings.

    Args:
        settings: Settings to use; read from the environment when omitted.

    Returns:
        A ready-to-use `ChesscomClient`.
    """

    context = ChesscomClientContext(settings=settings or get_settings(), logger=logger)
    return ChesscomClient(context)
