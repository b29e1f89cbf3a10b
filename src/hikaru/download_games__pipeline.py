"""Download and normalize every game for one or more Chess.com players."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor

from hikaru.chess_clients.chesscom_client import ChesscomClient, build_client
from hikaru.chess_clients.chesscom_raw_game import ChesscomRawGame
from hikaru.config import Settings
from hikaru.game_data import GameData
from hikaru.normalize_game__pipeline import normalize_game


def _as_usernames(usernames: str | Iterable[str]) -> list[str]:
    names = [usernames] if isinstance(usernames, str) else list(usernames)
    for name in names:
        if not name:
            raise ValueError("usernames must be non-empty strings")
    return names


def _iter_archive_games(
    client: ChesscomClient,
    username: str,
    archive_urls: list[str],
) -> Iterator[list[ChesscomRawGame]]:
    """Yield each archive's games in archive-index order.

    With ``max_workers`` above one the archives are fetched on a thread pool;
    `ThreadPoolExecutor.map` hands results back in submission order.
    """
    workers = min(client.settings.max_workers, len(archive_urls))
    if workers <= 1:
        for archive_url in archive_urls:
            yield client.fetch_archive_games(archive_url, username)
        return
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="hikaru-archive") as executor:
        yield from executor.map(
            lambda archive_url: client.fetch_archive_games(archive_url, username),
            archive_urls,
        )


def iter_games(
    usernames: str | Iterable[str],
    *,
    client: ChesscomClient | None = None,
    settings: Settings | None = None,
) -> Iterator[GameData]:
    """Lazily yield `GameData` for every game of every requested player.

    Records come out in username order, then archive order, then the order
    games appear within each archive. Each call starts a fresh download.

    Args:
        usernames: One username or an iterable of usernames.
        client: Client to use; built from ``settings`` when omitted.
        settings: Settings for the default client.

    Raises:
        ValueError: When a username is empty.
        TransportError: When a request fails.
        DecodeError: When a response body is not valid text.
        SchemaError: When a response does not match its endpoint schema.
        PerspectiveError: When a game does not involve the requested player.
    """
    names = _as_usernames(usernames)
    active_client = client or build_client(settings)
    for username in names:
        archive_urls = active_client.fetch_archive_index(username)
        count = 0
        for games in _iter_archive_games(active_client, username, archive_urls):
            for game in games:
                count += 1
                yield normalize_game(game, username)
        active_client.logger.info("Normalized %s games for %s", count, username)


def download_games(
    usernames: str | Iterable[str],
    *,
    client: ChesscomClient | None = None,
    settings: Settings | None = None,
) -> list[GameData]:
    """Return every game for the requested players as a list.

    Example:
        >>> games = download_games(["Hikaru", "GMHikaruOnTwitch"])
        >>> games[0].colour
        <ChessPlayerColor.WHITE: 'White'>
    """
    return list(iter_games(usernames, client=client, settings=settings))
