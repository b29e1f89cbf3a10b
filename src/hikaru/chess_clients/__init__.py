"""Public exports for the Chess.com client and its response schemas."""

from __future__ import annotations

from hikaru.chess_clients.chesscom_archive import ChesscomArchive, ChesscomArchiveIndex
from hikaru.chess_clients.chesscom_client import (
    ARCHIVES_URL,
    ChesscomClient,
    ChesscomClientContext,
    build_client,
)
from hikaru.chess_clients.chesscom_player import ChesscomPlayer
from hikaru.chess_clients.chesscom_raw_game import ChesscomRawGame

__all__ = [
    "ARCHIVES_URL",
    "ChesscomArchive",
    "ChesscomArchiveIndex",
    "ChesscomClient",
    "ChesscomClientContext",
    "ChesscomPlayer",
    "ChesscomRawGame",
    "build_client",
]
