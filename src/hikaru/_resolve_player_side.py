"""Resolve which side of a game the requested user played."""

from __future__ import annotations

from hikaru.chess_clients.chesscom_player import ChesscomPlayer
from hikaru.chess_clients.chesscom_raw_game import ChesscomRawGame
from hikaru.chess_player_color import ChessPlayerColor
from hikaru.errors import PerspectiveError


def _resolve_player_side(
    game: ChesscomRawGame,
    username: str,
) -> tuple[ChessPlayerColor, ChesscomPlayer]:
    """Return the colour and player block matching ``username`` exactly."""
    if username == game.white.username:
        return ChessPlayerColor.WHITE, game.white
    if username == game.black.username:
        return ChessPlayerColor.BLACK, game.black
    raise PerspectiveError(username, game.game_url)


__all__ = ["_resolve_player_side"]
