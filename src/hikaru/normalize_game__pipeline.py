"""Flatten a raw Chess.com game into a `GameData` record."""

from __future__ import annotations

from hikaru._resolve_player_side import _resolve_player_side
from hikaru.chess_clients.chesscom_raw_game import ChesscomRawGame
from hikaru.game_data import GameData
from hikaru.game_result_win_lose import GameResultWinLose
from hikaru.pgn_tag_fields import extract_pgn_tag_fields


def normalize_game(game: ChesscomRawGame, username: str) -> GameData:
    """Build the record for ``game`` as seen by ``username``.

    Args:
        game: Game from a monthly archive.
        username: Requested player; must equal the white or black username
            exactly.

    Returns:
        The flattened record.

    Raises:
        PerspectiveError: When ``username`` played neither side.
    """
    colour, player = _resolve_player_side(game, username)
    result_win_lose = GameResultWinLose.from_result(player.result)
    tags = extract_pgn_tag_fields(game.pgn)
    return GameData(
        game_url=game.game_url,
        time_control=game.time_control,
        start_time=game.start_time,
        end_time=game.end_time,
        rated=game.rated,
        fen=game.fen,
        time_class=game.time_class,
        rules=game.rules,
        eco_game=game.eco,
        tournament=game.tournament,
        team_match=game.team_match,
        white_rating=game.white.rating,
        white_username=game.white.username,
        black_rating=game.black.rating,
        black_username=game.black.username,
        eco_pgn=tags.eco,
        eco_url=tags.eco_url,
        result=player.result,
        result_win_lose=result_win_lose,
        rating=player.rating,
        date=tags.utc_date,
        colour=colour,
        win=result_win_lose.score,
        player_username=username,
    )
