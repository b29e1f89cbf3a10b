"""Download a Chess.com player's full game history as flat records.

Example:
    >>> import hikaru
    >>> games = hikaru.download(["Hikaru", "GMHikaruOnTwitch"])
    >>> games[0].player_username
    'Hikaru'
"""

from hikaru.chess_clients import (
    ChesscomArchive,
    ChesscomArchiveIndex,
    ChesscomClient,
    ChesscomClientContext,
    ChesscomPlayer,
    ChesscomRawGame,
    build_client,
)
from hikaru.chess_player_color import ChessPlayerColor
from hikaru.chess_rules import ChessRules
from hikaru.chess_time_class import ChessTimeClass
from hikaru.chesscom_game_result import ChesscomGameResult
from hikaru.config import Settings, get_settings
from hikaru.download_games__pipeline import download_games, iter_games
from hikaru.errors import (
    ChesscomFetchError,
    DecodeError,
    FetchStage,
    HikaruError,
    PerspectiveError,
    SchemaError,
    TransportError,
)
from hikaru.export_games__records import dump_games_json, games_to_records
from hikaru.game_data import GameData
from hikaru.game_result_win_lose import GameResultWinLose
from hikaru.normalize_game__pipeline import normalize_game
from hikaru.pgn_tag_fields import PgnTagFields, extract_pgn_tag_fields

__version__ = "0.1.0"

download = download_games

__all__ = [
    "ChessPlayerColor",
    "ChessRules",
    "ChessTimeClass",
    "ChesscomArchive",
    "ChesscomArchiveIndex",
    "ChesscomClient",
    "ChesscomClientContext",
    "ChesscomFetchError",
    "ChesscomGameResult",
    "ChesscomPlayer",
    "ChesscomRawGame",
    "DecodeError",
    "FetchStage",
    "GameData",
    "GameResultWinLose",
    "HikaruError",
    "PerspectiveError",
    "PgnTagFields",
    "SchemaError",
    "Settings",
    "TransportError",
    "build_client",
    "download",
    "download_games",
    "dump_games_json",
    "extract_pgn_tag_fields",
    "games_to_records",
    "get_settings",
    "iter_games",
    "normalize_game",
]
