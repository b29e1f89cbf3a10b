"""Game objects as returned by the monthly archive endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from hikaru.chess_clients.chesscom_player import ChesscomPlayer
from hikaru.chess_rules import ChessRules
from hikaru.chess_time_class import ChessTimeClass


class ChesscomRawGame(BaseModel):
    """A single game from a monthly archive.

    Live games have no ``start_time``; daily games do. Keys the API sends
    that are not modelled here (``tcn``, ``uuid``, ``accuracies``...) are
    ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    game_url: str = Field(..., alias="url")
    pgn: str | None = None
    time_control: str
    start_time: int | None = None
    end_time: int
    rated: bool
    fen: str
    time_class: ChessTimeClass
    rules: ChessRules
    eco: str | None = None
    tournament: str | None = None
    team_match: str | None = Field(default=None, alias="match")
    white: ChesscomPlayer
    black: ChesscomPlayer
