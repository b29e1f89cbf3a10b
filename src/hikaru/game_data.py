"""Flattened per-player game record."""

from pydantic import BaseModel, ConfigDict, Field

from hikaru.chess_player_color import ChessPlayerColor
from hikaru.chess_rules import ChessRules
from hikaru.chess_time_class import ChessTimeClass
from hikaru.chesscom_game_result import ChesscomGameResult
from hikaru.game_result_win_lose import GameResultWinLose


class GameData(BaseModel):
    """One Chess.com game seen from one player's side.

    Attributes:
        game_url: Chess.com URL of the game.
        time_control: Time control as reported by the API, e.g. ``"600"``.
        start_time: Start timestamp in epoch seconds (daily games only).
        end_time: End timestamp in epoch seconds.
        rated: Whether the game was rated.
        fen: Final position.
        time_class: Time class bucket.
        rules: Rule variant.
        eco_game: The ``eco`` field of the game object (an opening URL).
        tournament: Tournament URL, if any.
        team_match: Team match URL, if any. Serialized as ``match``.
        white_rating: White's rating.
        white_username: White's username.
        black_rating: Black's rating.
        black_username: Black's username.
        eco_pgn: ECO code from the PGN tags.
        eco_url: ECOUrl from the PGN tags.
        result: The player's Chess.com result code.
        result_win_lose: The player's coarse outcome.
        rating: The player's rating in this game.
        date: UTCDate from the PGN tags.
        colour: The side the player had.
        win: Points scored by the player (1.0, 0.5 or 0.0).
        player_username: Username the record was requested for.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    game_url: str
    time_control: str
    start_time: int | None = None
    end_time: int
    rated: bool
    fen: str
    time_class: ChessTimeClass
    rules: ChessRules
    eco_game: str | None = None
    tournament: str | None = None
    team_match: str | None = Field(default=None, alias="match")
    white_rating: int
    white_username: str
    black_rating: int
    black_username: str
    eco_pgn: str = ""
    eco_url: str = ""
    result: ChesscomGameResult
    result_win_lose: GameResultWinLose
    rating: int
    date: str = ""
    colour: ChessPlayerColor
    win: float
    player_username: str

    def to_record(self) -> dict[str, object]:
        """Return a flat, JSON-compatible dict of this record."""
        return self.model_dump(mode="json", by_alias=True)
