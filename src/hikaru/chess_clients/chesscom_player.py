"""Player block embedded in every Chess.com game."""

from pydantic import BaseModel, ConfigDict, Field

from hikaru.chesscom_game_result import ChesscomGameResult


class ChesscomPlayer(BaseModel):
    """One side of a Chess.com game.

    Attributes:
        username: Chess.com username, with the capitalization the API reports.
        rating: Rating after the game.
        result: Result code for this side.
        player_id: Profile URL, sent by the API under ``@id``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    rating: int = Field(..., ge=0)
    result: ChesscomGameResult
    player_id: str = Field(..., alias="@id")
