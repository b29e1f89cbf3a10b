"""Response schemas for the two Chess.com endpoints used by hikaru."""

from pydantic import BaseModel, ConfigDict

from hikaru.chess_clients.chesscom_raw_game import ChesscomRawGame


class ChesscomArchiveIndex(BaseModel):
    """Body of ``/player/{username}/games/archives``.

    Attributes:
        archives: Monthly archive URLs, oldest first.
    """

    model_config = ConfigDict(frozen=True)

    archives: list[str]


class ChesscomArchive(BaseModel):
    """Body of a monthly archive URL.

    Attributes:
        games: Games played that month, in API order.
    """

    model_config = ConfigDict(frozen=True)

    games: list[ChesscomRawGame]
