from __future__ import annotations

from enum import StrEnum

from hikaru.chesscom_game_result import ChesscomGameResult


class GameResultWinLose(StrEnum):
    """
    Coarse outcome of a game for one player.

    Attributes:
        WIN: The player won.
        LOSS: The player lost.
        DRAW: Any result code not listed as a win or a loss.

    Methods:
        from_result(result: ChesscomGameResult) -> GameResultWinLose:
            Classifies a Chess.com result code through a fixed lookup table.
            Codes missing from the table (including ``timeout``) count as draws.

        score -> float:
            Points scored: 1.0 for a win, 0.5 for a draw, 0.0 for a loss.
    """

    WIN = "Win"
    LOSS = "Loss"
    DRAW = "Draw"

    @classmethod
    def from_result(cls, result: ChesscomGameResult) -> GameResultWinLose:
        return _RESULT_TABLE.get(result, cls.DRAW)

    @property
    def score(self) -> float:
        return _SCORES[self]


_RESULT_TABLE: dict[ChesscomGameResult, GameResultWinLose] = {
    ChesscomGameResult.WIN: GameResultWinLose.WIN,
    ChesscomGameResult.BUGHOUSE_PARTNER_WIN: GameResultWinLose.WIN,
    ChesscomGameResult.KING_OF_THE_HILL: GameResultWinLose.WIN,
    ChesscomGameResult.THREE_CHECK: GameResultWinLose.WIN,
    ChesscomGameResult.CHECKMATED: GameResultWinLose.LOSS,
    ChesscomGameResult.BUGHOUSE_PARTNER_LOSE: GameResultWinLose.LOSS,
    ChesscomGameResult.ABANDONED: GameResultWinLose.LOSS,
    ChesscomGameResult.RESIGNED: GameResultWinLose.LOSS,
}

_SCORES: dict[GameResultWinLose, float] = {
    GameResultWinLose.WIN: 1.0,
    GameResultWinLose.DRAW: 0.5,
    GameResultWinLose.LOSS: 0.0,
}
