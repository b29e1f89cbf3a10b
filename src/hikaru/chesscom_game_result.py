from __future__ import annotations

from enum import StrEnum


class ChesscomGameResult(StrEnum):
    """
    Per-side result codes reported by Chess.com.

    Each game carries one code for white and one for black. The values are
    the lowercase strings the API sends, e.g. ``"checkmated"`` or ``"50move"``.
    """

    WIN = "win"
    TIMEOUT = "timeout"
    CHECKMATED = "checkmated"
    STALEMATE = "stalemate"
    RESIGNED = "resigned"
    AGREED = "agreed"
    REPETITION = "repetition"
    INSUFFICIENT = "insufficient"
    ABANDONED = "abandoned"
    FIFTY_MOVE = "50move"
    TIME_VS_INSUFFICIENT = "timevsinsufficient"
    KING_OF_THE_HILL = "kingofthehill"
    THREE_CHECK = "threecheck"
    BUGHOUSE_PARTNER_LOSE = "bughousepartnerlose"
    BUGHOUSE_PARTNER_WIN = "bughousepartnerwin"
