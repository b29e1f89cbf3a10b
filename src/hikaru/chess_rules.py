from __future__ import annotations

from enum import StrEnum


class ChessRules(StrEnum):
    """Rule variants reported in the ``rules`` field of a Chess.com game."""

    CHESS = "chess"
    CHESS960 = "chess960"
    CRAZYHOUSE = "crazyhouse"
    THREE_CHECK = "threecheck"
    KING_OF_THE_HILL = "kingofthehill"
    HORDE = "horde"
    BUGHOUSE = "bughouse"
    ODDS_CHESS = "oddschess"
