from __future__ import annotations

from enum import StrEnum


class ChessPlayerColor(StrEnum):
    """Side played by the requested user, rendered as ``"White"`` or ``"Black"``."""

    WHITE = "White"
    BLACK = "Black"
