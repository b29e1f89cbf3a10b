from __future__ import annotations

from enum import StrEnum


class ChessTimeClass(StrEnum):
    """Chess.com time class buckets, using the API's wire values."""

    BULLET = "bullet"
    BLITZ = "blitz"
    RAPID = "rapid"
    DAILY = "daily"
