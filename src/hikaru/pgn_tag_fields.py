"""Pull the opening and date tags out of a Chess.com PGN header block."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

_ECO_PREFIX = '[ECO "'
_ECO_URL_PREFIX = '[ECOUrl "'
_UTC_DATE_PREFIX = '[UTCDate "'


class PgnTagFields(BaseModel):
    """Tag values used by `GameData`.

    Attributes:
        eco: Opening classification code, e.g. ``"C50"``.
        eco_url: Chess.com opening explorer URL.
        utc_date: Game start date as written in the PGN, e.g. ``"2020.01.01"``.
    """

    model_config = ConfigDict(frozen=True)

    eco: str = ""
    eco_url: str = ""
    utc_date: str = ""


def _tag_value(line: str) -> str:
    parts = line.split(" ")
    if len(parts) < 2:
        return ""
    return parts[1].replace('"', "").replace("]", "")


def extract_pgn_tag_fields(pgn: str | None) -> PgnTagFields:
    """Return the ECO, ECOUrl and UTCDate tags from a PGN.

    Lines are matched by literal prefix; everything else, including move
    text, is ignored. A tag that appears more than once keeps its last
    value. Missing tags, and a missing PGN, give empty strings. Lines are
    split on ``\\n`` only, with a trailing ``\\r`` dropped so CRLF input
    reads the same as LF input.

    Example:
        >>> extract_pgn_tag_fields('[ECO "C50"]\\n1. e4 e5').eco
        'C50'
    """
    if not pgn:
        return PgnTagFields()
    eco = ""
    eco_url = ""
    utc_date = ""
    for raw_line in pgn.split("\n"):
        line = raw_line.removesuffix("\r")
        if line.startswith(_ECO_PREFIX):
            eco = _tag_value(line)
        elif line.startswith(_ECO_URL_PREFIX):
            eco_url = _tag_value(line)
        elif line.startswith(_UTC_DATE_PREFIX):
            utc_date = _tag_value(line)
    return PgnTagFields(eco=eco, eco_url=eco_url, utc_date=utc_date)
