"""Write `GameData` records out for downstream analysis tools."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from hikaru.game_data import GameData
from hikaru.utils import get_logger

logger = get_logger(__name__)


def games_to_records(games: Iterable[GameData]) -> list[dict[str, object]]:
    """Return the flat record dict for each game, preserving order."""
    return [game.to_record() for game in games]


def dump_games_json(games: Iterable[GameData], path: str | Path) -> int:
    """Write games as a JSON array of flat records.

    Args:
        games: Records to write.
        path: Destination file; parent directories are created.

    Returns:
        Number of records written.
    """
    records = games_to_records(games)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(records, indent=2), encoding="utf-8")
    logger.info("Wrote %s game records to %s", len(records), target)
    return len(records)
