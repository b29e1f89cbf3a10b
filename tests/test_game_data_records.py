import json
import tempfile
from pathlib import Path

from hikaru.chess_clients.chesscom_archive import ChesscomArchive
from hikaru.export_games__records import dump_games_json, games_to_records
from hikaru.normalize_game__pipeline import normalize_game
from tests.fixture_helpers import load_archive_payload

RECORD_KEYS = [
    "game_url",
    "time_control",
    "start_time",
    "end_time",
    "rated",
    "fen",
    "time_class",
    "rules",
    "eco_game",
    "tournament",
    "match",
    "white_rating",
    "white_username",
    "black_rating",
    "black_username",
    "eco_pgn",
    "eco_url",
    "result",
    "result_win_lose",
    "rating",
    "date",
    "colour",
    "win",
    "player_username",
]


def _alice_games():
    archive = ChesscomArchive.model_validate(load_archive_payload())
    return [normalize_game(game, "alice") for game in archive.games]


def test_record_is_flat_and_json_ready() -> None:
    record = _alice_games()[2].to_record()
    assert list(record) == RECORD_KEYS
    assert record["match"] == "https://api.chess.com/pub/match/1200001"
    assert record["time_class"] == "blitz"
    assert record["rules"] == "chess960"
    assert record["result"] == "timeout"
    assert record["result_win_lose"] == "Draw"
    assert record["colour"] == "White"
    assert record["win"] == 0.5
    assert record["start_time"] is None
    json.dumps(record)


def test_fifty_move_result_serializes_to_wire_value() -> None:
    payload = load_archive_payload()
    payload["games"][1]["white"]["result"] = "50move"
    payload["games"][1]["black"]["result"] = "50move"
    game = ChesscomArchive.model_validate(payload).games[1]
    assert normalize_game(game, "alice").to_record()["result"] == "50move"


def test_games_to_records_preserves_order() -> None:
    records = games_to_records(_alice_games())
    assert [r["game_url"].rsplit("/", 1)[-1] for r in records] == [
        "5321491557",
        "301234567",
        "5322000001",
    ]


def test_dump_games_json_writes_array() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        target = Path(tmp) / "out" / "alice.json"
        written = dump_games_json(_alice_games(), target)

        assert written == 3
        loaded = json.loads(target.read_text(encoding="utf-8"))
        assert [row["colour"] for row in loaded] == ["White", "Black", "White"]
        assert loaded[0]["eco_pgn"] == "C50"
