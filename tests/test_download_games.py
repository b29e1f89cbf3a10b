import unittest
from unittest.mock import patch

from hikaru import download
from hikaru.chess_clients.chesscom_client import ARCHIVES_URL, build_client
from hikaru.chess_player_color import ChessPlayerColor
from hikaru.config import Settings
from hikaru.download_games__pipeline import download_games, iter_games
from hikaru.errors import FetchStage, PerspectiveError, SchemaError, TransportError
from hikaru.game_result_win_lose import GameResultWinLose
from tests.fixture_helpers import load_archive_payload, make_game, make_player
from tests.http_fakes import FakeResponse, make_fake_get, make_routed_get

GET_TARGET = "hikaru.chess_clients.chesscom_client.requests.get"


def _month(*games: dict) -> FakeResponse:
    return FakeResponse(200, json_data={"games": list(games)})


def _index(*urls: str) -> FakeResponse:
    return FakeResponse(200, json_data={"archives": list(urls)})


def _game(n: int, white: str, black: str, white_result: str = "win") -> dict:
    black_result = "checkmated" if white_result == "win" else "win"
    return make_game(
        make_player(white, result=white_result),
        make_player(black, result=black_result),
        url=f"https://www.chess.com/game/live/{n}",
    )


def _user_routes() -> dict[str, FakeResponse]:
    """Archives for users "a" (two months, three games) and "b" (one month, two games)."""
    return {
        ARCHIVES_URL.format(username="a"): _index("https://x/a/2020/01", "https://x/a/2020/02"),
        "https://x/a/2020/01": _month(_game(1, "a", "z"), _game(2, "z", "a")),
        "https://x/a/2020/02": _month(_game(3, "a", "y", white_result="resigned")),
        ARCHIVES_URL.format(username="b"): _index("https://x/b/2021/03"),
        "https://x/b/2021/03": _month(_game(4, "b", "z"), _game(5, "y", "b")),
    }


class DownloadGamesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = build_client(Settings())

    def test_single_game_end_to_end(self) -> None:
        game = make_game(
            make_player("alice", result="win"), make_player("bob", result="checkmated")
        )
        captured_urls: list[str] = []
        fake_get = make_fake_get(
            [_index("https://x/2020/01"), _month(game)], captured_urls=captured_urls
        )

        with patch(GET_TARGET, side_effect=fake_get):
            games = download_games("alice", client=self.client)

        self.assertEqual(len(games), 1)
        self.assertEqual(games[0].win, 1.0)
        self.assertEqual(games[0].colour, ChessPlayerColor.WHITE)
        self.assertEqual(games[0].result_win_lose, GameResultWinLose.WIN)
        self.assertEqual(
            captured_urls,
            ["https://api.chess.com/pub/player/alice/games/archives", "https://x/2020/01"],
        )

    def test_repeated_calls_give_identical_output(self) -> None:
        routes = {
            ARCHIVES_URL.format(username="alice"): _index("https://x/2020/09"),
            "https://x/2020/09": FakeResponse(200, json_data=load_archive_payload()),
        }
        with patch(GET_TARGET, side_effect=make_routed_get(routes)):
            first = download_games(["alice"], client=self.client)
            second = download_games(["alice"], client=self.client)

        self.assertEqual(len(first), 3)
        self.assertEqual(first, second)
        self.assertEqual([g.to_record() for g in first], [g.to_record() for g in second])

    def test_users_are_concatenated_in_request_order(self) -> None:
        with patch(GET_TARGET, side_effect=make_routed_get(_user_routes())):
            only_a = download_games("a", client=self.client)
            only_b = download_games("b", client=self.client)
            both = download_games(["a", "b"], client=self.client)

        self.assertEqual(len(both), len(only_a) + len(only_b))
        self.assertEqual([g.player_username for g in both], ["a", "a", "a", "b", "b"])
        self.assertEqual(
            [g.game_url.rsplit("/", 1)[-1] for g in both], ["1", "2", "3", "4", "5"]
        )
        self.assertEqual(both[:3], only_a)
        self.assertEqual([g.colour for g in only_a], ["White", "Black", "White"])
        self.assertEqual([g.win for g in only_a], [1.0, 0.0, 0.0])

    def test_thread_pool_preserves_order(self) -> None:
        threaded = build_client(Settings(max_workers=4))
        with patch(GET_TARGET, side_effect=make_routed_get(_user_routes())):
            sequential = download_games(["a", "b"], client=self.client)
            parallel = download_games(["a", "b"], client=threaded)

        self.assertEqual(parallel, sequential)

    def test_iter_games_is_lazy(self) -> None:
        with patch(GET_TARGET, side_effect=make_routed_get(_user_routes())) as get_mock:
            games = iter_games(["a", "b"], client=self.client)
            self.assertEqual(get_mock.call_count, 0)
            first = next(games)
            self.assertEqual(first.player_username, "a")
            self.assertEqual(get_mock.call_count, 2)

    def test_user_without_archives_yields_nothing(self) -> None:
        fake_get = make_fake_get([_index()])
        with patch(GET_TARGET, side_effect=fake_get):
            self.assertEqual(download_games("newcomer", client=self.client), [])

    def test_failure_aborts_whole_download(self) -> None:
        routes = _user_routes()
        routes["https://x/b/2021/03"] = FakeResponse(503)
        with patch(GET_TARGET, side_effect=make_routed_get(routes)):
            with self.assertRaises(TransportError) as ctx:
                download_games(["a", "b"], client=self.client)

        self.assertEqual(ctx.exception.stage, FetchStage.ARCHIVE)
        self.assertEqual(ctx.exception.url, "https://x/b/2021/03")
        self.assertEqual(ctx.exception.username, "b")

    def test_schema_failure_in_index_names_user(self) -> None:
        fake_get = make_fake_get([FakeResponse(200, json_data={"archive": []})])
        with patch(GET_TARGET, side_effect=fake_get):
            with self.assertRaises(SchemaError) as ctx:
                download_games("alice", client=self.client)

        self.assertEqual(ctx.exception.stage, FetchStage.ARCHIVE_INDEX)
        self.assertEqual(ctx.exception.username, "alice")

    def test_game_without_requested_user_raises(self) -> None:
        stranger = _game(9, "y", "z")
        fake_get = make_fake_get([_index("https://x/2020/01"), _month(stranger)])
        with patch(GET_TARGET, side_effect=fake_get):
            with self.assertRaises(PerspectiveError):
                download_games("a", client=self.client)

    def test_empty_username_rejected(self) -> None:
        with self.assertRaises(ValueError):
            download_games(["a", ""], client=self.client)

    def test_package_level_download_alias(self) -> None:
        with patch(GET_TARGET, side_effect=make_routed_get(_user_routes())):
            games = download(["b"], settings=Settings())

        self.assertEqual(len(games), 2)


if __name__ == "__main__":
    unittest.main()
