from unittest.mock import patch

from textual.widgets import Label

from termflame.reporters import FlameGraphReporter
from termflame.reporters.navigation import Cursor
from termflame.reporters.tui import FlameView
from termflame.reporters.tui import NodeDetail
from tests.utils import async_run
from tests.utils import make_sample

SAMPLES = [
    make_sample(10, "main", "parse"),
    make_sample(5, "main", "render"),
    make_sample(3, "worker", "poll"),
]


def get_app(**kwargs):
    return FlameGraphReporter.from_samples(SAMPLES).get_app(**kwargs)


class TestFlameGraphApp:
    def test_starts_on_the_root(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.flame_screen
                return screen.cursor, screen.query_one(NodeDetail).flame_node.name

        cursor, selected = async_run(run_test())

        # THEN
        assert cursor == Cursor(level=0, column=0)
        assert selected == "root"

    def test_arrow_keys_move_the_cursor(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.press("down", "down", "right")
                await pilot.pause()
                screen = app.flame_screen
                return (
                    screen.cursor,
                    screen.query_one(FlameView).cursor,
                    screen.query_one(NodeDetail).flame_node.name,
                )

        screen_cursor, view_cursor, selected = async_run(run_test())

        # THEN
        assert screen_cursor == Cursor(level=2, column=1)
        assert view_cursor == screen_cursor
        assert selected == "render"

    def test_out_of_bounds_moves_are_ignored(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.press("up", "left")
                await pilot.press("down", "down", "down", "down")
                await pilot.press("right", "right", "right", "right")
                await pilot.pause()
                return app.flame_screen.cursor

        cursor = async_run(run_test())

        # THEN
        assert cursor == Cursor(level=2, column=2)

    def test_going_up_resets_the_column(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                await pilot.press("j", "l", "k", "j")
                await pilot.pause()
                return app.flame_screen.cursor

        cursor = async_run(run_test())

        # THEN
        assert cursor == Cursor(level=1, column=0)

    def test_flame_view_spans_the_widget(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test(size=(60, 20)) as pilot:
                await pilot.pause()
                await pilot.press("down")
                await pilot.pause()
                flame = app.flame_screen.query_one(FlameView)
                return flame.size.width, flame.render().plain

        width, rendered = async_run(run_test())

        # THEN
        assert len(rendered) == width
        assert "main" in rendered
        assert "worker" in rendered

    def test_toggle_all_levels(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                flame = app.flame_screen.query_one(FlameView)
                before = flame.all_levels
                await pilot.press("m")
                await pilot.pause()
                return before, flame.all_levels, flame.render().plain.split("\n")

        before, after, lines = async_run(run_test())

        # THEN
        assert before is False
        assert after is True
        assert len(lines) == 2

    def test_start_with_all_levels(self):
        app = get_app(all_levels=True)

        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                return app.flame_screen.query_one(FlameView).all_levels

        assert async_run(run_test()) is True

    def test_toggle_help(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                help_bar = app.flame_screen.query_one("#help", Label)
                shown = [help_bar.display]
                await pilot.press("h")
                await pilot.pause()
                shown.append(help_bar.display)
                await pilot.press("h")
                await pilot.pause()
                shown.append(help_bar.display)
                return shown

        shown = async_run(run_test())

        # THEN
        assert shown == [True, False, True]

    def test_quit(self):
        # GIVEN
        app = get_app()

        # WHEN
        async def run_test():
            async with app.run_test() as pilot:
                await pilot.pause()
                with patch.object(app, "exit") as exit_mock:
                    await pilot.press("q")
                    await pilot.pause()
                return exit_mock

        exit_mock = async_run(run_test())

        # THEN
        exit_mock.assert_called_once_with()
