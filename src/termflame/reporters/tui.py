from typing import Any

from rich.text import Text
from textual import log
from textual.app import App
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Footer
from textual.widgets import Label
from textual.widgets import Static

from termflame.reporters.navigation import Cursor
from termflame.reporters.navigation import NavigationCommand
from termflame.reporters.navigation import Navigator
from termflame.reporters.render import describe_node
from termflame.reporters.render import render
from termflame.reporters.tree import FlameNode

HELP_TEXT = (
    "↑/↓: Change level  ←/→: Change column  m: All levels  q: Quit  h: Toggle help"
)


class FlameView(Widget):
    """Widget drawing one level, or all levels, of the flame graph."""

    DEFAULT_CSS = """
    FlameView {
        height: 1fr;
    }
    """

    cursor = reactive(Cursor())
    all_levels = reactive(False)

    def __init__(
        self, root: FlameNode, *args: Any, all_levels: bool = False, **kwargs: Any
    ) -> None:
        super().__init__(*args, **kwargs)
        self.root = root
        self.set_reactive(FlameView.all_levels, all_levels)

    def render(self) -> Text:
        markup = render(
            self.root,
            self.cursor.level,
            self.cursor.column,
            self.size.width,
            all_levels=self.all_levels,
        )
        text = Text.from_markup(markup, overflow="crop")
        text.no_wrap = True
        return text


class NodeDetail(Static):
    """Describes the node under the cursor."""

    DEFAULT_CSS = """
    NodeDetail {
        height: 8;
        border: round $accent;
        padding: 0 1;
    }
    """

    def __init__(
        self, root: FlameNode, node: FlameNode, *args: Any, **kwargs: Any
    ) -> None:
        super().__init__(Text(describe_node(node, root)), *args, **kwargs)
        self.root = root
        self.flame_node = node
        self.border_title = "Details"

    def show(self, node: FlameNode) -> None:
        self.flame_node = node
        self.update(Text(describe_node(node, self.root)))


class FlameGraphScreen(Screen[None]):
    BINDINGS = [
        Binding("ctrl+z", "app.suspend_process"),
        Binding("q,escape", "dispatch('quit')", "Quit"),
        Binding("down,j", "dispatch('increase_level')", "Deeper"),
        Binding("up,k", "dispatch('decrease_level')", "Shallower"),
        Binding("right,l", "dispatch('next_column')", "Next"),
        Binding("left", "dispatch('previous_column')", "Previous"),
        Binding("h", "dispatch('toggle_help')", "Help"),
        Binding("m", "toggle_all_levels", "All levels"),
    ]

    DEFAULT_CSS = """
    #help {
        width: 100%;
        content-align: center middle;
        background: $panel;
    }
    """

    cursor = reactive(Cursor(), init=False)

    def __init__(self, root: FlameNode, *, all_levels: bool = False) -> None:
        super().__init__()
        self.root = root
        self.navigator = Navigator(root)
        self.all_levels = all_levels

    def compose(self) -> ComposeResult:
        yield Vertical(
            FlameView(self.root, all_levels=self.all_levels),
            NodeDetail(self.root, self.navigator.selected(Cursor())),
            Label(HELP_TEXT, id="help"),
        )
        yield Footer()

    @property
    def selected(self) -> FlameNode:
        return self.navigator.selected(self.cursor)

    def action_dispatch(self, name: str) -> None:
        command = NavigationCommand(name)
        if command is NavigationCommand.QUIT:
            self.app.exit()
        elif command is NavigationCommand.TOGGLE_HELP:
            help_bar = self.query_one("#help", Label)
            help_bar.display = not help_bar.display
        else:
            self.cursor = self.navigator.apply(self.cursor, command)

    def action_toggle_all_levels(self) -> None:
        self.all_levels = not self.all_levels
        self.query_one(FlameView).all_levels = self.all_levels

    def watch_cursor(self, cursor: Cursor) -> None:
        log(f"cursor moved to level={cursor.level} column={cursor.column}")
        self.query_one(FlameView).cursor = cursor
        self.query_one(NodeDetail).show(self.selected)


class FlameGraphApp(App[None]):
    TITLE = "termflame"

    def __init__(self, root: FlameNode, *, all_levels: bool = False) -> None:
        super().__init__()
        self.flame_screen = FlameGraphScreen(root, all_levels=all_levels)

    def on_mount(self) -> None:
        self.push_screen(self.flame_screen)
