from typing import IO
from typing import Iterable
from typing import Optional

from rich.console import Console
from rich.text import Text

from termflame._samples import Sample
from termflame.reporters.navigation import Cursor
from termflame.reporters.navigation import Navigator
from termflame.reporters.render import describe_node
from termflame.reporters.render import render
from termflame.reporters.tree import FlameNode
from termflame.reporters.tree import build_flame_tree
from termflame.reporters.tui import FlameGraphApp


class FlameGraphReporter:
    def __init__(self, data: FlameNode) -> None:
        super().__init__()
        self.data = data

    @classmethod
    def from_samples(cls, samples: Iterable[Sample]) -> "FlameGraphReporter":
        return cls(build_flame_tree(samples))

    def get_app(self, *, all_levels: bool = False) -> FlameGraphApp:
        return FlameGraphApp(self.data, all_levels=all_levels)

    def render(self, *, all_levels: bool = False) -> None:
        self.get_app(all_levels=all_levels).run()

    def render_static(
        self,
        *,
        file: Optional[IO[str]] = None,
        width: Optional[int] = None,
        level: int = 1,
        column: int = 0,
        all_levels: bool = False,
    ) -> None:
        """Print the flame graph once, without entering interactive mode."""
        console = Console(file=file, width=width)
        navigator = Navigator(self.data)
        level = min(max(level, 0), navigator.max_depth)
        column = min(max(column, 0), navigator.columns_at(level) - 1)
        cursor = Cursor(level=level, column=column)
        selected = navigator.selected(cursor)

        markup = render(
            self.data,
            cursor.level,
            cursor.column,
            console.width,
            all_levels=all_levels,
        )
        if markup:
            console.print(Text.from_markup(markup), no_wrap=True, crop=True)
        console.print(Text(describe_node(selected, self.data)), soft_wrap=True)
