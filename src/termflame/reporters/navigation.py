import enum
from dataclasses import dataclass
from dataclasses import replace
from typing import List

from termflame.reporters.tree import FlameNode
from termflame.reporters.tree import level_sizes
from termflame.reporters.tree import nodes_at_level


class NavigationCommand(enum.Enum):
    INCREASE_LEVEL = "increase_level"
    DECREASE_LEVEL = "decrease_level"
    NEXT_COLUMN = "next_column"
    PREVIOUS_COLUMN = "previous_column"
    QUIT = "quit"
    TOGGLE_HELP = "toggle_help"


@dataclass(frozen=True)
class Cursor:
    level: int = 0
    column: int = 0


class Navigator:
    """Moves a cursor over the levels and columns of an immutable tree.

    Moves that would leave the tree are ignored and return the cursor
    unchanged. Commands that do not move the cursor are ignored as well.
    """

    def __init__(self, root: FlameNode) -> None:
        self.root = root
        self._level_sizes: List[int] = level_sizes(root)

    @property
    def max_depth(self) -> int:
        return len(self._level_sizes) - 1

    def columns_at(self, level: int) -> int:
        if 0 <= level < len(self._level_sizes):
            return self._level_sizes[level]
        return 0

    def apply(self, cursor: Cursor, command: NavigationCommand) -> Cursor:
        if command is NavigationCommand.INCREASE_LEVEL:
            if cursor.level < self.max_depth:
                return Cursor(level=cursor.level + 1, column=0)
        elif command is NavigationCommand.DECREASE_LEVEL:
            if cursor.level > 0:
                return Cursor(level=cursor.level - 1, column=0)
        elif command is NavigationCommand.NEXT_COLUMN:
            if cursor.column < self.columns_at(cursor.level) - 1:
                return replace(cursor, column=cursor.column + 1)
        elif command is NavigationCommand.PREVIOUS_COLUMN:
            if cursor.column > 0:
                return replace(cursor, column=cursor.column - 1)
        return cursor

    def selected(self, cursor: Cursor) -> FlameNode:
        """The node under the cursor, clamped to the last node of its level."""
        level = min(max(cursor.level, 0), self.max_depth)
        nodes = nodes_at_level(self.root, level)
        column = min(max(cursor.column, 0), len(nodes) - 1)
        return nodes[column]
