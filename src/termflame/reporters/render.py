"""Turn laid out flame graph rows into rich console markup."""
import functools
import hashlib
from itertools import islice
from typing import List
from typing import Tuple

from rich.markup import escape
from textual.color import Color

from termflame.reporters.layout import NO_HIGHLIGHT
from termflame.reporters.layout import Span
from termflame.reporters.layout import highlight_column
from termflame.reporters.layout import span_at
from termflame.reporters.layout import span_rows
from termflame.reporters.tree import FlameNode
from termflame.reporters.tree import max_depth

ELLIPSIS = "..."

# Dark inks, all readable on the warm backgrounds produced by color_for.
FOREGROUND_PALETTE = (
    "#000000",
    "#1c1c1c",
    "#2b1d0e",
    "#3a1f1f",
)


def truncate_label(label: str, width: int) -> str:
    """Fit ``label`` inside a block ``width`` columns wide.

    Blocks narrower than three columns stay unlabelled.
    """
    if width < 3:
        return ""
    if len(label) <= width:
        return label
    if width >= 5:
        return label[: width - 5] + ELLIPSIS
    return label[: width - 2]


@functools.lru_cache(maxsize=None)
def color_for(name: str) -> Tuple[str, str]:
    """Foreground and background colors for a frame name."""
    digest = int(hashlib.md5(name.encode()).hexdigest()[:8], 16)
    hue = (digest % 55) / 360
    saturation = (70 + digest % 30) / 100
    lightness = (55 + (digest >> 8) % 15) / 100
    background = Color.from_hsl(hue, saturation, lightness)
    foreground = FOREGROUND_PALETTE[(digest >> 16) % len(FOREGROUND_PALETTE)]
    return foreground, background.hex


def render_block(span: Span) -> str:
    if span.width <= 0:
        return ""
    if span.node is None:
        return " " * span.width

    label = truncate_label(span.node.name, span.width).center(span.width)
    foreground, background = color_for(span.node.name)
    block = f"[{foreground} on {background}]{escape(label)}[/]"
    if span.highlighted:
        block = f"[underline]{block}[/underline]"
    return block


def render_row(
    root: FlameNode, level: int, total_width: int, column: int = -1
) -> str:
    """Markup for the nodes at ``level``, highlighting the one at ``column``."""
    spans = span_at(root, level, total_width, highlight=column)
    return "".join(render_block(span) for span in spans)


def render_rows(
    root: FlameNode, current_level: int, current_column: int, total_width: int
) -> str:
    """Markup for every level below the root, one line per level."""
    rows: List[str] = []
    levels = islice(span_rows(root, total_width), 1, max_depth(root) + 1)
    for level, spans in enumerate(levels, 1):
        column = current_column if level == current_level else NO_HIGHLIGHT
        spans = highlight_column(spans, column)
        rows.append("".join(render_block(span) for span in spans))
    return "\n".join(rows)


def render(
    root: FlameNode,
    current_level: int,
    current_column: int,
    total_width: int,
    *,
    all_levels: bool = False,
) -> str:
    if all_levels:
        return render_rows(root, current_level, current_column, total_width)
    return render_row(root, current_level, total_width, current_column)


def describe_node(node: FlameNode, root: FlameNode) -> str:
    lines = [f"Function: {node.name}", f"Value: {node.value}"]

    parent = node.parent
    if parent is not None and parent.value:
        lines.append(f"Percentage of parent: {node.value / parent.value * 100:.2f}%")
    if root.value:
        lines.append(f"Percentage of total: {node.value / root.value * 100:.2f}%")

    lines.append(f"Children: {len(node.children)}")
    return "\n".join(lines)
