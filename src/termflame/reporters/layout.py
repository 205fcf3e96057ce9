"""Proportional partitioning of terminal columns among flame graph nodes.

Every row produced here sums exactly to the width it was given. Columns lost
to floor-rounding, or owned by a node with nothing below it, are emitted as
padding spans whose ``node`` is ``None``.
"""
from dataclasses import dataclass
from dataclasses import replace
from itertools import islice
from typing import Iterator
from typing import List
from typing import NamedTuple
from typing import Optional

from termflame.reporters.tree import FlameNode

NO_HIGHLIGHT = -1


class Allocation(NamedTuple):
    node: Optional[FlameNode]
    width: int


@dataclass(frozen=True)
class Span:
    """A horizontal run of columns owned by one node (or by padding)."""

    node: Optional[FlameNode]
    width: int
    highlighted: bool = False

    @property
    def is_padding(self) -> bool:
        return self.node is None


def widths(node: FlameNode, total_width: int) -> List[Allocation]:
    """Split ``total_width`` columns among the direct children of ``node``.

    Children come largest first. A child with a non-zero value never gets
    less than one column while there are columns left to hand out.
    """
    if total_width < 0:
        raise ValueError(f"width must not be negative, got {total_width}")

    allocations: List[Allocation] = []
    used = 0
    for child in node.ordered_children():
        if node.value == 0:
            width = 0
        else:
            width = child.value * total_width // node.value
            if width == 0 and child.value > 0:
                width = 1
            width = min(width, total_width - used)
        allocations.append(Allocation(child, width))
        used += width

    if used < total_width:
        allocations.append(Allocation(None, total_width - used))
    return allocations


def span_at(
    root: FlameNode,
    level: int,
    total_width: int,
    highlight: int = NO_HIGHLIGHT,
) -> List[Span]:
    """Lay out every node at ``level`` across ``total_width`` columns.

    ``highlight`` is the left-to-right index, among the nodes at ``level``,
    of the node to mark as highlighted.
    """
    if total_width < 0:
        raise ValueError(f"width must not be negative, got {total_width}")
    if level < 0:
        return [Span(None, total_width)] if total_width else []
    row = next(islice(span_rows(root, total_width), level, None))
    return highlight_column(row, highlight)


def span_rows(root: FlameNode, total_width: int) -> Iterator[List[Span]]:
    """Yield the unhighlighted row of every level, starting with the root.

    Rows keep coming forever; past the deepest leaf they are all padding.
    """
    if total_width < 0:
        raise ValueError(f"width must not be negative, got {total_width}")
    row = [Span(root, total_width)]
    while True:
        row = _merge_padding(row)
        yield row
        next_row: List[Span] = []
        for span in row:
            if span.node is None:
                next_row.append(span)
                continue
            for child, width in widths(span.node, span.width):
                next_row.append(Span(child, width))
        row = next_row


def highlight_column(row: List[Span], column: int) -> List[Span]:
    """Mark the ``column``-th node of a row, skipping padding."""
    consumed = 0
    highlighted: List[Span] = []
    for span in row:
        if span.node is not None:
            if consumed == column:
                span = replace(span, highlighted=True)
            consumed += 1
        highlighted.append(span)
    return highlighted


def _merge_padding(spans: List[Span]) -> List[Span]:
    merged: List[Span] = []
    for span in spans:
        if span.is_padding and span.width == 0:
            continue
        if span.is_padding and merged and merged[-1].is_padding:
            merged[-1] = Span(None, merged[-1].width + span.width)
        else:
            merged.append(span)
    return merged
