import logging
import weakref
from collections import deque
from dataclasses import dataclass
from dataclasses import field
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional

from termflame._samples import Sample
from termflame.reporters.frame_tools import frame_name

LOGGER = logging.getLogger(__name__)

ROOT_NAME = "root"


@dataclass
class FlameNode:
    """A node in the aggregated call tree"""

    name: str
    value: int = 0
    children: Dict[str, "FlameNode"] = field(default_factory=dict)
    _parent: Optional["weakref.ReferenceType[FlameNode]"] = field(
        default=None, repr=False, compare=False
    )

    @property
    def parent(self) -> Optional["FlameNode"]:
        if self._parent is None:
            return None
        return self._parent()

    def child(self, name: str) -> "FlameNode":
        node = self.children.get(name)
        if node is None:
            node = FlameNode(name=name, _parent=weakref.ref(self))
            self.children[name] = node
        return node

    def ordered_children(self) -> List["FlameNode"]:
        # sorted() is stable, so equal values keep insertion order
        return sorted(self.children.values(), key=lambda c: c.value, reverse=True)


def build_flame_tree(samples: Iterable[Sample]) -> FlameNode:
    """Merge samples into a call tree rooted at a node holding their total."""
    root = FlameNode(name=ROOT_NAME)
    n_samples = 0
    for sample in samples:
        n_samples += 1
        value = sample.value
        root.value += value

        current = root
        for stack_frame in reversed(sample.stack):
            current = current.child(frame_name(stack_frame))
            current.value += value

    LOGGER.info(
        "Built flame tree from %d samples (total value %d, depth %d)",
        n_samples,
        root.value,
        max_depth(root),
    )
    return root


def max_depth(root: FlameNode) -> int:
    """Length of the longest root-to-leaf chain, in edges."""
    return len(level_sizes(root)) - 1


def level_sizes(root: FlameNode) -> List[int]:
    """Number of nodes found at every level, starting with the root level."""
    sizes: List[int] = []
    queue = deque([(root, 0)])
    while queue:
        node, level = queue.popleft()
        if level == len(sizes):
            sizes.append(0)
        sizes[level] += 1
        for child in node.children.values():
            queue.append((child, level + 1))
    return sizes


def nodes_at_level(root: FlameNode, level: int) -> List[FlameNode]:
    """Nodes at ``level`` from left to right, as the layout places them."""
    if level < 0:
        return []
    nodes = [root]
    for _ in range(level):
        nodes = [child for node in nodes for child in node.ordered_children()]
    return nodes
