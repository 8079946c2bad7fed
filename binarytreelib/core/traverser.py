"""Traversal orders for BinaryTreeLib.

Every traverser walks with an explicit queue or stack, so neither tree
height nor Python's recursion limit bounds what it can visit, and each
node is handled a constant number of times. A root of None is the empty
tree and produces no nodes.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .adapter import TreeAdapter
from .node import TreeNode


class TreeTraverser(ABC):
    """Base class for a traversal order.

    Traversers only read the tree, through the adapter they were
    created with.
    """

    def __init__(self, adapter: TreeAdapter):
        self.adapter = adapter

    @abstractmethod
    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        """Yield the nodes of the tree rooted at root in this order."""
        pass


class BreadthFirstTraverser(TreeTraverser):
    """Level order: top to bottom, left to right within a level.

    The queue is seeded with the root even when it is None, and every
    child slot is enqueued, absent ones included. Absent entries are
    dropped as they come off the queue.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        queue: Deque[Optional[TreeNode]] = deque([root])
        while queue:
            node = queue.popleft()
            if node is None:
                continue
            yield node
            queue.extend(self.adapter.get_child_slots(node))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Pre-order: node, then left subtree, then right subtree."""

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        stack: List[Optional[TreeNode]] = [root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            yield node
            # Reversed so the leftmost child is popped first
            stack.extend(reversed(self.adapter.get_child_slots(node)))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Post-order: left subtree, then right subtree, then node.

    Each node goes on the stack twice: once to expand its children and
    once, marked as expanded, to be emitted after them.
    """

    def traverse(self, root: Optional[TreeNode]) -> Iterator[TreeNode]:
        stack: List[Tuple[Optional[TreeNode], bool]] = [(root, False)]
        while stack:
            node, expanded = stack.pop()
            if node is None:
                continue
            if expanded:
                yield node
                continue
            stack.append((node, True))
            for child in reversed(self.adapter.get_child_slots(node)):
                stack.append((child, False))


_TRAVERSERS = {
    'bfs': BreadthFirstTraverser,
    'level_order': BreadthFirstTraverser,
    'pre': DepthFirstPreOrderTraverser,
    'pre_order': DepthFirstPreOrderTraverser,
    'post': DepthFirstPostOrderTraverser,
    'post_order': DepthFirstPostOrderTraverser,
}


def create_traverser(order: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser by name.

    Args:
        order: One of bfs, level_order, pre, pre_order, post, post_order
            (case-insensitive)
        adapter: Adapter for the node type being walked

    Raises:
        ValueError: If the name is not a known order
    """
    try:
        traverser_class = _TRAVERSERS[order.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown traversal order: {order}. "
            f"Choose from: {', '.join(_TRAVERSERS)}"
        ) from None
    return traverser_class(adapter)
