"""Helpers for building TreeNode trees from plain Python data.

Two input formats are supported:

- Level-order lists, as used by LeetCode: ``[1, 2, 3, 4, 5, None, 6]``.
  ``None`` marks an absent child; children of absent nodes are not listed.
- Nested tuples ``(value, left, right)`` with ``None`` for an absent child.
  A bare value (anything that is not a tuple) is a leaf.
"""

import logging
from collections import deque
from typing import Any, Deque, Dict, Iterable, Optional

from .core.adapter import BinaryTreeAdapter
from .core.node import TreeNode
from .core.traverser import DepthFirstPostOrderTraverser

logger = logging.getLogger(__name__)

_adapter = BinaryTreeAdapter()


def tree_from_level_order(values: Iterable[Any]) -> Optional[TreeNode]:
    """Build a tree from a level-order list.

    Args:
        values: Node values in breadth-first order, None for absent slots

    Returns:
        The root node, or None when the list is empty or starts with None

    Example:
        >>> root = tree_from_level_order([1, 2, 3, 4, 5, None, 6])
        >>> root.right.right.value
        6
    """
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None

    root = TreeNode(first)
    pending: Deque[TreeNode] = deque([root])

    for index, value in enumerate(items, start=1):
        if not pending:
            logger.debug("Ignoring level-order entries from index %d: no open slots", index)
            break
        # Odd indexes fill a left slot, even indexes the right slot of the same parent
        parent = pending[0]
        child = TreeNode(value) if value is not None else None
        if index % 2 == 1:
            parent.left = child
        else:
            parent.right = child
            pending.popleft()
        if child is not None:
            pending.append(child)

    return root


def tree_from_tuple(shape: Any) -> Optional[TreeNode]:
    """Build a tree from nested ``(value, left, right)`` tuples.

    ``(value,)`` and ``(value, left)`` are accepted as shorthand with the
    missing children absent.

    Raises:
        ValueError: If a tuple is empty or has more than three items

    Example:
        >>> tree_from_tuple((1, (2, 4, 5), (3, None, 6)))
        TreeNode(1, TreeNode(2, TreeNode(4), TreeNode(5)), TreeNode(3, None, TreeNode(6)))
    """
    if shape is None:
        return None
    if not isinstance(shape, tuple):
        return TreeNode(shape)
    if not 1 <= len(shape) <= 3:
        raise ValueError(
            f"Tree tuple must be (value[, left[, right]]), got {len(shape)} items: {shape!r}"
        )

    value, left, right = (shape + (None, None))[:3]
    return TreeNode(value, tree_from_tuple(left), tree_from_tuple(right))


def tree_to_tuple(node: Optional[TreeNode]) -> Any:
    """Convert a tree back to nested tuples.

    Leaves come out as bare values, other nodes as ``(value, left, right)``.
    Note that a leaf whose value is itself a tuple does not round-trip.
    """
    # Post-order guarantees both children are converted before their parent
    converted: Dict[int, Any] = {}
    for current in DepthFirstPostOrderTraverser(_adapter).traverse(node):
        if current.is_leaf():
            converted[id(current)] = current.value
        else:
            converted[id(current)] = (
                current.value,
                converted.pop(id(current.left), None),
                converted.pop(id(current.right), None),
            )
    return converted.get(id(node)) if node is not None else None
