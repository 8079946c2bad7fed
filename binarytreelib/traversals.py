"""Classic binary-tree algorithms.

Every function accepts a possibly-absent root (None is the empty tree)
and returns a derived value without touching the tree. An empty tree is
never an error; it yields 0, "", [] or False as appropriate.

All walks use explicit stacks or queues, so arbitrarily deep trees are
fine and each runs in time linear in the number of nodes.
"""

from typing import Any, Hashable, Iterator, List, Optional, Set, Tuple

from .core.node import TreeNode
from .core.adapter import BinaryTreeAdapter
from .core.traverser import create_traverser

_adapter = BinaryTreeAdapter()


def _walk(order: str, node: Optional[TreeNode]) -> Iterator[TreeNode]:
    return create_traverser(order, _adapter).traverse(node)


def sum_leaf_nodes(node: Optional[TreeNode]) -> int:
    """Return the sum of the values of all leaf nodes.

    Example:
        >>> from binarytreelib import tree_from_tuple
        >>> sum_leaf_nodes(tree_from_tuple((1, (2, 4, 5), (3, None, 6))))
        15
    """
    return sum(current.value for current in _walk("pre", node) if current.is_leaf())


def count_internal_nodes(node: Optional[TreeNode]) -> int:
    """Count the nodes that have at least one child."""
    return sum(1 for current in _walk("pre", node) if not current.is_leaf())


def build_post_order_string(node: Optional[TreeNode]) -> str:
    """Concatenate str() of every value in post-order.

    If the post-order visit sees "a", "b" and "c" in that order, the
    result is "abc".
    """
    return "".join(str(current.value) for current in _walk("post", node))


def collect_level_order_values(node: Optional[TreeNode]) -> List[Any]:
    """Collect values level by level, top to bottom and left to right."""
    return [current.value for current in _walk("bfs", node)]


def count_distinct_values(node: Optional[TreeNode]) -> int:
    """Count the distinct values stored in the tree.

    Values are compared by equality.

    Raises:
        TypeError: If a value is unhashable
    """
    seen: Set[Hashable] = set()
    for current in _walk("pre", node):
        seen.add(current.value)
    return len(seen)


def has_strictly_increasing_path(node: Optional[TreeNode]) -> bool:
    """Check for a root-to-leaf path whose values strictly increase.

    Only one such path is needed. A lone leaf counts as an increasing
    path of length one.
    """
    if node is None:
        return False

    if node.is_leaf():
        return True

    # Each entry is a candidate node and the value of its parent
    stack: List[Tuple[Optional[TreeNode], Any]] = [
        (node.right, node.value),
        (node.left, node.value),
    ]
    while stack:
        current, previous = stack.pop()
        # An absent child is not a leaf, so that path ends without succeeding
        if current is None or not current.value > previous:
            continue
        if current.is_leaf():
            return True
        stack.append((current.right, current.value))
        stack.append((current.left, current.value))

    return False


def have_same_shape(node_a: Optional[TreeNode], node_b: Optional[TreeNode]) -> bool:
    """Check whether two trees have the same arrangement of nodes.

    Stored values are ignored. Two empty trees have the same shape.
    """
    stack: List[Tuple[Optional[TreeNode], Optional[TreeNode]]] = [(node_a, node_b)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))

    return True


def find_all_root_to_leaf_paths(node: Optional[TreeNode]) -> List[List[Any]]:
    """Find every path from the root to a leaf.

    Paths are listed in pre-order, so the left subtree's paths come
    before the right subtree's.

    Example:
                1
               / \\
              2   3
             / \\   \\
            4   5   6

        gives [[1, 2, 4], [1, 2, 5], [1, 3, 6]]
    """
    paths: List[List[Any]] = []
    current_path: List[Any] = []
    # (node, leaving): leaving entries pop the node's value off the path
    stack: List[Tuple[Optional[TreeNode], bool]] = [(node, False)]

    while stack:
        current, leaving = stack.pop()
        if leaving:
            current_path.pop()
            continue
        if current is None:
            continue

        current_path.append(current.value)
        if current.is_leaf():
            paths.append(list(current_path))
            current_path.pop()
            continue

        stack.append((current, True))
        stack.append((current.right, False))
        stack.append((current.left, False))

    return paths
