"""BinaryTreeLib - Binary Tree Traversal Algorithms.

BinaryTreeLib provides a generic binary tree node, classic traversal
algorithms over it, and the iterative traversers they are built on.

Algorithms:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from binarytreelib import sum_leaf_nodes, find_all_root_to_leaf_paths

Building trees:
    from binarytreelib import tree_from_level_order, tree_from_tuple
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.2.0"

from .core import (
    TreeNode,
    TreeAdapter,
    BinaryTreeAdapter,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .builders import tree_from_level_order, tree_from_tuple, tree_to_tuple
from .traversals import (
    sum_leaf_nodes,
    count_internal_nodes,
    build_post_order_string,
    collect_level_order_values,
    count_distinct_values,
    has_strictly_increasing_path,
    have_same_shape,
    find_all_root_to_leaf_paths,
)

# Applications configure output; the library stays silent by default
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "TreeAdapter",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    # Builders
    "tree_from_level_order",
    "tree_from_tuple",
    "tree_to_tuple",
    # Algorithms
    "sum_leaf_nodes",
    "count_internal_nodes",
    "build_post_order_string",
    "collect_level_order_values",
    "count_distinct_values",
    "has_strictly_increasing_path",
    "have_same_shape",
    "find_all_root_to_leaf_paths",
]
