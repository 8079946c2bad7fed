"""Core building blocks for BinaryTreeLib: the node, adapters and traversers."""

from .node import TreeNode
from .adapter import TreeAdapter, BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)

__all__ = [
    "TreeNode",
    "TreeAdapter",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
]
