"""TreeAdapter abstraction for BinaryTreeLib.

Traversers never touch ``left``/``right`` directly; they ask an adapter
for a node's child slots. This keeps the walking code independent of
how a particular node type stores its children.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from .node import TreeNode


class TreeAdapter(ABC):
    """Navigation for one kind of tree node."""

    @abstractmethod
    def get_child_slots(self, node: TreeNode) -> Sequence[Optional[TreeNode]]:
        """Return every child position of a node, in order.

        Absent children are reported as None so that callers can tell
        positions apart.
        """
        pass

    def get_children(self, node: TreeNode) -> Sequence[TreeNode]:
        """Return only the children that are present."""
        return [child for child in self.get_child_slots(node) if child is not None]


class BinaryTreeAdapter(TreeAdapter):
    """Adapter for TreeNode: slots are always (left, right)."""

    def get_child_slots(self, node: TreeNode) -> Sequence[Optional[TreeNode]]:
        return (node.left, node.right)
