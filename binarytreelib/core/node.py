"""TreeNode for BinaryTreeLib.

The node is a plain data container: a value and two optional, exclusively
owned children. The empty tree is None, never a sentinel node.
"""

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A node in a finite, acyclic binary tree.

    Example:
        >>> root = TreeNode(1, TreeNode(2), TreeNode(3))
        >>> root.is_leaf()
        False
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: T,
                 left: Optional["TreeNode[T]"] = None,
                 right: Optional["TreeNode[T]"] = None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """True when the node has neither a left nor a right child."""
        return self.left is None and self.right is None

    def children(self) -> List["TreeNode[T]"]:
        """Present children, left before right."""
        return [child for child in (self.left, self.right) if child is not None]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        # Recursive, so only meant for small trees in tests and debugging
        if self.is_leaf():
            return f"{self.__class__.__name__}({self.value!r})"
        return f"{self.__class__.__name__}({self.value!r}, {self.left!r}, {self.right!r})"
