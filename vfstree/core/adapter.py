"""TreeAdapter abstraction for vfstree.

The adapter provides the navigation logic for a tree, decoupling the node
representation from the traversal mechanism. Traversers and collectors
only ever ask the adapter for children.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple
from .node import Node


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree of nodes.

    Nodes hold no back-references, so navigation is strictly downward:
    an adapter answers "what are the children of this node" and nothing
    else is required by the traversers.
    """

    @abstractmethod
    def get_children(self, node: Node) -> Tuple[Node, ...]:
        """Get the immediate children of the given node, in order.

        Args:
            node: The parent node

        Returns:
            Tuple of child nodes; empty for leaves
        """
        pass

    def has_children(self, node: Node) -> bool:
        """Check if the node has at least one child."""
        return len(self.get_children(node)) > 0

    def child_named(self, node: Node, name: str) -> Optional[Node]:
        """Find the immediate child with the given name.

        Args:
            node: The parent node
            name: Name to look up among the children

        Returns:
            The matching child, or None if there is none
        """
        for child in self.get_children(node):
            if child.name == name:
                return child
        return None

    def estimated_size(self, node: Node) -> Optional[int]:
        """Estimate the number of nodes in the subtree.

        Return None if estimation is not possible.
        """
        return None


class VirtualTreeAdapter(TreeAdapter):
    """Adapter for in-memory File/Directory trees."""

    def get_children(self, node: Node) -> Tuple[Node, ...]:
        """Return a directory's children, or an empty tuple for a file.

        Files have no children; asking for them is not an error.
        """
        if node.is_directory():
            return node.children
        return ()

    def estimated_size(self, node: Node) -> Optional[int]:
        """Count the subtree exactly; the tree is in memory and immutable."""
        count = 0
        stack = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(self.get_children(current))
        return count


class PrunedTreeAdapter(TreeAdapter):
    """Adapter wrapper that hides the children of selected nodes.

    Wrapping lets any traverser skip whole subtrees without knowing
    about filtering.
    """

    def __init__(self, base_adapter: TreeAdapter, prune: Callable[[Node], bool]):
        """Initialize the wrapper.

        Args:
            base_adapter: Adapter that does the actual navigation
            prune: Predicate; nodes for which it returns True report no children
        """
        self.base_adapter = base_adapter
        self.prune = prune

    def get_children(self, node: Node) -> Tuple[Node, ...]:
        if self.prune(node):
            return ()
        return self.base_adapter.get_children(node)
