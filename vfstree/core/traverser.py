"""Tree traversal strategies for vfstree.

Traversers implement different algorithms for walking through trees.
They work with any TreeAdapter. All of them are iterative, keeping their
own stack or queue, so deep trees never exhaust the interpreter's call
stack.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple
from .node import Node
from .adapter import TreeAdapter, VirtualTreeAdapter


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers are independent of the tree structure, working through
    the TreeAdapter.
    """

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
                (defaults to VirtualTreeAdapter)
        """
        self.adapter = adapter if adapter is not None else VirtualTreeAdapter()

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node, then each child's subtree in child order. This is the
    order ``all_files`` reports.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree depth-first, pre-order.

        Children are pushed in reverse so the first child is popped first,
        giving the same order as the naive recursion.
        """
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                children = self.adapter.get_children(node)
                for child in reversed(children):
                    stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for computing per-directory
    aggregates bottom-up.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        """Traverse tree depth-first, post-order.

        Each stack entry carries a flag telling whether its children have
        already been expanded.
        """
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                for child in reversed(self.adapter.get_children(node)):
                    stack.append((child, depth + 1, False))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


def walk_paths(root: Node,
               adapter: Optional[TreeAdapter] = None) -> Iterator[Tuple[Tuple[str, ...], Node]]:
    """Walk the tree in pre-order, yielding each node with its path.

    Nodes hold no parent references, so the path (names from root to the
    node) is carried on the stack alongside each node.

    Args:
        root: Starting node
        adapter: TreeAdapter for navigating the tree

    Yields:
        Tuples of (path, node)
    """
    adapter = adapter if adapter is not None else VirtualTreeAdapter()
    stack: List[Tuple[Tuple[str, ...], Node]] = [((root.name,), root)]

    while stack:
        path, node = stack.pop()
        yield (path, node)
        for child in reversed(adapter.get_children(node)):
            stack.append((path + (child.name,), child))


def create_traverser(strategy: str, adapter: Optional[TreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs_pre, dfs_post, bfs)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
