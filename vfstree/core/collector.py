"""Data collection strategies for vfstree.

DataCollectors define what information to extract from each node during
traversal. AggregateCollectors reduce a whole sequence of nodes to one
value with a fold, so totals and extremes are computed in a single pass.
"""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple
from .node import Node
from .adapter import TreeAdapter, VirtualTreeAdapter


class DataCollector(ABC):
    """Abstract base class for per-node data collection strategies.

    The same traversal can serve different purposes (collecting names,
    metadata or whole nodes) depending on the collector plugged in.
    """

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        self.adapter = adapter if adapter is not None else VirtualTreeAdapter()

    @abstractmethod
    def collect(self, node: Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class NameCollector(DataCollector):
    """Collects only node names."""

    def collect(self, node: Node, depth: int) -> str:
        return node.name


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        return node.metadata()


class FullNodeCollector(DataCollector):
    """Collects the node itself."""

    def collect(self, node: Node, depth: int) -> Node:
        return node


class ChildCountCollector(DataCollector):
    """Collects node info with the number of immediate children."""

    def collect(self, node: Node, depth: int) -> Dict[str, Any]:
        return {
            'name': node.name,
            'depth': depth,
            'child_count': len(self.adapter.get_children(node)),
            'is_leaf': node.is_leaf(),
        }


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[Node, int], Any],
                 adapter: Optional[TreeAdapter] = None):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
            adapter: TreeAdapter for tree navigation
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Node, depth: int) -> Any:
        return self.collect_func(node, depth)


class AggregateCollector(ABC):
    """Base class for collectors that fold a sequence of nodes into one value.

    Subclasses provide the initial accumulator, the combining step and a
    final conversion. ``aggregate`` runs the fold in one pass.
    """

    @abstractmethod
    def initial(self) -> Any:
        """Return the starting accumulator."""
        pass

    @abstractmethod
    def combine(self, acc: Any, node: Node) -> Any:
        """Fold one node into the accumulator and return the new accumulator."""
        pass

    def finish(self, acc: Any) -> Any:
        """Convert the final accumulator into the result."""
        return acc

    def aggregate(self, nodes: Iterable[Node]) -> Any:
        """Fold all nodes and return the finished result."""
        return self.finish(reduce(self.combine, nodes, self.initial()))


class CountCollector(AggregateCollector):
    """Counts nodes."""

    def initial(self) -> int:
        return 0

    def combine(self, acc: int, node: Node) -> int:
        return acc + 1


class SumCollector(AggregateCollector):
    """Sums a metadata property across nodes.

    Nodes lacking the property (directories, for 'size') contribute nothing.
    """

    def __init__(self, property_name: str = 'size'):
        self.property_name = property_name

    def initial(self) -> int:
        return 0

    def combine(self, acc: int, node: Node) -> int:
        value = node.metadata().get(self.property_name)
        if value is None:
            return acc
        return acc + value


class ExtremesCollector(AggregateCollector):
    """Finds the nodes with the smallest and largest value of a property.

    The accumulator is (count, smallest, largest). Comparisons are strict,
    so on ties the first node encountered is kept for both ends. Nodes
    lacking the property are skipped.

    Result:
        [] when no node had the property, [node] when exactly one did,
        otherwise [smallest, largest].
    """

    def __init__(self, property_name: str = 'size'):
        self.property_name = property_name

    def initial(self) -> Tuple[int, Optional[Node], Optional[Node]]:
        return (0, None, None)

    def combine(self, acc, node: Node):
        count, smallest, largest = acc
        value = node.metadata().get(self.property_name)
        if value is None:
            return acc
        if count == 0:
            return (1, node, node)

        if value < smallest.metadata()[self.property_name]:
            smallest = node
        if value > largest.metadata()[self.property_name]:
            largest = node
        return (count + 1, smallest, largest)

    def finish(self, acc) -> List[Node]:
        count, smallest, largest = acc
        if count == 0:
            return []
        if count == 1:
            return [smallest]
        return [smallest, largest]
