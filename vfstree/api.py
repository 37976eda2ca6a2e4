"""High-level API for vfstree.

This module provides simple, functional interfaces for the common
operations on a virtual filesystem tree. These functions wrap the
object-oriented traverser/collector/plan machinery for ease of use.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .core.node import Node, File, Directory, format_path
from .core.adapter import TreeAdapter, VirtualTreeAdapter
from .core.traverser import DepthFirstPreOrderTraverser, walk_paths
from .core.collector import CountCollector, SumCollector, ExtremesCollector
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import ExecutionPlan

logger = logging.getLogger(__name__)

_default_adapter = VirtualTreeAdapter()


def list_children(node: Node) -> Tuple[Node, ...]:
    """Return the immediate children of a node.

    A file has no children; this returns an empty tuple rather than
    failing.
    """
    return _default_adapter.get_children(node)


def all_files(node: Node) -> List[Node]:
    """Return every node in the subtree rooted at ``node``, in pre-order.

    The node itself comes first, then each child's subtree in child
    order. Despite the name, directories are included; use
    ``only_files`` for files alone.

    Example:
        >>> root = make_directory("/", [make_directory("bin", [make_file("ls", 10)])])
        >>> [n.name for n in all_files(root)]
        ['/', 'bin', 'ls']
    """
    traverser = DepthFirstPreOrderTraverser(_default_adapter)
    return [n for n, _ in traverser.traverse(node)]


def only_files(node: Node) -> List[File]:
    """Return the files in the subtree, in pre-order."""
    return [n for n in all_files(node) if n.is_file()]


def total_size(node: Node) -> int:
    """Return the sum of file sizes in the subtree (0 when there are none)."""
    total = SumCollector('size').aggregate(only_files(node))
    logger.debug("total_size(%r) = %d", node.name, total)
    return total


def largest_smallest(node: Node) -> List[File]:
    """Find the smallest and largest files in the subtree.

    Returns:
        ``[]`` with no files, ``[f]`` with exactly one file, otherwise
        ``[smallest, largest]``. On equal sizes the file that comes first
        in pre-order wins.
    """
    return ExtremesCollector('size').aggregate(only_files(node))


def where_is(root: Node, target_name: str) -> Optional[Directory]:
    """Find the directory that directly contains a node named ``target_name``.

    Directories are searched in pre-order and the first match is
    returned; the walk stops there.

    Args:
        root: Root of the tree to search
        target_name: Name to look for among each directory's children

    Returns:
        The containing directory, or None if no directory has such a child
    """
    traverser = DepthFirstPreOrderTraverser(_default_adapter)
    for node, _ in traverser.traverse(root):
        if not node.is_directory():
            continue
        if _default_adapter.child_named(node, target_name) is not None:
            logger.debug("where_is(%r) found in %r", target_name, node.name)
            return node
    return None


def find_file(root: Node, name: str) -> Optional[File]:
    """Return the first file named ``name`` in pre-order, or None."""
    for node in only_files(root):
        if node.name == name:
            return node
    return None


def traverse_tree(
    root: Node,
    adapter: Optional[TreeAdapter] = None,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Node], bool]] = None,
    exclude_filter: Optional[Callable[[Node], bool]] = None,
    prune_on_exclude: bool = False,
) -> Iterator[Node]:
    """Simple interface for tree traversal.

    This is a generator: the configuration is only built and validated
    when iteration starts, so the errors listed below surface on the
    first next() call rather than when traverse_tree() is called.

    Args:
        root: Starting node for traversal
        adapter: Tree adapter (defaults to VirtualTreeAdapter)
        strategy: Traversal strategy (dfs_pre, dfs_post, bfs)
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        prune_on_exclude: Also skip the subtree below excluded nodes

    Yields:
        Nodes that match the criteria

    Raises:
        InvalidConfigurationError: If the depth bounds are inconsistent
        ValueError: If the strategy name is unknown
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
            prune_on_exclude=prune_on_exclude,
        ),
        data_requirements=DataRequirement.FULL_NODE,
    )
    plan = ExecutionPlan(config, adapter or _default_adapter)

    for node, _ in plan.execute(root):
        yield node


def collect_tree_data(
    root: Node,
    adapter: Optional[TreeAdapter] = None,
    data_requirement: DataRequirement = DataRequirement.METADATA,
    **kwargs
) -> Iterator[Tuple[Node, Any]]:
    """Traverse the tree and collect the requested data from each node.

    Args:
        root: Starting node for traversal
        adapter: Tree adapter (defaults to VirtualTreeAdapter)
        data_requirement: What data to collect
        **kwargs: strategy, max_depth, min_depth, include_filter,
            exclude_filter, prune_on_exclude, custom_collector

    Yields:
        Tuples of (node, collected_data)
    """
    config = _build_config_from_kwargs(data_requirement=data_requirement, **kwargs)
    plan = ExecutionPlan(config, adapter or _default_adapter)
    yield from plan.execute(root)


def count_nodes(root: Node, **kwargs) -> int:
    """Count nodes in a tree that match the traversal criteria.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse_tree)
    """
    return CountCollector().aggregate(traverse_tree(root, **kwargs))


def find_nodes(root: Node, predicate: Callable[[Node], bool], **kwargs) -> Iterator[Node]:
    """Find nodes that match a predicate.

    The predicate takes the place of include_filter; passing both raises
    TypeError.

    Example:
        >>> [d.name for d in find_nodes(root, lambda n: n.is_directory())]
        ['/', 'bin']
    """
    if 'include_filter' in kwargs:
        raise TypeError("find_nodes() takes the predicate instead of include_filter")
    kwargs['include_filter'] = predicate
    yield from traverse_tree(root, **kwargs)


def get_tree_paths(root: Node) -> Iterator[str]:
    """Yield the rendered path of every node, in pre-order.

    Example:
        >>> list(get_tree_paths(root))
        ['/', '/bin/', '/bin/ls']
    """
    for path, node in walk_paths(root, _default_adapter):
        yield format_path(path, node)


def get_tree_stats(root: Node) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with total_nodes, file_count, directory_count,
        empty_directories, total_size and max_depth
    """
    stats = {
        'total_nodes': 0,
        'file_count': 0,
        'directory_count': 0,
        'empty_directories': 0,
        'total_size': 0,
        'max_depth': 0,
    }

    traverser = DepthFirstPreOrderTraverser(_default_adapter)
    for node, depth in traverser.traverse(root):
        stats['total_nodes'] += 1
        stats['max_depth'] = max(stats['max_depth'], depth)
        if node.is_file():
            stats['file_count'] += 1
            stats['total_size'] += node.size
        else:
            stats['directory_count'] += 1
            if not node.children:
                stats['empty_directories'] += 1

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum."""
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'dfs': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
        'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
        'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
    }

    strategy_lower = str(strategy).lower()
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build a TraversalConfig from keyword arguments.

    Raises:
        TypeError: If an unknown option is passed
    """
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))
    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')
    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')
    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')
    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')
    if 'prune_on_exclude' in kwargs:
        config.filter.prune_on_exclude = kwargs.pop('prune_on_exclude')
    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')
    if 'custom_collector' in kwargs:
        config.custom_collector = kwargs.pop('custom_collector')

    if kwargs:
        raise TypeError(f"Unknown traversal options: {', '.join(sorted(kwargs))}")

    return config
