"""Core abstractions for vfstree.

Nodes, the adapter that navigates them, traversal strategies and data
collectors.
"""

from .node import (
    Node,
    File,
    Directory,
    NodeKind,
    InvalidNodeError,
    make_file,
    make_directory,
    format_path,
)
from .adapter import TreeAdapter, VirtualTreeAdapter, PrunedTreeAdapter
from .traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    walk_paths,
)
from .collector import (
    DataCollector,
    NameCollector,
    MetadataCollector,
    FullNodeCollector,
    ChildCountCollector,
    CustomCollector,
    AggregateCollector,
    CountCollector,
    SumCollector,
    ExtremesCollector,
)

__all__ = [
    "Node",
    "File",
    "Directory",
    "NodeKind",
    "InvalidNodeError",
    "make_file",
    "make_directory",
    "format_path",
    "TreeAdapter",
    "VirtualTreeAdapter",
    "PrunedTreeAdapter",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "walk_paths",
    "DataCollector",
    "NameCollector",
    "MetadataCollector",
    "FullNodeCollector",
    "ChildCountCollector",
    "CustomCollector",
    "AggregateCollector",
    "CountCollector",
    "SumCollector",
    "ExtremesCollector",
]
