"""vfstree - an immutable virtual filesystem tree.

Build a tree once from File and Directory values, then walk, aggregate
and search it:

    from vfstree import make_file, make_directory, all_files, where_is

    root = make_directory("/", [
        make_directory("bin", [make_file("ls", 10), make_file("cp", 20)]),
        make_file("etc-note", 5),
    ])
    where_is(root, "ls")   # -> the "bin" directory
"""

import logging

__version__ = "0.1.0"

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    DepthConfig,
    FilterConfig,
)
from .planning import ExecutionPlan, InvalidConfigurationError
from .api import (
    list_children,
    all_files,
    only_files,
    total_size,
    largest_smallest,
    where_is,
    find_file,
    traverse_tree,
    collect_tree_data,
    count_nodes,
    find_nodes,
    get_tree_paths,
    get_tree_stats,
)

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    *_core_all,
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "DataRequirement",
    "DepthConfig",
    "FilterConfig",
    "ExecutionPlan",
    "InvalidConfigurationError",
    # API
    "list_children",
    "all_files",
    "only_files",
    "total_size",
    "largest_smallest",
    "where_is",
    "find_file",
    "traverse_tree",
    "collect_tree_data",
    "count_nodes",
    "find_nodes",
    "get_tree_paths",
    "get_tree_stats",
]
