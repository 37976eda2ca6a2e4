"""Configuration system for vfstree.

This module defines how callers specify their traversal requirements:
which order to walk in, which depths to report, which nodes to keep and
what data to collect from each of them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Set

from .core.node import Node, NodeKind


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    DEPTH_FIRST_PRE = "dfs_pre"     # Parent before children
    DEPTH_FIRST_POST = "dfs_post"   # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level


class DataRequirement(Enum):
    """Specifies what data is collected from each node."""
    NAME_ONLY = "name"
    METADATA = "metadata"
    CHILDREN_COUNT = "children_count"
    FULL_NODE = "full"
    CUSTOM = "custom"                    # User-supplied collector


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering."""

    min_depth: int = 0
    max_depth: Optional[int] = None

    def should_yield(self, depth: int) -> bool:
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal."""

    include_filter: Optional[Callable[[Node], bool]] = None
    exclude_filter: Optional[Callable[[Node], bool]] = None
    kinds: Optional[Set[NodeKind]] = None  # Only report these node kinds

    # Skip the whole subtree of an excluded directory
    prune_on_exclude: bool = False

    def should_include(self, node: Node) -> bool:
        """Check if a node should be reported.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter and self.exclude_filter(node):
            return False
        if self.kinds is not None and node.kind not in self.kinds:
            return False
        if self.include_filter:
            return bool(self.include_filter(node))
        return True

    def should_prune(self, node: Node) -> bool:
        """Check if the subtree below an excluded node should be skipped."""
        if not self.prune_on_exclude or self.exclude_filter is None:
            return False
        return bool(self.exclude_filter(node))


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The ExecutionPlan validates this configuration before any node is
    visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    depth: DepthConfig = field(default_factory=DepthConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    data_requirements: DataRequirement = DataRequirement.FULL_NODE
    custom_collector: Optional[Any] = None  # DataCollector for CUSTOM

    def validate(self) -> List[str]:
        """Check the configuration for internal consistency.

        Returns:
            List of problems (empty if the configuration is usable)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append(f"min_depth must be >= 0, got {self.depth.min_depth}")
        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append(f"max_depth must be >= 0, got {self.depth.max_depth}")
            elif self.depth.min_depth > self.depth.max_depth:
                errors.append(
                    f"min_depth ({self.depth.min_depth}) is greater than "
                    f"max_depth ({self.depth.max_depth})"
                )

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("CUSTOM data requirement needs a custom_collector")

        return errors
