"""Execution planning for vfstree.

The ExecutionPlan validates a TraversalConfig and assembles the adapter,
traverser and collector that carry it out.
"""

import logging
from typing import Any, Dict, Iterator, Tuple

from .core.node import Node
from .core.adapter import TreeAdapter, PrunedTreeAdapter
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import (
    DataCollector,
    NameCollector,
    MetadataCollector,
    FullNodeCollector,
    ChildCountCollector,
)
from .config import TraversalConfig, DataRequirement

logger = logging.getLogger(__name__)


class InvalidConfigurationError(Exception):
    """Raised when a TraversalConfig is internally inconsistent."""
    pass


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The plan is the bridge between caller intent (TraversalConfig) and
    execution. All validation happens in the constructor, before any node
    is visited.
    """

    def __init__(self, config: TraversalConfig, adapter: TreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration
            adapter: Tree adapter for the tree

        Raises:
            InvalidConfigurationError: If the config fails validation
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()
        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        adapter = self.adapter
        if self.config.filter.prune_on_exclude and self.config.filter.exclude_filter:
            adapter = PrunedTreeAdapter(adapter, self.config.filter.should_prune)
        return create_traverser(self.config.strategy.value, adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.NAME_ONLY: NameCollector,
            DataRequirement.METADATA: MetadataCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
        }
        return collector_map[self.config.data_requirements](self.adapter)

    def execute(self, root: Node) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal.

        Args:
            root: Starting node

        Yields:
            Tuples of (node, collected_data) for nodes passing the filters
        """
        logger.debug(
            "Executing %s traversal from %r (min_depth=%d, max_depth=%s)",
            self.config.strategy.value, root.name,
            self.config.depth.min_depth, self.config.depth.max_depth,
        )
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth,
        ):
            self.nodes_processed += 1
            if not self.config.filter.should_include(node):
                continue
            yield (node, self.collector.collect(node, depth))

        logger.debug("Traversal from %r visited %d nodes", root.name, self.nodes_processed)

    def get_execution_summary(self) -> Dict[str, Any]:
        """Get a summary of the plan, useful for debugging and logging."""
        return {
            'strategy': self.config.strategy.value,
            'data_requirement': self.config.data_requirements.value,
            'min_depth': self.config.depth.min_depth,
            'max_depth': self.config.depth.max_depth,
            'traverser': type(self.traverser).__name__,
            'collector': type(self.collector).__name__,
            'nodes_processed': self.nodes_processed,
        }
