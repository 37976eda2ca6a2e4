"""Testing utilities for vfstree consumers."""

from .fixtures import build_tree, sample_disk, small_disk

__all__ = ['build_tree', 'sample_disk', 'small_disk']
