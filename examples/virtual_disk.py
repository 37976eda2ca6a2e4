#!/usr/bin/env python3
"""Walk, aggregate and search the sample virtual disk.

This example demonstrates:
- Pre-order listing of every node with rendered paths
- Filtering to files and summing their sizes
- Finding the smallest and largest files
- Locating the directory that contains a given name

Usage:
    python examples/virtual_disk.py              # search for "ls"
    python examples/virtual_disk.py test.hs -v   # search for "test.hs", debug logging
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from vfstree import (
    all_files,
    only_files,
    total_size,
    largest_smallest,
    where_is,
    get_tree_paths,
    get_tree_stats,
)
from vfstree.testing import sample_disk


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Explore the sample virtual disk")
    parser.add_argument("name", nargs="?", default="ls", help="name to locate")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    root = sample_disk()

    print("All nodes (pre-order):")
    for path in get_tree_paths(root):
        print(f"  {path}")

    files = only_files(root)
    print(f"\n{len(files)} files of {len(all_files(root))} nodes, {total_size(root):,} bytes")

    extremes = largest_smallest(root)
    if len(extremes) == 2:
        smallest, largest = extremes
        print(f"Smallest: {smallest.name} ({smallest.size:,} bytes)")
        print(f"Largest:  {largest.name} ({largest.size:,} bytes)")
    elif extremes:
        print(f"Only file: {extremes[0].name}")

    found = where_is(root, args.name)
    if found is None:
        print(f"\n{args.name!r} not found")
    else:
        print(f"\n{args.name!r} lives in directory {found.name!r}")

    stats = get_tree_stats(root)
    print(f"\nStats: {stats}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
