"""Literal sample trees for tests and demonstrations.

Trees can also be written as nested mappings, which is easier to read in
test code than chains of make_directory calls:

    build_tree("/", {"bin": {"ls": 10, "cp": 20}, "etc-note": 5})

An integer value becomes a file of that size, a mapping becomes a
directory. Mapping order is child order.
"""

from typing import Mapping, Union

from ..core.node import Node, InvalidNodeError, make_file, make_directory

TreeLayout = Union[int, Mapping[str, "TreeLayout"]]


def build_tree(name: str, layout: TreeLayout) -> Node:
    """Build a node from a nested mapping description.

    Args:
        name: Name of the node to build
        layout: File size (int) or mapping of child name to child layout

    Returns:
        The constructed node

    Raises:
        InvalidNodeError: If a layout is neither an int nor a mapping
    """
    if isinstance(layout, Mapping):
        return make_directory(name, [build_tree(k, v) for k, v in layout.items()])
    if isinstance(layout, int) and not isinstance(layout, bool):
        return make_file(name, layout)
    raise InvalidNodeError(f"Cannot build node {name!r} from {layout!r}")


def small_disk() -> Node:
    """The three-file tree used throughout the test suite.

        /
        ├── bin/
        │   ├── ls (10)
        │   └── cp (20)
        └── etc-note (5)
    """
    return make_directory("/", [
        make_directory("bin", [
            make_file("ls", 10),
            make_file("cp", 20),
        ]),
        make_file("etc-note", 5),
    ])


def sample_disk() -> Node:
    """A larger sample disk with nested home directories."""
    return build_tree("/", {
        "bin": {
            "cp": 24800,
            "ls": 34700,
            "mv": 20200,
        },
        "etc": {
            "hosts": 300,
        },
        "home": {
            "user": {
                "todo.txt": 1020,
                "code": {
                    "js": {
                        "test.js": 40000,
                    },
                    "haskell": {
                        "test.hs": 5000,
                    },
                },
            },
        },
        "tmp": {},
    })
