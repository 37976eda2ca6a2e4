"""Node types for vfstree.

A virtual filesystem is a strict tree of immutable nodes. Files carry a
size, directories carry an ordered tuple of children. Navigation logic
lives in the TreeAdapter; nodes are plain data containers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Sequence, Tuple


class InvalidNodeError(ValueError):
    """Raised when a node is constructed from ill-typed or inconsistent inputs."""
    pass


class NodeKind(Enum):
    """The two variants a node can take."""
    FILE = "file"
    DIRECTORY = "directory"


class Node(ABC):
    """Abstract base class for nodes in a virtual filesystem tree.

    Concrete nodes are frozen dataclasses: a tree is built once, bottom-up,
    and never mutated afterwards. Because children must exist before their
    parent, a node can never be its own ancestor.

    Nodes compare and hash by identity, and their repr never descends
    into children.
    """

    name: str

    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        """Return which variant this node is."""
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight metadata about this node.

        Returns:
            Dict[str, Any]: Always contains 'name' and 'kind'. Files add
            'size', directories add 'child_count'.
        """
        pass

    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def is_leaf(self) -> bool:
        """Check if this node can never have children.

        Only files are leaves. An empty directory is still a directory.
        """
        return self.is_file()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False, repr=False)
class File(Node):
    """A file with a non-negative byte count."""

    name: str
    size: int

    def __post_init__(self):
        _check_name(self.name)
        # bool is an int subclass
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise InvalidNodeError(
                f"File {self.name!r}: size must be an integer, got {type(self.size).__name__}"
            )
        if self.size < 0:
            raise InvalidNodeError(f"File {self.name!r}: size must be >= 0, got {self.size}")

    @property
    def kind(self) -> NodeKind:
        return NodeKind.FILE

    def metadata(self) -> Dict[str, Any]:
        return {'name': self.name, 'kind': self.kind.value, 'size': self.size}

    def __repr__(self) -> str:
        return f"File(name={self.name!r}, size={self.size})"


@dataclass(frozen=True, eq=False, repr=False)
class Directory(Node):
    """A directory with an ordered, possibly empty, sequence of children.

    Any iterable of nodes is accepted for ``children``; it is stored as a
    tuple so the directory stays immutable. Sibling names must be unique
    and may not contain "/"; only the root may use it in its name.
    """

    name: str
    children: Tuple[Node, ...] = field(default=())

    def __post_init__(self):
        _check_name(self.name)
        try:
            children = tuple(self.children)
        except TypeError:
            raise InvalidNodeError(
                f"Directory {self.name!r}: children must be an iterable of nodes"
            ) from None

        seen = set()
        for child in children:
            if not isinstance(child, Node):
                raise InvalidNodeError(
                    f"Directory {self.name!r}: child {child!r} is not a Node"
                )
            if "/" in child.name:
                raise InvalidNodeError(
                    f"Directory {self.name!r}: child name {child.name!r} contains '/'"
                )
            if child.name in seen:
                raise InvalidNodeError(
                    f"Directory {self.name!r}: duplicate child name {child.name!r}"
                )
            seen.add(child.name)

        object.__setattr__(self, 'children', children)

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY

    def metadata(self) -> Dict[str, Any]:
        return {'name': self.name, 'kind': self.kind.value, 'child_count': len(self.children)}

    def __repr__(self) -> str:
        return f"Directory(name={self.name!r}, children={len(self.children)})"


def _check_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidNodeError(f"Node name must be a non-empty string, got {name!r}")


def make_file(name: str, size: int) -> File:
    """Construct a file node.

    Args:
        name: Label of the file, unique among its siblings
        size: Non-negative size in bytes

    Returns:
        File node

    Raises:
        InvalidNodeError: If the name or size is ill-typed
    """
    return File(name, size)


def make_directory(name: str, children: Iterable[Node] = ()) -> Directory:
    """Construct a directory node from already-constructed children.

    Args:
        name: Label of the directory, unique among its siblings
        children: Ordered child nodes (may be empty)

    Returns:
        Directory node

    Raises:
        InvalidNodeError: If the name is ill-typed, a child is not a node,
            two children share a name, or a child name contains "/"
    """
    return Directory(name, children)


def format_path(path: Sequence[str], node: Node) -> str:
    """Render a root-to-node name sequence as a slash-separated path.

    Directories get a trailing separator, and a root already named "/" is
    not doubled, so ``("/", "bin")`` renders ``/bin/`` and
    ``("/", "bin", "ls")`` renders ``/bin/ls``.

    Args:
        path: Names from the root down to and including ``node``
        node: The node the path leads to

    Returns:
        Rendered path string
    """
    if not path:
        raise ValueError("path must contain at least the node's own name")

    text = path[0]
    for part in path[1:]:
        if not text.endswith('/'):
            text += '/'
        text += part

    if node.is_directory() and not text.endswith('/'):
        text += '/'
    return text
