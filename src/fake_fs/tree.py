"""The in-memory tree and its path resolution algorithm."""

from __future__ import annotations

import logging
import os
from typing import Iterator, List, Optional, Sequence, Tuple

from .content import Content
from .exceptions import EntryNotFoundError, FakeFsError, IsADirError, NotADirError
from .node import Node, Timestamp
from .paths import SEP, PathLike, split_path

log = logging.getLogger(__name__)


class Tree:
    """Hierarchy of nodes below a single root directory.

    Every read and write goes through :meth:`_walk`, which resolves name
    segments from the root and optionally creates missing directories on
    the way (``mkdir -p``).
    """

    def __init__(self) -> None:
        self.root = Node.directory()

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def _walk(self, parts: Sequence[str], path: PathLike, syscall: str, create: bool = False) -> Node:
        node = self.root
        for depth, name in enumerate(parts):
            if not node.is_dir:
                raise NotADirError(os.fspath(path), syscall)
            assert node.children is not None
            child = node.children.get(name)
            if child is None:
                if not create:
                    raise EntryNotFoundError(os.fspath(path), syscall)
                child = Node.directory()
                node.children[name] = child
                log.debug("Created directory %s", SEP.join(parts[: depth + 1]))
            node = child
        return node

    def _parent(self, parts: Sequence[str], path: PathLike, syscall: str, create: bool) -> Node:
        parent = self._walk(parts[:-1], path, syscall, create=create)
        if not parent.is_dir:
            raise NotADirError(os.fspath(path), syscall)
        return parent

    def resolve(self, path: PathLike, syscall: str = "stat") -> Node:
        return self._walk(split_path(path), path, syscall)

    def lookup(self, path: PathLike) -> Optional[Node]:
        try:
            return self.resolve(path)
        except FakeFsError:
            return None

    def list_names(self, path: PathLike) -> List[str]:
        node = self.resolve(path, "scandir")
        if node.children is None:
            raise NotADirError(os.fspath(path), "scandir")
        return list(node.children)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------
    def create_directory(
        self,
        path: PathLike,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> Node:
        """Create ``path`` and any missing ancestors.

        Times apply only when the terminal directory is new; an existing
        directory is returned untouched.
        """

        parts = split_path(path)
        if not parts:
            return self.root
        parent = self._parent(parts, path, "mkdir", create=True)
        assert parent.children is not None
        name = parts[-1]
        existing = parent.children.get(name)
        if existing is not None:
            if not existing.is_dir:
                raise NotADirError(os.fspath(path), "mkdir")
            return existing
        node = Node.directory(atime=atime, mtime=mtime, ctime=ctime)
        parent.children[name] = node
        log.debug("Created directory %s", SEP.join(parts))
        return node

    def create_file(
        self,
        path: PathLike,
        content: Content,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> Node:
        """Create or replace the file at ``path``, creating parent directories.

        Replacing a file swaps in a new node; it keeps its place in the
        parent's listing order.
        """

        parts = split_path(path)
        if not parts:
            raise IsADirError(os.fspath(path), "open")
        data = content.to_bytes()
        parent = self._parent(parts, path, "open", create=True)
        assert parent.children is not None
        name = parts[-1]
        existing = parent.children.get(name)
        if existing is not None and existing.is_dir:
            raise IsADirError(os.fspath(path), "open")
        node = Node.file(data, atime=atime, mtime=mtime, ctime=ctime)
        parent.children[name] = node
        log.debug("%s file %s (%d bytes)", "Replaced" if existing else "Created", SEP.join(parts), len(data))
        return node

    def write_content(self, path: PathLike, data: bytes) -> Node:
        """Write ``data`` to a file whose parent directory already exists."""

        parts = split_path(path)
        if not parts:
            raise IsADirError(os.fspath(path), "open")
        parent = self._parent(parts, path, "open", create=False)
        assert parent.children is not None
        name = parts[-1]
        node = parent.children.get(name)
        if node is None:
            node = Node.file(data)
            parent.children[name] = node
        elif node.is_dir:
            raise IsADirError(os.fspath(path), "open")
        else:
            node.content = bytes(data)
        log.debug("Wrote %d bytes to %s", len(data), SEP.join(parts))
        return node

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def walk(self, path: PathLike = ".") -> Iterator[Tuple[str, Node]]:
        """Yield ``(path, node)`` pairs depth first, children in listing order."""

        parts = split_path(path)
        start = self._walk(parts, path, "scandir")
        stack: List[Tuple[str, Node]] = [(SEP.join(parts) or ".", start)]
        while stack:
            current_path, node = stack.pop()
            yield current_path, node
            if node.children is None:
                continue
            prefix = "" if current_path == "." else current_path + SEP
            for name, child in reversed(list(node.children.items())):
                stack.append((prefix + name, child))
