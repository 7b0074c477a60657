"""Builder and operation facade over the in-memory tree."""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, List, Optional, TypeVar, Union

from .content import BytesLike, Content, coerce_content, decode_bytes, encode_text, normalize_encoding
from .exceptions import FakeFsError, IsADirError
from .node import Timestamp
from .paths import PathLike, join_path
from .scheduler import EventLoopScheduler, Scheduler
from .stats import Stats
from .tree import Tree

log = logging.getLogger(__name__)

T = TypeVar("T")

ResultCallback = Callable[[Optional[FakeFsError], Any], Any]
ExistsCallback = Callable[[bool], Any]
FileContent = Union[str, BytesLike, Content, None]


class FakeFileSystem:
    """In-memory stand-in for a hierarchical filesystem.

    Populate it with :meth:`dir`, :meth:`file` and :meth:`at`, then hand it
    to the code under test, which reads it back through the ``*_sync``
    calls or their callback based counterparts::

        fs = FakeFileSystem()
        fs.dir("a", mtime=100).file("a/b.txt", "hello", "utf8")
        fs.read_file_sync("a/b.txt", "utf8")  # -> "hello"

    Callback operations compute their result right away but never invoke
    the callback before returning. Inside a running asyncio loop the
    callback is scheduled on that loop; otherwise it fires on the next
    :meth:`run_pending`.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None) -> None:
        self.tree = Tree()
        self.scheduler: Scheduler = scheduler if scheduler is not None else EventLoopScheduler()

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------
    def dir(
        self,
        path: PathLike,
        *,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> "FakeFileSystem":
        self.tree.create_directory(path, atime=atime, mtime=mtime, ctime=ctime)
        return self

    def file(
        self,
        path: PathLike,
        content: FileContent = None,
        encoding: Optional[str] = None,
        *,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> "FakeFileSystem":
        self.tree.create_file(
            path,
            coerce_content(content, encoding),
            atime=atime,
            mtime=mtime,
            ctime=ctime,
        )
        return self

    def at(self, prefix: PathLike) -> "ScopedBuilder":
        return ScopedBuilder(self, prefix)

    # ------------------------------------------------------------------
    # Synchronous operations
    # ------------------------------------------------------------------
    def stat_sync(self, path: PathLike) -> Stats:
        """Resolving through a file (``a.txt/b``) raises ``NotADirError``, not ``ENOENT``."""

        return Stats.from_node(self.tree.resolve(path, "stat"))

    def readdir_sync(self, path: PathLike) -> List[str]:
        return self.tree.list_names(path)

    def exists_sync(self, path: PathLike) -> bool:
        return self.tree.lookup(path) is not None

    def read_file_sync(self, path: PathLike, encoding: Optional[str] = None) -> Union[bytes, str]:
        """Return the file's bytes, or its text when ``encoding`` is given."""

        if encoding is not None:
            normalize_encoding(encoding)
        node = self.tree.resolve(path, "open")
        if node.content is None:
            raise IsADirError(os.fspath(path), "read")
        if encoding is None:
            return node.content
        return decode_bytes(node.content, encoding)

    def write_file_sync(self, path: PathLike, data: Union[str, BytesLike], encoding: str = "utf8") -> None:
        """Write ``data`` to ``path``; the parent directory must exist."""

        if isinstance(data, str):
            payload = encode_text(data, encoding)
        else:
            payload = bytes(data)
        self.tree.write_content(path, payload)

    # ------------------------------------------------------------------
    # Callback operations
    # ------------------------------------------------------------------
    def _complete(self, callback: ResultCallback, compute: Callable[[], T]) -> "FakeFileSystem":
        try:
            result = compute()
        except FakeFsError as exc:
            log.debug("Deferring %s error for %r", exc.code, exc.filename)
            self.scheduler.call_soon(callback, exc, None)
        else:
            self.scheduler.call_soon(callback, None, result)
        return self

    def stat(self, path: PathLike, callback: ResultCallback) -> "FakeFileSystem":
        return self._complete(callback, lambda: self.stat_sync(path))

    def readdir(self, path: PathLike, callback: ResultCallback) -> "FakeFileSystem":
        return self._complete(callback, lambda: self.readdir_sync(path))

    def exists(self, path: PathLike, callback: ExistsCallback) -> "FakeFileSystem":
        self.scheduler.call_soon(callback, self.exists_sync(path))
        return self

    def read_file(
        self,
        path: PathLike,
        callback: ResultCallback,
        encoding: Optional[str] = None,
    ) -> "FakeFileSystem":
        return self._complete(callback, lambda: self.read_file_sync(path, encoding))

    def write_file(
        self,
        path: PathLike,
        data: Union[str, BytesLike],
        callback: ResultCallback,
        encoding: str = "utf8",
    ) -> "FakeFileSystem":
        return self._complete(callback, lambda: self.write_file_sync(path, data, encoding))

    def run_pending(self) -> int:
        """Run callbacks deferred while no event loop was running."""

        return self.scheduler.run_pending()


class ScopedBuilder:
    """``dir``/``file`` proxy that prefixes every path with ``prefix``."""

    def __init__(self, fs: FakeFileSystem, prefix: PathLike) -> None:
        self.fs = fs
        self.prefix = join_path(prefix, ".")

    def dir(
        self,
        path: PathLike,
        *,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> "ScopedBuilder":
        self.fs.dir(join_path(self.prefix, path), atime=atime, mtime=mtime, ctime=ctime)
        return self

    def file(
        self,
        path: PathLike,
        content: FileContent = None,
        encoding: Optional[str] = None,
        *,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> "ScopedBuilder":
        self.fs.file(
            join_path(self.prefix, path),
            content,
            encoding,
            atime=atime,
            mtime=mtime,
            ctime=ctime,
        )
        return self

    def at(self, prefix: PathLike) -> "ScopedBuilder":
        return ScopedBuilder(self.fs, join_path(self.prefix, prefix))
