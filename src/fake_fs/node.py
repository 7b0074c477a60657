"""Tree nodes: directories with ordered children, files with byte content."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Union

Timestamp = Union[int, float, datetime]

EPOCH: Timestamp = 0


class NodeKind(str, enum.Enum):
    DIRECTORY = "dir"
    FILE = "file"


@dataclass
class Node:
    """A single entry of the tree.

    Directories own ``children`` (insertion ordered), files own ``content``.
    The other slot stays ``None`` for the lifetime of the node.
    """

    kind: NodeKind
    children: Optional[Dict[str, "Node"]] = None
    content: Optional[bytes] = None
    atime: Timestamp = EPOCH
    mtime: Timestamp = EPOCH
    ctime: Timestamp = EPOCH

    @classmethod
    def directory(
        cls,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> "Node":
        node = cls(kind=NodeKind.DIRECTORY, children={})
        node.set_times(atime=atime, mtime=mtime, ctime=ctime)
        return node

    @classmethod
    def file(
        cls,
        content: bytes = b"",
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> "Node":
        node = cls(kind=NodeKind.FILE, content=bytes(content))
        node.set_times(atime=atime, mtime=mtime, ctime=ctime)
        return node

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    @property
    def size(self) -> Optional[int]:
        if self.content is None:
            return None
        return len(self.content)

    def set_times(
        self,
        atime: Optional[Timestamp] = None,
        mtime: Optional[Timestamp] = None,
        ctime: Optional[Timestamp] = None,
    ) -> None:
        if atime is not None:
            self.atime = atime
        if mtime is not None:
            self.mtime = mtime
        if ctime is not None:
            self.ctime = ctime
