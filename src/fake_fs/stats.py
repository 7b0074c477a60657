from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .node import Node, NodeKind, Timestamp


@dataclass(frozen=True, slots=True)
class Stats:
    """Snapshot of a node's metadata taken when ``stat`` ran."""

    kind: NodeKind
    size: Optional[int]
    atime: Timestamp
    mtime: Timestamp
    ctime: Timestamp

    @classmethod
    def from_node(cls, node: Node) -> "Stats":
        return cls(
            kind=node.kind,
            size=node.size,
            atime=node.atime,
            mtime=node.mtime,
            ctime=node.ctime,
        )

    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE
