"""In-memory filesystem for tests that read files without touching a disk."""

from .exceptions import (
    EntryNotFoundError,
    ErrorCode,
    FakeFsError,
    IsADirError,
    NotADirError,
)
from .filesystem import FakeFileSystem, ScopedBuilder
from .node import Node, NodeKind
from .scheduler import DeferredQueue, EventLoopScheduler, Scheduler
from .stats import Stats
from .tree import Tree

__version__ = "0.1.0"

__all__ = [
    "FakeFileSystem",
    "ScopedBuilder",
    "Stats",
    "Tree",
    "Node",
    "NodeKind",
    "Scheduler",
    "DeferredQueue",
    "EventLoopScheduler",
    "ErrorCode",
    "FakeFsError",
    "EntryNotFoundError",
    "NotADirError",
    "IsADirError",
]
