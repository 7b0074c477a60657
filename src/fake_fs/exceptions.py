"""Error taxonomy surfaced by filesystem operations."""

from __future__ import annotations

import enum
import errno
import os
from typing import ClassVar, Optional


class ErrorCode(str, enum.Enum):
    NOT_FOUND = "ENOENT"
    NOT_A_DIRECTORY = "ENOTDIR"
    IS_A_DIRECTORY = "EISDIR"

    @property
    def errno(self) -> int:
        return getattr(errno, self.value)


class FakeFsError(OSError):
    """Base class for every error raised by the fake filesystem.

    Instances behave like the ``OSError`` a real filesystem call would raise
    and additionally carry the conventional string ``code`` and the name of
    the failed ``syscall``.
    """

    error_code: ClassVar[ErrorCode]

    def __init__(self, path: str, syscall: Optional[str] = None) -> None:
        number = self.error_code.errno
        super().__init__(number, os.strerror(number), path)
        self.syscall = syscall

    @property
    def code(self) -> str:
        return self.error_code.value


class EntryNotFoundError(FakeFsError, FileNotFoundError):
    """Raised when a path does not resolve to an entry."""

    error_code = ErrorCode.NOT_FOUND


class NotADirError(FakeFsError, NotADirectoryError):
    """Raised when a directory was required but a file was found."""

    error_code = ErrorCode.NOT_A_DIRECTORY


class IsADirError(FakeFsError, IsADirectoryError):
    """Raised when a file was required but a directory was found."""

    error_code = ErrorCode.IS_A_DIRECTORY
