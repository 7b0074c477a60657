"""Slash-delimited path handling for the in-memory tree."""

from __future__ import annotations

import os
from typing import List, Union

PathLike = Union[str, "os.PathLike[str]"]

SEP = "/"


def split_path(path: PathLike) -> List[str]:
    """Split ``path`` into name segments relative to the root.

    The empty path, ``.`` and ``/`` all denote the root and yield ``[]``.
    ``..`` drops the previous segment and stops at the root.
    """

    raw = os.fspath(path)
    if not isinstance(raw, str):
        raise TypeError(f"path must be str or os.PathLike[str], not {type(raw).__name__}")
    parts: List[str] = []
    for part in raw.split(SEP):
        if part in {"", "."}:
            continue
        if part == "..":
            if parts:
                parts.pop()
            continue
        parts.append(part)
    return parts


def normalize_path(path: PathLike) -> str:
    parts = split_path(path)
    return SEP.join(parts) if parts else "."


def join_path(prefix: PathLike, path: PathLike) -> str:
    # Absolute sub-paths stay under the prefix; the tree has a single root.
    return SEP.join(split_path(prefix) + split_path(path)) or "."
