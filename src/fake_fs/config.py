"""Settings discovery for the CLI and fixture files describing a tree."""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

import yaml

from .filesystem import FakeFileSystem

log = logging.getLogger(__name__)


CONFIG_ENV_VAR = "FAKE_FS_CONFIG"
CONFIG_FILENAMES = ("fake-fs.toml", "fake-fs.yaml", "fake-fs.yml")
DEFAULT_CONFIG_DIR_UNIX = Path.home() / ".config" / "fake-fs"

ENTRY_TYPES = ("dir", "file")
TIME_FIELDS = ("atime", "mtime", "ctime")


class ConfigurationError(RuntimeError):
    """Raised when a settings or fixture file cannot be processed."""


@dataclass(frozen=True)
class CliConfig:
    debug: bool = False
    log_level: str = "WARNING"
    logs_dir: Optional[Path] = None
    encoding: str = "utf8"


def _read_mapping(p: Path) -> Any:
    suffix = p.suffix.lower()
    try:
        if suffix == ".toml":
            with p.open("rb") as f:
                return tomllib.load(f)
        with p.open("r", encoding="utf-8") as f:
            if suffix == ".json":
                return json.load(f)
            if suffix in {".yaml", ".yml"}:
                return yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse {p}: {exc}") from exc
    raise ConfigurationError(f"Unsupported file format '{suffix}' for {p}. Use JSON, YAML or TOML.")


def _find_config_file(explicit: Optional[Path]) -> Optional[Path]:
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.exists():
            return p

    for directory in (Path.cwd(), DEFAULT_CONFIG_DIR_UNIX):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.exists():
                return candidate

    return None


def load_config(config_path: Optional[Path] = None) -> CliConfig:
    """Resolve CLI settings, falling back to defaults when no file is found."""

    file_path = _find_config_file(config_path)
    if file_path is None:
        return CliConfig()
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' does not exist.")

    raw = _read_mapping(file_path) or {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Configuration must be a mapping at top-level: {file_path}")
    log.debug("Loaded config from %s", file_path)

    defaults = CliConfig()
    logs_dir = raw.get("logs_dir")
    if logs_dir is not None:
        logs_dir = Path(logs_dir)
        if not logs_dir.is_absolute():
            logs_dir = (file_path.parent / logs_dir).resolve()
    return CliConfig(
        debug=bool(raw.get("debug", defaults.debug)),
        log_level=str(raw.get("log_level", defaults.log_level)),
        logs_dir=logs_dir,
        encoding=str(raw.get("encoding", defaults.encoding)),
    )


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------
def _timestamp(value: Any, field: str, path: str) -> Any:
    # YAML and TOML both produce datetime values for date-like scalars.
    if value is None or isinstance(value, (int, float, datetime)):
        return value
    if isinstance(value, date) and not isinstance(value, datetime):
        return datetime.combine(value, time())
    raise ConfigurationError(f"Invalid {field} for {path}: {value!r}")


def populate(fs: FakeFileSystem, entries: Iterable[Mapping[str, Any]], root: str = ".") -> FakeFileSystem:
    """Apply fixture ``entries`` to ``fs`` in order through the builder."""

    builder = fs.at(root)
    for definition in entries:
        if not isinstance(definition, Mapping):
            raise ConfigurationError(f"Fixture entry must be a mapping: {definition!r}")
        if "path" not in definition:
            raise ConfigurationError(f"Fixture entry without a path: {dict(definition)!r}")
        path = str(definition["path"])
        node_type = str(definition.get("type", "file"))
        times = {name: _timestamp(definition.get(name), name, path) for name in TIME_FIELDS}

        if node_type == "dir":
            builder.dir(path, **times)
            continue
        if node_type == "file":
            content = definition.get("content")
            if content is not None and not isinstance(content, str):
                raise ConfigurationError(f"Unsupported content type for {path}")
            builder.file(path, content, definition.get("encoding"), **times)
            continue
        raise ConfigurationError(f"Unsupported node type '{node_type}' for {path}. Use one of {ENTRY_TYPES}.")
    return fs


def _fixture_entries(raw: Any, source: Path) -> List[Dict[str, Any]]:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get("entries", []), list):
        return raw.get("entries", [])
    raise ConfigurationError(f"Fixture must be a list of entries or a mapping with 'entries': {source}")


def load_fixture(path: str | Path, fs: Optional[FakeFileSystem] = None) -> FakeFileSystem:
    """Build a filesystem from a JSON, YAML or TOML fixture file.

    Parameters
    ----------
    path:
        Location of the fixture file on the real disk.
    fs:
        Filesystem to populate. A new one is created when omitted.

    Returns
    -------
    FakeFileSystem
        The populated filesystem.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Fixture file '{file_path}' does not exist.")

    raw = _read_mapping(file_path)
    entries = _fixture_entries(raw, file_path)
    root = str(raw.get("root", ".")) if isinstance(raw, dict) else "."
    log.debug("Loading %d fixture entries from %s", len(entries), file_path)
    return populate(fs if fs is not None else FakeFileSystem(), entries, root=root)
