from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from . import __version__
from .config import CliConfig, ConfigurationError, load_config, load_fixture
from .exceptions import FakeFsError
from .filesystem import FakeFileSystem
from .logging_setup import setup_logging
from .node import Node, Timestamp
from .paths import normalize_path

log = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Inspect in-memory filesystem fixtures.")


@dataclass
class State:
    config: CliConfig


def _state(ctx: typer.Context) -> State:
    assert isinstance(ctx.obj, State)
    return ctx.obj


def _load(fixture: Path) -> FakeFileSystem:
    try:
        return load_fixture(fixture)
    except ConfigurationError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc


def _fail(exc: FakeFsError) -> typer.Exit:
    typer.echo(f"{exc.code}: {exc.filename}", err=True)
    return typer.Exit(code=1)


def _label(name: str, node: Node) -> str:
    if node.is_dir:
        return name if name == "." else name + "/"
    return f"{name} ({node.size} bytes)"


def _format_time(value: Timestamp) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


@app.callback()
def _load_config(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a settings file (TOML or YAML). Overrides discovery.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Overrides config.",
    ),
) -> None:
    try:
        cfg = load_config(config)
    except ConfigurationError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    level = log_level or ("DEBUG" if cfg.debug else cfg.log_level)
    setup_logging(level, cfg.logs_dir)
    log.debug("Resolved configuration: %s", cfg)
    ctx.obj = State(config=cfg)


@app.command(name="version")
def version() -> None:
    """Print version information."""
    typer.echo(__version__)


@app.command(name="tree")
def tree(
    fixture: Path = typer.Argument(..., help="Fixture file describing the tree."),
    path: str = typer.Argument(".", help="Directory to start from."),
) -> None:
    """Render the fixture as an indented tree with file sizes."""
    fs = _load(fixture)
    try:
        entries = list(fs.tree.walk(path))
    except FakeFsError as exc:
        raise _fail(exc) from exc
    start = normalize_path(path)
    base = 0 if start == "." else start.count("/") + 1
    for entry_path, node in entries:
        if entry_path == start:
            typer.echo(_label(start, node))
            continue
        depth = entry_path.count("/") + 1 - base
        typer.echo("  " * depth + _label(entry_path.rsplit("/", 1)[-1], node))


@app.command(name="ls")
def ls(
    fixture: Path = typer.Argument(..., help="Fixture file describing the tree."),
    path: str = typer.Argument(".", help="Directory to list."),
) -> None:
    """List directory entries in creation order."""
    fs = _load(fixture)
    try:
        names = fs.readdir_sync(path)
    except FakeFsError as exc:
        raise _fail(exc) from exc
    if not names:
        typer.echo("<empty>")
    for name in names:
        typer.echo(name)


@app.command(name="stat")
def stat(
    fixture: Path = typer.Argument(..., help="Fixture file describing the tree."),
    path: str = typer.Argument(..., help="Entry to describe."),
) -> None:
    """Show type, size and timestamps of an entry."""
    fs = _load(fixture)
    try:
        st = fs.stat_sync(path)
    except FakeFsError as exc:
        raise _fail(exc) from exc
    lines = [
        f"type:  {st.kind.value}",
        f"size:  {'-' if st.size is None else st.size}",
        f"atime: {_format_time(st.atime)}",
        f"mtime: {_format_time(st.mtime)}",
        f"ctime: {_format_time(st.ctime)}",
    ]
    for line in lines:
        typer.echo(line)


@app.command(name="cat")
def cat(
    ctx: typer.Context,
    fixture: Path = typer.Argument(..., help="Fixture file describing the tree."),
    path: str = typer.Argument(..., help="File to print."),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="Decode with this encoding. Overrides config."),
) -> None:
    """Print the content of a file."""
    fs = _load(fixture)
    try:
        text = fs.read_file_sync(path, encoding or _state(ctx).config.encoding)
    except FakeFsError as exc:
        raise _fail(exc) from exc
    except LookupError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    typer.echo(text, nl=False)
