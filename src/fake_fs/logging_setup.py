from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_dir: Optional[Path] = None) -> None:
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    # Remove any existing handlers to avoid duplicate logs across CLI invocations
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(log_dir / "fake-fs.log", maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        )

    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=DATE_FORMAT, handlers=handlers)
