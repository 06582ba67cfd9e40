"""Atomic JSON file helpers shared by the local stores."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def write_atomic(path: Path, data: bytes) -> None:
    """Write *data* to *path* so readers never observe a partial file.

    Writes to a temp file in the same directory, fsyncs it, then
    ``os.replace``s it over the target.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def read_json(path: Path) -> Any | None:
    """Read and decode a JSON file. Returns *None* if missing or corrupt."""
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        logger.warning("Cannot read %s: %s", path, exc)
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        logger.warning("Corrupt JSON in %s: %s", path, exc)
        return None
