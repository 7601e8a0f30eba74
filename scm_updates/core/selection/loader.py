# scm_updates/core/selection/loader.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Set

from .errors import InputUnavailable

_log = logging.getLogger("scmupdates.loader")

MARKER_FILE_NAME = ".scm-updates"


def marker_path(base_dir: Path) -> Path:
    return Path(base_dir) / MARKER_FILE_NAME


def load_changed_files(base_dir: Path) -> Set[str]:
    """
    Read the changed-file list written by the SCM status step.

    One base_dir-relative path per line, UTF-8. Blank lines are dropped, so an
    empty marker yields an empty set.

    A missing or unreadable marker raises InputUnavailable. Treating it as
    "no changes" could skip modules that really changed.
    """
    path = marker_path(base_dir)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailable(path, exc) from exc

    updated = {line for line in content.splitlines() if line.strip()}
    _log.debug("Read %d updated file(s) from %s", len(updated), path)
    return updated
