from __future__ import annotations

from pathlib import Path
from typing import Optional


class ScmUpdatesError(Exception):
    pass


class InputUnavailable(ScmUpdatesError):
    """The changed-file marker could not be read. Aborts the invocation."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to read saved list of updated files {path}{detail}")


class ManifestError(ScmUpdatesError):
    pass
