# scm_updates/core/selection/models.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List


class MakeBehavior(str, Enum):
    DOWNSTREAM = "make-downstream"
    UPSTREAM = "make-upstream"
    BOTH = "make-both"


def absolute_path(path: str | Path) -> Path:
    # lexical only, no symlink resolution and no existence check
    return Path(os.path.abspath(path))


@dataclass(frozen=True)
class ModuleDescriptor:
    key: str
    file: Path

    def __post_init__(self):
        object.__setattr__(self, "file", absolute_path(self.file))

    @property
    def directory(self) -> Path:
        return self.file.parent

    @classmethod
    def from_coordinates(cls, group_id: str, artifact_id: str, file: str | Path) -> "ModuleDescriptor":
        return cls(key=f"{group_id}:{artifact_id}", file=Path(file))

    def contains(self, path: Path) -> bool:
        """True when this module's directory is a strict parent of ``path``."""
        return self.directory in path.parents


@dataclass(frozen=True)
class SelectionResult:
    selected_projects: List[str] = field(default_factory=list)
    make_behavior: MakeBehavior = MakeBehavior.DOWNSTREAM
