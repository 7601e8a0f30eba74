# scm_updates/core/selection/config.py

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict

from .models import ModuleDescriptor, absolute_path

# IMPORTANT: keep these names; builds pass them as -D user properties
PROP_ENABLED = "make.scmUpdates"
PROP_IGNORE_ROOT = "make.ignoreRootPom"
PROP_BASE_DIR = "make.baseDir"

_TRUTHY = ("1", "true", "yes")


def _flag(props: Mapping[str, str], name: str, default: str = "false") -> bool:
    raw = props.get(name)
    if raw is None:
        raw = default
    return str(raw).strip().lower() in _TRUTHY


class ScmUpdatesConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    # Ignore changes to the root descriptor, which would otherwise force a full rebuild
    ignore_root_module: bool = False
    # Directory the marker file lives in and changed paths are relative to
    base_dir: Path

    @classmethod
    def from_properties(
        cls,
        props: Optional[Mapping[str, str]],
        top_level: ModuleDescriptor,
    ) -> "ScmUpdatesConfig":
        props = props or {}

        base_path = props.get(PROP_BASE_DIR)
        if base_path is not None and str(base_path).strip():
            base_dir = absolute_path(str(base_path).strip())
        else:
            base_dir = top_level.directory

        return cls(
            enabled=_flag(props, PROP_ENABLED),
            ignore_root_module=_flag(props, PROP_IGNORE_ROOT),
            base_dir=base_dir,
        )
