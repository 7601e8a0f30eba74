# scm_updates/core/selection/resolver.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .models import ModuleDescriptor, absolute_path

_log = logging.getLogger("scmupdates.resolver")


def _accepts_top_level(updated: Path, top_level: ModuleDescriptor, base_dir: Path) -> bool:
    # Including the top level module builds everything, so be careful.
    # When the top level project is not the base dir (sibling modules such as
    # <module>../child</module>) a full build may be rational: accept.
    if base_dir != top_level.directory:
        return True
    # Only the base dir itself or its immediate children count. A file in some
    # random subdirectory that no module owns must not cause a full build.
    return updated == base_dir or updated.parent == base_dir


def resolve(
    changed_files: Iterable[str],
    modules: Sequence[ModuleDescriptor],
    top_level: ModuleDescriptor,
    base_dir: Path,
    ignore_root_module: bool = False,
) -> Tuple[List[str], bool]:
    """
    Map changed paths to module keys.

    Modules are scanned in host order and the first module whose directory
    strictly contains the file wins. Returns the included keys in first-match
    order (no duplicates) and whether any file matched at all.
    """
    base_dir = absolute_path(base_dir)

    included: List[str] = []
    any_matched = False

    for updated_path in sorted(set(changed_files)):
        # always under base_dir, even when the marker line starts with a separator
        updated = absolute_path(base_dir / updated_path.lstrip("/\\"))

        if ignore_root_module and updated == top_level.file:
            _log.debug("Ignoring update to root descriptor %s", updated)
            continue

        found = None
        for module in modules:
            if not module.contains(updated):
                continue
            if module == top_level and not _accepts_top_level(updated, top_level, base_dir):
                _log.debug(
                    "Not considering top level project for %s because that would trigger a full rebuild.",
                    updated,
                )
                continue
            found = module
            break

        if found is None:
            _log.debug("Couldn't find file in any project root: %s", updated)
            continue

        any_matched = True
        if found.key not in included:
            _log.info("Including %s", found.key)
            included.append(found.key)

    if not any_matched:
        _log.debug("No updated file matched any project root")

    return included, any_matched
