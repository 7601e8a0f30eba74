# scm_updates/core/selection/participant.py

from __future__ import annotations

import logging
from typing import Optional

from .adjuster import adjust
from .config import PROP_ENABLED, ScmUpdatesConfig
from .loader import load_changed_files
from .models import SelectionResult
from .resolver import resolve
from .session import BuildSession

_log = logging.getLogger("scmupdates.lifecycle")


class MakeScmUpdates:
    """
    Builds only the modules containing files listed in the ".scm-updates"
    marker under the base directory.

    Disabled by default; activate with make.scmUpdates=true.
    """

    def read_parameters(self, session: BuildSession) -> ScmUpdatesConfig:
        return ScmUpdatesConfig.from_properties(
            session.user_properties(),
            session.top_level_module(),
        )

    def after_projects_read(self, session: BuildSession) -> Optional[SelectionResult]:
        cfg = self.read_parameters(session)

        if not cfg.enabled:
            _log.debug("%s = false, not modifying project list", PROP_ENABLED)
            return None

        updated_files = load_changed_files(cfg.base_dir)
        for path in sorted(updated_files):
            _log.info("Updated %s", path)

        included, _ = resolve(
            updated_files,
            session.list_modules(),
            session.top_level_module(),
            cfg.base_dir,
            ignore_root_module=cfg.ignore_root_module,
        )

        result = adjust(included, session.make_behavior())
        if result is None:
            _log.info("No updates found. Nothing to do!")
            return None

        session.apply_selection(result.selected_projects, result.make_behavior)
        _log.info(
            "Selected %d project(s) with %s",
            len(result.selected_projects),
            result.make_behavior.value,
        )
        return result
