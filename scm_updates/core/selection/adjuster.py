# scm_updates/core/selection/adjuster.py

from __future__ import annotations

from typing import Optional, Sequence

from .models import MakeBehavior, SelectionResult


def adjust_make_behavior(current: Optional[MakeBehavior]) -> MakeBehavior:
    if current is None:
        return MakeBehavior.DOWNSTREAM
    # upstream only would silently narrow the build once projects are selected
    if current == MakeBehavior.UPSTREAM:
        return MakeBehavior.BOTH
    return current


def adjust(
    included: Sequence[str],
    current: Optional[MakeBehavior],
) -> Optional[SelectionResult]:
    """Return the selection to request, or None to leave the build plan untouched."""
    if not included:
        return None
    return SelectionResult(
        selected_projects=list(included),
        make_behavior=adjust_make_behavior(current),
    )
