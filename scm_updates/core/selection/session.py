# scm_updates/core/selection/session.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Protocol, Sequence

from .models import MakeBehavior, ModuleDescriptor


class BuildSession(Protocol):
    """What the selection needs from the host build tool."""

    def list_modules(self) -> Sequence[ModuleDescriptor]:
        ...

    def top_level_module(self) -> ModuleDescriptor:
        ...

    def user_properties(self) -> Mapping[str, str]:
        ...

    def make_behavior(self) -> Optional[MakeBehavior]:
        ...

    def apply_selection(self, selected: List[str], make_behavior: MakeBehavior) -> None:
        ...


@dataclass
class ReactorSession:
    modules: List[ModuleDescriptor]
    top_level: ModuleDescriptor
    properties: Dict[str, str] = field(default_factory=dict)
    requested_make_behavior: Optional[MakeBehavior] = None
    selected_projects: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.top_level not in self.modules:
            raise ValueError(f"top level module {self.top_level.key} is not part of the reactor")

    def list_modules(self) -> Sequence[ModuleDescriptor]:
        return list(self.modules)

    def top_level_module(self) -> ModuleDescriptor:
        return self.top_level

    def user_properties(self) -> Mapping[str, str]:
        return dict(self.properties)

    def make_behavior(self) -> Optional[MakeBehavior]:
        return self.requested_make_behavior

    def apply_selection(self, selected: List[str], make_behavior: MakeBehavior) -> None:
        self.selected_projects = list(selected)
        self.requested_make_behavior = make_behavior
