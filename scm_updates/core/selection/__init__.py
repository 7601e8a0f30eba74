from .adjuster import adjust
from .config import ScmUpdatesConfig
from .errors import InputUnavailable, ManifestError, ScmUpdatesError
from .loader import MARKER_FILE_NAME, load_changed_files
from .manifest import load_reactor_manifest
from .models import MakeBehavior, ModuleDescriptor, SelectionResult
from .participant import MakeScmUpdates
from .resolver import resolve
from .session import BuildSession, ReactorSession

__all__ = [
    "BuildSession",
    "InputUnavailable",
    "MARKER_FILE_NAME",
    "MakeBehavior",
    "MakeScmUpdates",
    "ManifestError",
    "ModuleDescriptor",
    "ReactorSession",
    "ScmUpdatesConfig",
    "ScmUpdatesError",
    "SelectionResult",
    "adjust",
    "load_changed_files",
    "load_reactor_manifest",
    "resolve",
]
