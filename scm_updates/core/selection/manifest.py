"""
Reactor manifest loader.

Lets a host that is not a JVM build tool describe its module graph in a YAML
or JSON file and get a ReactorSession back.

Manifest format (YAML or JSON):
    top_level: com.example:parent
    make_behavior: make-upstream      # optional
    properties:                       # optional user properties
      make.scmUpdates: "true"
    modules:
      - key: com.example:parent
        file: pom.xml                 # relative to the manifest directory
      - group_id: com.example
        artifact_id: core
        file: core/pom.xml

Module order is kept; it decides which module wins a changed file.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ManifestError
from .models import MakeBehavior, ModuleDescriptor, absolute_path
from .session import ReactorSession

_log = logging.getLogger("scmupdates.manifest")


def _parse_module(raw: Any, root: Path, index: int) -> ModuleDescriptor:
    if not isinstance(raw, dict):
        raise ManifestError(f"modules[{index}] must be a mapping, got {type(raw).__name__}")

    file = raw.get("file")
    if not isinstance(file, str) or not file.strip():
        raise ManifestError(f"modules[{index}] is missing 'file'")
    path = root / file.strip()

    key = raw.get("key")
    if isinstance(key, str) and key.strip():
        return ModuleDescriptor(key=key.strip(), file=path)

    group_id, artifact_id = raw.get("group_id"), raw.get("artifact_id")
    if isinstance(group_id, str) and isinstance(artifact_id, str):
        return ModuleDescriptor.from_coordinates(group_id.strip(), artifact_id.strip(), path)

    raise ManifestError(f"modules[{index}] needs 'key' or 'group_id' + 'artifact_id'")


def _parse_make_behavior(raw: Any) -> Optional[MakeBehavior]:
    if raw is None:
        return None
    try:
        return MakeBehavior(str(raw).strip().lower())
    except ValueError:
        allowed = ", ".join(b.value for b in MakeBehavior)
        raise ManifestError(f"unknown make_behavior {raw!r} (expected one of {allowed})") from None


def parse_reactor_manifest(data: Any, root: Path) -> ReactorSession:
    if not isinstance(data, dict):
        raise ManifestError(f"reactor manifest must be a mapping, got {type(data).__name__}")

    raw_modules = data.get("modules")
    if not isinstance(raw_modules, list) or not raw_modules:
        raise ManifestError("reactor manifest must list at least one module")

    modules: List[ModuleDescriptor] = []
    seen: Dict[str, ModuleDescriptor] = {}
    for i, raw in enumerate(raw_modules):
        m = _parse_module(raw, root, i)
        if m.key in seen:
            raise ManifestError(f"duplicate module key: {m.key}")
        seen[m.key] = m
        modules.append(m)

    top_key = data.get("top_level")
    if top_key is None:
        top_level = modules[0]
    elif str(top_key) in seen:
        top_level = seen[str(top_key)]
    else:
        raise ManifestError(f"top_level {top_key!r} is not a listed module")

    props = data.get("properties") or {}
    if not isinstance(props, dict):
        raise ManifestError("properties must be a mapping")

    return ReactorSession(
        modules=modules,
        top_level=top_level,
        properties={str(k): str(v) for k, v in props.items()},
        requested_make_behavior=_parse_make_behavior(data.get("make_behavior")),
    )


def load_reactor_manifest(path: Path) -> ReactorSession:
    """Load a reactor manifest; module files are resolved against its directory."""
    path = Path(path)
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Cannot read reactor manifest {path}: {exc}") from exc

    # JSON first, YAML otherwise
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ManifestError(f"Failed to parse reactor manifest {path} as JSON or YAML: {exc}") from exc

    session = parse_reactor_manifest(data, absolute_path(path).parent)
    _log.info("Loaded %d module(s) from %s", len(session.modules), path)
    return session
