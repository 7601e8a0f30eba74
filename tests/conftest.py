from pathlib import Path

import pytest

from scm_updates.core.selection.models import ModuleDescriptor
from scm_updates.core.selection.session import ReactorSession


def _write_marker(base_dir: Path, *paths: str) -> Path:
    marker = base_dir / ".scm-updates"
    marker.write_text("".join(p + "\n" for p in paths), encoding="utf-8")
    return marker


@pytest.fixture()
def write_marker():
    return _write_marker


@pytest.fixture()
def root_dir(tmp_path: Path) -> Path:
    d = tmp_path / "root"
    d.mkdir()
    return d


@pytest.fixture()
def top_level(root_dir: Path) -> ModuleDescriptor:
    return ModuleDescriptor.from_coordinates("com.example", "parent", root_dir / "pom.xml")


@pytest.fixture()
def sub_module(root_dir: Path) -> ModuleDescriptor:
    return ModuleDescriptor.from_coordinates("com.example", "sub", root_dir / "sub" / "pom.xml")


@pytest.fixture()
def reactor(top_level, sub_module):
    """
    Two-module reactor: the aggregator at root/ listed first (as build tools
    order parents), then root/sub. Pass ``modules`` to change the order.
    """
    def _make(properties=None, make_behavior=None, extra_modules=(), modules=None):
        if modules is None:
            modules = [top_level, sub_module, *extra_modules]
        return ReactorSession(
            modules=list(modules),
            top_level=top_level,
            properties=dict(properties or {}),
            requested_make_behavior=make_behavior,
        )

    return _make
