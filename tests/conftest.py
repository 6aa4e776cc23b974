# File: tests/conftest.py

import pytest
import os
import sys
from pathlib import Path
from typing import Dict, Optional

# 1. Add project root to path
sys.path.append(os.getcwd())

from mddiff.features.inventory.domain.models import Asset, Inventory


def build_tree(root: Path, layout: Dict[str, Optional[str]]) -> Path:
    """
    Materialises a directory tree.
    Keys are POSIX relative paths; a value of None makes a directory,
    a string makes a file with that content.
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in layout.items():
        path = root / rel
        if content is None:
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
    return root


def make_inventory(root: str, *assets: Asset) -> Inventory:
    return Inventory(root_path=root, assets={a.path: a for a in assets})


@pytest.fixture
def inventory_factory():
    """
    Returns make_inventory(root, *assets) for in-memory engine tests.
    """
    return make_inventory


@pytest.fixture
def tree_factory(tmp_path):
    """
    Returns a callable (name, layout) -> Path creating trees under tmp_path.
    """
    def _factory(name: str, layout: Dict[str, Optional[str]]) -> Path:
        return build_tree(tmp_path / name, layout)
    return _factory


@pytest.fixture
def source_and_target(tree_factory):
    """
    The canonical fixture pair:
    - missing.mkv   only in source            -> MISSING
    - extra.mkv     only in target            -> EXTRA
    - match.mp4     identical in both         -> nothing
    - movie.mkv/mp4 extension changed         -> MODIFIED
    """
    src = tree_factory("src", {
        "missing.mkv": "content",
        "match.mp4": "content",
        "movie.mkv": "content",
    })
    tgt = tree_factory("tgt", {
        "extra.mkv": "content",
        "match.mp4": "content",
        "movie.mp4": "content",
    })
    return src, tgt
