from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple


class InventoryScanError(RuntimeError):
    """
    Raised when walking a directory tree fails part-way through.
    The partial inventory is discarded.
    """


def split_name(name: str) -> Tuple[str, str]:
    """
    Splits a filename into (stem, extension).
    The extension runs from the last dot (inclusive) to the end, or is empty.
        "movie.mkv"      -> ("movie", ".mkv")
        "archive.tar.gz" -> ("archive.tar", ".gz")
        "README"         -> ("README", "")
    """
    idx = name.rfind(".")
    if idx == -1:
        return name, ""
    return name[:idx], name[idx:]


@dataclass(frozen=True)
class Asset:
    """
    One file or directory recorded by a scan.
    `path` is relative to the scan root, POSIX separated, and unique per inventory.
    """
    path: str
    stem: str
    extension: str
    size: int = 0
    is_dir: bool = False

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Asset size cannot be negative: {self.path} ({self.size})")

    @classmethod
    def from_path(cls, relative_path: str, size: int = 0, is_dir: bool = False) -> "Asset":
        name = relative_path.rsplit("/", 1)[-1]
        stem, extension = split_name(name)
        return cls(path=relative_path, stem=stem, extension=extension, size=size, is_dir=is_dir)


@dataclass(frozen=True)
class Inventory:
    """
    The complete result of scanning one root directory.
    Assets are keyed by relative path and iterate in scan order.
    """
    root_path: str
    assets: Mapping[str, Asset] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so nothing downstream can mutate a finished scan
        if not isinstance(self.assets, MappingProxyType):
            object.__setattr__(self, "assets", MappingProxyType(dict(self.assets)))

    def __len__(self) -> int:
        return len(self.assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.assets.values())


@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to scan a specific directory.
    """
    root_path: Path

    def __post_init__(self):
        if not self.root_path.exists():
            raise FileNotFoundError(f"Scan root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Scan root is not a directory: {self.root_path}")
