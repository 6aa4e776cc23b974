from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import Inventory, ScanRequest

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    Abstracts os.walk vs pathlib (or a future concurrent walker).
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[Path]:
        """
        Yields every file and directory below root (root itself excluded).
        Should handle filtering of ignored names internally, pruning
        ignored directories together with everything inside them.

        Raises:
            OSError: If any part of the tree cannot be read.
        """
        pass

class IInventoryCollector(ABC):
    """
    Contract for turning a directory tree into an Inventory.
    """
    @abstractmethod
    def collect(self, request: ScanRequest) -> Inventory:
        """
        Scans the requested root completely before returning.

        Raises:
            InventoryScanError: If traversal fails. No partial inventory is returned.
        """
        pass
