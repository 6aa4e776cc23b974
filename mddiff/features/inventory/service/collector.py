import logging
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from ..domain.interfaces import IFileWalker, IInventoryCollector
from ..domain.models import Asset, Inventory, InventoryScanError, ScanRequest
from ..data.file_walker import LocalFileWalker

logger = logging.getLogger(__name__)


def printable_path(path: str) -> str:
    """
    Re-decodes a filesystem path so it can be written to any UTF-8 sink.
    Bytes that are not valid UTF-8 (surrogate-escaped by os.walk) become
    "\\xNN" escapes, which keeps distinct names distinct.
    """
    return os.fsencode(path).decode("utf-8", "backslashreplace")


def _entry_info(entry: Path) -> Tuple[bool, int]:
    """
    Returns (is_dir, size) for a walked entry.
    Dangling symlinks are recorded from the link itself instead of failing the scan.
    """
    try:
        st = entry.stat()
    except FileNotFoundError:
        if not entry.is_symlink():
            raise
        logger.warning(f"Dangling symlink: {printable_path(str(entry))}")
        st = entry.lstat()
        return False, st.st_size

    if entry.is_dir():
        # Directories carry 0; their st_size is filesystem noise
        return True, 0
    return False, st.st_size


class LinearCollector(IInventoryCollector):
    """
    Single-threaded collector.
    Walks the whole tree, stats every entry and returns a frozen Inventory.
    """

    def __init__(self, walker: Optional[IFileWalker] = None):
        # In a full DI framework, this would be injected.
        self.walker = walker or LocalFileWalker()

    def collect(self, request: ScanRequest) -> Inventory:
        # Clean the root so relative paths come out consistent
        root = os.path.abspath(request.root_path)
        assets: Dict[str, Asset] = {}

        logger.info(f"Starting scan of: {printable_path(root)}")

        current = root
        try:
            for entry in self.walker.walk(request.root_path):
                current = str(entry)

                # 1. Relative, POSIX-style key: "Season 1/Episode 01.mkv"
                relative_path = printable_path(entry.relative_to(request.root_path).as_posix())

                # 2. Type and size
                is_dir, size = _entry_info(entry)

                assets[relative_path] = Asset.from_path(relative_path, size=size, is_dir=is_dir)

        except OSError as e:
            where, reason = printable_path(current), printable_path(str(e))
            logger.error(f"Scan of {printable_path(root)} failed at {where}: {reason}")
            raise InventoryScanError(f"Failed to scan {printable_path(root)} (at {where}): {reason}") from e

        logger.info(f"Scan complete. Found {len(assets)} entries in {printable_path(root)}")
        return Inventory(root_path=printable_path(root), assets=assets)
