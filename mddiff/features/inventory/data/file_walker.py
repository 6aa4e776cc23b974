import logging
import os
from pathlib import Path
from typing import Iterator, Optional
from ..domain.interfaces import IFileWalker
from .ignore_rules import IgnoreRules

logger = logging.getLogger(__name__)

def _raise(error: OSError) -> None:
    raise error

class LocalFileWalker(IFileWalker):
    """
    Concrete implementation using standard os.walk for efficiency.
    Output order is deterministic: entries are sorted by name within each directory.
    """

    def __init__(self, ignore_rules: Optional[IgnoreRules] = None):
        self.ignore_rules = ignore_rules or IgnoreRules()

    def _keep(self, path: Path) -> bool:
        if self.ignore_rules.should_ignore(path):
            logger.debug(f"Ignoring {path}")
            return False
        return True

    def walk(self, root: Path) -> Iterator[Path]:
        # onerror=_raise: os.walk silently skips unreadable dirs by default
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            # 1. Filter directories in-place to prevent traversing ignored folders
            # Modifying 'dirnames' tells os.walk to skip them
            dirnames[:] = sorted(
                d for d in dirnames
                if self._keep(Path(dirpath) / d)
            )

            # 2. Directories are inventory entries too (empty ones get diffed)
            for dirname in dirnames:
                yield Path(dirpath) / dirname

            # 3. Process files
            for filename in sorted(filenames):
                file_path = Path(dirpath) / filename

                if self._keep(file_path):
                    yield file_path
