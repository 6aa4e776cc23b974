from pathlib import Path
from typing import Iterable, Optional
from mddiff.core.config.settings import settings

class IgnoreRules:
    """
    Central logic for what files the scanner should skip.
    """

    def __init__(self, names: Optional[Iterable[str]] = None):
        # Exact folder/file names to ignore
        self.ignored_names = frozenset(settings.IGNORED_NAMES if names is None else names)

    def should_ignore(self, path: Path) -> bool:
        """
        Returns True if the file/folder should be skipped.
        Matching is on the exact final name; no globbing, no case folding.
        """
        return path.name in self.ignored_names
