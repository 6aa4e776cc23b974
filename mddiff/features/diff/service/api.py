import logging
from typing import Optional

from mddiff.core.config.settings import settings
from mddiff.features.inventory.service.api import collect_inventory
from ..domain.interfaces import IAssetComparator
from ..domain.models import DiffReport
from ..data.basic_comparator import BasicComparator
from .engine import DiffEngine

logger = logging.getLogger(__name__)

def compare_directories(
    source_path: str,
    target_path: str,
    size_threshold: Optional[int] = None,
    comparator: Optional[IAssetComparator] = None,
) -> DiffReport:
    """
    Public Service API: Diff two media directory trees.

    Args:
        source_path: The reference tree.
        target_path: The tree checked against the reference.
        size_threshold: Bytes of size drift tolerated. Defaults to settings.SIZE_THRESHOLD.
        comparator: Replaces the basic extension/size strategy when given.

    Raises:
        FileNotFoundError / NotADirectoryError: If either root is invalid.
        InventoryScanError: If either tree could not be read completely.
    """
    # 1. Collect both inventories fully before diffing (source first)
    source = collect_inventory(source_path)
    target = collect_inventory(target_path)

    # 2. Wire the comparison strategy
    if comparator is None:
        threshold = settings.SIZE_THRESHOLD if size_threshold is None else size_threshold
        comparator = BasicComparator(size_threshold=threshold)

    logger.info(f"Comparing {source.root_path} ({len(source)} entries) -> {target.root_path} ({len(target)} entries)")

    # 3. Execute Logic
    return DiffEngine(comparator).diff(source, target)
