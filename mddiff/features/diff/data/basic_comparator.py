from typing import Tuple
from mddiff.features.inventory.domain.models import Asset
from ..domain.interfaces import IAssetComparator

class BasicComparator(IAssetComparator):
    """
    Extension + size comparison.
    An extension change always wins over the size check.
    """

    def __init__(self, size_threshold: int = 0):
        if size_threshold < 0:
            raise ValueError(f"Size threshold cannot be negative: {size_threshold}")
        self.size_threshold = size_threshold

    def compare(self, source: Asset, target: Asset) -> Tuple[bool, str]:
        # 1. Extension (exact, case-sensitive: ".MKV" != ".mkv")
        if source.extension != target.extension:
            return True, f"Extension changed: {source.extension} -> {target.extension}"

        # 2. Size, a difference equal to the threshold is still "unchanged"
        if abs(source.size - target.size) > self.size_threshold:
            return True, "Size changed"

        return False, ""
