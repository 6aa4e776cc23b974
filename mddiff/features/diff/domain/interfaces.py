from abc import ABC, abstractmethod
from typing import Tuple
from mddiff.features.inventory.domain.models import Asset

class IAssetComparator(ABC):
    """
    Contract for deciding whether two identity-matched assets differ.
    Swappable without touching the diff engine (e.g. a hash or codec comparator).
    """

    @abstractmethod
    def compare(self, source: Asset, target: Asset) -> Tuple[bool, str]:
        """
        Must be side-effect free and depend only on its two arguments.

        Note: identity matching ignores is_dir, so a file may be handed
        in alongside a directory of the same stem.

        Returns:
            (is_modified, reason). reason is "" when not modified.
        """
        pass
