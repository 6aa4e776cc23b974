from pathlib import Path
from ..domain.models import Inventory, ScanRequest
from .collector import LinearCollector

def collect_inventory(root_path: str) -> Inventory:
    """
    Public Service API: Scan a directory tree into an Inventory.

    Args:
        root_path: Directory to scan.

    Raises:
        FileNotFoundError / NotADirectoryError: If root_path is not a directory.
        InventoryScanError: If the tree could not be read completely.
    """
    # 1. Map Primitives to Domain Objects (validates the root)
    request = ScanRequest(root_path=Path(root_path))

    # 2. Execute
    return LinearCollector().collect(request)
