import logging
import posixpath
from typing import Dict, List, Set

from mddiff.core.common.enums import DiffType
from mddiff.features.inventory.domain.models import Asset, Inventory
from ..domain.identity import identity_key
from ..domain.interfaces import IAssetComparator
from ..domain.models import DiffItem, DiffReport, DiffSummary

logger = logging.getLogger(__name__)


def _parent_dirs(inventory: Inventory) -> Set[str]:
    """
    Relative paths of every directory that has at least one descendant in the inventory.
    """
    parents: Set[str] = set()
    for path in inventory.assets:
        parent = posixpath.dirname(path)
        while parent and parent not in parents:
            parents.add(parent)
            parent = posixpath.dirname(parent)
    return parents


class DiffEngine:
    """
    Classifies two inventories into MISSING / EXTRA / MODIFIED items.

    Assets are matched on identity key (parent dir + stem), never on the full name.
    A rename that only touches the extension is a MODIFIED asset; any other
    rename is one MISSING plus one EXTRA.
    """

    def __init__(self, comparator: IAssetComparator):
        self.comparator = comparator

    def diff(self, source: Inventory, target: Inventory) -> DiffReport:
        # 1. Index target by identity. Last write wins on a collision.
        target_index: Dict[str, Asset] = {}
        for tgt_asset in target:
            key = identity_key(tgt_asset.path, tgt_asset.stem)
            previous = target_index.get(key)
            if previous is not None:
                logger.warning(
                    f"Identity collision in target on '{key}': "
                    f"'{tgt_asset.path}' shadows '{previous.path}'"
                )
            target_index[key] = tgt_asset

        # Directories with children are represented by their descendants
        source_parents = _parent_dirs(source)
        target_parents = _parent_dirs(target)

        items: List[DiffItem] = []
        consumed: Set[str] = set()
        total_missing = 0
        total_modified = 0

        # 2. Source pass: MISSING and MODIFIED
        for src_asset in source:
            key = identity_key(src_asset.path, src_asset.stem)
            tgt_asset = target_index.get(key)

            if tgt_asset is None:
                if src_asset.is_dir and src_asset.path in source_parents:
                    continue
                items.append(DiffItem(
                    type=DiffType.MISSING,
                    path=src_asset.path,
                    src_size=src_asset.size,
                ))
                total_missing += 1
                continue

            consumed.add(key)
            modified, reason = self.comparator.compare(src_asset, tgt_asset)
            if modified:
                items.append(DiffItem(
                    type=DiffType.MODIFIED,
                    path=src_asset.path,
                    reason=reason,
                    src_size=src_asset.size,
                    tgt_size=tgt_asset.size,
                ))
                total_modified += 1

        # 3. Target pass: EXTRA
        for tgt_asset in target:
            key = identity_key(tgt_asset.path, tgt_asset.stem)
            if key in consumed:
                continue
            if tgt_asset.is_dir and tgt_asset.path in target_parents:
                continue
            items.append(DiffItem(
                type=DiffType.EXTRA,
                path=tgt_asset.path,
                tgt_size=tgt_asset.size,
            ))

        summary = DiffSummary(total_missing=total_missing, total_modified=total_modified)
        logger.info(
            f"Diff complete. Missing: {summary.total_missing}, "
            f"Modified: {summary.total_modified}, Extra: {len(items) - total_missing - total_modified}"
        )

        # 4. Assemble (source-driven items already precede extras)
        return DiffReport(
            source_dir=source.root_path,
            target_dir=target.root_path,
            items=tuple(items),
            summary=summary,
        )
