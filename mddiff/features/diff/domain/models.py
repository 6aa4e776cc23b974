from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from mddiff.core.common.enums import DiffType

@dataclass(frozen=True)
class DiffItem:
    """
    One reported difference.
    MISSING carries src_size, EXTRA carries tgt_size, MODIFIED carries both plus a reason.
    """
    type: DiffType
    path: str
    reason: Optional[str] = None
    src_size: Optional[int] = None
    tgt_size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "path": self.path,
            "reason": self.reason,
            "src_size": self.src_size,
            "tgt_size": self.tgt_size,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiffItem":
        return cls(
            type=DiffType(data["type"]),
            path=data["path"],
            reason=data.get("reason"),
            src_size=data.get("src_size"),
            tgt_size=data.get("tgt_size"),
        )

@dataclass(frozen=True)
class DiffSummary:
    # EXTRA is not counted here; extras are enumerable from the item list only.
    total_missing: int = 0
    total_modified: int = 0

@dataclass(frozen=True)
class DiffReport:
    """
    Full comparison report.
    Items are ordered: source-driven (MISSING / MODIFIED) first, then EXTRA.
    """
    source_dir: str
    target_dir: str
    items: Tuple[DiffItem, ...] = field(default_factory=tuple)
    summary: DiffSummary = field(default_factory=DiffSummary)

    def _of_type(self, diff_type: DiffType) -> Tuple[DiffItem, ...]:
        return tuple(item for item in self.items if item.type == diff_type)

    @property
    def missing(self) -> Tuple[DiffItem, ...]:
        return self._of_type(DiffType.MISSING)

    @property
    def modified(self) -> Tuple[DiffItem, ...]:
        return self._of_type(DiffType.MODIFIED)

    @property
    def extra(self) -> Tuple[DiffItem, ...]:
        return self._of_type(DiffType.EXTRA)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_dir": self.source_dir,
            "target_dir": self.target_dir,
            "items": [item.to_dict() for item in self.items],
            "summary": {
                "total_missing": self.summary.total_missing,
                "total_modified": self.summary.total_modified,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiffReport":
        summary = data.get("summary") or {}
        return cls(
            source_dir=data["source_dir"],
            target_dir=data["target_dir"],
            items=tuple(DiffItem.from_dict(item) for item in data.get("items") or []),
            summary=DiffSummary(
                total_missing=summary.get("total_missing", 0),
                total_modified=summary.get("total_modified", 0),
            ),
        )
