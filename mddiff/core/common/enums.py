# File: mddiff/core/common/enums.py

from enum import Enum, unique

@unique
class DiffType(str, Enum):
    MISSING = "MISSING"     # In source, not in target
    EXTRA = "EXTRA"         # In target, not in source
    MODIFIED = "MODIFIED"   # Same identity in both, tracked attribute differs

@unique
class ReportFormat(str, Enum):
    JSON = "json"
    TABLE = "table"
    MARKDOWN = "markdown"
