# File: mddiff/core/config/settings.py

import os
from typing import FrozenSet

from mddiff.core.common.enums import ReportFormat


def _names_from_env(var: str, default: str) -> FrozenSet[str]:
    raw = os.getenv(var, default)
    return frozenset(name.strip() for name in raw.split(",") if name.strip())


def _format_from_env(var: str, default: ReportFormat = ReportFormat.TABLE) -> str:
    # Unknown values fall back to the default
    raw = os.getenv(var, default.value).strip().lower()
    if raw not in {fmt.value for fmt in ReportFormat}:
        return default.value
    return raw


class Settings:
    # --- Scanner ---
    # Exact file/folder names the collector skips. Ignored folders are pruned with their contents.
    IGNORED_NAMES: FrozenSet[str] = _names_from_env(
        "MDDIFF_IGNORED_NAMES",
        ".DS_Store,Thumbs.db,.git,.idea,.vscode",
    )

    # --- Comparison ---
    # Bytes two same-identity files may differ by before they count as modified
    SIZE_THRESHOLD: int = int(os.getenv("MDDIFF_SIZE_THRESHOLD", "0"))

    # --- Output ---
    DEFAULT_FORMAT: str = _format_from_env("MDDIFF_FORMAT")
    TABLE_WIDTH: int = int(os.getenv("MDDIFF_TABLE_WIDTH", "160"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("MDDIFF_LOG_LEVEL", "WARNING").upper()


settings = Settings()
