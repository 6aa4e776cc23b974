from typing import Callable, Sequence, TextIO
from mddiff.features.diff.domain.models import DiffItem, DiffReport
from ..domain.interfaces import IReporter

class MarkdownReporter(IReporter):
    """
    Grouped narrative: Missing, Modified, Extra sections in that order.
    Empty sections are left out entirely.
    """

    def report(self, report: DiffReport, sink: TextIO) -> None:
        sink.write("# Diff Report\n\n")
        sink.write(f"**Source:** `{report.source_dir}`\n")
        sink.write(f"**Target:** `{report.target_dir}`\n\n")

        self._section(
            sink,
            "Missing Files (In Source, Not Target)",
            report.missing,
            lambda item: f"- `{item.path}` (Size: {item.src_size})",
        )
        self._section(
            sink,
            "Modified Files",
            report.modified,
            lambda item: f"- `{item.path}`: {item.reason}",
        )
        self._section(
            sink,
            "Extra Files (In Target, Not Source)",
            report.extra,
            lambda item: f"- `{item.path}` (Size: {item.tgt_size})",
        )

    @staticmethod
    def _section(sink: TextIO, title: str, items: Sequence[DiffItem], line: Callable[[DiffItem], str]) -> None:
        if not items:
            return
        sink.write(f"## {title}\n")
        for item in items:
            sink.write(line(item) + "\n")
        sink.write("\n")
