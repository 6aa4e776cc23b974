from typing import TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from mddiff.core.common.enums import DiffType
from mddiff.core.config.settings import settings
from mddiff.features.diff.domain.models import DiffItem, DiffReport
from ..domain.interfaces import IReporter

STATUS_STYLES = {
    DiffType.MISSING: "bold red",
    DiffType.EXTRA: "bold green",
    DiffType.MODIFIED: "bold yellow",
}

def _details(item: DiffItem) -> str:
    if item.type == DiffType.MISSING:
        return f"Size: {item.src_size} bytes"
    if item.type == DiffType.EXTRA:
        return f"Size: {item.tgt_size} bytes"
    return item.reason or ""

class TableReporter(IReporter):
    """
    Columnar rendering (Status, Path, Details) followed by a summary line.
    Colours only appear when the sink is a terminal.
    """

    def __init__(self, width: int = settings.TABLE_WIDTH):
        self.width = width

    def report(self, report: DiffReport, sink: TextIO) -> None:
        console = Console(file=sink, width=self.width, highlight=False)

        table = Table(box=box.SIMPLE, show_edge=False)
        table.add_column("Status", no_wrap=True)
        table.add_column("Path", overflow="fold")
        table.add_column("Details", overflow="fold")

        for item in report.items:
            # Text() keeps brackets in file names from being parsed as markup
            table.add_row(
                Text(item.type.value, style=STATUS_STYLES[item.type]),
                Text(item.path),
                Text(_details(item)),
            )

        console.print(table)
        sink.write(
            f"\nSummary: Missing: {report.summary.total_missing}, "
            f"Modified: {report.summary.total_modified}\n"
        )
