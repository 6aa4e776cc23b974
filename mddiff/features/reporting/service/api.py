from typing import Dict, TextIO, Type, Union

from mddiff.core.common.enums import ReportFormat
from mddiff.features.diff.domain.models import DiffReport
from ..domain.interfaces import IReporter
from ..data.json_reporter import JSONReporter
from ..data.markdown_reporter import MarkdownReporter
from ..data.table_reporter import TableReporter

REPORTERS: Dict[ReportFormat, Type[IReporter]] = {
    ReportFormat.JSON: JSONReporter,
    ReportFormat.TABLE: TableReporter,
    ReportFormat.MARKDOWN: MarkdownReporter,
}

def get_reporter(fmt: Union[str, ReportFormat]) -> IReporter:
    """
    Returns a reporter for a format name ("json", "table", "markdown").

    Raises:
        ValueError: If the format is not recognised.
    """
    try:
        report_format = ReportFormat(fmt)
    except ValueError:
        raise ValueError(f"unknown format: {fmt}") from None
    return REPORTERS[report_format]()

def render_report(report: DiffReport, fmt: Union[str, ReportFormat], sink: TextIO) -> None:
    """
    Public Service API: Render a finished report to sink in the requested format.
    """
    get_reporter(fmt).report(report, sink)
