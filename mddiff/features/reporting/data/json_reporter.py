import json
from typing import TextIO
from mddiff.features.diff.domain.models import DiffReport
from ..domain.interfaces import IReporter

class JSONReporter(IReporter):
    """
    Structured dump of every field. Absent optional fields are written as null,
    so the output loads back with DiffReport.from_dict.
    """

    def report(self, report: DiffReport, sink: TextIO) -> None:
        json.dump(report.to_dict(), sink, indent=2, ensure_ascii=False)
        sink.write("\n")
