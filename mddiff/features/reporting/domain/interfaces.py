from abc import ABC, abstractmethod
from typing import TextIO
from mddiff.features.diff.domain.models import DiffReport

class IReporter(ABC):
    """
    Contract for rendering a finished DiffReport.
    Reporters are pure consumers: they never change the report.
    """

    @abstractmethod
    def report(self, report: DiffReport, sink: TextIO) -> None:
        """
        Writes the rendered report to sink.

        Raises:
            OSError: If the sink cannot be written.
        """
        pass
