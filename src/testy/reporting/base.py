from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from testy.runner import RunReport, TestOutcome


class BaseReporter(ABC):
    """Sink for run results. The runner calls it from a single thread."""

    @abstractmethod
    def report_outcome(self, outcome: TestOutcome) -> None:
        """Record the outcome of one test procedure, passed or failed."""
        ...

    @abstractmethod
    def report_summary(self, report: RunReport) -> None:
        """Record the totals once every procedure has run."""
        ...


class MultiReporter(BaseReporter):
    """Fans each call out to several reporters, in order."""

    def __init__(self, reporters: Iterable[BaseReporter]):
        self.reporters = list(reporters)

    def report_outcome(self, outcome: TestOutcome) -> None:
        for reporter in self.reporters:
            reporter.report_outcome(outcome)

    def report_summary(self, report: RunReport) -> None:
        for reporter in self.reporters:
            reporter.report_summary(report)
