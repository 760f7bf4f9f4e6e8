from __future__ import annotations

import sys
from typing import TextIO, TYPE_CHECKING

from testy.reporting.base import BaseReporter

if TYPE_CHECKING:
    from testy.runner import RunReport, TestOutcome


class ConsoleReporter(BaseReporter):
    """Writes each failure to ``err`` and the run summary to ``out``.

    Streams default to the current ``sys.stdout``/``sys.stderr`` at call time,
    so captured or redirected streams are honoured.
    """

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None):
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def report_outcome(self, outcome: TestOutcome) -> None:
        if outcome.passed:
            return
        print("Test failed:", file=self.err)
        print(outcome.diagnostic, end="", file=self.err)
        print(file=self.err)

    def report_summary(self, report: RunReport) -> None:
        print(f"{report.total} total tests:", file=self.out)
        print(f"    {report.failed} failed.", file=self.out)
        print(f"    {report.passed} passed.", file=self.out)
        if report.interrupted:
            print("    (run interrupted)", file=self.out)
