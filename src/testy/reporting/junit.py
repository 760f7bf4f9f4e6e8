from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from junitparser import Error, Failure, JUnitXml, TestCase, TestSuite

from testy.metrics import collect_metrics
from testy.reporting.base import BaseReporter

if TYPE_CHECKING:
    from testy.runner import RunReport, TestOutcome


def build_suite(report: RunReport, suite_name: str = "testy") -> TestSuite:
    """Build a JUnit test suite with one test case per procedure."""
    suite = TestSuite(suite_name)

    for key, val in collect_metrics(report).items():
        if val is not None:
            suite.add_property(key, str(val))
    if report.interrupted:
        suite.add_property("interrupted", "true")

    for outcome in report.outcomes:
        case = TestCase(f"{outcome.index + 1}: {outcome.name}")
        case.classname = suite_name
        if not outcome.passed:
            result_cls = Failure if outcome.is_failure else Error
            result = result_cls(outcome.message or "")
            result.text = outcome.diagnostic
            case.result = [result]
        case.time = round(outcome.duration_seconds, 6)
        suite.add_testcase(case)

    # Set time after add_testcase (add_testcase resets it via update_statistics)
    suite.time = round(report.duration_seconds, 6)
    return suite


def write_junit(path: Path, report: RunReport, suite_name: str = "testy") -> Path:
    """Write a junit.xml for the run report, return path."""
    xml = JUnitXml()
    # Use append (not +=) to preserve properties and time
    xml.append(build_suite(report, suite_name))
    path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(path), pretty=True)
    return path


class JUnitReporter(BaseReporter):
    """Writes the whole run as JUnit XML once the summary arrives."""

    def __init__(self, path: Path | str, suite_name: str = "testy"):
        self.path = Path(path)
        self.suite_name = suite_name

    def report_outcome(self, outcome: TestOutcome) -> None:
        # outcomes are read back from the report at summary time
        pass

    def report_summary(self, report: RunReport) -> None:
        write_junit(self.path, report, self.suite_name)
