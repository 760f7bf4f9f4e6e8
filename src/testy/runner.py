from __future__ import annotations

import logging
import time
import traceback
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, TYPE_CHECKING

from testy.assertions.base import TestFailure

if TYPE_CHECKING:
    from testy.reporting.base import BaseReporter

TestProcedure = Callable[[], Any]


def describe(test: TestProcedure) -> str:
    """Best-effort display name for a test procedure."""
    func = getattr(test, "func", test)  # functools.partial
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    return name or repr(test)


@dataclass
class TestOutcome:
    __test__ = False

    index: int
    name: str
    passed: bool
    error: BaseException | None = None
    duration_seconds: float = 0.0

    @property
    def is_failure(self) -> bool:
        """True for assertion failures, False for passes and unexpected errors."""
        return isinstance(self.error, AssertionError)

    @property
    def message(self) -> str | None:
        if self.error is None:
            return None
        if isinstance(self.error, TestFailure):
            return self.error.message
        text = str(self.error)
        return text or None

    @property
    def diagnostic(self) -> str:
        if self.error is None:
            return ""
        return "".join(
            traceback.format_exception(
                type(self.error), self.error, self.error.__traceback__
            )
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "passed": self.passed,
            "message": self.message,
            "error_type": type(self.error).__name__ if self.error else None,
            "duration_seconds": self.duration_seconds,
        }


@dataclass
class RunReport:
    total: int
    passed: int
    failed: int
    outcomes: list[TestOutcome] = field(default_factory=list)
    interrupted: bool = False
    duration_seconds: float = 0.0

    @classmethod
    def from_outcomes(
        cls,
        outcomes: list[TestOutcome],
        interrupted: bool = False,
        duration_seconds: float = 0.0,
    ) -> RunReport:
        passed = sum(1 for o in outcomes if o.passed)
        return cls(
            total=len(outcomes),
            passed=passed,
            failed=len(outcomes) - passed,
            outcomes=list(outcomes),
            interrupted=interrupted,
            duration_seconds=duration_seconds,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "interrupted": self.interrupted,
            "duration_seconds": self.duration_seconds,
            "outcomes": [o.to_dict() for o in self.outcomes],
        }


def _invoke(index: int, test: TestProcedure) -> TestOutcome:
    name = describe(test)
    start = time.perf_counter()
    try:
        test()
    except KeyboardInterrupt:
        raise
    except BaseException as e:
        return TestOutcome(
            index=index,
            name=name,
            passed=False,
            error=e,
            duration_seconds=time.perf_counter() - start,
        )
    return TestOutcome(
        index=index,
        name=name,
        passed=True,
        duration_seconds=time.perf_counter() - start,
    )


class Runner:
    """Runs test procedures in order and reports each outcome.

    A procedure fails by raising any exception; assertion checks raise
    ``TestFailure`` but any error counts. One failure never stops the run.

    With ``parallel > 1`` procedures run on a thread pool, but outcomes are
    still reported from the calling thread in submission order.
    """

    def __init__(
        self,
        reporter: BaseReporter | None = None,
        parallel: int = 1,
        logger: logging.Logger | None = None,
    ):
        if parallel < 1:
            raise ValueError(f"parallel must be at least 1, got {parallel}")
        if reporter is None:
            from testy.reporting.console import ConsoleReporter

            reporter = ConsoleReporter()
        self.reporter = reporter
        self.parallel = parallel
        self.logger = logger or logging.getLogger("testy.runner")
        self.interrupted = False

    def execute(self, tests: Iterable[TestProcedure]) -> RunReport:
        """Run every procedure and return the resulting report."""
        tests = list(tests)
        self.interrupted = False
        self.logger.debug(f"Starting run of {len(tests)} test(s)")
        start = time.perf_counter()

        outcomes: list[TestOutcome] = []
        try:
            if self.parallel > 1:
                self._execute_parallel(tests, outcomes)
            else:
                for index, test in enumerate(tests):
                    self._record(_invoke(index, test), outcomes)
        except KeyboardInterrupt:
            self.interrupted = True
            self.logger.warning(
                f"Run interrupted after {len(outcomes)} of {len(tests)} test(s)"
            )
        finally:
            report = RunReport.from_outcomes(
                outcomes,
                interrupted=self.interrupted,
                duration_seconds=time.perf_counter() - start,
            )
            self.reporter.report_summary(report)
        self.logger.debug(
            f"Run complete: {report.total} total, {report.failed} failed, "
            f"{report.passed} passed"
        )
        return report

    def _execute_parallel(
        self, tests: list[TestProcedure], outcomes: list[TestOutcome]
    ) -> None:
        with ThreadPoolExecutor(max_workers=self.parallel) as executor:
            futures: list[Future[TestOutcome]] = [
                executor.submit(_invoke, index, test)
                for index, test in enumerate(tests)
            ]
            try:
                for future in futures:
                    self._record(future.result(), outcomes)
            except KeyboardInterrupt:
                # only cancels procedures that have not started yet
                cancelled = sum(1 for f in futures if f.cancel())
                self.logger.info(f"Cancelled {cancelled} pending test(s)")
                raise

    def _record(self, outcome: TestOutcome, outcomes: list[TestOutcome]) -> None:
        status = "PASS" if outcome.passed else "FAIL"
        self.logger.debug(
            f"[{outcome.index + 1}] {status} {outcome.name} "
            f"({outcome.duration_seconds:.3f}s)"
        )
        outcomes.append(outcome)
        self.reporter.report_outcome(outcome)


def run_all(
    tests: Iterable[TestProcedure],
    reporter: BaseReporter | None = None,
    parallel: int = 1,
    logger: logging.Logger | None = None,
) -> int:
    """Run a collection of test procedures. Returns the number that failed."""
    runner = Runner(reporter=reporter, parallel=parallel, logger=logger)
    return runner.execute(tests).failed


def run(
    *tests: TestProcedure,
    reporter: BaseReporter | None = None,
    parallel: int = 1,
    logger: logging.Logger | None = None,
) -> int:
    """Run the given test procedures. Returns the number that failed.

    Example::

        failed = run(
            lambda: assert_equals(4, 2 + 2),
            lambda: assert_true(False, "this will fail"),
        )
    """
    return run_all(tests, reporter=reporter, parallel=parallel, logger=logger)
