"""A small unit-testing toolkit: assertion checks plus a list runner.

    from testy import run
    from testy.assertions import assert_equals

    failed = run(
        lambda: assert_equals(4, 2 + 2),
        lambda: assert_equals([1.3, 1.3], [1.3, 1.301], epsilon=0.01),
    )
"""

from testy.assertions import TestFailure
from testy.runner import RunReport, Runner, TestOutcome, run, run_all

__all__ = [
    "RunReport",
    "Runner",
    "TestFailure",
    "TestOutcome",
    "run",
    "run_all",
]
