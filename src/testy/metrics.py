"""Run statistics written as suite properties by file-based reporters."""

from __future__ import annotations

from dataclasses import dataclass, asdict

import numpy as np

from testy.runner import RunReport


@dataclass
class DurationStats:
    """Spread of per-procedure durations in a run, in seconds."""

    avg: float | None
    min: float | None
    max: float | None
    stddev: float | None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


def duration_stats(durations: list[float | None]) -> DurationStats:
    """Summarize durations; ``None`` entries are skipped and an empty input
    gives all-``None`` statistics."""
    nums = [d for d in durations if d is not None]
    if not nums:
        return DurationStats(avg=None, min=None, max=None, stddev=None)

    arr = np.array(nums, dtype=float)
    return DurationStats(
        avg=round(float(np.mean(arr)), 4),
        min=round(float(np.min(arr)), 4),
        max=round(float(np.max(arr)), 4),
        stddev=round(float(np.std(arr)), 4),
    )


def collect_metrics(report: RunReport) -> dict[str, float | int | None]:
    """Flatten a run report into the metric properties written by reporters."""
    durations = duration_stats([o.duration_seconds for o in report.outcomes])
    pass_rate = (report.passed / report.total * 100) if report.total > 0 else 0.0
    return {
        "total": report.total,
        "passed": report.passed,
        "failed": report.failed,
        "pass_rate": round(pass_rate, 2),
        "wall_clock_seconds": round(report.duration_seconds, 4),
        "duration_avg": durations.avg,
        "duration_min": durations.min,
        "duration_max": durations.max,
        "duration_stddev": durations.stddev,
    }
