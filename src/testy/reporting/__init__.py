from testy.reporting.base import BaseReporter, MultiReporter
from testy.reporting.console import ConsoleReporter
from testy.reporting.junit import JUnitReporter

_REPORTERS: dict[str, type[BaseReporter]] = {
    "console": ConsoleReporter,
    "junit": JUnitReporter,
}


def get_reporter(reporter_name: str, **kwargs) -> BaseReporter:
    cls = _REPORTERS.get(reporter_name)
    if cls is None:
        raise ValueError(
            f"Unknown reporter: {reporter_name!r}. "
            f"Available: {', '.join(sorted(_REPORTERS))}"
        )
    return cls(**kwargs)


__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JUnitReporter",
    "MultiReporter",
    "get_reporter",
]
