"""Load a suite of test procedures named as ``module:attribute``."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import Any

from testy.runner import TestProcedure


def parse_target(target: str) -> tuple[str, str]:
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Suite target '{target}' must look like 'module:attribute'")
    return module_name, attr


def load_suite(target: str, app_dir: Path | None = None) -> list[TestProcedure]:
    """Import ``module`` and return the procedures held by ``attribute``.

    The attribute is either a sequence of callables or a zero-argument
    factory returning an iterable of callables.
    """
    module_name, attr = parse_target(target)
    if app_dir is not None:
        app_path = str(app_dir.resolve())
        if app_path not in sys.path:
            sys.path.insert(0, app_path)

    module = importlib.import_module(module_name)
    try:
        obj: Any = module
        for part in attr.split("."):
            obj = getattr(obj, part)
    except AttributeError as e:
        raise ValueError(f"Module '{module_name}' has no attribute '{attr}'") from e

    if callable(obj) and not isinstance(obj, (list, tuple)):
        obj = obj()
    if isinstance(obj, (str, bytes)) or not hasattr(obj, "__iter__"):
        raise TypeError(f"Suite '{target}' did not produce an iterable of tests")

    tests = list(obj)
    for test in tests:
        if not callable(test):
            raise TypeError(f"Suite '{target}' contains a non-callable entry: {test!r}")
    return tests
