from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class ReporterType(str, Enum):
    CONSOLE = "console"
    JUNIT = "junit"


class RunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    suite: str | None = None
    name: str = "testy"
    parallel: int = 1
    reporters: list[ReporterType] = [ReporterType.CONSOLE]
    junit_path: str | None = None
    debug_log: str | None = None
    verbose: bool = False

    @field_validator("parallel")
    @classmethod
    def parallel_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("parallel must be at least 1")
        return v

    @field_validator("suite")
    @classmethod
    def suite_must_name_attribute(cls, v: str | None) -> str | None:
        if v is not None and ":" not in v:
            raise ValueError(f"suite '{v}' must look like 'module:attribute'")
        return v

    @field_validator("junit_path", "debug_log")
    @classmethod
    def expand_env_variables(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"cannot expand '{v}': {e}") from e


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = RunConfig(**raw)

    # Resolve relative output paths relative to config file location
    for attr in ("junit_path", "debug_log"):
        value = getattr(config, attr)
        if value is not None and not Path(value).is_absolute():
            setattr(config, attr, str((config_dir / value).resolve()))

    return config
