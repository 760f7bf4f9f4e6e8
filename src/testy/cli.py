from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="testy", help="Run lists of test procedures")


@app.command()
def run(
    target: str | None = typer.Argument(
        None, help="Suite to run, as 'module:attribute'"
    ),
    config: str | None = typer.Option(None, "--config", "-c", help="Path to YAML config"),
    parallel: int | None = typer.Option(
        None, "--parallel", "-p", min=1, max=100, help="Number of tests to run at once"
    ),
    junit: str | None = typer.Option(None, help="Also write JUnit XML to this path"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
    app_dir: str | None = typer.Option(
        None,
        "--app-dir",
        help="Directory to import the suite module from "
        "(default: the config file's directory, else the current one)",
    ),
):
    """Run a suite of test procedures and report pass/fail counts."""
    from testy.config import RunConfig, ReporterType, load_config
    from testy.reporting import MultiReporter, get_reporter
    from testy.runner import Runner
    from testy.suite import load_suite
    from testy.verbose import setup_logger

    if config is not None:
        config_path = Path(config)
        if not config_path.exists():
            typer.echo(f"Error: config file not found: {config}", err=True)
            raise typer.Exit(1)
        try:
            run_config = load_config(config_path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        config_path = None
        run_config = RunConfig()

    if app_dir is None:
        app_dir = str(config_path.parent) if config_path is not None else "."

    suite_target = target or run_config.suite
    if suite_target is None:
        typer.echo("Error: no suite given on the command line or in config", err=True)
        raise typer.Exit(1)

    try:
        tests = load_suite(suite_target, app_dir=Path(app_dir))
    except (ImportError, ValueError, TypeError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    logger = setup_logger(
        debug_file=Path(run_config.debug_log) if run_config.debug_log else None,
        verbose=verbose or run_config.verbose,
        logger_name="testy.runner",
    )

    reporters = []
    junit_path = junit or run_config.junit_path
    for reporter_type in run_config.reporters:
        if reporter_type is ReporterType.JUNIT:
            if junit_path is None:
                typer.echo("Error: junit reporter needs junit_path", err=True)
                raise typer.Exit(1)
            continue
        reporters.append(get_reporter(reporter_type.value))
    if junit_path is not None:
        reporters.append(
            get_reporter("junit", path=Path(junit_path), suite_name=run_config.name)
        )

    runner = Runner(
        reporter=MultiReporter(reporters),
        parallel=parallel or run_config.parallel,
        logger=logger,
    )
    report = runner.execute(tests)

    if junit_path is not None:
        typer.echo(f"JUnit report: {junit_path}")

    # Exit with non-zero if any test failed or run was interrupted
    if report.failed or report.interrupted:
        raise typer.Exit(1)


@app.command()
def init(
    dir: str = typer.Option(".", "--dir", help="Directory to create example files in"),
):
    """Create an example config and test suite."""
    project_dir = Path(dir)
    project_dir.mkdir(parents=True, exist_ok=True)

    config_file = project_dir / "testy.yaml"
    if config_file.exists():
        typer.echo(f"testy.yaml already exists in {dir}, skipping.")
        return

    config_file.write_text("""\
suite: example_tests:TESTS
name: example
parallel: 1
reporters:
  - console
  - junit
junit_path: reports/junit.xml
""")

    (project_dir / "example_tests.py").write_text('''\
from testy.assertions import assert_equals, assert_true


def test_addition():
    assert_equals(4, 2 + 2, "addition")


def test_matrix():
    assert_equals([[1.0, 2.0]], [[1.0, 2.0001]], "matrix", epsilon=0.001)


TESTS = [
    test_addition,
    test_matrix,
    lambda: assert_true(True),
]
''')

    typer.echo(f"Initialized testy project in {dir}:")
    typer.echo("  testy.yaml        - example run config")
    typer.echo("  example_tests.py  - example test suite")
