"""
nodeseed — CLI entrypoint.

Usage:
    nodeseed
    nodeseed --dry-run
    python -m nodeseed.main --help
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from nodeseed import __version__
from nodeseed.core.models.stage import Stage
from nodeseed.core.observability.logging_config import level_from_flags, setup_logging


def _announce(stage: Stage) -> None:
    """Status line printed before each stage."""
    click.secho(stage.title, fg="cyan", bold=True)


@click.command()
@click.version_option(version=__version__, prog_name="nodeseed")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write full-detail logs to this file.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to a YAML config file (default: built-in settings).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--dry-run", is_flag=True, help="Plan and validate, but don't execute.")
@click.option("--mock", is_flag=True, help="Use mock adapter (no real execution).")
def cli(
    verbose: bool,
    quiet: bool,
    debug: bool,
    log_file: str | None,
    config_path: str | None,
    as_json: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """nodeseed — bootstrap a JavaScript project with its tooling.

    Recreates the project folder, runs npm init and git init, installs
    the development tools, and writes lint, format, commit hook, release
    and test configuration.

    Examples:

        nodeseed

        nodeseed --dry-run

        nodeseed --config nodeseed.yml
    """
    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(level=level_from_flags(verbose, quiet, debug), log_file=log_file)

    from nodeseed.core.use_cases.bootstrap import run_bootstrap

    result = run_bootstrap(
        config_path=Path(config_path) if config_path else None,
        dry_run=dry_run,
        mock_mode=mock,
        on_stage=None if as_json else _announce,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(result.exit_code)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(result.exit_code)

    report = result.report
    assert report is not None

    if verbose:
        for receipt in report.receipts:
            if receipt.ok and receipt.output:
                for line in receipt.output.split("\n")[:10]:
                    click.echo(f"     │ {line}")

    failure = report.failure
    if failure is not None:
        click.secho(
            f"✗ {report.failed_stage} failed ({failure.action_id})",
            fg="red",
            bold=True,
            err=True,
        )
        if failure.error:
            click.echo(failure.error, err=True)
        sys.exit(report.exit_code)

    if quiet:
        return

    click.echo()
    if dry_run:
        click.secho(
            f"[dry-run] {report.skipped} actions validated for {result.project_dir}",
            fg="yellow",
        )
    else:
        mode_label = "[mock] " if mock else ""
        click.secho(f"✅ {mode_label}Project ready: {result.project_dir}", fg="green", bold=True)


if __name__ == "__main__":
    cli()
