"""
DevFlow CLI — entrypoint.

Usage:
    devflow --help
    devflow init [FOLDER] [--skip-deps]
    devflow deps
    devflow ide start | update
"""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from devflow import __version__
from devflow.core.models.capability import CapabilityReport
from devflow.core.observability.logging_config import LogSettings, setup_logging
from devflow.core.observability.reporter import Reporter

_INIT_EPILOG = """\
\b
Examples:
  $ devflow init                    Install DevFlow in the current directory
  $ devflow init ./my-project       Install DevFlow in the 'my-project' folder
  $ devflow init --skip-deps        Skip dependency checks

\b
After installation, the CLI will:
  • Clone the DevFlow template repository
  • Copy DevFlow folders (.claude, .devflow, docs, etc.) to your project
  • Ask for confirmation if files already exist
"""


@click.group()
@click.version_option(version=__version__, prog_name="devflow")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool, debug: bool) -> None:
    """DevFlow CLI — install DevFlow in your project.

    Adds DevFlow agents, configuration, and documentation structure to
    your existing project.
    """
    from devflow.adapters import GitAdapter, RemoteManifest, ShellProber, ShellRunner
    from devflow.core.config.settings import RuntimeConfig
    from devflow.ui.cli.output import ClickReporter

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug

    # Collaborators may be pre-seeded (tests pass obj={...} to CliRunner)
    ctx.obj.setdefault("config", RuntimeConfig.from_environment())
    ctx.obj.setdefault("reporter", ClickReporter())
    ctx.obj.setdefault("prober", ShellProber())
    ctx.obj.setdefault("git", GitAdapter())
    ctx.obj.setdefault("runner", ShellRunner())
    ctx.obj.setdefault("manifest", RemoteManifest())

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(LogSettings.from_cli(debug=debug, verbose=verbose, quiet=quiet))


def _show_install_instructions(reporter: Reporter, report: CapabilityReport) -> None:
    """Print the OS-specific commands for whatever ``report`` found missing."""
    from devflow.core.services.detection.instructions import install_instructions

    if not report.has_errors:
        reporter.success("All dependencies are installed!")
        click.echo()
        return

    reporter.warn("Missing dependencies:")
    click.echo()
    for line in install_instructions(report):
        click.echo(line)

    if report.missing_required:
        reporter.warn("Missing CLI dependencies. Agent installation may not work.")


def _render_findings(reporter: Reporter, report: CapabilityReport) -> None:
    reporter.info("Checking dependencies...")
    click.echo()
    for finding in report.findings:
        if finding.level == "ok":
            reporter.success(finding.message)
        elif finding.level == "error":
            reporter.error(finding.message)
        else:
            reporter.warn(finding.message)
    click.echo()


def _handle_init_error(reporter: Reporter, error: Exception) -> NoReturn:
    from devflow.core.errors import error_message, is_tool_missing

    if is_tool_missing(error, "git"):
        reporter.error("Git is not installed or not found in PATH.")
    else:
        reporter.error(f"Error initializing project: {error_message(error)}")
    sys.exit(1)


@cli.command(epilog=_INIT_EPILOG)
@click.argument("folder", required=False)
@click.option("--skip-deps", is_flag=True, help="Skip dependency checks.")
@click.pass_context
def init(ctx: click.Context, folder: str | None, skip_deps: bool) -> None:
    """Install DevFlow in your project.

    FOLDER is the target folder path (optional). If not provided, DevFlow
    will be installed in the current directory.
    """
    from devflow.core.services.detection.dependencies import check_dependencies
    from devflow.core.services.installer import initialize_project
    from devflow.ui.cli.output import ask

    reporter = ctx.obj["reporter"]
    config = ctx.obj["config"]

    try:
        report = check_dependencies(skip_deps, config=config, prober=ctx.obj["prober"])
        if not skip_deps:
            _render_findings(reporter, report)

        if report.has_errors:
            _show_install_instructions(reporter, report)
            click.echo()
            answer = ask("Continue anyway? (y/n) ")
            if not answer.strip().lower().startswith("y"):
                click.echo()
                sys.exit(0)
            click.echo()

        result = initialize_project(
            folder,
            config=config,
            prompt=ask,
            git=ctx.obj["git"],
            reporter=reporter,
        )
    except Exception as e:
        _handle_init_error(reporter, e)

    if result.cancelled:
        reporter.error("Initialization cancelled.")
        sys.exit(0)


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def deps(ctx: click.Context, as_json: bool) -> None:
    """Check DevFlow dependencies and show how to install missing ones."""
    from devflow.core.services.detection.dependencies import check_dependencies

    report = check_dependencies(config=ctx.obj["config"], prober=ctx.obj["prober"])

    if as_json:
        click.echo(json.dumps(report.model_dump(mode="json"), indent=2))
        return

    reporter = ctx.obj["reporter"]
    _render_findings(reporter, report)
    _show_install_instructions(reporter, report)

    if report.has_errors:
        click.echo()
        reporter.warn("Some dependencies are missing. Run 'devflow init' to set up a project.")
    else:
        reporter.info("Run 'devflow init' to create a new project.")


# ── Register sub-command groups from devflow/ui/cli/ ───────────────

from devflow.ui.cli.ide import ide  # noqa: E402

cli.add_command(ide)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
