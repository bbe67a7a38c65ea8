"""
Command line interface for the vc_release_notes tool.

This module defines the ``main`` function which is used as the entry
point when executing the ``release-notes`` command, typically as a step
of a CI workflow. It loads the changelog configuration, reads the branch
history from GitHub, builds the changelog, and publishes it as a step
output. Every run-level failure maps to its own exit code so that
pipelines can tell a broken run apart from a release with nothing to
publish.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import click

from vc_release_notes import __version__
from vc_release_notes.changelog import NoCommitsFound, NoValidCommits, build_changelog
from vc_release_notes.config.loader import ConfigError, load_config
from vc_release_notes.context import RunContext, split_repository
from vc_release_notes.history.github_client import DEFAULT_API_URL, GitHubClient
from vc_release_notes.history.model import HistoryUnavailable
from vc_release_notes.output import OutputError, write_github_output

# Create a module-level logger. Attach a null handler and disable
# propagation to avoid logging errors when the root logger's stream is
# closed (such as during unit tests). When logging is configured by
# the CLI, root handlers will be added and messages will propagate.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_HISTORY_UNAVAILABLE = 3
EXIT_NO_COMMITS = 4
EXIT_CONFIG_ERROR = 5
EXIT_NO_VALID_COMMITS = 6
EXIT_OUTPUT_FAILURE = 7


# ---------------------------------------------------------------------------
# Progress and status display utilities
# ---------------------------------------------------------------------------

class ProgressIndicator:
    """Line-based progress indicator suitable for CI logs."""

    def __init__(self, message: str):
        self.message = message
        self.start_time = None

    def __enter__(self):
        self.start_time = time.time()
        click.echo(f"→ {self.message}...")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            elapsed = time.time() - self.start_time
            click.echo(f"  ✓ Done ({elapsed:.1f}s)")
        return False


def print_step(step_num: int, total_steps: int, message: str):
    """Print a step indicator."""
    click.echo(f"\n{'='*60}")
    click.echo(f"Step {step_num}/{total_steps}: {message}")
    click.echo(f"{'='*60}")


def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def _enable_package_logging() -> None:
    """Let package loggers propagate to the handlers configured by the CLI."""
    for name in list(logging.root.manager.loggerDict):
        if name == "vc_release_notes" or name.startswith("vc_release_notes."):
            logging.getLogger(name).propagate = True


@click.command()
@click.option("--token", envvar=["GITHUB_TOKEN", "GH_TOKEN"], required=True,
              help="GitHub access token (env: GITHUB_TOKEN or GH_TOKEN).")
@click.option("--repository", envvar="GITHUB_REPOSITORY", required=True,
              help="Target repository as owner/repo (env: GITHUB_REPOSITORY).")
@click.option("--branch", envvar="RELEASE_NOTES_BRANCH", default="master", show_default=True,
              help="Branch whose history is read.")
@click.option("--config-path", envvar="RELEASE_NOTES_CONFIG", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="JSON or YAML changelog configuration. Built-in defaults when omitted.")
@click.option("--use-icons", is_flag=True, help="Prefix section headings with the configured icons.")
@click.option("--output-name", default="changelog", show_default=True,
              help="Name of the step output that receives the changelog.")
@click.option("--github-output", envvar="GITHUB_OUTPUT", default=None,
              type=click.Path(dir_okay=False, path_type=Path),
              help="Step output file (env: GITHUB_OUTPUT).")
@click.option("--api-url", envvar="GITHUB_GRAPHQL_URL", default=DEFAULT_API_URL, show_default=True,
              help="GitHub GraphQL endpoint.")
@click.option("--timeout", "request_timeout", type=float, default=30.0, show_default=True,
              help="Timeout in seconds for each GitHub request.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="release-notes")
def main(
    token: str,
    repository: str,
    branch: str,
    config_path: Optional[Path],
    use_icons: bool,
    output_name: str,
    github_output: Optional[Path],
    api_url: str,
    request_timeout: float,
    verbose: bool,
) -> None:
    """📝 Build release notes from Conventional Commits since the latest tag."""
    # Configure logging. Use force=True to ensure handlers are reconfigured
    # on subsequent invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    _enable_package_logging()
    ctx = click.get_current_context(silent=True)
    total_steps = 3

    try:
        # Step 1: Load configuration
        print_step(1, total_steps, "Loading Configuration")
        try:
            owner, repo = split_repository(repository)
        except ValueError as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_INVALID_USAGE)

        try:
            with ProgressIndicator("Reading changelog configuration"):
                config = load_config(config_path)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        print_success("Configuration loaded successfully")
        print_info(f"Source: {config_path if config_path else 'built-in defaults'}", indent=1)
        print_info(f"Groups: {len(config.groups)}", indent=1)

        context = RunContext(
            owner=owner,
            repo=repo,
            token=token,
            config=config,
            branch=branch,
            use_icons=use_icons,
            api_url=api_url,
            request_timeout=request_timeout,
        )

        # Step 2: Build changelog
        print_step(2, total_steps, "Building Changelog")
        print_info(f"Repository: {context.full_name}@{context.branch}", indent=1)
        source = GitHubClient(
            token=context.token,
            owner=context.owner,
            repo=context.repo,
            branch=context.branch,
            api_url=context.api_url,
            request_timeout=context.request_timeout,
        )
        try:
            with ProgressIndicator("Reading commit history"):
                result = build_changelog(context, source)
        except HistoryUnavailable as exc:
            print_error(f"GitHub history unavailable: {exc}")
            raise click.exceptions.Exit(EXIT_HISTORY_UNAVAILABLE)
        except NoCommitsFound as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_NO_COMMITS)
        except NoValidCommits as exc:
            print_error(str(exc))
            raise click.exceptions.Exit(EXIT_NO_VALID_COMMITS)

        classification = result.classification
        if result.latest_tag is not None:
            print_info(f"Latest tag: {result.latest_tag.name}", indent=1)
        print_success(f"Read {result.commit_count} commit{'s' if result.commit_count != 1 else ''}")
        print_info(f"Conventional: {len(classification.parsed)}", indent=1)
        print_info(f"Breaking changes: {len(classification.breaking)}", indent=1)
        print_info(f"Skipped: {classification.skipped_count}", indent=1)
        print_info(f"Not conventional: {classification.failed_count}", indent=1)

        if not result.has_changes:
            print_warning("Nothing to add to the changelog: every commit type is excluded or ungrouped.")
            raise click.exceptions.Exit(EXIT_SUCCESS)

        for line in result.lines:
            logger.info("%s", line)

        # Step 3: Publish output
        print_step(3, total_steps, "Publishing Changelog")
        if github_output is not None:
            try:
                write_github_output(github_output, output_name, result.text)
            except OutputError as exc:
                print_error(str(exc))
                raise click.exceptions.Exit(EXIT_OUTPUT_FAILURE)
            print_success(f"Wrote step output '{output_name}'")
        else:
            print_info("GITHUB_OUTPUT not set; printing changelog only")

        click.echo("")
        click.echo(result.text)
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)


if __name__ == "__main__":
    main()
