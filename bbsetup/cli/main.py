"""CLI entrypoint: a single Typer command that bootstraps the workspace."""

from __future__ import annotations

import os
import sys
import traceback

import click
import typer

from ..config.settings import get_settings
from ..core.console import Console
from ..core.constants import PROG_NAME
from ..core.git_client import GitClient, GitNotFoundError, SubprocessRunner
from ..core.types import RunConfig
from ..services.bootstrap import BootstrapError, bootstrap_workspace

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _branch_value(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise typer.BadParameter("Missing value for --branch", param_hint="'--branch'")
    return value


@app.command()
def setup(
    update: bool = typer.Option(False, "--update", "-u", help="Pull latest changes if the repo exists"),
    branch: str | None = typer.Option(
        None, "--branch", "-b", metavar="NAME", callback=_branch_value, help="Clone/pull this branch for all repos"
    ),
):
    """Budget Bees setup.

    Creates ../budget-bees and clones the required repositories there.
    If a repo already exists it is skipped by default, or with --update
    its latest changes are pulled.

    Set NO_COLOR=1 to disable colored output.
    """
    s = get_settings()
    console = Console(no_color=s.color_disabled)
    config = RunConfig.from_urls(s.target_dir, s.repos, update=update, branch=branch)
    git = GitClient(SubprocessRunner(s.git_binary))

    try:
        bootstrap_workspace(config, git, console)
    except GitNotFoundError as e:
        console.error(str(e))
        raise typer.Exit(code=1)
    except BootstrapError as e:
        console.error(str(e))
        if e.detail:
            console.detail(e.detail)
        raise typer.Exit(code=1)


def _location(exc: BaseException) -> str:
    tb = traceback.extract_tb(exc.__traceback__)
    if not tb:
        return "unknown location"
    frame = tb[-1]
    return f"{os.path.basename(frame.filename)}:{frame.lineno}"


def main(argv: list[str] | None = None) -> int:
    """Run the command and map every failure to exit code 1."""
    console = Console(no_color=bool(os.environ.get("NO_COLOR")))
    command = typer.main.get_command(app)
    try:
        rv = command.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.UsageError as e:
        console.error(f"{e.format_message()} (use --help)")
        return 1
    except click.Abort:
        console.error("Aborted.")
        return 1
    except Exception as e:
        console.error(f"An unexpected error occurred ({_location(e)}): {e}")
        return 1
    return rv if isinstance(rv, int) else 0


def run() -> None:
    sys.exit(main())
