"""Service: clone or update the configured repositories into the workspace."""

from __future__ import annotations

import os

from ..core.console import Console
from ..core.git_client import GitClient
from ..core.types import Outcome, RepoRef, RunConfig


class BootstrapError(RuntimeError):
    """A git step failed for one repository; the run stops here."""

    MESSAGES = {
        "clone": "Failed to clone '{repo}'.",
        "update": "Failed to update '{repo}'.",
        "checkout": "Failed to check out branch '{branch}' in '{repo}'.",
    }

    def __init__(self, repo: str, step: str, detail: str = "", branch: str | None = None) -> None:
        self.repo = repo
        self.step = step
        self.detail = detail
        self.branch = branch
        super().__init__(self.MESSAGES[step].format(repo=repo, branch=branch))


def _checkout_branch(name: str, path: str, branch: str, git: GitClient, console: Console) -> None:
    for step in (git.fetch_all, lambda d: git.checkout(d, branch), git.pull_ff_only):
        ok, out = step(path)
        if not ok:
            raise BootstrapError(name, "checkout", out, branch=branch)
    console.ok(f"Checked out & updated branch '{branch}' in {name}")


def sync_repo(ref: RepoRef, config: RunConfig, git: GitClient, console: Console) -> Outcome:
    """Bring one working copy into the requested state.

    Absent -> clone; present -> update, checkout or skip. A plain directory in
    the way is reported and left alone.
    """
    name = ref.name
    path = config.repo_path(ref)

    if git.is_working_copy(path):
        console.info(f"Repo '{name}' already present.")
        outcome = Outcome.skipped
        if config.update:
            for step in (git.fetch_all, git.pull_ff_only):
                ok, out = step(path)
                if not ok:
                    raise BootstrapError(name, "update", out)
            console.ok(f"Updated '{name}'.")
            outcome = Outcome.updated
            if config.branch:
                _checkout_branch(name, str(path), config.branch, git, console)
                outcome = Outcome.checked_out
        else:
            if config.branch:
                _checkout_branch(name, str(path), config.branch, git, console)
                outcome = Outcome.checked_out
            console.info(f"Skipping clone for '{name}'.")
        return outcome

    if os.path.isdir(path):
        console.warn(f"Directory '{name}' exists but is not a git repo. Skipping.")
        return Outcome.not_a_repo

    console.info(f"Cloning '{name}'...")
    ok, out = git.clone(ref.url, path, branch=config.branch)
    if not ok:
        raise BootstrapError(name, "clone", out)
    console.ok(f"Cloned '{name}'.")
    return Outcome.cloned


def bootstrap_workspace(config: RunConfig, git: GitClient, console: Console) -> list[Outcome]:
    """Ensure the target directory exists and sync every repository in order.

    Stops at the first failure by letting BootstrapError propagate.
    """
    console.log("Starting Budget Bees setup")
    git.ensure_available()

    os.makedirs(config.target_dir, exist_ok=True)
    console.ok(f"Using target directory: {config.target_dir}")

    outcomes = [sync_repo(ref, config, git, console) for ref in config.repos]

    console.ok("All repositories processed.")
    console.log("Done.")
    return outcomes
