"""Small helpers for running Git commands against local working copies."""

from __future__ import annotations

import os
import shutil
import subprocess
from collections.abc import Sequence
from typing import Protocol

from .constants import DEFAULT_GIT_BINARY


class GitNotFoundError(RuntimeError):
    pass


class GitRunner(Protocol):
    binary: str

    def available(self) -> bool: ...

    def run(self, args: Sequence[str], cwd: str | None = None) -> tuple[bool, str]: ...


class SubprocessRunner:
    """Runs the real git binary. Output is captured, never echoed."""

    def __init__(self, binary: str = DEFAULT_GIT_BINARY) -> None:
        self.binary = binary

    def available(self) -> bool:
        return shutil.which(self.binary) is not None

    def run(self, args: Sequence[str], cwd: str | None = None) -> tuple[bool, str]:
        try:
            out = subprocess.check_output([self.binary, *args], cwd=cwd, stderr=subprocess.STDOUT)
            return True, out.decode("utf-8", "ignore").strip()
        except subprocess.CalledProcessError as e:
            return False, (e.output or b"").decode("utf-8", "ignore").strip()


class GitClient:
    def __init__(self, runner: GitRunner | None = None) -> None:
        self.runner = runner if runner is not None else SubprocessRunner()

    def ensure_available(self) -> None:
        if not self.runner.available():
            raise GitNotFoundError(f"{self.runner.binary} is not installed or not on PATH.")

    @staticmethod
    def is_working_copy(path: str | os.PathLike) -> bool:
        return os.path.isdir(os.path.join(path, ".git"))

    # ---------- remote ops ----------
    def clone(self, url: str, dest: str | os.PathLike, branch: str | None = None) -> tuple[bool, str]:
        cmd = ["clone"]
        if branch:
            cmd += ["--branch", branch]
        cmd += [url, os.fspath(dest)]
        return self.runner.run(cmd)

    def fetch_all(self, repo_dir: str | os.PathLike) -> tuple[bool, str]:
        return self.runner.run(["fetch", "--all", "--prune"], cwd=os.fspath(repo_dir))

    def pull_ff_only(self, repo_dir: str | os.PathLike) -> tuple[bool, str]:
        return self.runner.run(["pull", "--ff-only"], cwd=os.fspath(repo_dir))

    # ---------- local ops ----------
    def checkout(self, repo_dir: str | os.PathLike, branch: str) -> tuple[bool, str]:
        return self.runner.run(["checkout", branch], cwd=os.fspath(repo_dir))
