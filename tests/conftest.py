import os

import pytest

from bbsetup.core.console import Console
from bbsetup.core.git_client import GitClient
from bbsetup.core.types import RunConfig


class FakeRunner:
    """Stands in for the git binary: records calls, simulates clones."""

    def __init__(self, binary="git", installed=True):
        self.binary = binary
        self.installed = installed
        self.calls = []
        self._rules = []

    def fail(self, verb, match=None, output="fatal: simulated failure"):
        self._rules.append((verb, match, output))

    def available(self):
        return self.installed

    def run(self, args, cwd=None):
        args = tuple(args)
        self.calls.append((args, cwd))
        haystack = " ".join(args) + " " + str(cwd or "")
        for verb, match, output in self._rules:
            if args[0] == verb and (match is None or match in haystack):
                return False, output
        if args[0] == "clone":
            os.makedirs(os.path.join(args[-1], ".git"))
        return True, ""

    @property
    def commands(self):
        return [args for args, _ in self.calls]


URLS = (
    "git@github.com:Budget-Bees/db.git",
    "git@github.com:Budget-Bees/api.git",
    "git@github.com:Budget-Bees/ui.git",
)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def git(runner):
    return GitClient(runner)


@pytest.fixture
def console():
    return Console(color=False)


@pytest.fixture
def target(tmp_path):
    return tmp_path / "budget-bees"


@pytest.fixture
def make_config(target):
    def _make(update=False, branch=None, urls=URLS):
        return RunConfig.from_urls(target, urls, update=update, branch=branch)

    return _make


@pytest.fixture
def present(target):
    """Create a fake working copy named `name` under the target directory."""

    def _present(name):
        (target / name / ".git").mkdir(parents=True)
        return target / name

    return _present
