"""Small types and Enums used by bbsetup."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class Outcome(str, Enum):
    """What happened to a single repository during a run."""

    cloned = "cloned"
    updated = "updated"
    checked_out = "checked_out"
    skipped = "skipped"
    not_a_repo = "not_a_repo"


def short_name(url: str) -> str:
    """Return the directory name git would pick for url.

    git@github.com:Budget-Bees/budget-bees-db.git -> budget-bees-db
    """
    last = re.split(r"[/:]", url.strip().rstrip("/"))[-1]
    if last.endswith(".git"):
        last = last[: -len(".git")]
    return last


class RepoRef(BaseModel):
    """A clone-able remote URL."""

    model_config = ConfigDict(frozen=True)

    url: str

    @field_validator("url")
    @classmethod
    def _has_name(cls, v: str) -> str:
        v = v.strip()
        if not short_name(v):
            raise ValueError(f"cannot derive a repository name from {v!r}")
        return v

    @property
    def name(self) -> str:
        return short_name(self.url)


class RunConfig(BaseModel):
    """Options for one bootstrap run. Built once, never mutated."""

    model_config = ConfigDict(frozen=True)

    target_dir: Path
    repos: tuple[RepoRef, ...]
    update: bool = False
    branch: str | None = None

    @field_validator("branch")
    @classmethod
    def _branch_not_empty(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("branch name must not be empty")
        return v

    @classmethod
    def from_urls(
        cls,
        target_dir: str | Path,
        urls: list[str] | tuple[str, ...],
        *,
        update: bool = False,
        branch: str | None = None,
    ) -> RunConfig:
        return cls(
            target_dir=Path(target_dir).expanduser().resolve(),
            repos=tuple(RepoRef(url=u) for u in urls),
            update=update,
            branch=branch,
        )

    def repo_path(self, ref: RepoRef) -> Path:
        return self.target_dir / ref.name

