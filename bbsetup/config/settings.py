from __future__ import annotations

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_GIT_BINARY, DEFAULT_REPOS, DEFAULT_TARGET_DIR

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="BBSETUP_", env_file=None, extra="ignore")

    target_dir: str = Field(default=DEFAULT_TARGET_DIR)
    repos: list[str] = Field(default_factory=lambda: list(DEFAULT_REPOS))
    git_binary: str = Field(default=DEFAULT_GIT_BINARY)
    # NO_COLOR is a cross-tool convention, so it is read without the prefix.
    no_color: str | None = Field(default=None, validation_alias=AliasChoices("NO_COLOR"))

    @property
    def color_disabled(self) -> bool:
        return bool(self.no_color)


def get_settings() -> Settings:
    return Settings()
