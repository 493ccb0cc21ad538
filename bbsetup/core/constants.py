"""Module holding constants used across bbsetup."""

DEFAULT_REPOS = (
    "git@github.com:Budget-Bees/budget-bees-db.git",
    "git@github.com:Budget-Bees/budget-bees-api.git",
    "git@github.com:Budget-Bees/budget-bees-ui.git",
)
DEFAULT_TARGET_DIR = "../budget-bees"
DEFAULT_GIT_BINARY = "git"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
PROG_NAME = "bbsetup"
