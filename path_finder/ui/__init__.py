"""User interface package for the path finder."""

from .main import (
    LEVEL_ENV_VAR,
    PathFinderApp,
    UIDirectories,
    main,
    resolve_directories,
    run,
)
from .toolkit import PathFinderUI

__all__ = [
    "LEVEL_ENV_VAR",
    "UIDirectories",
    "PathFinderApp",
    "PathFinderUI",
    "main",
    "resolve_directories",
    "run",
]
