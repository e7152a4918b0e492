"""
flutter_clean.errors - Exception Hierarchy
==========================================

Every failure that flutter-clean raises on purpose derives from
``ScaffoldError`` so the CLI can report it with a single ``except`` clause
and exit with status 1. All of them are fatal to the run; nothing here is
retried.

    ScaffoldError
    ├── EmptyFeatureListError   (also a ValueError)
    ├── InvalidFeatureNameError (also a ValueError)
    ├── ManifestNotFoundError   (also a FileNotFoundError)
    ├── ToolchainNotFoundError
    └── DependencyInstallError
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for all flutter-clean errors."""


class EmptyFeatureListError(ScaffoldError, ValueError):
    """
    No feature names survived normalization.

    Raised by the configuration resolver before any directory or file is
    created.
    """

    def __init__(self, raw: str = "") -> None:
        self.raw = raw
        super().__init__(
            "No features provided. Please enter at least one feature name."
        )


class InvalidFeatureNameError(ScaffoldError, ValueError):
    """A feature name would not map to a single directory segment."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid feature name '{name}'. Use lowercase letters, digits "
            "and underscores only."
        )


class ManifestNotFoundError(ScaffoldError, FileNotFoundError):
    """The project root has no pubspec.yaml."""

    def __init__(self, path: object) -> None:
        self.path = path
        super().__init__(f"pubspec.yaml not found at {path}. Run from project root.")


class ToolchainNotFoundError(ScaffoldError):
    """A required executable (flutter or dart) is not on PATH."""

    def __init__(self, tool: str) -> None:
        self.tool = tool
        super().__init__(f"{tool} not found in PATH.")


class DependencyInstallError(ScaffoldError):
    """``dart pub add`` exited with a non-zero status."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(
            f"'{' '.join(command)}' failed with exit code {returncode}{detail}"
        )
