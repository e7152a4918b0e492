"""
pytest configuration and shared fixtures for flutter-clean tests.

Fixtures
--------
sample_pubspec : str
    Minimal pubspec.yaml content.

flutter_project : Path
    A temporary directory holding a pubspec.yaml.

make_config : Callable[..., ScaffoldConfig]
    Factory for configurations with sensible defaults.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from flutter_clean.models import Profile, Router, ScaffoldConfig, StateManagement


@pytest.fixture
def sample_pubspec() -> str:
    """
    Provide sample pubspec.yaml content for testing.

    Returns
    -------
    str
        A minimal pubspec.yaml for a package named ``demo_app``.
    """
    return '''name: demo_app
description: A new Flutter project.
version: 1.0.0+1

environment:
  sdk: ">=3.3.0 <4.0.0"

dependencies:
  flutter:
    sdk: flutter
'''


@pytest.fixture
def flutter_project(tmp_path: Path, sample_pubspec: str) -> Path:
    """
    Create a temporary Flutter project root.

    Returns
    -------
    Path
        Directory containing only pubspec.yaml.
    """
    project_dir = tmp_path / "demo_app"
    project_dir.mkdir()
    (project_dir / "pubspec.yaml").write_text(sample_pubspec, encoding="utf-8")
    return project_dir


@pytest.fixture
def make_config() -> Callable[..., ScaffoldConfig]:
    """Build a ScaffoldConfig, overriding only what a test cares about."""

    def _make(**overrides: object) -> ScaffoldConfig:
        values: dict[str, object] = {
            "app_name": "demo_app",
            "state_management": StateManagement.BLOC,
            "router": Router.NONE,
            "profile": Profile.MINIMAL,
            "features": ("auth", "profile"),
            "skip_install": True,
        }
        values.update(overrides)
        return ScaffoldConfig(**values)

    return _make


# =============================================================================
# pytest Configuration
# =============================================================================

def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers used in the test suite."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring external resources"
    )
