"""
flutter_clean - Flutter Clean Architecture Structure Generator
==============================================================

A CLI tool that lays out a Flutter project following a fixed clean
architecture convention: core directories, one domain/data/presentation
slice per feature, empty placeholder files, pub dependencies and an
ARCHITECTURE.md describing the result.

Features
--------
- **Four state-management variants**: bloc, riverpod, provider, getx
- **Optional go_router** setup
- **Dependency profiles**: minimal, standard, full
- **Safe re-runs**: existing files are never overwritten

Quick Start
-----------
```bash
# From the root of a Flutter project
flutter-clean init

# Non-interactive
flutter-clean init --state riverpod --features auth,profile --yes

# Add one more feature later
flutter-clean add-feature settings --state riverpod
```

Example
-------
>>> from flutter_clean import plan, resolve
>>> config = resolve("shop", "bloc", "none", "minimal", "auth, profile", True)
>>> layout = plan(config)
>>> len(layout.directories), len(layout.files)
(25, 32)

Architecture
------------
- ``models``: Pydantic configuration model and choice enums
- ``resolver``: Raw input → canonical configuration
- ``planner``: Configuration → ordered directories and files
- ``dependencies``: pub package resolution and ``dart pub add``
- ``generator``: Filesystem application, documents, orchestration
- ``cli``: Typer-based command line interface
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from flutter_clean.errors import (
    EmptyFeatureListError,
    InvalidFeatureNameError,
    ScaffoldError,
)
from flutter_clean.generator import scaffold_project
from flutter_clean.models import Profile, Router, ScaffoldConfig, StateManagement
from flutter_clean.planner import LayoutPlan, plan
from flutter_clean.resolver import resolve


__all__ = [
    "EmptyFeatureListError",
    "InvalidFeatureNameError",
    "LayoutPlan",
    "Profile",
    "Router",
    "ScaffoldConfig",
    "ScaffoldError",
    "StateManagement",
    "__version__",
    "plan",
    "resolve",
    "scaffold_project",
]
