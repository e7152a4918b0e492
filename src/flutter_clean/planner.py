"""
flutter_clean.planner - Layout Planner
======================================

Computes every directory and file a scaffolding run creates. The planner is
pure: it never touches the filesystem, and the same configuration always
yields the same ordered lists.

Layout
------
::

    lib/
    ├── main.dart
    └── src/
        ├── app.dart
        ├── core/
        │   ├── constants/   app_constants.dart
        │   ├── network/     network_info.dart, dio_client.dart   (not minimal)
        │   ├── error/       failures.dart, exceptions.dart
        │   ├── theme/       app_theme.dart
        │   ├── di/          injection.dart
        │   ├── usecase/     usecase.dart
        │   ├── utils/
        │   └── router/      app_router.dart                      (go_router)
        └── features/<feature>/
            ├── domain/{entities,repositories,usecases}/
            ├── data/{models,datasources,repositories}/
            └── presentation/{<state dir>,pages,widgets}/

Directories come first (pass 1), then files (pass 2). ``lib`` and
``lib/src`` are never listed themselves; they are ancestors of the core
directories and come into existence with them.
"""

from __future__ import annotations

from dataclasses import dataclass

from flutter_clean.models import Router, ScaffoldConfig, StateManagement


# =============================================================================
# Path Templates
# =============================================================================

LIB_ROOT = "lib"
SRC_ROOT = f"{LIB_ROOT}/src"
CORE_ROOT = f"{SRC_ROOT}/core"
FEATURES_ROOT = f"{SRC_ROOT}/features"

CORE_DIRS: tuple[str, ...] = (
    "constants",
    "network",
    "error",
    "theme",
    "di",
    "usecase",
    "utils",
)
ROUTER_DIR = "router"

DOMAIN_DIRS: tuple[str, ...] = ("entities", "repositories", "usecases")
DATA_DIRS: tuple[str, ...] = ("models", "datasources", "repositories")
PRESENTATION_DIRS: tuple[str, ...] = ("pages", "widgets")

CORE_FILES: tuple[str, ...] = (
    "constants/app_constants.dart",
    "error/failures.dart",
    "error/exceptions.dart",
    "usecase/usecase.dart",
    "theme/app_theme.dart",
    "di/injection.dart",
)
NETWORK_FILES: tuple[str, ...] = (
    "network/network_info.dart",
    "network/dio_client.dart",
)
ROUTER_FILE = "router/app_router.dart"

# Relative to lib/src/features/<feature>/, formatted with the feature name
FEATURE_FILE_TEMPLATES: tuple[str, ...] = (
    "domain/entities/{feature}_entity.dart",
    "domain/repositories/{feature}_repository.dart",
    "domain/usecases/get_{feature}.dart",
    "data/models/{feature}_model.dart",
    "data/datasources/{feature}_remote_data_source.dart",
    "data/datasources/{feature}_local_data_source.dart",
    "data/repositories/{feature}_repository_impl.dart",
    "presentation/pages/{feature}_page.dart",
    "presentation/widgets/{feature}_widget.dart",
)

APP_ENTRY_FILES: tuple[str, ...] = (
    f"{SRC_ROOT}/app.dart",
    f"{LIB_ROOT}/main.dart",
)


# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass(frozen=True)
class LayoutPlan:
    """
    Ordered directories and files for one scaffolding run.

    Paths are POSIX-style and relative to the project root.

    Attributes
    ----------
    directories : tuple[str, ...]
        Directories, in creation order.

    files : tuple[str, ...]
        Empty placeholder files, in creation order.
    """

    directories: tuple[str, ...]
    files: tuple[str, ...]

    @property
    def core_directories(self) -> tuple[str, ...]:
        """Names of the planned core subdirectories, in plan order."""
        prefix = f"{CORE_ROOT}/"
        return tuple(
            d[len(prefix):] for d in self.directories if d.startswith(prefix)
        )


# =============================================================================
# Planning
# =============================================================================

def feature_root(feature: str) -> str:
    """Directory of one feature slice, e.g. ``lib/src/features/auth``."""
    return f"{FEATURES_ROOT}/{feature}"


def feature_directories(feature: str, state_management: StateManagement) -> list[str]:
    """The nine directories of one feature slice."""
    root = feature_root(feature)
    presentation = (state_management.presentation_dir, *PRESENTATION_DIRS)
    return [
        *(f"{root}/domain/{name}" for name in DOMAIN_DIRS),
        *(f"{root}/data/{name}" for name in DATA_DIRS),
        *(f"{root}/presentation/{name}" for name in presentation),
    ]


def feature_files(feature: str, state_management: StateManagement) -> list[str]:
    """
    The files of one feature slice.

    Nine files are common to every state-management variant; the variant
    adds its own state files after them (three for bloc, one otherwise).
    """
    root = feature_root(feature)
    files = [f"{root}/{t.format(feature=feature)}" for t in FEATURE_FILE_TEMPLATES]
    state_dir = state_management.presentation_dir
    files.extend(
        f"{root}/presentation/{state_dir}/{feature}_{suffix}.dart"
        for suffix in state_management.presentation_suffixes
    )
    return files


def plan(config: ScaffoldConfig) -> LayoutPlan:
    """
    Compute the full layout for a configuration.

    Parameters
    ----------
    config : ScaffoldConfig
        Canonical configuration.

    Returns
    -------
    LayoutPlan
        Directories then files, in creation order. Duplicate feature names
        produce duplicate entries.

    Examples
    --------
    >>> from flutter_clean.models import Profile
    >>> layout = plan(ScaffoldConfig(
    ...     app_name="demo", profile=Profile.MINIMAL, features=("auth", "profile"),
    ... ))
    >>> len(layout.directories), len(layout.files)
    (25, 32)
    """
    use_router = config.router is Router.GO_ROUTER

    # Pass 1: directories
    directories = [f"{CORE_ROOT}/{name}" for name in CORE_DIRS]
    if use_router:
        directories.append(f"{CORE_ROOT}/{ROUTER_DIR}")
    for feature in config.features:
        directories.extend(feature_directories(feature, config.state_management))

    # Pass 2: files
    files = [f"{CORE_ROOT}/{name}" for name in CORE_FILES]
    if config.profile.includes_network:
        files.extend(f"{CORE_ROOT}/{name}" for name in NETWORK_FILES)
    if use_router:
        files.append(f"{CORE_ROOT}/{ROUTER_FILE}")
    for feature in config.features:
        files.extend(feature_files(feature, config.state_management))
    files.extend(APP_ENTRY_FILES)

    return LayoutPlan(directories=tuple(directories), files=tuple(files))


def plan_feature(feature: str, state_management: StateManagement) -> LayoutPlan:
    """
    Plan a single feature slice for an existing project.

    Only the feature's own directories and files are returned; core and app
    entry files are left alone.
    """
    return LayoutPlan(
        directories=tuple(feature_directories(feature, state_management)),
        files=tuple(feature_files(feature, state_management)),
    )
