"""
flutter_clean.models - Scaffolding Configuration Models
=======================================================

This module defines the data models shared by the resolver, the planner and
the CLI. Pydantic gives us validation of the canonical configuration and
an immutable value object once it is built.

Architecture Notes
------------------
Each choice the user makes is a ``str`` enum, and every decision that
depends on a choice is a lookup table attached to its enum. Nothing else in
the package branches on the raw strings.

    ScaffoldConfig (frozen)
    ├── app_name: str
    ├── state_management: StateManagement
    │   ├── presentation_dir        bloc → "bloc", riverpod → "providers", ...
    │   ├── presentation_suffixes   bloc → (bloc, event, state), ...
    │   └── package                 bloc → "flutter_bloc", ...
    ├── router: Router
    │   └── package                 go_router → "go_router"
    ├── profile: Profile
    │   ├── includes_network
    │   ├── packages
    │   └── dev_packages
    ├── features: tuple[str, ...]
    └── skip_install: bool

Usage Example
-------------
>>> from flutter_clean.models import ScaffoldConfig, StateManagement
>>> config = ScaffoldConfig(
...     app_name="shop",
...     state_management=StateManagement.RIVERPOD,
...     features=("auth", "cart"),
... )
>>> config.state_management.presentation_dir
'providers'
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator


# One path segment, usable in Dart file names
FEATURE_NAME_PATTERN = r"^[a-z0-9_]+$"


# =============================================================================
# Enumerations
# =============================================================================

class StateManagement(str, Enum):
    """
    State-management pattern used by the presentation layer.

    The choice decides the name of one presentation subdirectory per
    feature, the state files generated inside it, and one runtime package.

    Examples
    --------
    >>> StateManagement.BLOC.presentation_suffixes
    ('bloc', 'event', 'state')
    >>> StateManagement.GETX.presentation_dir
    'controllers'
    """

    BLOC = "bloc"
    RIVERPOD = "riverpod"
    PROVIDER = "provider"
    GETX = "getx"

    @property
    def description(self) -> str:
        """Human-readable description for CLI prompts."""
        descriptions = {
            StateManagement.BLOC: "BLoC pattern (flutter_bloc)",
            StateManagement.RIVERPOD: "Riverpod providers (flutter_riverpod)",
            StateManagement.PROVIDER: "ChangeNotifier with provider",
            StateManagement.GETX: "GetX controllers (get)",
        }
        return descriptions[self]

    @property
    def presentation_dir(self) -> str:
        """Name of the state-holder directory under ``presentation/``."""
        return _PRESENTATION_DIRS[self]

    @property
    def presentation_suffixes(self) -> tuple[str, ...]:
        """
        File name suffixes for the per-feature state files.

        Each suffix produces ``<feature>_<suffix>.dart`` inside
        :attr:`presentation_dir`.
        """
        return _PRESENTATION_SUFFIXES[self]

    @property
    def package(self) -> str:
        """The pub package that provides this state-management solution."""
        return _STATE_PACKAGES[self]


_PRESENTATION_DIRS: dict[StateManagement, str] = {
    StateManagement.BLOC: "bloc",
    StateManagement.RIVERPOD: "providers",
    StateManagement.PROVIDER: "notifiers",
    StateManagement.GETX: "controllers",
}

_PRESENTATION_SUFFIXES: dict[StateManagement, tuple[str, ...]] = {
    StateManagement.BLOC: ("bloc", "event", "state"),
    StateManagement.RIVERPOD: ("provider",),
    StateManagement.PROVIDER: ("notifier",),
    StateManagement.GETX: ("controller",),
}

_STATE_PACKAGES: dict[StateManagement, str] = {
    StateManagement.BLOC: "flutter_bloc",
    StateManagement.RIVERPOD: "flutter_riverpod",
    StateManagement.PROVIDER: "provider",
    StateManagement.GETX: "get",
}


class Router(str, Enum):
    """Navigation solution. ``go_router`` adds a core router directory and file."""

    NONE = "none"
    GO_ROUTER = "go_router"

    @property
    def description(self) -> str:
        """Human-readable description for CLI prompts."""
        if self is Router.GO_ROUTER:
            return "Declarative routing with go_router"
        return "Plain Navigator, no router package"

    @property
    def package(self) -> str | None:
        """The pub package for this router, or None."""
        return "go_router" if self is Router.GO_ROUTER else None


class Profile(str, Enum):
    """
    Dependency profile.

    Profiles are ordered by feature set: every package of ``minimal`` is in
    ``standard`` and every package of ``standard`` is in ``full``. For
    generated files the ordering is different: only ``minimal`` leaves out
    the core network files.
    """

    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"

    @property
    def description(self) -> str:
        """Human-readable description for CLI prompts."""
        descriptions = {
            Profile.MINIMAL: "Core packages only, no network layer files",
            Profile.STANDARD: "Adds connectivity, dio logging and flutter_lints",
            Profile.FULL: "Adds storage, json_serializable and build_runner",
        }
        return descriptions[self]

    @property
    def includes_network(self) -> bool:
        """Whether the core network files are generated."""
        return self is not Profile.MINIMAL

    @property
    def packages(self) -> tuple[str, ...]:
        """Runtime packages added by this profile."""
        return _PROFILE_PACKAGES[self]

    @property
    def dev_packages(self) -> tuple[str, ...]:
        """Dev packages added by this profile."""
        return _PROFILE_DEV_PACKAGES[self]


_PROFILE_PACKAGES: dict[Profile, tuple[str, ...]] = {
    Profile.MINIMAL: ("fpdart",),
    Profile.STANDARD: ("connectivity_plus", "pretty_dio_logger", "fpdart"),
    Profile.FULL: (
        "connectivity_plus",
        "pretty_dio_logger",
        "shared_preferences",
        "flutter_secure_storage",
        "fpdart",
        "json_annotation",
    ),
}

_PROFILE_DEV_PACKAGES: dict[Profile, tuple[str, ...]] = {
    Profile.MINIMAL: (),
    Profile.STANDARD: ("flutter_lints",),
    Profile.FULL: ("flutter_lints", "build_runner", "json_serializable"),
}


# =============================================================================
# Main Configuration Model
# =============================================================================

class ScaffoldConfig(BaseModel):
    """
    Canonical configuration for one scaffolding run.

    Instances are immutable. They are normally produced by
    :func:`flutter_clean.resolver.resolve`, which applies the input
    normalization rules and raises a dedicated error for an empty feature
    list; constructing the model directly still enforces the same shape.

    Attributes
    ----------
    app_name : str
        Display name used in the generated documentation.

    state_management : StateManagement
        Presentation-layer state pattern.

    router : Router
        Navigation solution.

    profile : Profile
        Dependency profile.

    features : tuple[str, ...]
        Feature slice names in input order. Lowercase, trimmed, non-empty.
        Duplicates are kept.

    skip_install : bool
        If True, ``dart pub add`` is not run.
    """

    model_config = ConfigDict(frozen=True)

    app_name: Annotated[str, Field(
        description="App display name",
        min_length=1,
    )]
    state_management: StateManagement = Field(
        default=StateManagement.BLOC,
        description="State management solution",
    )
    router: Router = Field(
        default=Router.NONE,
        description="Navigation solution",
    )
    profile: Profile = Field(
        default=Profile.STANDARD,
        description="Dependency profile",
    )
    features: tuple[str, ...] = Field(
        description="Feature names, in input order",
        min_length=1,
    )
    skip_install: bool = Field(
        default=False,
        description="Create the structure without installing dependencies",
    )

    @field_validator("app_name", mode="before")
    @classmethod
    def validate_app_name(cls, v: object) -> object:
        """Strip surrounding whitespace before the length check."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("features")
    @classmethod
    def validate_features(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject names that are not a single lowercase path segment."""
        for name in v:
            if not re.match(FEATURE_NAME_PATTERN, name):
                msg = (
                    f"Invalid feature name '{name}'. Use lowercase letters, "
                    "digits and underscores only."
                )
                raise ValueError(msg)
        return v

    @property
    def summary_rows(self) -> list[tuple[str, str]]:
        """Label/value pairs for the configuration summary table."""
        return [
            ("App Name", self.app_name),
            ("State Mgmt", self.state_management.value),
            ("Router", self.router.value),
            ("Profile", self.profile.value),
            ("Features", ", ".join(self.features)),
            ("Skip Install", str(self.skip_install).lower()),
        ]
