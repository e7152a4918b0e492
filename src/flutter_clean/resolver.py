"""
flutter_clean.resolver - Configuration Resolver
===============================================

Turns raw user input (prompt answers, command-line options, or values from a
``flutter_clean.toml`` file) into a canonical :class:`ScaffoldConfig`.

Normalization Rules
-------------------
- **App name**: trimmed. If empty, the ``name:`` key of the project's
  ``pubspec.yaml`` is used; if that is missing too, the caller's default,
  then ``"my_app"``.
- **Features**: split on ``,``; each part is trimmed and lowercased; empty
  parts are dropped. Order and duplicates are preserved. An empty result
  raises :class:`EmptyFeatureListError`.
  Each name must then be a single segment of lowercase letters, digits and
  underscores, or :class:`InvalidFeatureNameError` is raised.
- **Enums**: taken as given (enum members or their string values).

Nothing here touches the filesystem except reading the manifest and the
optional TOML file.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from flutter_clean.errors import EmptyFeatureListError, InvalidFeatureNameError
from flutter_clean.models import (
    FEATURE_NAME_PATTERN,
    Profile,
    Router,
    ScaffoldConfig,
    StateManagement,
)


logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "my_app"
MANIFEST_NAME = "pubspec.yaml"
CONFIG_FILE_NAME = "flutter_clean.toml"

# Keys accepted in a flutter_clean.toml file
CONFIG_KEYS = frozenset({
    "app_name",
    "state_management",
    "router",
    "profile",
    "features",
    "skip_install",
})

# Expected TOML types for the scalar keys
STRING_KEYS = ("app_name", "state_management", "router", "profile")
BOOL_KEYS = ("skip_install",)


def parse_features(raw: str) -> tuple[str, ...]:
    """
    Split a comma-separated feature list into normalized names.

    Parameters
    ----------
    raw : str
        Input such as ``"Auth, profile ,settings"``.

    Returns
    -------
    tuple[str, ...]
        Trimmed, lowercased, non-empty names in input order. May be empty;
        :func:`resolve` decides whether that is an error.

    Examples
    --------
    >>> parse_features("Auth, AUTH ,  ")
    ('auth', 'auth')
    """
    names = (part.strip().lower() for part in raw.split(","))
    return tuple(name for name in names if name)


def read_manifest_name(manifest: Path) -> str | None:
    """
    Read the package name from a pubspec.yaml.

    Only the first top-level line starting with ``name:`` is considered, and
    only the text between that colon and the next one. No YAML parsing is
    done.

    Returns
    -------
    str | None
        The trimmed name, or None if the file or key is missing or the value
        is blank.
    """
    try:
        text = manifest.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("No manifest at %s", manifest)
        return None

    for line in text.splitlines():
        if line.startswith("name:"):
            value = line.split(":")[1].strip()
            return value or None
    return None


def validate_feature_name(name: str) -> str:
    """Return *name* unchanged, or raise InvalidFeatureNameError."""
    if not re.match(FEATURE_NAME_PATTERN, name):
        raise InvalidFeatureNameError(name)
    return name


def resolve(
    raw_app_name: str | None,
    raw_state_management: StateManagement | str,
    raw_router: Router | str,
    raw_profile: Profile | str,
    raw_features: str,
    raw_skip_install: bool,
    *,
    manifest: Path | None = None,
    default_app_name: str | None = None,
) -> ScaffoldConfig:
    """
    Build the canonical configuration from raw input.

    Parameters
    ----------
    raw_app_name : str | None
        Free-text app name. Empty or None falls back to the manifest.

    raw_state_management, raw_router, raw_profile
        Enum members or their string values.

    raw_features : str
        Comma-separated feature names.

    raw_skip_install : bool
        Whether to skip dependency installation.

    manifest : Path | None
        pubspec.yaml used for the app name fallback. Defaults to
        ``./pubspec.yaml``.

    default_app_name : str | None
        Name used when neither the input nor the manifest provides one.

    Returns
    -------
    ScaffoldConfig
        Validated, immutable configuration.

    Raises
    ------
    EmptyFeatureListError
        If no feature names survive normalization.
    InvalidFeatureNameError
        If a feature name contains anything but lowercase letters, digits
        and underscores.
    ValueError
        If an enum value is not a valid member.
    """
    features = parse_features(raw_features)
    if not features:
        raise EmptyFeatureListError(raw_features)
    for name in features:
        validate_feature_name(name)

    app_name = (raw_app_name or "").strip()
    if not app_name:
        manifest_path = manifest if manifest is not None else Path(MANIFEST_NAME)
        app_name = (
            read_manifest_name(manifest_path)
            or default_app_name
            or DEFAULT_APP_NAME
        )
        logger.debug("App name resolved to %r", app_name)

    return ScaffoldConfig(
        app_name=app_name,
        state_management=StateManagement(raw_state_management),
        router=Router(raw_router),
        profile=Profile(raw_profile),
        features=features,
        skip_install=bool(raw_skip_install),
    )


def load_config_file(path: Path) -> dict[str, Any]:
    """
    Load raw configuration values from a TOML file.

    The file holds top-level keys named after :class:`ScaffoldConfig`
    fields. ``features`` may be an array of strings or a single
    comma-separated string; it is returned as a comma-separated string so it
    goes through the same normalization as typed input.

    Parameters
    ----------
    path : Path
        Path to the TOML file.

    Returns
    -------
    dict[str, Any]
        Raw values, keyed by field name. Missing keys are absent.

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    ValueError
        If the file contains unknown keys or a value of the wrong type.
    """
    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        msg = f"Unknown keys in {path}: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    for key in STRING_KEYS:
        if key in data and not isinstance(data[key], str):
            msg = f"'{key}' in {path} must be a string"
            raise ValueError(msg)
    for key in BOOL_KEYS:
        if key in data and not isinstance(data[key], bool):
            msg = f"'{key}' in {path} must be true or false"
            raise ValueError(msg)

    features = data.get("features")
    if isinstance(features, list):
        if not all(isinstance(item, str) for item in features):
            msg = f"'features' in {path} must be a list of strings"
            raise ValueError(msg)
        data["features"] = ",".join(features)
    elif features is not None and not isinstance(features, str):
        msg = f"'features' in {path} must be a string or a list of strings"
        raise ValueError(msg)

    logger.debug("Loaded %d setting(s) from %s", len(data), path)
    return data
