"""
flutter_clean.dependencies - Pub Dependency Resolution and Installation
=======================================================================

Maps a configuration to the pub packages it needs and adds them to the
project with ``dart pub add``.

Package Sets
------------
Every project gets ``get_it``, ``dio`` and ``equatable``, followed by the
state-management package, the profile's packages and, if selected,
``go_router``. Dev packages come only from the profile.

>>> from flutter_clean.models import ScaffoldConfig, Profile
>>> deps = resolve_dependencies(ScaffoldConfig(
...     app_name="demo", profile=Profile.MINIMAL, features=("auth",),
... ))
>>> deps.packages
('get_it', 'dio', 'equatable', 'flutter_bloc', 'fpdart')
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

from flutter_clean.errors import DependencyInstallError, ToolchainNotFoundError
from flutter_clean.models import ScaffoldConfig


logger = logging.getLogger(__name__)

BASE_PACKAGES: tuple[str, ...] = ("get_it", "dio", "equatable")


@dataclass(frozen=True)
class DependencySet:
    """
    Pub packages to add to a project.

    Attributes
    ----------
    packages : tuple[str, ...]
        Runtime dependencies, passed to ``dart pub add``.

    dev_packages : tuple[str, ...]
        Dev dependencies, passed to ``dart pub add -d``.
    """

    packages: tuple[str, ...]
    dev_packages: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.packages) + len(self.dev_packages)


def resolve_dependencies(config: ScaffoldConfig) -> DependencySet:
    """Collect the runtime and dev packages for a configuration."""
    packages = [
        *BASE_PACKAGES,
        config.state_management.package,
        *config.profile.packages,
    ]
    if config.router.package:
        packages.append(config.router.package)

    return DependencySet(
        packages=tuple(packages),
        dev_packages=config.profile.dev_packages,
    )


def pub_add_commands(deps: DependencySet) -> list[list[str]]:
    """
    Build the ``dart pub add`` invocations for a dependency set.

    Returns one command for runtime packages and, when there are any, one
    for dev packages.
    """
    commands: list[list[str]] = []
    if deps.packages:
        commands.append(["dart", "pub", "add", *deps.packages])
    if deps.dev_packages:
        commands.append(["dart", "pub", "add", "-d", *deps.dev_packages])
    return commands


def install_dependencies(deps: DependencySet, project_dir: Path) -> list[list[str]]:
    """
    Add the packages to the project's pubspec.yaml with ``dart pub add``.

    Parameters
    ----------
    deps : DependencySet
        Packages to add.

    project_dir : Path
        Flutter project root; used as the working directory.

    Returns
    -------
    list[list[str]]
        The commands that were run, in order.

    Raises
    ------
    ToolchainNotFoundError
        If ``dart`` cannot be executed.
    DependencyInstallError
        If a command exits with a non-zero status. Commands after the
        failing one are not run.
    """
    commands = pub_add_commands(deps)

    for command in commands:
        logger.info("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                cwd=project_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise ToolchainNotFoundError(command[0]) from e

        for line in result.stdout.splitlines():
            if line.strip() and "Resolving dependencies" not in line:
                logger.debug("pub: %s", line)

        if result.returncode != 0:
            raise DependencyInstallError(command, result.returncode, result.stderr)

    return commands
