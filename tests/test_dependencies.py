"""
Tests for flutter_clean.dependencies
====================================

Test Organization
-----------------
- TestResolveDependencies: Package selection per configuration
- TestPubAddCommands: Command construction
- TestInstallDependencies: subprocess invocation (mocked)
"""

import subprocess
from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest

from flutter_clean.dependencies import (
    BASE_PACKAGES,
    DependencySet,
    install_dependencies,
    pub_add_commands,
    resolve_dependencies,
)
from flutter_clean.errors import DependencyInstallError, ToolchainNotFoundError
from flutter_clean.models import Profile, Router, ScaffoldConfig, StateManagement


def _completed(
    returncode: int = 0, stdout: str = "", stderr: str = ""
) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


# =============================================================================
# Resolution Tests
# =============================================================================

class TestResolveDependencies:
    """Tests for resolve_dependencies."""

    def test_minimal_bloc(self, make_config: Callable[..., ScaffoldConfig]) -> None:
        """Test the smallest package set."""
        deps = resolve_dependencies(make_config(profile=Profile.MINIMAL))

        assert deps.packages == ("get_it", "dio", "equatable", "flutter_bloc", "fpdart")
        assert deps.dev_packages == ()

    def test_standard_riverpod_go_router(
        self, make_config: Callable[..., ScaffoldConfig]
    ) -> None:
        """Test state, profile and router packages are appended in order."""
        deps = resolve_dependencies(make_config(
            state_management=StateManagement.RIVERPOD,
            router=Router.GO_ROUTER,
            profile=Profile.STANDARD,
        ))

        assert deps.packages == (
            "get_it", "dio", "equatable",
            "flutter_riverpod",
            "connectivity_plus", "pretty_dio_logger", "fpdart",
            "go_router",
        )
        assert deps.dev_packages == ("flutter_lints",)

    def test_full_dev_packages(self, make_config: Callable[..., ScaffoldConfig]) -> None:
        """Test the full profile's dev packages."""
        deps = resolve_dependencies(make_config(profile=Profile.FULL))

        assert deps.dev_packages == ("flutter_lints", "build_runner", "json_serializable")

    @pytest.mark.parametrize("state", list(StateManagement))
    def test_base_packages_always_first(
        self, state: StateManagement, make_config: Callable[..., ScaffoldConfig]
    ) -> None:
        """Test every set starts with the base packages."""
        deps = resolve_dependencies(make_config(state_management=state))

        assert deps.packages[:3] == BASE_PACKAGES
        assert deps.packages[3] == state.package

    def test_profiles_are_nested(self, make_config: Callable[..., ScaffoldConfig]) -> None:
        """Test full ⊇ standard ⊇ minimal."""
        sets = [
            set(resolve_dependencies(make_config(profile=p)).packages)
            for p in (Profile.MINIMAL, Profile.STANDARD, Profile.FULL)
        ]

        assert sets[0] <= sets[1] <= sets[2]

    def test_len_counts_both_lists(self) -> None:
        """Test len() covers runtime and dev packages."""
        assert len(DependencySet(packages=("a", "b"), dev_packages=("c",))) == 3


# =============================================================================
# Command Tests
# =============================================================================

class TestPubAddCommands:
    """Tests for pub_add_commands."""

    def test_runtime_and_dev(self) -> None:
        """Test both commands are produced."""
        commands = pub_add_commands(DependencySet(("dio",), ("flutter_lints",)))

        assert commands == [
            ["dart", "pub", "add", "dio"],
            ["dart", "pub", "add", "-d", "flutter_lints"],
        ]

    def test_no_dev_packages(self) -> None:
        """Test no dev command without dev packages."""
        commands = pub_add_commands(DependencySet(("dio", "get_it")))

        assert commands == [["dart", "pub", "add", "dio", "get_it"]]


# =============================================================================
# Installation Tests
# =============================================================================

class TestInstallDependencies:
    """Tests for install_dependencies."""

    def test_runs_commands_in_project(self, tmp_path: Path) -> None:
        """Test each command runs with the project as working directory."""
        deps = DependencySet(("dio",), ("flutter_lints",))

        with patch("flutter_clean.dependencies.subprocess.run") as mock_run:
            mock_run.return_value = _completed(stdout="Resolving dependencies...\n+ dio 5.4.0\n")
            commands = install_dependencies(deps, tmp_path)

        assert mock_run.call_count == 2
        first_args, first_kwargs = mock_run.call_args_list[0]
        assert first_args[0] == ["dart", "pub", "add", "dio"]
        assert first_kwargs["cwd"] == tmp_path
        assert commands == pub_add_commands(deps)

    def test_failure_raises(self, tmp_path: Path) -> None:
        """Test a non-zero exit raises DependencyInstallError."""
        deps = DependencySet(("not_a_package",), ("flutter_lints",))

        with patch("flutter_clean.dependencies.subprocess.run") as mock_run:
            mock_run.return_value = _completed(
                returncode=65, stderr="could not find package not_a_package"
            )
            with pytest.raises(DependencyInstallError) as exc_info:
                install_dependencies(deps, tmp_path)

        assert mock_run.call_count == 1
        assert exc_info.value.returncode == 65
        assert "not_a_package" in str(exc_info.value)

    def test_missing_dart_raises(self, tmp_path: Path) -> None:
        """Test a missing dart executable is reported as a toolchain error."""
        with patch(
            "flutter_clean.dependencies.subprocess.run",
            side_effect=FileNotFoundError("dart"),
        ):
            with pytest.raises(ToolchainNotFoundError, match="dart"):
                install_dependencies(DependencySet(("dio",)), tmp_path)
