"""
Tests for flutter_clean.models
==============================

Test Organization
-----------------
- TestStateManagement: Lookup tables on the state-management enum
- TestRouter: Router enum
- TestProfile: Profile enum and package ordering
- TestScaffoldConfig: The main configuration model
"""

import pytest
from pydantic import ValidationError

from flutter_clean.models import Profile, Router, ScaffoldConfig, StateManagement


# =============================================================================
# StateManagement Tests
# =============================================================================

class TestStateManagement:
    """Tests for the StateManagement enumeration."""

    def test_values(self) -> None:
        """Test the four supported variants."""
        assert [sm.value for sm in StateManagement] == [
            "bloc", "riverpod", "provider", "getx",
        ]

    @pytest.mark.parametrize(
        ("variant", "directory"),
        [
            (StateManagement.BLOC, "bloc"),
            (StateManagement.RIVERPOD, "providers"),
            (StateManagement.PROVIDER, "notifiers"),
            (StateManagement.GETX, "controllers"),
        ],
    )
    def test_presentation_dir(self, variant: StateManagement, directory: str) -> None:
        """Test the presentation subdirectory lookup."""
        assert variant.presentation_dir == directory

    def test_bloc_has_three_state_files(self) -> None:
        """Test bloc generates bloc, event and state files."""
        assert StateManagement.BLOC.presentation_suffixes == ("bloc", "event", "state")

    def test_other_variants_have_one_state_file(self) -> None:
        """Test non-bloc variants generate a single state file."""
        for variant in (
            StateManagement.RIVERPOD,
            StateManagement.PROVIDER,
            StateManagement.GETX,
        ):
            assert len(variant.presentation_suffixes) == 1

    def test_packages(self) -> None:
        """Test the pub package for each variant."""
        assert StateManagement.BLOC.package == "flutter_bloc"
        assert StateManagement.RIVERPOD.package == "flutter_riverpod"
        assert StateManagement.PROVIDER.package == "provider"
        assert StateManagement.GETX.package == "get"

    def test_descriptions_exist(self) -> None:
        """Verify all variants have descriptions for prompts."""
        for variant in StateManagement:
            assert variant.description

    def test_from_string(self) -> None:
        """Test creating a member from its value."""
        assert StateManagement("riverpod") is StateManagement.RIVERPOD

    def test_invalid_value_raises(self) -> None:
        """Test that unknown values raise ValueError."""
        with pytest.raises(ValueError):
            StateManagement("mobx")


# =============================================================================
# Router Tests
# =============================================================================

class TestRouter:
    """Tests for the Router enumeration."""

    def test_go_router_package(self) -> None:
        """Test go_router maps to its package."""
        assert Router.GO_ROUTER.package == "go_router"

    def test_none_has_no_package(self) -> None:
        """Test the plain navigator adds no package."""
        assert Router.NONE.package is None


# =============================================================================
# Profile Tests
# =============================================================================

class TestProfile:
    """Tests for the Profile enumeration."""

    def test_network_files_only_excluded_for_minimal(self) -> None:
        """Test includes_network per profile."""
        assert Profile.MINIMAL.includes_network is False
        assert Profile.STANDARD.includes_network is True
        assert Profile.FULL.includes_network is True

    def test_packages_are_nested(self) -> None:
        """Test full ⊇ standard ⊇ minimal for runtime packages."""
        minimal = set(Profile.MINIMAL.packages)
        standard = set(Profile.STANDARD.packages)
        full = set(Profile.FULL.packages)

        assert minimal <= standard <= full

    def test_dev_packages_are_nested(self) -> None:
        """Test full ⊇ standard ⊇ minimal for dev packages."""
        assert Profile.MINIMAL.dev_packages == ()
        assert set(Profile.STANDARD.dev_packages) <= set(Profile.FULL.dev_packages)

    def test_full_packages(self) -> None:
        """Test the full profile's package list and order."""
        assert Profile.FULL.packages == (
            "connectivity_plus",
            "pretty_dio_logger",
            "shared_preferences",
            "flutter_secure_storage",
            "fpdart",
            "json_annotation",
        )


# =============================================================================
# ScaffoldConfig Tests
# =============================================================================

class TestScaffoldConfig:
    """Tests for the main ScaffoldConfig model."""

    def test_minimal_config(self) -> None:
        """Test defaults when only name and features are given."""
        config = ScaffoldConfig(app_name="demo", features=("auth",))

        assert config.state_management is StateManagement.BLOC
        assert config.router is Router.NONE
        assert config.profile is Profile.STANDARD
        assert config.skip_install is False

    def test_string_values_are_coerced(self) -> None:
        """Test enum fields accept their string values."""
        config = ScaffoldConfig(
            app_name="demo",
            state_management="getx",
            router="go_router",
            profile="full",
            features=["auth"],
        )

        assert config.state_management is StateManagement.GETX
        assert config.router is Router.GO_ROUTER
        assert config.profile is Profile.FULL
        assert config.features == ("auth",)

    def test_frozen(self) -> None:
        """Test the configuration is immutable."""
        config = ScaffoldConfig(app_name="demo", features=("auth",))

        with pytest.raises(ValidationError):
            config.app_name = "other"  # type: ignore[misc]

    def test_empty_features_rejected(self) -> None:
        """Test at least one feature is required."""
        with pytest.raises(ValidationError):
            ScaffoldConfig(app_name="demo", features=())

    def test_unnormalized_feature_rejected(self) -> None:
        """Test feature names must already be trimmed and lowercase."""
        with pytest.raises(ValidationError):
            ScaffoldConfig(app_name="demo", features=(" Auth",))

    def test_blank_feature_rejected(self) -> None:
        """Test empty feature names are rejected."""
        with pytest.raises(ValidationError):
            ScaffoldConfig(app_name="demo", features=("auth", ""))

    @pytest.mark.parametrize("name", ["a/b", "..", "../auth", "user profile", "user-profile"])
    def test_non_segment_feature_rejected(self, name: str) -> None:
        """Test feature names must be one lowercase word of [a-z0-9_]."""
        with pytest.raises(ValidationError, match="Invalid feature name"):
            ScaffoldConfig(app_name="demo", features=(name,))

    def test_duplicate_features_kept(self) -> None:
        """Test duplicates are not collapsed."""
        config = ScaffoldConfig(app_name="demo", features=("auth", "auth"))
        assert config.features == ("auth", "auth")

    def test_invalid_state_management_rejected(self) -> None:
        """Test unknown enum values are rejected."""
        with pytest.raises(ValidationError):
            ScaffoldConfig(app_name="demo", state_management="mobx", features=("a",))

    def test_app_name_is_stripped(self) -> None:
        """Test surrounding whitespace is removed from the app name."""
        config = ScaffoldConfig(app_name="  shop  ", features=("auth",))
        assert config.app_name == "shop"

    def test_summary_rows(self) -> None:
        """Test the summary table content."""
        config = ScaffoldConfig(
            app_name="shop",
            features=("auth", "cart"),
            skip_install=True,
        )
        rows = dict(config.summary_rows)

        assert rows["App Name"] == "shop"
        assert rows["State Mgmt"] == "bloc"
        assert rows["Features"] == "auth, cart"
        assert rows["Skip Install"] == "true"
