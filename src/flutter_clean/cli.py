"""
flutter_clean.cli - Command Line Interface
==========================================

This module provides the command-line interface for flutter-clean using
Typer, with questionary for interactive prompts and rich for output.

Architecture
------------
    app (main entry point)
    ├── init         - Generate the clean architecture structure
    └── add-feature  - Add one feature slice to an existing project

Every choice can come from, in order of precedence: a command-line option,
a ``flutter_clean.toml`` file passed with ``--config``, an interactive
prompt, or (with ``--yes``) a built-in default. Feature names have no
default.

Usage Examples
--------------
Interactive mode (prompts for everything):
    $ flutter-clean init

Non-interactive mode:
    $ flutter-clean init --state riverpod --router go_router \\
          --profile full --features auth,profile --yes

Preview without writing anything:
    $ flutter-clean init --features auth --yes --dry-run

See Also
--------
- resolver.py: Input normalization
- generator.py: Structure generation
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, TypeVar

import questionary
import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from flutter_clean import __version__
from flutter_clean.dependencies import resolve_dependencies
from flutter_clean.errors import ScaffoldError
from flutter_clean.generator import (
    add_feature_to_project,
    check_environment,
    detect_flutter_version,
    scaffold_project,
)
from flutter_clean.models import Profile, Router, ScaffoldConfig, StateManagement
from flutter_clean.planner import plan
from flutter_clean.resolver import (
    MANIFEST_NAME,
    load_config_file,
    parse_features,
    resolve,
    validate_feature_name,
)


E = TypeVar("E", bound=Enum)


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="flutter-clean",
    help="Flutter clean architecture structure generator.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=True,
)

# Console for rich output
console = Console()

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """
    Route log records through rich.

    Only warnings are shown by default; ``--verbose`` shows debug output
    (files skipped, pub output, resolved values).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(Panel(
            f"[bold green]flutter-clean[/] version [cyan]{__version__}[/]\n\n"
            f"[dim]Flutter clean architecture structure generator[/]",
            border_style="green",
        ))
        raise typer.Exit()


# =============================================================================
# Interactive Prompts
# =============================================================================

def _select(message: str, enum_cls: type[E], default: E) -> E:
    choices = [
        questionary.Choice(
            title=f"{member.value:<10} - {member.description}",
            value=member,
        )
        for member in enum_cls
    ]

    result = questionary.select(message, choices=choices, default=default).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_app_name(default: str = "") -> str:
    """
    Prompt for the app display name.

    Returns
    -------
    str
        The typed name; empty means "keep the pubspec.yaml name".
    """
    result = questionary.text(
        "App display name (press Enter to keep current):",
        default=default,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_state_management() -> StateManagement:
    """Prompt for the state management solution."""
    return _select(
        "Select state management solution:",
        StateManagement,
        StateManagement.BLOC,
    )


def prompt_router() -> Router:
    """Prompt for the navigation solution."""
    return _select("Select navigation solution:", Router, Router.NONE)


def prompt_profile() -> Profile:
    """Prompt for the dependency profile."""
    return _select("Select dependency profile:", Profile, Profile.STANDARD)


def prompt_features() -> str:
    """
    Prompt for a comma-separated list of feature names.

    Blank input is rejected in the prompt itself so the user can retry;
    normalization happens in the resolver.
    """
    result = questionary.text(
        "Features (comma-separated, e.g. auth,profile,settings):",
        validate=lambda text: bool(parse_features(text))
        or "Please enter at least one feature name.",
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


def prompt_skip_install() -> bool:
    """Ask whether to skip dependency installation."""
    result = questionary.confirm(
        "Skip dependency installation (structure only)?",
        default=False,
    ).ask()

    if result is None:
        raise typer.Abort()

    return result


# =============================================================================
# Helpers
# =============================================================================

def _parse_choice(enum_cls: type[E], value: Any, label: str) -> E:
    """Convert an option value to an enum member or exit with an error."""
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(member.value for member in enum_cls)
        rprint(f"[red]Error:[/] Invalid {label} '{value}'. Valid: {valid}")
        raise typer.Exit(1)


def _print_summary(config: ScaffoldConfig) -> None:
    table = Table(title="Configuration Summary", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for label, value in config.summary_rows:
        table.add_row(label, value)

    console.print()
    console.print(table)
    console.print()


def _print_plan(config: ScaffoldConfig) -> None:
    layout = plan(config)
    deps = resolve_dependencies(config)

    dir_table = Table(title=f"Directories ({len(layout.directories)})", show_header=False)
    dir_table.add_column("Path", style="cyan")
    for directory in layout.directories:
        dir_table.add_row(f"{directory}/")

    file_table = Table(title=f"Files ({len(layout.files)})", show_header=False)
    file_table.add_column("Path", style="green")
    for file in layout.files:
        file_table.add_row(file)

    console.print(dir_table)
    console.print()
    console.print(file_table)
    console.print()

    if config.skip_install:
        console.print("[dim]Dependency installation would be skipped.[/]")
    else:
        console.print(f"[bold]Packages:[/] {' '.join(deps.packages)}")
        if deps.dev_packages:
            console.print(f"[bold]Dev packages:[/] {' '.join(deps.dev_packages)}")


# =============================================================================
# Main Application Callback
# =============================================================================

@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold]flutter-clean[/] - Flutter clean architecture structure generator.

    Creates core and per-feature domain/data/presentation directories with
    empty placeholder files, adds pub dependencies and writes ARCHITECTURE.md.

    [bold]Quick Start:[/]

        flutter-clean init

    [bold]Non-interactive:[/]

        flutter-clean init --features auth,profile --yes
    """


# =============================================================================
# Init Command
# =============================================================================

@app.command()
def init(
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="App display name (default: name from pubspec.yaml)",
        ),
    ] = None,
    state: Annotated[
        str | None,
        typer.Option(
            "--state",
            help="State management: bloc, riverpod, provider, getx",
        ),
    ] = None,
    router: Annotated[
        str | None,
        typer.Option(
            "--router",
            help="Navigation: none, go_router",
        ),
    ] = None,
    profile: Annotated[
        str | None,
        typer.Option(
            "--profile",
            help="Dependency profile: minimal, standard, full",
        ),
    ] = None,
    features: Annotated[
        str | None,
        typer.Option(
            "--features",
            "-f",
            help="Comma-separated feature names, e.g. auth,profile",
        ),
    ] = None,
    skip_install: Annotated[
        bool | None,
        typer.Option(
            "--skip-install/--install",
            help="Create the structure without running dart pub add",
        ),
    ] = None,
    path: Annotated[
        Path,
        typer.Option(
            "--path",
            "-p",
            help="Flutter project root (default: current directory)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = Path("."),
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Read settings from a flutter_clean.toml file",
            exists=True,
            file_okay=True,
            dir_okay=False,
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "--auto",
            "-y",
            help="Skip all prompts, use defaults for anything not given",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show what would be created without making changes",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug output",
        ),
    ] = False,
) -> None:
    """
    Generate the clean architecture structure in a Flutter project.

    Creates [cyan]lib/src/core/[/] and one [cyan]lib/src/features/<name>/[/]
    slice per feature, each with domain, data and presentation layers.
    Existing files are never overwritten.

    [bold]Examples:[/]

        # Interactive mode
        flutter-clean init

        # Riverpod with go_router, no prompts
        flutter-clean init --state riverpod --router go_router -f auth,cart -y

        # Structure only
        flutter-clean init -f auth --skip-install -y
    """
    setup_logging(verbose)
    project_dir = path.resolve()

    try:
        check_environment(project_dir, require_toolchain=False)
    except ScaffoldError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    flutter_version = detect_flutter_version()
    if flutter_version:
        rprint(f"[green]✓[/] Flutter detected: {flutter_version}")

    file_values: dict[str, Any] = {}
    if config_file is not None:
        try:
            file_values = load_config_file(config_file)
        except (OSError, ValueError) as e:
            rprint(f"[red]Error:[/] {e}")
            raise typer.Exit(1)

    should_prompt = not yes

    # Resolve app name
    raw_name = name if name is not None else file_values.get("app_name")
    if raw_name is None and should_prompt:
        raw_name = prompt_app_name()

    # Resolve state management
    resolved_state: StateManagement
    raw_state = state if state is not None else file_values.get("state_management")
    if raw_state is not None:
        resolved_state = _parse_choice(StateManagement, raw_state, "state management")
    elif should_prompt:
        resolved_state = prompt_state_management()
    else:
        resolved_state = StateManagement.BLOC

    # Resolve router
    resolved_router: Router
    raw_router = router if router is not None else file_values.get("router")
    if raw_router is not None:
        resolved_router = _parse_choice(Router, raw_router, "router")
    elif should_prompt:
        resolved_router = prompt_router()
    else:
        resolved_router = Router.NONE

    # Resolve profile
    resolved_profile: Profile
    raw_profile = profile if profile is not None else file_values.get("profile")
    if raw_profile is not None:
        resolved_profile = _parse_choice(Profile, raw_profile, "profile")
    elif should_prompt:
        resolved_profile = prompt_profile()
    else:
        resolved_profile = Profile.STANDARD

    # Resolve features
    raw_features = features if features is not None else file_values.get("features")
    if raw_features is None:
        raw_features = prompt_features() if should_prompt else ""

    # Resolve skip-install
    resolved_skip: bool
    if skip_install is not None:
        resolved_skip = skip_install
    elif "skip_install" in file_values:
        resolved_skip = file_values["skip_install"]
    elif should_prompt:
        resolved_skip = prompt_skip_install()
    else:
        resolved_skip = False

    # Build the configuration
    try:
        config = resolve(
            raw_name,
            resolved_state,
            resolved_router,
            resolved_profile,
            raw_features,
            resolved_skip,
            manifest=project_dir / MANIFEST_NAME,
        )
    except ValueError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    logger.debug("Resolved configuration: %s", config)

    _print_summary(config)

    if dry_run:
        console.print("[yellow]DRY RUN - No changes will be made[/]")
        console.print()
        _print_plan(config)
        return

    if should_prompt:
        proceed = questionary.confirm(
            "Proceed with structure generation?", default=True
        ).ask()
        if proceed is None:
            raise typer.Abort()
        if not proceed:
            rprint("[yellow]Cancelled by user.[/]")
            raise typer.Exit()

    try:
        scaffold_project(config, project_dir, verbose=True)
    except (ScaffoldError, OSError) as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)


# =============================================================================
# Add Feature Command
# =============================================================================

@app.command("add-feature")
def add_feature(
    feature: Annotated[
        str,
        typer.Argument(
            help="Name of the feature to add",
        ),
    ],
    state: Annotated[
        str | None,
        typer.Option(
            "--state",
            help="State management: bloc, riverpod, provider, getx",
        ),
    ] = None,
    path: Annotated[
        Path,
        typer.Option(
            "--path",
            "-p",
            help="Flutter project root (default: current directory)",
            file_okay=False,
            dir_okay=True,
        ),
    ] = Path("."),
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show debug output",
        ),
    ] = False,
) -> None:
    """
    Add one feature slice to an existing project.

    Creates the feature's domain, data and presentation directories and
    files. Core files, dependencies and ARCHITECTURE.md are left alone.

    [bold]Examples:[/]

        flutter-clean add-feature settings
        flutter-clean add-feature cart --state riverpod
    """
    setup_logging(verbose)
    project_dir = path.resolve()

    names = parse_features(feature)
    if len(names) != 1:
        rprint(f"[red]Error:[/] Expected exactly one feature name, got '{feature}'")
        raise typer.Exit(1)
    try:
        feature_name = validate_feature_name(names[0])
    except ValueError as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    resolved_state: StateManagement
    if state is not None:
        resolved_state = _parse_choice(StateManagement, state, "state management")
    else:
        resolved_state = prompt_state_management()

    try:
        result = add_feature_to_project(project_dir, feature_name, resolved_state)
    except (ScaffoldError, OSError) as e:
        rprint(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    created = "\n".join(
        f"  - {f.relative_to(project_dir)}" for f in result.files_created
    )
    console.print(Panel(
        f"[bold green]Added feature '{feature_name}'![/]\n\n"
        f"Created {len(result.files_created)} file(s):\n{created}",
        title="[bold]Success[/]",
        border_style="green",
    ))
    for warning in result.warnings:
        rprint(f"[yellow]⚠[/] {warning}")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    app()
