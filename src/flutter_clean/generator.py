"""
flutter_clean.generator - Structure Generation
==============================================

This module applies a layout plan to disk and orchestrates a complete
scaffolding run.

Architecture
------------
The generator follows a pipeline pattern:

    1. Check the environment (pubspec.yaml, flutter/dart on PATH)
    2. Plan the layout (pure, see planner.py)
    3. Create all directories
    4. Create empty placeholder files
    5. Add pub dependencies (unless skipped)
    6. Render analysis_options.yaml and ARCHITECTURE.md
    7. Count the generated files for the summary

The pipeline is:
- **Idempotent**: directories are created with ``exist_ok`` and existing
  files are never truncated, so re-running only adds what is missing
- **Not atomic**: a failure leaves whatever was already created in place
- **Verbose**: users see what's happening at each step

Usage Example
-------------
>>> from pathlib import Path
>>> from flutter_clean.generator import scaffold_project
>>> from flutter_clean.resolver import resolve
>>>
>>> config = resolve("", "bloc", "none", "standard", "auth,profile", True)
>>> result = scaffold_project(config, Path("."))
>>> result.counts.total
33

See Also
--------
- planner.py: Layout computation
- dependencies.py: dart pub add invocation
- templates/: Jinja2 template files
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, select_autoescape
from rich.console import Console
from rich.panel import Panel

from flutter_clean import __version__
from flutter_clean.dependencies import (
    DependencySet,
    install_dependencies,
    resolve_dependencies,
)
from flutter_clean.errors import ManifestNotFoundError, ToolchainNotFoundError
from flutter_clean.planner import CORE_ROOT, FEATURES_ROOT, SRC_ROOT, plan, plan_feature
from flutter_clean.resolver import MANIFEST_NAME


if TYPE_CHECKING:
    from collections.abc import Iterable

    from flutter_clean.models import ScaffoldConfig, StateManagement
    from flutter_clean.planner import LayoutPlan


# =============================================================================
# Module-Level Configuration
# =============================================================================

logger = logging.getLogger(__name__)

# Console for rich output
console = Console()

REQUIRED_TOOLS: tuple[str, ...] = ("flutter", "dart")

ARCHITECTURE_DOC = "ARCHITECTURE.md"
ANALYSIS_OPTIONS = "analysis_options.yaml"

LINT_RULES: tuple[str, ...] = (
    "prefer_single_quotes",
    "require_trailing_commas",
    "always_use_package_imports",
    "prefer_const_constructors",
    "avoid_print",
)


# =============================================================================
# Result Data Classes
# =============================================================================

@dataclass(frozen=True)
class FileCounts:
    """Regular files found under lib/src after generation."""

    core: int
    features: int
    total: int


@dataclass
class ScaffoldResult:
    """
    Result of a scaffolding run.

    Attributes
    ----------
    project_path : Path
        Root of the Flutter project.

    layout : LayoutPlan
        The plan that was applied.

    directories_created : list[Path]
        Directories that did not exist before the run.

    files_created : list[Path]
        Placeholder files that did not exist before the run.

    dependencies : DependencySet | None
        Packages that were added, or None if installation was skipped.

    documents : list[Path]
        Generated text files (lint options, architecture doc).

    counts : FileCounts | None
        File counts after generation.

    warnings : list[str]
        Non-fatal notes gathered during the run.
    """

    project_path: Path
    layout: LayoutPlan
    directories_created: list[Path] = field(default_factory=list)
    files_created: list[Path] = field(default_factory=list)
    dependencies: DependencySet | None = None
    documents: list[Path] = field(default_factory=list)
    counts: FileCounts | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def files_skipped(self) -> int:
        """Planned files that already existed and were left untouched."""
        return len(set(self.layout.files)) - len(self.files_created)


# =============================================================================
# Environment Checks
# =============================================================================

def check_environment(project_dir: Path, *, require_toolchain: bool = True) -> None:
    """
    Verify that the run can proceed.

    Parameters
    ----------
    project_dir : Path
        Directory expected to hold pubspec.yaml.

    require_toolchain : bool, default=True
        If True, ``flutter`` and ``dart`` must be on PATH. Structure-only
        runs don't need them.

    Raises
    ------
    ManifestNotFoundError
        If pubspec.yaml is missing.
    ToolchainNotFoundError
        If a required tool is not on PATH.
    """
    if require_toolchain:
        for tool in REQUIRED_TOOLS:
            if shutil.which(tool) is None:
                raise ToolchainNotFoundError(tool)

    manifest = project_dir / MANIFEST_NAME
    if not manifest.is_file():
        raise ManifestNotFoundError(manifest)


def detect_flutter_version() -> str | None:
    """
    Return the installed Flutter version, or None if it can't be determined.

    Parses the second word of the first line of ``flutter --version``
    (``Flutter 3.24.3 • channel stable • ...``).
    """
    try:
        result = subprocess.run(
            ["flutter", "--version"],
            check=False, capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        return None

    if result.returncode != 0 or not result.stdout.strip():
        return None

    words = result.stdout.splitlines()[0].split()
    return words[1] if len(words) > 1 else None


# =============================================================================
# Filesystem Application
# =============================================================================

def create_directories(project_dir: Path, directories: Iterable[str]) -> list[Path]:
    """
    Create directories, parents included.

    Existing directories are fine; repeated entries are harmless.

    Returns
    -------
    list[Path]
        Directories that did not exist before this call.
    """
    created: list[Path] = []
    for relative in directories:
        path = project_dir / relative
        if not path.is_dir():
            created.append(path)
        path.mkdir(parents=True, exist_ok=True)
    return created


def create_files(project_dir: Path, files: Iterable[str]) -> list[Path]:
    """
    Create empty files that don't exist yet.

    Existing files are left as they are, content included.

    Returns
    -------
    list[Path]
        Files created by this call.

    Raises
    ------
    FileNotFoundError
        If a file's parent directory doesn't exist.
    """
    created: list[Path] = []
    for relative in files:
        path = project_dir / relative
        try:
            with path.open("x", encoding="utf-8"):
                pass
        except FileExistsError:
            logger.debug("Skipping existing file: %s", relative)
            continue
        created.append(path)
        logger.debug("Created %s", relative)
    return created


def apply_plan(project_dir: Path, layout: LayoutPlan) -> tuple[list[Path], list[Path]]:
    """
    Create every directory of the plan, then every file.

    Returns
    -------
    tuple[list[Path], list[Path]]
        Newly created directories and newly created files.
    """
    directories = create_directories(project_dir, layout.directories)
    files = create_files(project_dir, layout.files)
    return directories, files


def count_files(project_dir: Path) -> FileCounts:
    """Count regular files under lib/src/core, lib/src/features and lib/src."""

    def _count(relative: str) -> int:
        root = project_dir / relative
        if not root.is_dir():
            return 0
        return sum(1 for p in root.rglob("*") if p.is_file())

    return FileCounts(
        core=_count(CORE_ROOT),
        features=_count(FEATURES_ROOT),
        total=_count(SRC_ROOT),
    )


# =============================================================================
# Template Rendering
# =============================================================================

def create_jinja_env() -> Environment:
    """
    Create the Jinja2 environment for flutter_clean.templates.

    Autoescaping is off since the output is Markdown and YAML.
    """
    return Environment(
        loader=PackageLoader("flutter_clean", "templates"),
        autoescape=select_autoescape([]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_architecture_doc(
    config: ScaffoldConfig,
    layout: LayoutPlan,
    dependencies: DependencySet,
    env: Environment | None = None,
) -> str:
    """
    Render ARCHITECTURE.md for a configuration.

    The project tree lists the core directories from ``layout``, so it
    matches what was actually generated.
    """
    env = env or create_jinja_env()
    template = env.get_template(f"{ARCHITECTURE_DOC}.j2")
    return template.render(
        config=config,
        core_dirs=layout.core_directories,
        dependencies=dependencies,
        flutter_clean_version=__version__,
    )


def render_analysis_options(env: Environment | None = None) -> str:
    """Render analysis_options.yaml."""
    env = env or create_jinja_env()
    template = env.get_template(f"{ANALYSIS_OPTIONS}.j2")
    return template.render(lint_rules=LINT_RULES)


def write_documents(
    project_dir: Path,
    config: ScaffoldConfig,
    layout: LayoutPlan,
    dependencies: DependencySet,
) -> list[Path]:
    """
    Write analysis_options.yaml and ARCHITECTURE.md to the project root.

    Both files are regenerated on every run.

    Returns
    -------
    list[Path]
        The written files.
    """
    env = create_jinja_env()
    outputs = {
        ANALYSIS_OPTIONS: render_analysis_options(env),
        ARCHITECTURE_DOC: render_architecture_doc(config, layout, dependencies, env),
    }

    written: list[Path] = []
    for name, content in outputs.items():
        path = project_dir / name
        path.write_text(content, encoding="utf-8")
        written.append(path)
        logger.debug("Wrote %s", name)
    return written


# =============================================================================
# Main Generation Function
# =============================================================================

def scaffold_project(
    config: ScaffoldConfig,
    project_dir: Path,
    *,
    verbose: bool = True,
) -> ScaffoldResult:
    """
    Run the full scaffolding pipeline for a configuration.

    Parameters
    ----------
    config : ScaffoldConfig
        Resolved configuration.

    project_dir : Path
        Root of the Flutter project (holds pubspec.yaml).

    verbose : bool, default=True
        If True, display progress information on the console.

    Returns
    -------
    ScaffoldResult
        What was created and installed.

    Raises
    ------
    ManifestNotFoundError
        If pubspec.yaml is missing. Raised before anything is written.
    ToolchainNotFoundError
        If flutter or dart is missing and installation isn't skipped.
        Raised before anything is written.
    DependencyInstallError
        If ``dart pub add`` fails. Directories and files created up to that
        point stay in place.
    OSError
        If a directory or file can't be created.
    """
    check_environment(project_dir, require_toolchain=not config.skip_install)

    layout = plan(config)
    dependencies = resolve_dependencies(config)
    result = ScaffoldResult(project_path=project_dir, layout=layout)

    if verbose:
        console.print()
        console.print(Panel(
            f"[bold blue]Scaffolding:[/] [green]{config.app_name}[/]\n"
            f"[dim]State: {config.state_management.value} | "
            f"Router: {config.router.value} | "
            f"Profile: {config.profile.value}[/]",
            title="[bold]flutter-clean[/]",
            border_style="blue",
        ))
        console.print()

    # Step 1: Directories
    if verbose:
        console.print("[bold]📁 Creating directory structure...[/]")

    result.directories_created = create_directories(project_dir, layout.directories)

    if verbose:
        console.print(
            f"  [green]✓[/] {len(layout.directories)} directories "
            f"({len(result.directories_created)} new)"
        )

    # Step 2: Files
    if verbose:
        console.print()
        console.print("[bold]📝 Creating files...[/]")

    result.files_created = create_files(project_dir, layout.files)

    if verbose:
        for feature in config.features:
            console.print(f"  [green]✓[/] Feature '{feature}' files created")
        if result.files_skipped:
            console.print(
                f"  [yellow]⚠[/] {result.files_skipped} existing file(s) left untouched"
            )

    if result.files_skipped:
        result.warnings.append(
            f"{result.files_skipped} existing file(s) were left untouched"
        )

    # Step 3: Dependencies
    if verbose:
        console.print()
    if config.skip_install:
        result.warnings.append("Skipped dependency installation")
        if verbose:
            console.print("[yellow]⚠[/] Skipped dependency installation.")
    else:
        if verbose:
            console.print(f"[bold]📦 Installing {len(dependencies)} dependencies...[/]")
        install_dependencies(dependencies, project_dir)
        result.dependencies = dependencies
        if verbose:
            console.print("  [green]✓[/] Dependencies installed")

    # Step 4: Documentation
    result.documents = write_documents(project_dir, config, layout, dependencies)

    result.counts = count_files(project_dir)

    if verbose:
        console.print()
        console.print(Panel(
            f"[bold green]✨ Project structure generated successfully![/]\n\n"
            f"[dim]Features:[/]       {len(config.features)}\n"
            f"[dim]Core files:[/]     {result.counts.core}\n"
            f"[dim]Feature files:[/]  {result.counts.features}\n"
            f"[dim]Total files:[/]    {result.counts.total}\n\n"
            f"[dim]Documentation:[/] {ARCHITECTURE_DOC}\n\n"
            f"[bold]Next:[/] start implementing your features, then\n"
            f"  flutter run",
            title="[bold green]Success[/]",
            border_style="green",
        ))

    return result


# =============================================================================
# Add Feature to Existing Project
# =============================================================================

def add_feature_to_project(
    project_dir: Path,
    feature: str,
    state_management: StateManagement,
) -> ScaffoldResult:
    """
    Scaffold one more feature slice into an existing project.

    Core files, dependencies and documents are not touched.

    Raises
    ------
    ManifestNotFoundError
        If pubspec.yaml is missing.
    """
    check_environment(project_dir, require_toolchain=False)

    layout = plan_feature(feature, state_management)
    directories, files = apply_plan(project_dir, layout)
    result = ScaffoldResult(
        project_path=project_dir,
        layout=layout,
        directories_created=directories,
        files_created=files,
    )
    if result.files_skipped:
        result.warnings.append(
            f"{result.files_skipped} existing file(s) were left untouched"
        )
    result.counts = count_files(project_dir)
    return result
