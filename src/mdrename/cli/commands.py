"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mdrename.config import Settings, load_config
from mdrename.core.models import RenameEntry
from mdrename.core.pipeline import discover_names, run_rename
from mdrename.core.plan import plan_renames
from mdrename.log import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except (ValueError, ValidationError) as e:
        _fail("Invalid configuration", e)
    configure_logging(settings.log_level)
    return settings


def _directory(path: Optional[str], settings: Settings) -> Path:
    return Path(path if path is not None else settings.proposals_dir)


def _plan(directory: Path, keep_all_digits: bool) -> list[RenameEntry]:
    """Discover and plan without touching the filesystem."""
    try:
        return plan_renames(discover_names(directory), keep_all_digits=keep_all_digits)
    except OSError as e:
        _fail(f"Cannot read {directory}", e)


PathArg = Annotated[Optional[str], typer.Argument(help="Proposals directory (default: proposals_dir setting)")]
DigitsOpt = Annotated[
    Optional[bool],
    typer.Option("--keep-all-digits/--legacy-digits", help="Keep digits 2-9 in slugs, or hyphenate them (default: config)"),
]


def rename_cmd(
    path: PathArg = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Show renames without applying them")] = False,
    keep_all_digits: DigitsOpt = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ):
    """Rename markdown files to sequence-numbered 'NNNN-slug.md' names."""
    settings = _settings(overrides={
        "dry_run": True if dry_run else None,
        "keep_all_digits": keep_all_digits,
        "log_level": "DEBUG" if verbose else None,
    })
    directory = _directory(path, settings)

    try:
        plan = run_rename(directory, keep_all_digits=settings.keep_all_digits, dry_run=settings.dry_run)
    except OSError as e:
        _fail("Rename failed", e)

    changed = [e for e in plan if e.changed]
    for entry in changed:
        typer.echo(f"  {entry.source} -> {entry.target}")
    verb = "Would rename" if settings.dry_run else "Renamed"
    typer.echo(f"{verb} {len(changed)} of {len(plan)} document(s) in {directory}/")


def check_cmd(
    path: PathArg = None,
    keep_all_digits: DigitsOpt = None,
    ):
    """Exit 1 if any markdown file is not in canonical form."""
    settings = _settings(overrides={"keep_all_digits": keep_all_digits})
    directory = _directory(path, settings)
    changed = [e for e in _plan(directory, settings.keep_all_digits) if e.changed]
    if changed:
        for entry in changed:
            typer.echo(f"  {entry.source} -> {entry.target}")
        typer.echo(f"{len(changed)} document(s) need renaming in {directory}/")
        raise typer.Exit(1)
    typer.echo(f"All documents in {directory}/ are canonical.")


def plan_cmd(
    path: PathArg = None,
    keep_all_digits: DigitsOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the plan as JSON")] = False,
    ):
    """Print the full rename plan, including entries that are already canonical."""
    settings = _settings(overrides={"keep_all_digits": keep_all_digits})
    directory = _directory(path, settings)
    plan = _plan(directory, settings.keep_all_digits)

    if as_json:
        payload = [{**e.model_dump(), "changed": e.changed} for e in plan]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    if not plan:
        typer.echo(f"No markdown files found in {directory}/.")
        return
    for entry in plan:
        marker = "*" if entry.changed else " "
        typer.echo(f"{marker} {entry.position:4d}  {entry.source} -> {entry.target}")
