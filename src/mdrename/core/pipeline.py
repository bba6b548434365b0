"""Pipeline step functions: discover, apply, and rename orchestration"""

import errno
import logging
import os
from pathlib import Path

from mdrename.core.models import RenameEntry, RenameError
from mdrename.core.plan import MD_EXTENSION, plan_renames


logger = logging.getLogger(__name__)


def discover_names(directory: Path) -> list[str]:
    """Return names of regular files directly under directory ending in '.md'.

    Raises FileNotFoundError / NotADirectoryError / PermissionError from the
    directory listing unchanged.
    """
    names = [p.name for p in directory.iterdir() if p.name.endswith(MD_EXTENSION) and p.is_file()]
    logger.debug("Found %d markdown file(s) in %s", len(names), directory)
    return names


def _check_destination(source: Path, destination: Path) -> None:
    """Refuse to overwrite an existing entry unless it is the source itself (case-only rename)."""
    if destination.exists() and not os.path.samefile(source, destination):
        raise FileExistsError(errno.EEXIST, "Rename destination already exists", str(destination))


def apply_renames(directory: Path, plan: list[RenameEntry]) -> list[RenameEntry]:
    """Rename changed entries one at a time in plan order. Returns the applied entries.

    Stops at the first failure; renames already applied are left in place.
    """
    applied = []
    for entry in plan:
        if not entry.changed:
            continue
        source = directory / entry.source
        destination = directory / entry.target
        _check_destination(source, destination)
        try:
            source.rename(destination)
        except OSError as e:
            raise RenameError(entry.source, entry.target, e) from e
        logger.info("Renamed %s -> %s", entry.source, entry.target)
        applied.append(entry)
    return applied


def run_rename(directory: Path, keep_all_digits: bool = False, dry_run: bool = False) -> list[RenameEntry]:
    """Discover, plan, and (unless dry_run) apply renames for directory. Returns the full plan."""
    plan = plan_renames(discover_names(directory), keep_all_digits=keep_all_digits)
    pending = sum(1 for e in plan if e.changed)
    logger.debug("Planned %d rename(s) for %d document(s)", pending, len(plan))
    if dry_run:
        logger.info("Dry run: no files renamed in %s", directory)
        return plan
    apply_renames(directory, plan)
    return plan
