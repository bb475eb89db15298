import logging
import pathlib
from collections.abc import Iterable

from l10nstatus.classes import DEFAULT_INCLUDES, Project, ResourceEntry

logger = logging.getLogger(__name__)

# Version control and editor leftovers are never scanned
DEFAULT_EXCLUDED_DIRS = {"CVS", ".svn", ".git", ".hg", ".bzr", "_darcs", "SCCS"}
DEFAULT_EXCLUDED_NAMES = ["*~", "#*#", ".#*", "%*%", "._*", ".DS_Store"]


def _is_default_excluded(relative: pathlib.PurePath) -> bool:
    if any(part in DEFAULT_EXCLUDED_DIRS for part in relative.parts[:-1]):
        return True
    return any(relative.match(pattern) for pattern in DEFAULT_EXCLUDED_NAMES)


def _excluded_paths(
    directory: pathlib.Path, excludes: Iterable[str]
) -> tuple[set[pathlib.Path], set[pathlib.Path]]:
    """Resolve exclude globs into matched files and excluded directory trees.

    A pattern ending in ``/**`` excludes everything below the directories its
    prefix matches, whatever glob returns for the trailing ``**``.
    """
    files: set[pathlib.Path] = set()
    trees: set[pathlib.Path] = set()
    for pattern in excludes:
        if pattern == "**":
            trees.add(directory)
            continue
        if pattern.endswith("/**"):
            trees.update(p for p in directory.glob(pattern[:-3]) if p.is_dir())
            continue
        files.update(directory.glob(pattern))
    return files, trees


def scan_directory(
    directory: pathlib.Path,
    includes: Iterable[str] | None = None,
    excludes: Iterable[str] | None = None,
) -> list[str]:
    """Return the sorted relative paths (posix style) of files under directory
    matching any include pattern and no exclude pattern."""
    includes = list(includes or []) or DEFAULT_INCLUDES
    excluded, excluded_trees = _excluded_paths(directory, excludes or [])

    found: set[str] = set()
    for pattern in includes:
        for file in directory.glob(pattern):
            if not file.is_file() or file in excluded:
                continue
            if any(parent in excluded_trees for parent in file.parents):
                continue
            relative = file.relative_to(directory)
            if _is_default_excluded(relative):
                continue
            found.add(relative.as_posix())
    logger.debug(f"Scanned {directory}: {len(found)} files")
    return sorted(found)


def discover(projects: Iterable[Project]) -> list[ResourceEntry]:
    """Collect the resource entries of all projects in canonical order."""
    entries: set[ResourceEntry] = set()
    for project in projects:
        for resource in project.resources:
            resource_directory = pathlib.Path(resource.directory).absolute()
            if not resource_directory.is_dir():
                logger.info(f"Resource directory does not exist: {resource_directory}")
                continue

            for name in scan_directory(
                resource_directory, resource.includes, resource.excludes
            ):
                entries.add(
                    ResourceEntry(name, resource_directory / name, project.name)
                )
    return sorted(entries, key=lambda entry: entry.sort_key)


def can_generate_report(
    projects: Iterable[Project], entries: list[ResourceEntry]
) -> bool:
    if not any(project.resources for project in projects):
        return False
    return bool(entries)
