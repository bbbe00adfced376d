"""
Directory size walker.
Sums file sizes below a root using os.scandir, skipping ignored paths.
"""
import logging
import os
from dataclasses import dataclass, field

from errors import DirectoryReadError, MetadataReadError, PathResolutionError
from ignore import IgnoreList, build_ignore_list

logger = logging.getLogger(__name__)


@dataclass
class SizeReport:
    """Outcome of one walk."""
    root: str
    total: int
    warnings: list = field(default_factory=list)


def resolve_root(path):
    """Canonicalize the root path, which must be an existing directory."""
    try:
        root = os.path.realpath(path, strict=True)
    except (OSError, ValueError) as e:
        raise PathResolutionError(path, e) from e
    if not os.path.isdir(root):
        raise PathResolutionError(path, "not a directory")
    return root


def walk_size(root, ignored=frozenset()):
    """
    Return the total size in bytes of all files below root.

    Directories are kept on an explicit stack instead of recursing, so the
    depth of the tree is bounded by memory rather than the call stack.

    Args:
        root: Canonical directory to walk
        ignored: Container of canonical paths to prune, subtree included

    Raises:
        DirectoryReadError: a directory cannot be opened or listed
        MetadataReadError: an entry's type or size cannot be read
    """
    total = 0
    pending = [root]

    while pending:
        path = pending.pop()
        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    if entry.path in ignored:
                        continue
                    try:
                        # Symlinks are followed, cycles are not detected
                        if entry.is_dir():
                            pending.append(entry.path)
                        else:
                            total += entry.stat().st_size
                    except OSError as e:
                        raise MetadataReadError(entry.path, e) from e
        except OSError as e:
            raise DirectoryReadError(path, e) from e

    return total


def measure(path, use_gitignore=False):
    """
    Measure the directory at path.

    The ignore list is built once from root/.gitignore when use_gitignore
    is set, then the whole tree is walked against it.
    """
    root = resolve_root(path)
    ignored = build_ignore_list(root) if use_gitignore else IgnoreList()
    logger.debug("walking %s (%d ignored paths)", root, len(ignored))
    total = walk_size(root, ignored)
    return SizeReport(root, total, list(ignored.warnings))
