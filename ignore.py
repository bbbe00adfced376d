"""
Builds the set of paths excluded by the root .gitignore.

Only plain glob patterns are understood. Comment lines (#...), negations
(!...) and blank lines are dropped, and a leading slash is removed since
every pattern is anchored at the root anyway.
"""
import glob
import logging
import os
from dataclasses import dataclass, field

from errors import IgnoreFileError

logger = logging.getLogger(__name__)

GITIGNORE = ".gitignore"


@dataclass(frozen=True)
class IgnoreList:
    """Canonical paths to skip during a walk, plus non-fatal warnings."""
    paths: frozenset = frozenset()
    warnings: list = field(default_factory=list)

    def __contains__(self, path):
        return path in self.paths

    def __len__(self):
        return len(self.paths)


def parse_patterns(text):
    """Return the usable patterns of a .gitignore text, in file order."""
    patterns = []
    for line in text.splitlines():
        line = line.rstrip()
        if not line or line.startswith(("#", "!")):
            continue
        if line.startswith("/"):
            line = line[1:]
        patterns.append(line)
    return patterns


def read_gitignore(root):
    """Return the text of root/.gitignore, or None if there is none."""
    path = os.path.join(root, GITIGNORE)
    # A dangling link counts as no .gitignore
    if not os.path.exists(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise IgnoreFileError(path, e) from e


def expand_pattern(root, pattern):
    """Expand one pattern below root into the raw glob matches, dot-files included."""
    full = os.path.join(glob.escape(root), pattern)
    return sorted(glob.iglob(full, recursive=True, include_hidden=True))


def build_ignore_list(root):
    """
    Compute the ignore set for a canonical root directory.

    A missing .gitignore yields an empty list. A pattern that fails to
    expand, or a single match that cannot be canonicalized, is recorded as
    a warning and contributes nothing; the other matches are kept.
    """
    text = read_gitignore(root)
    if text is None:
        logger.debug("no %s in %s", GITIGNORE, root)
        return IgnoreList()

    paths = set()
    warnings = []

    def warn(message):
        logger.warning(message)
        warnings.append(message)

    for pattern in parse_patterns(text):
        try:
            matches = expand_pattern(root, pattern)
        except (OSError, ValueError) as e:
            warn(f"cannot expand pattern {pattern!r}: {e}")
            continue
        for match in matches:
            try:
                paths.add(os.path.realpath(match, strict=True))
            except OSError as e:
                warn(f"cannot resolve {match} for pattern {pattern!r}: {e}")

    logger.debug("%d ignored paths under %s", len(paths), root)
    return IgnoreList(frozenset(paths), warnings)
