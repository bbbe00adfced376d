"""
Errors raised while measuring a directory tree.
All of them are fatal: the walk stops and the CLI exits non-zero.
"""


class DirSizeError(Exception):
    """Base class for every fatal dirsize error."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class PathResolutionError(DirSizeError):
    """Root path does not exist, is not a directory or cannot be canonicalized."""


class DirectoryReadError(DirSizeError):
    """A directory could not be opened or its entries could not be listed."""


class MetadataReadError(DirSizeError):
    """Size or type of an entry could not be determined."""


class IgnoreFileError(DirSizeError):
    """.gitignore exists but could not be read or decoded."""
