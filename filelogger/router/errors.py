"""Error types for the log router and its file stores.

Only conditions the file system itself cannot name get a type here; a missing
file is still the builtin FileNotFoundError.
"""


class FileLoggerError(Exception):
    """Base exception for filelogger errors."""

    pass


class ArchiveCollisionError(FileLoggerError, FileExistsError):
    """Raised when a rename would overwrite an existing file.

    Attributes:
        source: Name being renamed
        target: Name that already exists
    """

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot rename '{source}' to '{target}': target already exists")
