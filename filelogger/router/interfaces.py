"""Capabilities consumed by LogRouter.

Structural protocols so production stores, in-memory fakes and mocks can be
swapped freely.
"""

from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current date."""

    def today(self) -> date: ...


class FileStore(Protocol):
    """Minimal file operations needed to route and archive log files.

    Failures are raised as OSError subclasses and are never translated by the
    router.
    """

    def exists(self, name: str) -> bool: ...

    def create(self, name: str) -> None: ...

    def append(self, name: str, content: str) -> None: ...

    def get_last_write_time(self, name: str) -> datetime: ...

    def rename(self, old_name: str, new_name: str) -> None: ...
