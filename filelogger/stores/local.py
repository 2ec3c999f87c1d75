"""File system and wall-clock implementations of the router capabilities."""

from datetime import date, datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from loguru import logger

from filelogger.router.errors import ArchiveCollisionError


class SystemClock:
    """Clock reading the current date from the system, optionally in a fixed timezone."""

    def __init__(self, tz: ZoneInfo | None = None) -> None:
        self._tz = tz

    def today(self) -> date:
        return datetime.now(self._tz).date()


class LocalFileStore:
    """FileStore over a base directory.

    Names are resolved relative to base_dir, which is created on the first
    create(). Timestamps are returned in tz, or as naive local time when tz is
    None.
    """

    def __init__(self, base_dir: str | Path, encoding: str = "utf-8", tz: ZoneInfo | None = None) -> None:
        self.base_dir = Path(base_dir)
        self._encoding = encoding
        self._tz = tz

    def _path(self, name: str) -> Path:
        return self.base_dir / name

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()

    def create(self, name: str) -> None:
        """Create an empty file.

        Raises:
            FileExistsError: If the file already exists
            OSError: If the file cannot be created
        """
        path = self._path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Exclusive mode so a racing writer's content is never truncated
        with path.open("x", encoding=self._encoding):
            pass
        logger.debug(f"Created {path}")

    def append(self, name: str, content: str) -> None:
        """Append content to an existing file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        path = self._path(name)
        if not path.is_file():
            raise FileNotFoundError(f"Cannot append to missing log file: {path}")
        with path.open("a", encoding=self._encoding) as f:
            f.write(content)
        logger.debug(f"Appended {len(content)} chars to {path}")

    def get_last_write_time(self, name: str) -> datetime:
        """Return the modification time of a file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        mtime = self._path(name).stat().st_mtime
        return datetime.fromtimestamp(mtime, self._tz)

    def rename(self, old_name: str, new_name: str) -> None:
        """Rename a file without ever overwriting.

        Raises:
            FileNotFoundError: If old_name does not exist
            ArchiveCollisionError: If new_name already exists
        """
        source = self._path(old_name)
        target = self._path(new_name)
        if not source.exists():
            raise FileNotFoundError(f"Cannot rename missing file: {source}")
        if target.exists():
            raise ArchiveCollisionError(old_name, new_name)
        source.rename(target)
        logger.debug(f"Renamed {source} to {target}")
