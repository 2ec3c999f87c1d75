"""In-memory router capabilities for tests and dry runs."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, datetime

from filelogger.router.errors import ArchiveCollisionError


@dataclass
class FixedClock:
    """Clock returning a settable date and counting reads.

    Attributes:
        current: Date returned by today()
        calls: Number of today() reads so far
    """

    current: date
    calls: int = 0

    def today(self) -> date:
        self.calls += 1
        return self.current


@dataclass
class _MemoryFile:
    content: str
    last_write: datetime


@dataclass
class InMemoryFileStore:
    """FileStore keeping file contents in a dict.

    Every create and append stamps the file with now(). Failure modes match
    LocalFileStore.
    """

    now: Callable[[], datetime] = datetime.now
    _files: dict[str, _MemoryFile] = field(default_factory=dict)

    def exists(self, name: str) -> bool:
        return name in self._files

    def create(self, name: str) -> None:
        if name in self._files:
            raise FileExistsError(f"File already exists: {name}")
        self._files[name] = _MemoryFile(content="", last_write=self.now())

    def append(self, name: str, content: str) -> None:
        file = self._require(name)
        file.content += content
        file.last_write = self.now()

    def get_last_write_time(self, name: str) -> datetime:
        return self._require(name).last_write

    def rename(self, old_name: str, new_name: str) -> None:
        file = self._require(old_name)
        if new_name in self._files:
            raise ArchiveCollisionError(old_name, new_name)
        del self._files[old_name]
        self._files[new_name] = file

    def read(self, name: str) -> str:
        return self._require(name).content

    def names(self) -> list[str]:
        return sorted(self._files)

    def seed(self, name: str, content: str, last_write: datetime) -> None:
        """Place a file with a given last write time, bypassing now()."""
        self._files[name] = _MemoryFile(content=content, last_write=last_write)

    def _require(self, name: str) -> _MemoryFile:
        try:
            return self._files[name]
        except KeyError:
            raise FileNotFoundError(f"No such file: {name}") from None
