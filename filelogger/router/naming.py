"""Log file naming rules.

Weekday files rotate daily (log20220314.txt), the weekend shares one file
(weekend.txt) and archived weekend files carry the Sunday that closed their
weekend (weekend-20220306.txt).
"""

from dataclasses import dataclass
from datetime import date

from filelogger.utils.calendar import is_weekend

DATE_STAMP_FORMAT = "%Y%m%d"


@dataclass(frozen=True)
class FileNaming:
    """File name parts.

    Attributes:
        weekday_prefix: Prefix before the date stamp of weekday files
        weekend_stem: Stem of the shared weekend file
        extension: Extension including the leading dot
    """

    weekday_prefix: str = "log"
    weekend_stem: str = "weekend"
    extension: str = ".txt"

    def weekday_file_name(self, d: date) -> str:
        return f"{self.weekday_prefix}{d.strftime(DATE_STAMP_FORMAT)}{self.extension}"

    def weekend_file_name(self) -> str:
        return f"{self.weekend_stem}{self.extension}"

    def archive_file_name(self, boundary: date) -> str:
        return f"{self.weekend_stem}-{boundary.strftime(DATE_STAMP_FORMAT)}{self.extension}"

    def log_file_name(self, d: date) -> str:
        """Return the active log file for d."""
        if is_weekend(d):
            return self.weekend_file_name()
        return self.weekday_file_name(d)


DEFAULT_NAMING = FileNaming()


def weekday_file_name(d: date) -> str:
    return DEFAULT_NAMING.weekday_file_name(d)


def weekend_file_name() -> str:
    return DEFAULT_NAMING.weekend_file_name()


def archive_file_name(boundary: date) -> str:
    return DEFAULT_NAMING.archive_file_name(boundary)


def log_file_name(d: date) -> str:
    return DEFAULT_NAMING.log_file_name(d)
