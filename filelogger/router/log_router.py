"""Date-aware log router.

Routes each message to the file for today's date, archiving a stale weekend
file before the first write of a new weekend.

Not safe for concurrent callers sharing the same files: exists -> create and
the archive rename are check-then-act without locking.
"""

from datetime import date, datetime

from loguru import logger

from filelogger.config.settings import ArchiveDateSource
from filelogger.router.interfaces import Clock, FileStore
from filelogger.router.naming import DEFAULT_NAMING, FileNaming
from filelogger.utils.calendar import archive_threshold, is_weekend, prior_sunday, week_end


def is_stale(last_write: datetime, today: date) -> bool:
    """Return True if weekend content last written at last_write belongs to a closed weekend.

    Stale means on or before prior_sunday(today) at 23:59:59. Sub-second
    precision is ignored; an aware last_write is compared in its own timezone.
    """
    threshold = archive_threshold(today)
    if last_write.tzinfo is not None:
        threshold = threshold.replace(tzinfo=last_write.tzinfo)
    return last_write.replace(microsecond=0) <= threshold


class LogRouter:
    """Appends messages to the log file selected by today's date.

    Monday to Friday write to a per-day file, Saturday and Sunday share the
    weekend file. A weekend file older than the previous weekend is renamed
    to its archive name before the new weekend's first write.

    Errors from the clock or the store propagate unchanged.
    """

    def __init__(
        self,
        file_store: FileStore,
        clock: Clock,
        naming: FileNaming = DEFAULT_NAMING,
        archive_date_source: ArchiveDateSource = "boundary",
    ) -> None:
        self._store = file_store
        self._clock = clock
        self._naming = naming
        self._archive_date_source = archive_date_source

    def target_for(self, today: date) -> str:
        """Return the file a message logged on today goes to."""
        return self._naming.log_file_name(today)

    def archive_name_for(self, today: date, last_write: datetime) -> str:
        """Return the name a stale weekend file is archived under.

        Args:
            today: Date of the write triggering the archive
            last_write: Last write time of the weekend file

        Returns:
            Archive file name dated by the boundary Sunday, or by the Sunday of
            the file's own weekend when archive_date_source is "last_write"
        """
        if self._archive_date_source == "last_write":
            return self._naming.archive_file_name(week_end(last_write.date()))
        return self._naming.archive_file_name(prior_sunday(today))

    def log(self, message: str) -> None:
        """Append message to today's log file.

        Args:
            message: Text to append, written as-is
        """
        today = self._clock.today()
        target = self.target_for(today)
        logger.debug(f"Routing message for {today.isoformat()} to {target}")

        exists = self._store.exists(target)
        if exists and is_weekend(today) and self._archive_if_stale(target, today):
            exists = False

        if not exists:
            self._store.create(target)
            logger.info(f"Created log file {target}")

        self._store.append(target, message)

    def _archive_if_stale(self, weekend_file: str, today: date) -> bool:
        last_write = self._store.get_last_write_time(weekend_file)
        if not is_stale(last_write, today):
            return False

        archive_name = self.archive_name_for(today, last_write)
        self._store.rename(weekend_file, archive_name)
        logger.info(f"Archived {weekend_file} to {archive_name} (last write {last_write.isoformat()})")
        return True
