from loguru import logger

from filelogger.config.settings import Settings
from filelogger.core.logger import setup_logger
from filelogger.router.log_router import LogRouter
from filelogger.router.naming import FileNaming
from filelogger.stores.local import LocalFileStore, SystemClock


def create_log_router(settings: Settings | None = None, configure_logging: bool = False) -> LogRouter:
    """Build a LogRouter writing under settings.log_dir with the system clock.

    Args:
        settings: Settings to use; read from the environment when None
        configure_logging: Also install filelogger's own loguru sinks at settings.log_level,
            plus settings.diagnostics_file when set. Host sinks are left alone.

    Returns:
        Ready-to-use LogRouter
    """
    settings = settings or Settings()
    if configure_logging:
        setup_logger(level=settings.log_level, log_file=settings.diagnostics_file)

    tz = settings.tzinfo
    router = LogRouter(
        file_store=LocalFileStore(settings.log_dir, encoding=settings.encoding, tz=tz),
        clock=SystemClock(tz),
        naming=FileNaming(
            weekday_prefix=settings.weekday_prefix,
            weekend_stem=settings.weekend_stem,
            extension=settings.extension,
        ),
        archive_date_source=settings.archive_date_source,
    )
    logger.debug(f"Log router writing to {settings.log_dir} (archive dates from {settings.archive_date_source})")
    return router
