"""Tests for wiring a LogRouter from settings."""

from datetime import date, datetime

import pytest
from loguru import logger

from filelogger.config.settings import Settings
from filelogger.core.logger import teardown_logger
from filelogger.router.factory import create_log_router


@pytest.fixture(autouse=True)
def restore_library_sinks():
    yield
    teardown_logger()


def test_create_log_router_writes_under_log_dir(tmp_path):
    router = create_log_router(Settings(_env_file=None, log_dir=tmp_path / "logs"))

    before = date.today()
    router.log("hello\n")
    after = date.today()

    # The system clock may cross midnight between the two reads
    candidates = {router.target_for(before), router.target_for(after)}
    written = {p.name for p in (tmp_path / "logs").iterdir()}
    assert len(written) == 1
    assert written <= candidates
    assert (tmp_path / "logs" / written.pop()).read_text(encoding="utf-8") == "hello\n"


def test_create_log_router_applies_naming_and_archive_source(tmp_path):
    settings = Settings(
        _env_file=None,
        log_dir=tmp_path,
        weekday_prefix="app",
        weekend_stem="sat-sun",
        extension=".log",
        archive_date_source="last_write",
    )

    router = create_log_router(settings)

    assert router.target_for(date(2022, 3, 14)) == "app20220314.log"
    assert router.target_for(date(2022, 3, 12)) == "sat-sun.log"
    assert router.archive_name_for(date(2022, 3, 12), datetime(2022, 1, 23, 12, 0)) == "sat-sun-20220123.log"


def test_create_log_router_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("FILELOGGER_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("FILELOGGER_TIMEZONE", "UTC")
    monkeypatch.setenv("FILELOGGER_WEEKEND_STEM", "sat-sun")

    router = create_log_router()

    assert router.target_for(date(2022, 3, 13)) == "sat-sun.txt"
    router.log("x")
    assert len(list(tmp_path.iterdir())) == 1


def test_configure_logging_keeps_host_sinks(tmp_path):
    seen: list[str] = []
    handler_id = logger.add(lambda m: seen.append(m.record["message"]), level="INFO")
    try:
        create_log_router(Settings(_env_file=None, log_dir=tmp_path), configure_logging=True)
        logger.info("host message after router setup")
    finally:
        logger.remove(handler_id)

    assert "host message after router setup" in seen


def test_configure_logging_writes_diagnostics_file(tmp_path):
    diagnostics = tmp_path / "diag" / "filelogger.log"
    settings = Settings(_env_file=None, log_dir=tmp_path / "logs", diagnostics_file=diagnostics, log_level="DEBUG")

    router = create_log_router(settings, configure_logging=True)
    router.log("hello\n")
    teardown_logger()

    content = diagnostics.read_text(encoding="utf-8")
    assert "Created log file" in content
    assert "Log router writing to" in content
