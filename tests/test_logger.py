import io
from datetime import datetime, timezone

import pytest

from chartcore.logger import (
    StdoutLogger,
    log_debug,
    log_debugf,
    log_info,
    log_infof,
)

MOMENT = datetime(2020, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc)
STAMP = "2020-01-02T03:04:05.123Z"


def _logger(**kwargs):
    return StdoutLogger(
        stdout=io.StringIO(), stderr=io.StringIO(), clock=lambda: MOMENT, **kwargs
    )


def test_default_timestamp_format():
    logger = _logger()
    logger.println("x")
    assert logger.stdout.getvalue() == STAMP + " x\n"


def test_info_line():
    logger = _logger()
    logger.info("hello", 42)
    assert logger.stdout.getvalue() == f"{STAMP} [INFO] hello 42\n"


def test_infof_formats_arguments():
    logger = _logger()
    logger.infof("%s=%d", "a", 1)
    assert logger.stdout.getvalue() == f"{STAMP} [INFO] a=1\n"


def test_value_verb_and_escaped_percent():
    logger = _logger()
    logger.debugf("%v at 100%%", "done")
    assert logger.stdout.getvalue() == f"{STAMP} [DEBUG] done at 100%\n"


def test_error_variants_go_to_stdout():
    logger = _logger()
    logger.error("bad")
    logger.errorf("code %d", 7)
    logger.err(RuntimeError("boom"))
    lines = logger.stdout.getvalue().splitlines()
    assert lines == [
        f"{STAMP} [ERROR] bad",
        f"{STAMP} [ERROR] code 7",
        f"{STAMP} [ERROR] boom",
    ]
    assert logger.stderr.getvalue() == ""


def test_err_none_writes_nothing():
    logger = _logger()
    logger.err(None)
    logger.fatal_err(None)
    assert logger.stdout.getvalue() == ""


def test_fatal_err_exits_with_status_one():
    logger = _logger()
    with pytest.raises(SystemExit) as info:
        logger.fatal_err(ValueError("broken"))
    assert info.value.code == 1
    assert logger.stdout.getvalue() == f"{STAMP} [FATAL] broken\n"


def test_errorln_writes_to_stderr():
    logger = _logger()
    logger.errorln("oops")
    assert logger.stderr.getvalue() == f"{STAMP} oops\n"
    assert logger.stdout.getvalue() == ""


def test_custom_time_format():
    logger = _logger(time_format="%Y")
    logger.info("x")
    assert logger.stdout.getvalue() == f"{MOMENT.year} [INFO] x\n"


def test_whole_seconds_have_no_fraction():
    moment = MOMENT.replace(microsecond=0)
    logger = StdoutLogger(stdout=io.StringIO(), clock=lambda: moment)
    logger.println("x")
    assert logger.stdout.getvalue() == moment.strftime("%Y-%m-%dT%H:%M:%S") + "Z x\n"


def test_module_helpers_skip_missing_logger():
    logger = _logger()
    for target in (None, logger):
        log_info(target, "i")
        log_infof(target, "%d", 1)
        log_debug(target, "d")
        log_debugf(target, "%s", "f")
    assert logger.stdout.getvalue().splitlines() == [
        f"{STAMP} [INFO] i",
        f"{STAMP} [INFO] 1",
        f"{STAMP} [DEBUG] d",
        f"{STAMP} [DEBUG] f",
    ]