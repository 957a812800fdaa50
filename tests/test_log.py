import io
import re

import pytest

from archecs import log
from archecs.log import LogLevel, LogLine, Logger

HEADER = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z"


@pytest.fixture
def singleton():
    logger = Logger.get_instance()
    saved = logger.log_level
    yield logger
    logger.set_log_level(saved)


def _split_header(text):
    header, rest = text.split(" ", 1)
    return header, rest


def test_level_names():
    stream = io.StringIO()
    logger = Logger(stream, LogLevel.TRACE)
    for level in LogLevel:
        logger.log(level, "m")
    names = [line.split(" ")[1] for line in stream.getvalue().splitlines()]
    assert names == ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "FATAL"]


def test_levels_are_ordered():
    stream = io.StringIO()
    logger = Logger(stream, LogLevel.WARNING)
    for level in LogLevel:
        logger.log(level, "m")
    names = [line.split(" ")[1] for line in stream.getvalue().splitlines()]
    assert names == ["WARNING", "ERROR", "FATAL"]


def test_default_level_is_info():
    assert Logger().log_level == LogLevel.INFO


def test_log_writes_header_values_and_newline():
    stream = io.StringIO()
    Logger(stream).log(LogLevel.INFO, "hello ", 42)
    header, rest = _split_header(stream.getvalue())
    assert rest == "INFO hello 42\n"
    assert re.fullmatch(HEADER, header)


def test_below_level_writes_nothing():
    stream = io.StringIO()
    logger = Logger(stream, LogLevel.WARNING)
    logger.log(LogLevel.INFO, "hidden")
    assert stream.getvalue() == ""
    logger.log(LogLevel.ERROR, "shown")
    assert stream.getvalue().endswith(" ERROR shown\n")


def test_set_log_level_enables_lower_levels():
    stream = io.StringIO()
    logger = Logger(stream)
    logger.log(LogLevel.DEBUG, "a")
    assert stream.getvalue() == ""
    logger.set_log_level(LogLevel.DEBUG)
    logger.log(LogLevel.DEBUG, "a")
    assert stream.getvalue().endswith(" DEBUG a\n")


def test_log_line_context_manager():
    stream = io.StringIO()
    logger = Logger(stream, LogLevel.TRACE)
    with logger.line(LogLevel.TRACE) as line:
        line.write("x").write("y")
        assert not stream.getvalue().endswith("\n")
    assert stream.getvalue().endswith(" TRACE xy\n")


def test_log_line_close_is_idempotent():
    stream = io.StringIO()
    line = LogLine(LogLevel.ERROR, Logger(stream))
    line.write("v")
    line.close()
    line.close()
    assert stream.getvalue().count("\n") == 1


def test_write_and_header_respect_level():
    stream = io.StringIO()
    logger = Logger(stream, LogLevel.FATAL)
    logger.write_header(LogLevel.ERROR)
    logger.write(LogLevel.ERROR, "v")
    logger.end_line(LogLevel.ERROR)
    assert stream.getvalue() == ""


def test_get_instance_is_shared(singleton):
    Logger.get_instance().set_log_level(LogLevel.ERROR)
    assert Logger.get_instance().log_level == LogLevel.ERROR
    Logger.get_instance().set_log_level(LogLevel.TRACE)
    assert Logger.get_instance().log_level == LogLevel.TRACE


def test_module_functions_use_caller_name(singleton, capsys):
    singleton.set_log_level(LogLevel.DEBUG)
    log.debug("value ", 7)
    header, rest = _split_header(capsys.readouterr().out)
    assert rest == "DEBUG test_module_functions_use_caller_name value 7\n"
    assert re.fullmatch(HEADER, header)


def test_module_functions_filter(singleton, capsys):
    singleton.set_log_level(LogLevel.ERROR)
    log.debug("d")
    log.info("i")
    log.warning("w")
    assert capsys.readouterr().out == ""
    log.error("e")
    assert " ERROR " in capsys.readouterr().out