import logging

import pytest

from render_engine.utils.logging import LogFormatter, PerformanceLogger, log_exception, setup_logging


def test_setup_logging_console_and_file(tmp_path):
    log_file = tmp_path / "logs" / "engine.log"
    logger = setup_logging(log_file=str(log_file), console_level="WARNING",
                           file_level="DEBUG", component="filetest", colored=False)
    
    assert logger.name == "render_engine.filetest"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    
    logger.debug("hello file")
    for handler in logger.handlers:
        handler.flush()
    assert "hello file" in log_file.read_text()
    
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_setup_logging_is_idempotent():
    logger = setup_logging(console_level="ERROR")
    assert setup_logging(console_level="DEBUG") is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR


def test_unknown_level_falls_back_to_info():
    logger = setup_logging(console_level="LOUD")
    assert logger.level == logging.INFO


def test_log_formatter_colors_level_name():
    record = logging.LogRecord("render_engine", logging.ERROR, __file__, 1, "boom", None, None)
    
    colored = LogFormatter(colored=True, fmt="[%(levelname)s] %(message)s").format(record)
    plain = LogFormatter(colored=False, fmt="[%(levelname)s] %(message)s").format(record)
    
    assert plain == "[ERROR] boom"
    assert "boom" in colored
    if LogFormatter(colored=True).colored:
        assert "\033[31mERROR\033[0m" in colored


def test_log_exception_includes_traceback(caplog):
    logger = logging.getLogger("render_engine.test")
    try:
        raise RuntimeError("broken")
    except RuntimeError as e:
        log_exception(logger, e, "Step failed")
    
    record, = caplog.records
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "Step failed: broken"
    assert record.exc_info[0] is RuntimeError


def test_performance_logger(caplog):
    logger = logging.getLogger("render_engine.perf")
    performance = PerformanceLogger(logger, "Engine")
    
    with caplog.at_level(logging.DEBUG, logger="render_engine.perf"):
        performance.start("layout")
        duration = performance.end("layout")
    
    assert duration >= 0.0
    assert "Engine layout took" in caplog.text
    assert "layout" not in performance.start_times


def test_performance_logger_end_without_start(caplog):
    performance = PerformanceLogger(logging.getLogger("render_engine.perf"), "Engine")
    assert performance.end("never") == 0.0
    assert "No start time found for never" in caplog.text


def test_performance_logger_clear():
    performance = PerformanceLogger(logging.getLogger("render_engine.perf"), "Engine")
    performance.start("a")
    performance.clear()
    assert performance.start_times == {}


def test_performance_stage_records_timing(caplog):
    performance = PerformanceLogger(logging.getLogger("render_engine.perf"), "Engine")
    
    with caplog.at_level(logging.DEBUG, logger="render_engine.perf"):
        with performance.stage("paint"):
            pass
    
    assert performance.timings["paint"] >= 0.0
    assert "Engine paint took" in caplog.text


def test_performance_stage_discards_failed_stage():
    performance = PerformanceLogger(logging.getLogger("render_engine.perf"), "Engine")
    
    with pytest.raises(ValueError):
        with performance.stage("layout"):
            raise ValueError("bad")
    
    assert "layout" not in performance.timings
    assert performance.start_times == {}
