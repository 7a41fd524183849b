import logging
from logging.handlers import RotatingFileHandler

from design_patterns.config.schemas import LoggingConfig
from design_patterns.infrastructure.logging.logger import get_logger, setup_logging


def test_stdout_destination_logs_to_stderr_only(capsys):
    setup_logging(LoggingConfig(level="INFO", destination="stdout"))

    get_logger("design_patterns.test").info("hello from test", answer=42)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hello from test" in captured.err
    assert "answer=42" in captured.err


def test_level_filters_records(capsys):
    setup_logging(LoggingConfig(level="ERROR"))

    get_logger("design_patterns.test").warning("should not appear")

    assert "should not appear" not in capsys.readouterr().err


def test_file_destination_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "catalog.log"
    setup_logging(LoggingConfig(level="DEBUG", destination="file", file_path=str(log_file)))

    get_logger("design_patterns.test").debug("written to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RotatingFileHandler)
    assert "written to file" in log_file.read_text()


def test_both_destinations_install_two_handlers(tmp_path):
    setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "dp.log")))

    assert len(logging.getLogger().handlers) == 2


def test_stdlib_records_use_same_handlers(capsys):
    setup_logging(LoggingConfig(level="DEBUG"))

    logging.getLogger("design_patterns.domain.test").debug("plain stdlib record")

    assert "plain stdlib record" in capsys.readouterr().err
