# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

from member_scout.logger import LOGGER_NAME, configure, init_logging


def test_console_handler_writes_to_stderr(capsys):
    lg = init_logging(level="INFO")
    lg.info("hola")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "hola" in captured.err
    assert lg.propagate is False


def test_optional_rotating_file(tmp_path):
    log_file = tmp_path / "scout.log"
    lg = configure(level="DEBUG", log_file=log_file, log_format="%(levelname)s %(message)s")
    lg.debug("detalle")
    for handler in lg.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)
    assert log_file.read_text(encoding="utf-8").strip() == "DEBUG detalle"


def test_reconfigure_replaces_handlers(tmp_path):
    configure(log_file=tmp_path / "a.log")
    lg = configure()
    assert lg is logging.getLogger(LOGGER_NAME)
    assert len(lg.handlers) == 1


def test_append_keeps_existing_handlers():
    init_logging()
    lg = configure(replace_handlers=False)
    assert len(lg.handlers) == 2
