"""Tests for the entry point and logging setup."""
import io
import logging

import pytest

from mandelascii.logging_config import setup_logging
from mandelascii.main import main
from mandelascii.renderer import render, render_grid


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("mandelascii")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_main_prints_only_the_picture(capsys):
    main()
    captured = capsys.readouterr()
    assert captured.out == render()
    assert captured.err == ""


def test_setup_logging_writes_to_given_stream():
    stream = io.StringIO()
    setup_logging(level=logging.DEBUG, stream=stream)
    render_grid()
    output = stream.getvalue()
    assert "Logging initialized." in output
    assert "render_grid took" in output


def test_setup_logging_does_not_duplicate_handlers():
    setup_logging(stream=io.StringIO())
    setup_logging(stream=io.StringIO())
    assert len(logging.getLogger("mandelascii").handlers) == 1


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "render.log"
    setup_logging(level=logging.INFO, log_file=str(log_file), stream=io.StringIO())
    for handler in logging.getLogger("mandelascii").handlers:
        handler.flush()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")
