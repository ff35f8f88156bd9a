"""Tests for logging setup."""

import logging

from cuda_setup.utils.logger import setup_logging


def test_setup_logging_installs_handlers_once(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        setup_logging("WARNING", log_dir=tmp_path)
        setup_logging("DEBUG", log_dir=tmp_path)
        installed = root.handlers[:]
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)

    assert len(installed) == 2
    assert (tmp_path / "setup_cuda.log").exists()
    console = [h for h in installed if not isinstance(h, logging.FileHandler)]
    assert console[0].level == logging.WARNING
