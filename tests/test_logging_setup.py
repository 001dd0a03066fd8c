from __future__ import annotations

import logging
from typing import Iterator

import pytest

from sleep_chart.logging_setup import NOISY_LOGGERS, configure_logging


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    noisy = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, lvl in noisy.items():
        logging.getLogger(name).setLevel(lvl)


def test_level_name_is_case_insensitive(restore_logging) -> None:
    assert configure_logging(" debug ") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG


def test_plotting_loggers_stay_at_warning(restore_logging) -> None:
    configure_logging("DEBUG")
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_quieter_root_level_also_applies_to_plotting_loggers(restore_logging) -> None:
    configure_logging(logging.ERROR)
    assert logging.getLogger("matplotlib").level == logging.ERROR


def test_single_stderr_handler(restore_logging) -> None:
    configure_logging("INFO")
    configure_logging("INFO")
    assert len(logging.getLogger().handlers) == 1


def test_unknown_level_is_rejected(restore_logging) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        configure_logging("LOUD")
