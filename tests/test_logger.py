import logging

import pytest

from src.common.tensors.access_pattern import new_ap
from src.common.tensors.logger import get_access_logger


@pytest.fixture(autouse=True)
def restore_access_level():
    logger = logging.getLogger("tensors.access")
    saved = logger.level
    yield
    logger.setLevel(saved)


def test_level_from_environment(monkeypatch):
    monkeypatch.delenv("ACCESS_DEBUG", raising=False)
    monkeypatch.setenv("ACCESS_LOG_LEVEL", "info")
    assert get_access_logger().level == logging.INFO
    monkeypatch.setenv("ACCESS_LOG_LEVEL", "not-a-level")
    assert get_access_logger().level == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch):
    monkeypatch.setenv("ACCESS_DEBUG", "1")
    assert get_access_logger().level == logging.DEBUG


def test_frozen_set_shape_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="tensors.access")
    ap = new_ap((2, 3))
    ap.set_shape(6)
    assert "ignored on frozen" in caplog.text
    assert ap.shape == (2, 3)
