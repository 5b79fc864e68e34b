"""Tests for the profile app's logging setup."""


from __future__ import annotations

import io
import logging

import pytest

from apps.profile.logs import setup_logging


def test_level_applied_and_routed_to_stream():
    buf = io.StringIO()
    setup_logging("info", buf)
    assert logging.getLogger("packages").level == logging.INFO
    logging.getLogger("packages.profiles.builder").info("built x")
    assert "[INFO] packages.profiles.builder: built x" in buf.getvalue()


def test_non_level_attribute_rejected():
    with pytest.raises(ValueError):
        setup_logging("basic_format")
