"""Tests for response status classification."""


from __future__ import annotations

from packages.core.types import ResponseClass, StatusRange
from packages.profiles.responses import is_failure_status, to_response_classes


def test_failure_threshold():
    assert is_failure_status(200) is False
    assert is_failure_status(404) is False
    assert is_failure_status(499) is False
    assert is_failure_status(500) is True
    assert is_failure_status(503) is True


def test_one_class_per_code_sorted():
    classes = to_response_classes([503, 200, 404, 500])
    assert [c.status.min for c in classes] == [200, 404, 500, 503]
    assert all(c.status.min == c.status.max for c in classes)
    assert [c.is_failure for c in classes] == [False, False, True, True]


def test_contiguous_codes_not_merged():
    classes = to_response_classes([500, 501, 502])
    assert len(classes) == 3
    assert classes[1] == ResponseClass(status=StatusRange(min=501, max=501), is_failure=True)


def test_duplicate_codes_collapse_to_one_class():
    assert len(to_response_classes([200, 200])) == 1


def test_no_responses_is_empty():
    assert to_response_classes(None) == []
    assert to_response_classes(()) == []
