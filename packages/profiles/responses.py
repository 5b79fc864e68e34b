"""Classify declared response status codes."""


from __future__ import annotations

from typing import Iterable, List, Optional

from packages.core.types import ResponseClass, StatusRange

FAILURE_STATUS_MIN = 500


def is_failure_status(status: int) -> bool:
    return status >= FAILURE_STATUS_MIN


def to_response_classes(statuses: Optional[Iterable[int]]) -> List[ResponseClass]:
    """
    One class per distinct status code, ascending. Each class covers exactly
    its own code; neighbouring codes are never merged into a band.
    """
    if statuses is None:
        return []
    return [
        ResponseClass(status=StatusRange(min=s, max=s), is_failure=is_failure_status(s))
        for s in sorted(set(statuses))
    ]
