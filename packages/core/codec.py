"""
Canonical encoding of generated artifacts.

Keys are sorted at every level so two runs over the same input produce
byte-identical output, and the digest can be compared across runs.
"""

from __future__ import annotations

import json
import hashlib
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

def canonicalize(obj: Any) -> Any:
    if hasattr(obj, "to_dict"):
        return canonicalize(obj.to_dict())
    if is_dataclass(obj):
        return canonicalize(asdict(obj))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj

def canonical_json_bytes(obj: Any) -> bytes:
    canon = canonicalize(obj)
    s = json.dumps(canon, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")

def stable_sha256(obj: Any) -> str:
    return hashlib.sha256(canonical_json_bytes(obj)).hexdigest()
