"""
Parse a decoded OpenAPI/Swagger mapping into an ApiDocument.

Only paths, methods and response status codes are read. Anything else in
the document (info, components, parameters, schemas...) is ignored, and no
semantic validation is attempted beyond the shape of those three levels.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Optional, Tuple

from packages.core.errors import STDIN_SOURCE, SchemaParseError
from packages.core.types import ApiDocument, HttpMethod, Operation, PathItem

logger = logging.getLogger(__name__)

# PathItem field names, which are also the OpenAPI method keys.
METHOD_KEYS = tuple(m.value.lower() for m in HttpMethod)

STATUS_KEY_RE = re.compile(r"[0-9]+")
STATUS_MAX = 2**32 - 1


def _is_extension(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("x-")


def check_path_template(template: str, source: str = STDIN_SOURCE) -> None:
    """
    Reject templates whose braces are unbalanced or nested. Such templates
    would otherwise be translated into a pattern that matches more (or
    other) paths than the author declared.
    """
    depth = 0
    for ch in template:
        if ch == "{":
            depth += 1
            if depth > 1:
                raise SchemaParseError(f"nested '{{' in path template {template!r}", source)
        elif ch == "}":
            depth -= 1
            if depth < 0:
                raise SchemaParseError(f"unbalanced '}}' in path template {template!r}", source)
    if depth != 0:
        raise SchemaParseError(f"unclosed '{{' in path template {template!r}", source)


def _parse_status(key: Any) -> Optional[int]:
    """ASCII decimal within uint32, as Go's strconv.Atoi + uint32 cast would accept."""
    if isinstance(key, bool):
        return None
    if isinstance(key, str):
        if not STATUS_KEY_RE.fullmatch(key):
            return None
        key = int(key)
    if isinstance(key, int) and 0 <= key <= STATUS_MAX:
        return key
    return None


def _parse_responses(raw: Any, where: str, source: str) -> Optional[Tuple[int, ...]]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise SchemaParseError(f"responses of {where} must be a mapping, got {type(raw).__name__}", source)

    codes = []
    for key in raw:
        status = _parse_status(key)
        if status is None:
            if key != "default" and not _is_extension(key):
                logger.debug("ignoring response key %r in %s: not a status code", key, where)
            continue
        codes.append(status)
    return tuple(codes)


def _parse_operation(raw: Any, where: str, source: str) -> Operation:
    if raw is None:
        return Operation()
    if not isinstance(raw, dict):
        raise SchemaParseError(f"operation {where} must be a mapping, got {type(raw).__name__}", source)
    return Operation(responses=_parse_responses(raw.get("responses"), where, source))


def _parse_path_item(template: str, raw: Any, source: str) -> PathItem:
    if raw is None:
        return PathItem()
    if not isinstance(raw, dict):
        raise SchemaParseError(f"path item {template!r} must be a mapping, got {type(raw).__name__}", source)

    ops: Dict[str, Operation] = {}
    for key in METHOD_KEYS:
        if key in raw:
            ops[key] = _parse_operation(raw[key], f"{key.upper()} {template}", source)
    return PathItem(**ops)


def parse_document(data: Any, source: str = STDIN_SOURCE) -> ApiDocument:
    if not isinstance(data, dict):
        raise SchemaParseError(f"document root must be a mapping, got {type(data).__name__}", source)

    raw_paths = data.get("paths")
    if raw_paths is None:
        return ApiDocument(paths={})
    if not isinstance(raw_paths, dict):
        raise SchemaParseError(f"'paths' must be a mapping, got {type(raw_paths).__name__}", source)

    paths: Dict[str, PathItem] = {}
    for template, item in raw_paths.items():
        if _is_extension(template):
            continue
        if not isinstance(template, str):
            raise SchemaParseError(f"path template must be a string, got {template!r}", source)
        check_path_template(template, source)
        paths[template] = _parse_path_item(template, item, source)
    return ApiDocument(paths=paths)
