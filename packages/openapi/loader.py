"""Read an OpenAPI document from a file or stdin."""


from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import yaml  # requires pyyaml

from packages.core.errors import STDIN_SOURCE, FormatConversionError, InputReadError
from packages.core.types import ApiDocument
from packages.openapi.document import parse_document

logger = logging.getLogger(__name__)


def read_source(source: str, stdin: Optional[TextIO] = None) -> str:
    """
    Return the text of `source`; "-" reads stdin (or the given stream).
    """
    if source == "-":
        stream = stdin if stdin is not None else sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"error reading input: {e}", STDIN_SOURCE) from e

    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(f"error reading file: {e}", source) from e


def decode_text(text: str, source: str = STDIN_SOURCE) -> Any:
    # YAML is a superset of JSON, so one decoder covers both encodings.
    # Invalid timestamp scalars (e.g. 2020-13-45) raise a bare ValueError.
    try:
        return yaml.safe_load(text)
    except (yaml.YAMLError, ValueError) as e:
        raise FormatConversionError(f"error parsing yaml: {e}", source) from e


def load_document(source: str, stdin: Optional[TextIO] = None) -> ApiDocument:
    label = STDIN_SOURCE if source == "-" else source
    text = read_source(source, stdin)
    data = decode_text(text, label)
    doc = parse_document(data, label)
    logger.info("loaded %s: %d paths", label, len(doc.paths))
    return doc
