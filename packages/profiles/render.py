"""Serialize a ServiceProfile as YAML or JSON."""


from __future__ import annotations

import json

import yaml  # requires pyyaml

from packages.core.codec import canonicalize
from packages.core.errors import OutputSerializationError
from packages.core.types import ServiceProfile

OUTPUT_FORMATS = ("yaml", "json")


def render_profile(profile: ServiceProfile, fmt: str = "yaml") -> str:
    """
    Keys are sorted at every level, so output is byte-stable across runs.
    Any failure here means the model itself is broken.
    """
    if fmt not in OUTPUT_FORMATS:
        raise OutputSerializationError(f"unsupported output format {fmt!r}", profile.name)

    data = canonicalize(profile)
    try:
        if fmt == "json":
            return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        return yaml.safe_dump(data, sort_keys=True, default_flow_style=False, allow_unicode=True)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        raise OutputSerializationError(f"error writing service profile: {e}", profile.name) from e
