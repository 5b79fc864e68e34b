"""
Service profile synthesis: route regexes, route enumeration, response classes.
"""

from .paths import path_to_regex
from .responses import to_response_classes
from .routes import enumerate_routes, METHOD_ACCESSORS
from .builder import build_profile
from .render import render_profile, OUTPUT_FORMATS
from .template import render_profile_template

__all__ = [
    "path_to_regex",
    "to_response_classes",
    "enumerate_routes",
    "METHOD_ACCESSORS",
    "build_profile",
    "render_profile",
    "OUTPUT_FORMATS",
    "render_profile_template",
]
