"""
OpenAPI/Swagger input: loading and shape parsing.
"""

from .document import parse_document, check_path_template
from .loader import load_document

__all__ = ["parse_document", "check_path_template", "load_document"]
