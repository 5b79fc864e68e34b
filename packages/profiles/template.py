"""
Template mode: a commented ServiceProfile scaffold to be edited by hand and
applied with kubectl.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from packages.core.config import DEFAULT_CLUSTER_DOMAIN, DEFAULT_CONTROL_PLANE_NAMESPACE
from packages.core.types import API_VERSION, KIND
from packages.profiles.naming import profile_name

TEMPLATES_DIR = Path(__file__).parent / "templates"
PROFILE_TEMPLATE = "service_profile.yaml.j2"


def _environment() -> Environment:
    # YAML output: no HTML autoescaping; keep the template's trailing newline.
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_profile_template(
    service: str,
    namespace: str,
    *,
    control_plane_namespace: str = DEFAULT_CONTROL_PLANE_NAMESPACE,
    cluster_domain: str = DEFAULT_CLUSTER_DOMAIN,
) -> str:
    template = _environment().get_template(PROFILE_TEMPLATE)
    return template.render(
        api_version=API_VERSION,
        kind=KIND,
        service_name=service,
        service_namespace=namespace,
        profile_name=profile_name(service, namespace, cluster_domain),
        control_plane_namespace=control_plane_namespace,
    )
