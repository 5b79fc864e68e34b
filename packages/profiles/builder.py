"""Wrap enumerated routes into a ServiceProfile resource."""


from __future__ import annotations

import logging

from packages.core.codec import stable_sha256
from packages.core.config import DEFAULT_CLUSTER_DOMAIN, DEFAULT_CONTROL_PLANE_NAMESPACE
from packages.core.types import ApiDocument, ServiceProfile
from packages.profiles.naming import profile_name
from packages.profiles.routes import enumerate_routes

logger = logging.getLogger(__name__)


def build_profile(
    doc: ApiDocument,
    service: str,
    namespace: str,
    *,
    control_plane_namespace: str = DEFAULT_CONTROL_PLANE_NAMESPACE,
    cluster_domain: str = DEFAULT_CLUSTER_DOMAIN,
) -> ServiceProfile:
    """
    The profile is named after the service's in-cluster DNS name but lives
    in the control plane's namespace.
    """
    profile = ServiceProfile(
        name=profile_name(service, namespace, cluster_domain),
        namespace=control_plane_namespace,
        routes=enumerate_routes(doc),
    )
    if logger.isEnabledFor(logging.INFO):
        logger.info("built %s: %d routes, digest=%s", profile.name, len(profile.routes), stable_sha256(profile))
    return profile
