"""
Environment-driven defaults. Command-line flags override these.

  - PROFILEGEN_CONTROL_PLANE_NAMESPACE: namespace the profile is created in
  - PROFILEGEN_CLUSTER_DOMAIN: suffix of the fully qualified service name
  - PROFILEGEN_LOG_LEVEL: logging level name
"""

from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_CONTROL_PLANE_NAMESPACE = "linkerd"
DEFAULT_CLUSTER_DOMAIN = "cluster.local"
DEFAULT_LOG_LEVEL = "WARNING"


def env_str(name: str, default: str) -> str:
    v = os.environ.get(name, "").strip()
    return v or default


@dataclass(frozen=True)
class ProfileConfig:
    control_plane_namespace: str = DEFAULT_CONTROL_PLANE_NAMESPACE
    cluster_domain: str = DEFAULT_CLUSTER_DOMAIN
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "ProfileConfig":
        return cls(
            control_plane_namespace=env_str("PROFILEGEN_CONTROL_PLANE_NAMESPACE", DEFAULT_CONTROL_PLANE_NAMESPACE),
            cluster_domain=env_str("PROFILEGEN_CLUSTER_DOMAIN", DEFAULT_CLUSTER_DOMAIN),
            log_level=env_str("PROFILEGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
