"""
Service and namespace name checks, and the profile's resource name.

The wording of the error messages follows the Kubernetes apimachinery
validators so users see the same text kubectl would print.
"""

from __future__ import annotations

import re
from typing import List

DNS_LABEL_MAX_LENGTH = 63

DNS1035_LABEL_FMT = "[a-z]([-a-z0-9]*[a-z0-9])?"
DNS1035_LABEL_RE = re.compile(f"^{DNS1035_LABEL_FMT}$")
DNS1035_LABEL_ERR = (
    "a DNS-1035 label must consist of lower case alphanumeric characters or '-', "
    "start with an alphabetic character, and end with an alphanumeric character"
)

DNS1123_LABEL_FMT = "[a-z0-9]([-a-z0-9]*[a-z0-9])?"
DNS1123_LABEL_RE = re.compile(f"^{DNS1123_LABEL_FMT}$")
DNS1123_LABEL_ERR = (
    "a DNS-1123 label must consist of lower case alphanumeric characters or '-', "
    "and must start and end with an alphanumeric character"
)


def _check_label(value: str, pattern: re.Pattern, fmt: str, err: str, example: str) -> List[str]:
    errs: List[str] = []
    if len(value) > DNS_LABEL_MAX_LENGTH:
        errs.append(f"must be no more than {DNS_LABEL_MAX_LENGTH} characters")
    if not pattern.match(value):
        errs.append(f"{err} (e.g. {example}, regex used for validation is '{fmt}')")
    return errs


def is_dns1035_label(value: str) -> List[str]:
    """Returns a list of problems; empty when `value` is a valid service name."""
    return _check_label(value, DNS1035_LABEL_RE, DNS1035_LABEL_FMT, DNS1035_LABEL_ERR, "'my-name', or 'abc-123'")


def is_dns1123_label(value: str) -> List[str]:
    return _check_label(value, DNS1123_LABEL_RE, DNS1123_LABEL_FMT, DNS1123_LABEL_ERR, "'my-name', or '123-abc'")


def profile_name(service: str, namespace: str, cluster_domain: str) -> str:
    return f"{service}.{namespace}.svc.{cluster_domain}"
