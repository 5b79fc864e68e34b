"""
Data types used throughout the system.

Input side: ApiDocument -> PathItem -> Operation (only what route
enumeration needs). Output side: ServiceProfile -> RouteSpec -> ResponseClass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

API_VERSION = "linkerd.io/v1alpha1"
KIND = "ServiceProfile"


class HttpMethod(str, Enum):
    DELETE = "DELETE"
    GET = "GET"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"


@dataclass(frozen=True)
class Operation:
    # None when the operation declares no responses collection at all
    responses: Optional[Tuple[int, ...]] = None


@dataclass(frozen=True)
class PathItem:
    delete: Optional[Operation] = None
    get: Optional[Operation] = None
    head: Optional[Operation] = None
    options: Optional[Operation] = None
    patch: Optional[Operation] = None
    post: Optional[Operation] = None
    put: Optional[Operation] = None


@dataclass(frozen=True)
class ApiDocument:
    paths: Dict[str, PathItem] = field(default_factory=dict)


@dataclass(frozen=True)
class StatusRange:
    min: int
    max: int

    def to_dict(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class ResponseClass:
    status: StatusRange
    is_failure: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"condition": {"status": self.status.to_dict()}, "isFailure": self.is_failure}


@dataclass(frozen=True)
class RequestMatch:
    path_regex: str
    method: HttpMethod

    def to_dict(self) -> Dict[str, Any]:
        return {"pathRegex": self.path_regex, "method": self.method.value}


@dataclass(frozen=True)
class RouteSpec:
    name: str
    condition: RequestMatch
    response_classes: List[ResponseClass] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name, "condition": self.condition.to_dict()}
        # Omitted when empty, like the resource's own encoder does.
        if self.response_classes:
            out["responseClasses"] = [rc.to_dict() for rc in self.response_classes]
        return out


@dataclass(frozen=True)
class ServiceProfile:
    name: str
    namespace: str  # control plane namespace, not the service's
    routes: List[RouteSpec] = field(default_factory=list)
    api_version: str = API_VERSION
    kind: str = KIND

    def to_dict(self) -> Dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {"name": self.name, "namespace": self.namespace},
            "spec": {"routes": [r.to_dict() for r in self.routes]},
        }
