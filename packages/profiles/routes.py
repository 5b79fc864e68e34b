"""
Route enumeration.

Output order is part of the contract: paths ascending, then methods in
METHOD_ACCESSORS order. Mapping order in the source document never leaks
into the result.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Callable, List, Optional, Tuple

from packages.core.types import ApiDocument, HttpMethod, Operation, PathItem, RequestMatch, RouteSpec
from packages.profiles.paths import path_to_regex
from packages.profiles.responses import to_response_classes

OperationAccessor = Callable[[PathItem], Optional[Operation]]

METHOD_ACCESSORS: Tuple[Tuple[HttpMethod, OperationAccessor], ...] = (
    (HttpMethod.DELETE, attrgetter("delete")),
    (HttpMethod.GET, attrgetter("get")),
    (HttpMethod.HEAD, attrgetter("head")),
    (HttpMethod.OPTIONS, attrgetter("options")),
    (HttpMethod.PATCH, attrgetter("patch")),
    (HttpMethod.POST, attrgetter("post")),
    (HttpMethod.PUT, attrgetter("put")),
)


def route_name(method: HttpMethod, template: str) -> str:
    return f"{method.value} {template}"


def make_route_spec(template: str, path_regex: str, method: HttpMethod, op: Operation) -> RouteSpec:
    return RouteSpec(
        name=route_name(method, template),
        condition=RequestMatch(path_regex=path_regex, method=method),
        response_classes=to_response_classes(op.responses),
    )


def enumerate_routes(doc: ApiDocument) -> List[RouteSpec]:
    routes: List[RouteSpec] = []
    for template in sorted(doc.paths):
        item = doc.paths[template]
        path_regex = path_to_regex(template)
        for method, accessor in METHOD_ACCESSORS:
            op = accessor(item)
            if op is None:
                continue
            routes.append(make_route_spec(template, path_regex, method, op))
    return routes
