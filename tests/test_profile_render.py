"""
Tests for building the ServiceProfile envelope and serializing it.
"""

from __future__ import annotations

import json

import pytest
import yaml

from packages.core.errors import OutputSerializationError
from packages.core.types import ApiDocument
from packages.openapi import parse_document
from packages.profiles import build_profile, render_profile


PING = {"paths": {"/ping": {"get": {"responses": {"200": {}, "500": {}}}}}}


def test_envelope_name_and_namespace():
    p = build_profile(ApiDocument(), "web-svc", "emojivoto")
    assert p.name == "web-svc.emojivoto.svc.cluster.local"
    assert p.namespace == "linkerd"
    assert p.routes == []


def test_envelope_overrides():
    p = build_profile(ApiDocument(), "web", "prod", control_plane_namespace="mesh", cluster_domain="example.org")
    assert p.name == "web.prod.svc.example.org"
    assert p.namespace == "mesh"


def test_yaml_output_shape():
    p = build_profile(parse_document(PING), "web", "default")
    data = yaml.safe_load(render_profile(p))
    assert data == {
        "apiVersion": "linkerd.io/v1alpha1",
        "kind": "ServiceProfile",
        "metadata": {"name": "web.default.svc.cluster.local", "namespace": "linkerd"},
        "spec": {
            "routes": [
                {
                    "name": "GET /ping",
                    "condition": {"pathRegex": "/ping", "method": "GET"},
                    "responseClasses": [
                        {"condition": {"status": {"min": 200, "max": 200}}, "isFailure": False},
                        {"condition": {"status": {"min": 500, "max": 500}}, "isFailure": True},
                    ],
                }
            ]
        },
    }


def test_empty_routes_still_valid_artifact():
    out = render_profile(build_profile(parse_document({"paths": {}}), "web", "default"))
    data = yaml.safe_load(out)
    assert data["kind"] == "ServiceProfile"
    assert data["spec"] == {"routes": []}


def test_route_without_responses_omits_classes():
    p = build_profile(parse_document({"paths": {"/x": {"get": {}}}}), "web", "default")
    data = yaml.safe_load(render_profile(p))
    assert "responseClasses" not in data["spec"]["routes"][0]


def test_output_is_byte_stable():
    a = {"paths": {"/b": {"put": {}, "get": {}}, "/a": {"get": {"responses": {"503": {}, "200": {}}}}}}
    b = {"paths": {"/a": {"get": {"responses": {"200": {}, "503": {}}}}, "/b": {"get": {}, "put": {}}}}
    ra = render_profile(build_profile(parse_document(a), "web", "default"))
    rb = render_profile(build_profile(parse_document(b), "web", "default"))
    assert ra == rb


def test_json_output():
    p = build_profile(parse_document(PING), "web", "default")
    data = json.loads(render_profile(p, "json"))
    assert data["spec"]["routes"][0]["condition"] == {"method": "GET", "pathRegex": "/ping"}


def test_regex_survives_yaml_roundtrip():
    p = build_profile(parse_document({"paths": {"/books/{id}.json": {"get": {}}}}), "web", "default")
    data = yaml.safe_load(render_profile(p))
    assert data["spec"]["routes"][0]["condition"]["pathRegex"] == r"/books/[^/]*\.json"


def test_unknown_format_rejected():
    with pytest.raises(OutputSerializationError):
        render_profile(build_profile(ApiDocument(), "web", "default"), "toml")
