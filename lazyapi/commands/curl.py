"""Example ``curl`` invocations for endpoints and webhooks.

Output is deterministic: headers keep insertion order and schema examples
are derived by a depth-bounded walk.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..document.refs import RefResolver

DEFAULT_BASE_URL = "https://api.example.com"
MAX_EXAMPLE_DEPTH = 3

STRING_FORMAT_EXAMPLES: dict[str, str] = {
    "date": '"2024-01-01"',
    "date-time": '"2024-01-01T00:00:00Z"',
    "email": '"user@example.com"',
}


def _first_type(schema: Mapping[str, Any]) -> str | None:
    raw_type = schema.get("type")
    if isinstance(raw_type, list):
        return str(raw_type[0]) if raw_type else None
    if isinstance(raw_type, str):
        return raw_type
    return None


def example_json(schema: Any, resolver: RefResolver, depth: int = 0) -> str:
    """Return a compact JSON-ish example for ``schema``.

    Recursion stops past ``MAX_EXAMPLE_DEPTH`` with ``null``, which also
    bounds self-referential schemas.
    """
    if depth > MAX_EXAMPLE_DEPTH:
        return "null"
    if schema is None:
        return "{}"
    node = resolver.resolve(schema)
    if not node:
        return "{}"

    if "example" in node:
        return json.dumps(node["example"], default=str)

    schema_type = _first_type(node)
    if schema_type == "object":
        props = [
            f"{json.dumps(str(name))}: {example_json(prop, resolver, depth + 1)}"
            for name, prop in (node.get("properties") or {}).items()
        ]
        return "{ " + ", ".join(props) + " }" if props else "{}"
    if schema_type == "array":
        items = node.get("items")
        if isinstance(items, Mapping):
            return "[ " + example_json(items, resolver, depth + 1) + " ]"
        return "[]"
    if schema_type == "string":
        enum = node.get("enum")
        if isinstance(enum, list) and enum:
            return json.dumps(str(enum[0]))
        fmt = node.get("format")
        if isinstance(fmt, str) and fmt in STRING_FORMAT_EXAMPLES:
            return STRING_FORMAT_EXAMPLES[fmt]
        return '"string"'
    if schema_type in {"number", "integer"}:
        return "0"
    if schema_type == "boolean":
        return "false"
    if schema_type == "null":
        return "null"

    branches = node.get("allOf")
    if isinstance(branches, list):
        for branch in branches:
            example = example_json(branch, resolver, depth + 1)
            if example not in {"{}", "null"}:
                return example
    return "{}"


def _security_headers(
    requirements: Any,
    document: Mapping[str, Any],
    resolver: RefResolver,
) -> dict[str, str]:
    headers: dict[str, str] = {}
    if not isinstance(requirements, list):
        return headers
    components = document.get("components")
    schemes = components.get("securitySchemes") if isinstance(components, Mapping) else None
    if not isinstance(schemes, Mapping):
        return headers
    for requirement in requirements:
        if not isinstance(requirement, Mapping):
            continue
        for name in requirement:
            scheme = resolver.resolve(schemes.get(name))
            scheme_type = scheme.get("type")
            if scheme_type == "http":
                http_scheme = str(scheme.get("scheme", "")).lower()
                if http_scheme == "bearer":
                    headers["Authorization"] = "Bearer YOUR_TOKEN"
                elif http_scheme == "basic":
                    headers["Authorization"] = "Basic YOUR_CREDENTIALS"
            elif scheme_type == "apiKey" and scheme.get("in") == "header" and scheme.get("name"):
                headers[str(scheme["name"])] = "YOUR_API_KEY"
    return headers


def base_url(document: Mapping[str, Any]) -> str:
    """Return the first declared server URL or a placeholder."""
    servers = document.get("servers")
    if isinstance(servers, list) and servers:
        first = servers[0]
        if isinstance(first, Mapping) and isinstance(first.get("url"), str):
            return first["url"]
    return DEFAULT_BASE_URL


def generate_curl(
    method: str,
    path: str,
    operation: Mapping[str, Any],
    document: Mapping[str, Any],
    resolver: RefResolver,
) -> str:
    """Build a multi-line ``curl`` command for one operation."""
    parts = [f"curl -X {method} '{base_url(document)}{path}'"]

    headers: dict[str, str] = {}
    request_body = resolver.resolve(operation.get("requestBody")) if "requestBody" in operation else None
    if request_body is not None:
        headers["Content-Type"] = "application/json"

    requirements = operation["security"] if "security" in operation else document.get("security")
    headers.update(_security_headers(requirements, document, resolver))

    for name, value in headers.items():
        parts.append(f"-H '{name}: {value}'")

    if request_body:
        content = request_body.get("content")
        media = content.get("application/json") if isinstance(content, Mapping) else None
        if isinstance(media, Mapping):
            schema = media.get("schema")
            body = example_json(schema, resolver) if schema is not None else "{}"
            parts.append(f"-d '{body}'")

    return " \\\n  ".join(parts)
