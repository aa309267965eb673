"""Entity extraction: parsed document to ordered browser items.

Each item gets a precomputed detail block so its rendered height is known
without reformatting on every viewport pass.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..model import Component, Endpoint, Webhook
from .loader import LoadedDocument
from .refs import RefResolver

HTTP_METHODS: tuple[str, ...] = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

COMPONENT_KINDS: dict[str, str] = {
    "schemas": "schema",
    "responses": "response",
    "parameters": "parameter",
    "examples": "example",
    "requestBodies": "requestBody",
    "headers": "header",
    "securitySchemes": "securityScheme",
    "links": "link",
    "callbacks": "callback",
    "pathItems": "pathItem",
}

EXAMPLE_VALUE_MAX_CHARS = 200


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _first_line(value: Any) -> str:
    text = _text(value)
    return text.splitlines()[0] if text else ""


def _block(label: str, text: str) -> list[str]:
    """Format ``label: text``; multi-line text continues indented below."""
    lines = text.splitlines()
    if not lines:
        return []
    out = [f"{label}: {lines[0]}"]
    out.extend(f"  {line}" for line in lines[1:])
    return out


def schema_type_label(schema: Any, resolver: RefResolver) -> str:
    """Return a short human label for a schema node (``Pet``, ``array<string>``)."""
    ref_name = resolver.ref_name(schema)
    if ref_name is not None:
        return ref_name
    node = resolver.resolve(schema)
    if not node:
        return "any"
    raw_type = node.get("type")
    if isinstance(raw_type, list):
        type_names = [str(name) for name in raw_type]
    elif isinstance(raw_type, str):
        type_names = [raw_type]
    else:
        type_names = []
    if "array" in type_names:
        item_label = schema_type_label(node.get("items"), resolver)
        type_names = [f"array<{item_label}>" if name == "array" else name for name in type_names]
    if type_names:
        label = "|".join(type_names)
        fmt = node.get("format")
        return f"{label}({fmt})" if isinstance(fmt, str) and fmt else label
    for combinator in ("allOf", "oneOf", "anyOf"):
        branches = node.get(combinator)
        if isinstance(branches, list) and branches:
            names = [schema_type_label(branch, resolver) for branch in branches]
            return f"{combinator}[{', '.join(names)}]"
    if "properties" in node:
        return "object"
    return "any"


def _content_lines(content: Any, resolver: RefResolver, indent: str = "  ") -> list[str]:
    lines: list[str] = []
    for media_type, media in _mapping(content).items():
        schema = _mapping(media).get("schema")
        if schema is None:
            lines.append(f"{indent}{media_type}")
        else:
            lines.append(f"{indent}{media_type}: {schema_type_label(schema, resolver)}")
    return lines


def _parameter_line(parameter: Any, resolver: RefResolver) -> str:
    node = resolver.resolve(parameter)
    name = _text(node.get("name")) or "?"
    location = _text(node.get("in")) or "?"
    type_label = schema_type_label(node.get("schema"), resolver) if "schema" in node else "any"
    required = " [required]" if node.get("required") else ""
    description = _first_line(node.get("description"))
    suffix = f": {description}" if description else ""
    return f"  - {name} ({location}) {type_label}{required}{suffix}"


def _security_names(requirements: Any) -> list[str]:
    names: list[str] = []
    if not isinstance(requirements, list):
        return names
    for requirement in requirements:
        for name in _mapping(requirement):
            if name not in names:
                names.append(name)
    return names


def format_operation_details(
    operation: Mapping[str, Any],
    resolver: RefResolver,
    path_parameters: list[Any] | None = None,
) -> str:
    """Return the newline-terminated detail block for one operation."""
    lines: list[str] = []
    lines.extend(_block("Summary", _text(operation.get("summary"))))
    lines.extend(_block("Description", _text(operation.get("description"))))
    if _text(operation.get("operationId")):
        lines.append(f"Operation ID: {operation['operationId'].strip()}")
    tags = operation.get("tags")
    if isinstance(tags, list) and tags:
        lines.append("Tags: " + ", ".join(str(tag) for tag in tags))
    if operation.get("deprecated"):
        lines.append("Deprecated: yes")

    parameters = list(path_parameters or [])
    if isinstance(operation.get("parameters"), list):
        parameters.extend(operation["parameters"])
    if parameters:
        lines.append("Parameters:")
        lines.extend(_parameter_line(parameter, resolver) for parameter in parameters)

    if "requestBody" in operation:
        body = resolver.resolve(operation.get("requestBody"))
        lines.append("Request Body:" + (" [required]" if body.get("required") else ""))
        lines.extend(_content_lines(body.get("content"), resolver))

    responses = _mapping(operation.get("responses"))
    if responses:
        lines.append("Responses:")
        for status, response in responses.items():
            description = _first_line(resolver.resolve(response).get("description"))
            lines.append(f"  {status}: {description}" if description else f"  {status}")

    security = _security_names(operation.get("security"))
    if security:
        lines.append("Security: " + ", ".join(security))

    return "".join(f"{line}\n" for line in lines)


def _schema_details(node: Mapping[str, Any], resolver: RefResolver) -> list[str]:
    lines = [f"Type: {schema_type_label(node, resolver)}"]
    lines.extend(_block("Description", _text(node.get("description"))))
    required = set(node.get("required") or []) if isinstance(node.get("required"), list) else set()
    properties = _mapping(node.get("properties"))
    if properties:
        lines.append("Properties:")
        for name, prop in properties.items():
            label = schema_type_label(prop, resolver)
            flag = " (required)" if name in required else ""
            description = _first_line(resolver.resolve(prop).get("description"))
            suffix = f" - {description}" if description else ""
            lines.append(f"  {name}: {label}{flag}{suffix}")
    enum = node.get("enum")
    if isinstance(enum, list) and enum:
        lines.append("Enum: " + ", ".join(str(value) for value in enum))
    return lines


def _component_details(kind: str, node: Mapping[str, Any], resolver: RefResolver) -> list[str]:
    if kind == "schema":
        return _schema_details(node, resolver)
    lines: list[str] = []
    if kind == "response":
        lines.extend(_block("Description", _text(node.get("description"))))
        content = _content_lines(node.get("content"), resolver)
        if content:
            lines.append("Content:")
            lines.extend(content)
        headers = _mapping(node.get("headers"))
        if headers:
            lines.append("Headers: " + ", ".join(headers))
    elif kind == "parameter":
        lines.append(_parameter_line(node, resolver).strip()[2:])
        lines.extend(_block("Description", _text(node.get("description"))))
    elif kind == "requestBody":
        lines.extend(_block("Description", _text(node.get("description"))))
        lines.append(f"Required: {'yes' if node.get('required') else 'no'}")
        lines.extend(_content_lines(node.get("content"), resolver))
    elif kind == "securityScheme":
        for label, field_name in (
            ("Type", "type"),
            ("Scheme", "scheme"),
            ("Bearer format", "bearerFormat"),
            ("In", "in"),
            ("Name", "name"),
            ("OpenID Connect URL", "openIdConnectUrl"),
        ):
            if _text(node.get(field_name)):
                lines.append(f"{label}: {node[field_name].strip()}")
        flows = _mapping(node.get("flows"))
        if flows:
            lines.append("Flows: " + ", ".join(flows))
        lines.extend(_block("Description", _text(node.get("description"))))
    elif kind == "header":
        lines.append(f"Type: {schema_type_label(node.get('schema'), resolver)}")
        lines.extend(_block("Description", _text(node.get("description"))))
    elif kind == "example":
        lines.extend(_block("Summary", _text(node.get("summary"))))
        if "value" in node:
            value = json.dumps(node["value"], default=str)
            if len(value) > EXAMPLE_VALUE_MAX_CHARS:
                value = value[: EXAMPLE_VALUE_MAX_CHARS - 3] + "..."
            lines.append(f"Value: {value}")
        lines.extend(_block("Description", _text(node.get("description"))))
    else:
        lines.extend(_block("Description", _text(node.get("description"))))
    return lines


def _iter_operations(path_item: Mapping[str, Any]):
    for method, operation in path_item.items():
        if method in HTTP_METHODS and isinstance(operation, Mapping):
            yield method.upper(), operation


def extract_endpoints(document: LoadedDocument) -> list[Endpoint]:
    """Return endpoints in document order (path order, then method order)."""
    resolver = document.resolver
    endpoints: list[Endpoint] = []
    for path, raw_item in _mapping(document.data.get("paths")).items():
        path_item = resolver.resolve(raw_item)
        path_parameters = path_item.get("parameters") if isinstance(path_item.get("parameters"), list) else []
        for method, operation in _iter_operations(path_item):
            endpoints.append(
                Endpoint(
                    method=method,
                    path=str(path),
                    operation=operation,
                    details=format_operation_details(operation, resolver, path_parameters),
                )
            )
    return endpoints


def extract_webhooks(document: LoadedDocument) -> list[Webhook]:
    """Return webhook operations in document order."""
    resolver = document.resolver
    webhooks: list[Webhook] = []
    for name, raw_item in _mapping(document.data.get("webhooks")).items():
        path_item = resolver.resolve(raw_item)
        for method, operation in _iter_operations(path_item):
            webhooks.append(
                Webhook(
                    name=str(name),
                    method=method,
                    operation=operation,
                    details=format_operation_details(operation, resolver),
                )
            )
    return webhooks


def extract_components(document: LoadedDocument) -> list[Component]:
    """Return reusable components grouped by kind in document order."""
    resolver = document.resolver
    components: list[Component] = []
    for section, entries in _mapping(document.data.get("components")).items():
        kind = COMPONENT_KINDS.get(section)
        if kind is None:
            continue
        for name, raw_node in _mapping(entries).items():
            node = resolver.resolve(raw_node)
            description = _first_line(node.get("description")) or _text(node.get("title"))
            lines = _component_details(kind, node, resolver)
            components.append(
                Component(
                    name=str(name),
                    kind=kind,
                    description=description,
                    details="".join(f"{line}\n" for line in lines),
                )
            )
    return components
