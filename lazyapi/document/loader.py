"""Read and parse API description documents.

Accepts JSON or YAML text from a path or a binary stream.
Structural problems become warnings; only unreadable or unparsable
input is fatal.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, BinaryIO

import yaml

from .refs import RefResolver

logger = logging.getLogger(__name__)

STDIN_SOURCE_NAME = "<stdin>"


class DocumentLoadError(Exception):
    """Raised when a document cannot be read or parsed at all."""


@dataclass
class LoadedDocument:
    """Parsed document plus the diagnostics gathered while loading it."""

    data: Mapping[str, Any]
    source_name: str
    warnings: list[str] = field(default_factory=list)
    resolver: RefResolver = field(init=False)

    def __post_init__(self) -> None:
        self.resolver = RefResolver(self.data)

    @property
    def title(self) -> str:
        info = self.data.get("info")
        if isinstance(info, Mapping) and isinstance(info.get("title"), str):
            return info["title"]
        return "API"

    @property
    def version(self) -> str:
        info = self.data.get("info")
        if isinstance(info, Mapping) and info.get("version") is not None:
            return str(info["version"])
        return ""


def decode_bytes(raw: bytes) -> str:
    """Decode document bytes, dropping a UTF-8 BOM and falling back to latin-1."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def parse_text(text: str) -> Any:
    """Parse JSON or YAML text into plain Python containers."""
    text = text.lstrip("\ufeff")
    stripped = text.lstrip()
    if not stripped:
        raise DocumentLoadError("document is empty")
    if stripped[0] in "{[":
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            logger.debug("JSON parse failed, retrying as YAML")
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"invalid JSON/YAML: {exc}") from exc


def structural_warnings(data: Mapping[str, Any]) -> list[str]:
    """Return shallow structural problems with an OpenAPI 3.x document."""
    problems: list[str] = []
    version = data.get("openapi")
    if version is None:
        if "swagger" in data:
            problems.append("Swagger 2.0 documents are not supported; showing what could be read")
        else:
            problems.append("missing 'openapi' version field")
    elif not str(version).startswith("3."):
        problems.append(f"unsupported openapi version: {version}")

    info = data.get("info")
    if not isinstance(info, Mapping):
        problems.append("missing 'info' object")
    elif not info.get("title"):
        problems.append("'info.title' is missing")

    for section in ("paths", "components", "webhooks"):
        value = data.get(section)
        if value is not None and not isinstance(value, Mapping):
            problems.append(f"'{section}' must be an object")

    if not any(isinstance(data.get(section), Mapping) for section in ("paths", "components", "webhooks")):
        problems.append("document declares no paths, components or webhooks")
    return problems


def build_document(text: str, source_name: str) -> LoadedDocument:
    """Parse ``text`` and wrap it in a ``LoadedDocument`` with warnings."""
    data = parse_text(text)
    if not isinstance(data, Mapping):
        raise DocumentLoadError("document root must be an object")
    document = LoadedDocument(data=data, source_name=source_name)
    document.warnings.extend(structural_warnings(data))
    return document


def load_document(path: Path) -> LoadedDocument:
    """Load a document from ``path``."""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(f"cannot read {path}: {exc.strerror or exc}") from exc
    return build_document(decode_bytes(raw), str(path))


def load_document_stream(stream: BinaryIO) -> LoadedDocument:
    """Load a document from a binary stream such as ``sys.stdin.buffer``."""
    try:
        raw = stream.read()
    except OSError as exc:
        raise DocumentLoadError(f"cannot read standard input: {exc.strerror or exc}") from exc
    return build_document(decode_bytes(raw), STDIN_SOURCE_NAME)
