"""Local ``$ref`` resolution for parsed OpenAPI documents.

Only same-document JSON pointers (``#/...``) are followed.
Unresolvable or remote references degrade to an empty mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

MAX_REF_CHAIN = 32

_EMPTY: Mapping[str, Any] = {}


def _unescape_pointer_token(token: str) -> str:
    """Decode one JSON-pointer path token (RFC 6901)."""
    return token.replace("~1", "/").replace("~0", "~")


class RefResolver:
    """Resolve local ``$ref`` pointers against one document root.

    Problems are recorded once per reference string in ``warnings`` instead
    of raising, so navigation code can treat resolution as total.
    """

    def __init__(self, root: Mapping[str, Any]) -> None:
        self.root = root
        self.warnings: list[str] = []
        self._reported: set[str] = set()

    def _warn_once(self, ref: str, message: str) -> None:
        if ref in self._reported:
            return
        self._reported.add(ref)
        self.warnings.append(message)

    def lookup(self, ref: str) -> Any:
        """Return the node addressed by ``ref`` or ``None`` when missing."""
        if not ref.startswith("#"):
            self._warn_once(ref, f"unsupported external reference: {ref}")
            return None
        pointer = ref[1:]
        if pointer in {"", "/"}:
            return self.root
        node: Any = self.root
        for raw_token in pointer.lstrip("/").split("/"):
            token = _unescape_pointer_token(raw_token)
            if isinstance(node, Mapping) and token in node:
                node = node[token]
            elif isinstance(node, list) and token.isdigit() and int(token) < len(node):
                node = node[int(token)]
            else:
                self._warn_once(ref, f"unresolved reference: {ref}")
                return None
        return node

    def resolve(self, node: Any) -> Mapping[str, Any]:
        """Follow ``$ref`` chains on ``node`` and return a mapping.

        Non-mapping inputs, missing targets, and reference cycles all yield an
        empty mapping.
        """
        seen: set[str] = set()
        current = node
        while isinstance(current, Mapping) and isinstance(current.get("$ref"), str):
            ref = current["$ref"]
            if ref in seen or len(seen) >= MAX_REF_CHAIN:
                self._warn_once(ref, f"circular reference: {ref}")
                return _EMPTY
            seen.add(ref)
            current = self.lookup(ref)
        if not isinstance(current, Mapping):
            return _EMPTY
        return current

    def ref_name(self, node: Any) -> str | None:
        """Return the last pointer segment of a ``$ref`` node, if any."""
        if isinstance(node, Mapping) and isinstance(node.get("$ref"), str):
            return _unescape_pointer_token(node["$ref"].rsplit("/", 1)[-1])
        return None
