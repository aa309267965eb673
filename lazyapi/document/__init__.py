"""Document loading and entity extraction."""

from .extract import (
    extract_components,
    extract_endpoints,
    extract_webhooks,
    format_operation_details,
    schema_type_label,
)
from .loader import (
    DocumentLoadError,
    LoadedDocument,
    build_document,
    load_document,
    load_document_stream,
)
from .refs import RefResolver

__all__ = [
    "DocumentLoadError",
    "LoadedDocument",
    "RefResolver",
    "build_document",
    "extract_components",
    "extract_endpoints",
    "extract_webhooks",
    "format_operation_details",
    "load_document",
    "load_document_stream",
    "schema_type_label",
]
