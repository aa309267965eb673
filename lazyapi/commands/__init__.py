"""Reference command generation."""

from .curl import DEFAULT_BASE_URL, base_url, example_json, generate_curl

__all__ = ["DEFAULT_BASE_URL", "base_url", "example_json", "generate_curl"]
