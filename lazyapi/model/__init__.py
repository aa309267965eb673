"""Browser item model: item variants and filterable collections."""

from .collection import FilterableCollection
from .items import Component, Endpoint, ListItem, Webhook

__all__ = [
    "Component",
    "Endpoint",
    "FilterableCollection",
    "ListItem",
    "Webhook",
]
