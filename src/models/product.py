"""
Product data model.

Represents an item in the sporting-goods catalog.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """
    A catalog item tied to exactly one activity and one category.
    Both are stored by name and are not checked against each other.
    """
    name: str  # Unique across the catalog
    activity: str  # Activity name, e.g. "Running"
    category: str  # Category name, e.g. "Outdoor"
