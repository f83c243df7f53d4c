"""
Unit tests for catalog data models.
"""

import dataclasses

import pytest

from src.errors import ValidationError
from src.models.category import Category
from src.models.product import Product
from src.models.rating import Rating


def test_rating_validation():
    """Test Rating star range validation."""
    # Bounds are inclusive
    assert Rating("ShoeX", "alice", 0, "").stars == 0
    assert Rating("ShoeX", "alice", 5, "").stars == 5

    with pytest.raises(ValidationError):
        Rating("ShoeX", "alice", 6, "too many")

    with pytest.raises(ValidationError):
        Rating("ShoeX", "alice", -1, "too few")


@pytest.mark.parametrize("stars", [4.5, 3.0, True, False, "4", None])
def test_rating_rejects_non_integer_stars(stars):
    """Test that only whole int stars are accepted (bool excluded)."""
    with pytest.raises(ValidationError, match="integer"):
        Rating("ShoeX", "alice", stars, "odd")


def test_rating_description():
    rating = Rating("ShoeX", "alice", 5, "great")

    assert rating.describe() == "5 : great"


def test_rating_to_dict():
    rating = Rating("ShoeX", "alice", 4, "good")

    assert rating.to_dict() == {
        "product": "ShoeX",
        "user": "alice",
        "stars": 4,
        "comment": "good",
    }


def test_product_is_immutable():
    product = Product("ShoeX", "Running", "Outdoor")

    with pytest.raises(dataclasses.FrozenInstanceError):
        product.activity = "Swimming"


def test_category_sorted_activities():
    category = Category("Outdoor", frozenset({"Running", "Cycling"}))

    assert category.sorted_activities() == ["Cycling", "Running"]
    assert Category("Empty").sorted_activities() == []
