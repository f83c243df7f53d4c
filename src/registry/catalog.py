"""
Sports Catalog - owner of activities, categories, products and ratings.

All state lives on the instance; every call reads or mutates it directly.
"""

import logging
from typing import Dict, List, Optional, Set

import pandas as pd

from src.errors import ValidationError
from src.models.category import Category
from src.models.product import Product
from src.models.rating import Rating
from src.utils.aggregation import (
    build_ratings_frame,
    group_products_by_mean,
    mean_stars_by,
)

logger = logging.getLogger(__name__)


class SportsCatalog:
    """
    In-memory catalog of sporting-goods products and their ratings.

    Tracks:
    - Activities (unique names)
    - Categories and the activities they are linked to (both directions)
    - Products, each tied to one activity and one category
    - Ratings per product name
    """

    def __init__(self):
        self.activities: Set[str] = set()
        self.categories: Dict[str, Category] = {}  # category -> linked activities
        self.activity_categories: Dict[str, Set[str]] = {}  # activity -> categories
        self.products: Dict[str, Product] = {}  # product name -> Product
        self.ratings: Dict[str, List[Rating]] = {}  # product name -> ratings

    # Activities

    def define_activities(self, *names: str) -> None:
        """
        Register one or more activities.
        Idempotent: registering a known activity again is a no-op.

        Args:
            *names: Activity names, e.g. "Running"

        Raises:
            ValidationError: If no names are given
        """
        if not names:
            logger.warning("define_activities called without any activity")
            raise ValidationError("No activities provided")

        for name in names:
            if name not in self.activities:
                self.activities.add(name)
                self.activity_categories.setdefault(name, set())
                logger.info(f"Defined activity '{name}'")

    def get_activities(self) -> List[str]:
        """Return all activity names, sorted."""
        return sorted(self.activities)

    # Categories

    def add_category(self, name: str, *activities: str) -> None:
        """
        Create (or replace) a category linked to the given activities.

        Re-adding a category replaces its activity set, but activities that
        were linked before stay linked to it in the reverse direction.

        Args:
            name: Category name
            *activities: Registered activity names to link

        Raises:
            ValidationError: If any activity is not registered
        """
        for activity in activities:
            if activity not in self.activities:
                logger.warning(
                    f"Rejected category '{name}': unknown activity '{activity}'"
                )
                raise ValidationError(f"Activity '{activity}' does not exist")

        category = Category(name=name, activities=frozenset(activities))
        self.categories[name] = category
        for activity in activities:
            self.activity_categories[activity].add(name)

        logger.info(f"Added category '{name}' linked to {category.sorted_activities()}")

    def count_categories(self) -> int:
        """Number of distinct category names."""
        return len(self.categories)

    def get_category(self, name: str) -> Optional[Category]:
        """Retrieve category by name. Returns None if not found."""
        return self.categories.get(name)

    def get_categories_for_activity(self, activity: str) -> List[str]:
        """
        Categories linked to an activity, sorted.
        Unknown activities yield an empty list.
        """
        return sorted(self.activity_categories.get(activity, ()))

    # Products

    def add_product(self, name: str, activity: str, category: str) -> None:
        """
        Add a product.

        The activity and category are stored as given; they are not checked
        for existence or for being linked to each other.

        Args:
            name: Unique product name
            activity: Activity name
            category: Category name

        Raises:
            ValidationError: If a product with this name already exists
        """
        if name in self.products:
            logger.warning(f"Rejected duplicate product '{name}'")
            raise ValidationError(f"Product '{name}' already exists")

        self.products[name] = Product(name=name, activity=activity, category=category)
        self.ratings.setdefault(name, [])
        logger.info(
            f"Added product '{name}' (activity={activity}, category={category})"
        )

    def get_product(self, name: str) -> Optional[Product]:
        """Retrieve product by name. Returns None if not found."""
        return self.products.get(name)

    def count_products(self) -> int:
        """Number of products added to the catalog."""
        return len(self.products)

    def get_products_for_category(self, category: str) -> List[str]:
        """Names of products in a category, sorted."""
        return sorted(p.name for p in self.products.values() if p.category == category)

    def get_products_for_activity(self, activity: str) -> List[str]:
        """Names of products for an activity, sorted."""
        return sorted(p.name for p in self.products.values() if p.activity == activity)

    def get_products(self, activity: str, *categories: str) -> List[str]:
        """
        Names of products for an activity whose category is one of
        `categories`, sorted.

        Args:
            activity: Activity name to match exactly
            *categories: Accepted category names

        Returns:
            Sorted product names (empty if none match)
        """
        wanted = set(categories)
        return sorted(
            p.name
            for p in self.products.values()
            if p.activity == activity and p.category in wanted
        )

    # Ratings

    def add_rating(self, product_name: str, user_name: str, stars: int, comment: str) -> None:
        """
        Record a rating.

        The product does not need to exist: rating an unknown name starts a
        rating list for it.

        Args:
            product_name: Product being rated
            user_name: Who rated it
            stars: Whole stars, 0-5 inclusive
            comment: Free text

        Raises:
            ValidationError: If stars is not an integer in 0-5
        """
        try:
            rating = Rating(
                product_name=product_name,
                user_name=user_name,
                stars=stars,
                comment=comment,
            )
        except ValidationError as e:
            logger.warning(f"Rejected rating of '{product_name}' by '{user_name}': {e}")
            raise

        self.ratings.setdefault(product_name, []).append(rating)
        logger.info(f"Added {stars}-star rating of '{product_name}' by '{user_name}'")

    def count_ratings(self) -> int:
        """Number of ratings, including those of products never added."""
        return sum(len(ratings) for ratings in self.ratings.values())

    def get_ratings_for_product(self, product_name: str) -> List[str]:
        """
        Rating descriptions ("<stars> : <comment>") for a product.

        Sorted by stars descending; equal stars keep the order they were
        added in.
        """
        ratings = self.ratings.get(product_name, [])
        ranked = sorted(ratings, key=lambda r: r.stars, reverse=True)
        return [r.describe() for r in ranked]

    def get_stars_of_product(self, product_name: str) -> float:
        """Mean stars of a product, or 0.0 if it has no ratings."""
        ratings = self.ratings.get(product_name)
        if not ratings:
            return 0.0
        return sum(r.stars for r in ratings) / len(ratings)

    def average_stars(self) -> float:
        """Mean stars over every rating in the catalog, or 0.0 if none."""
        total_ratings = self.count_ratings()
        if total_ratings == 0:
            return 0.0

        total_stars = sum(
            r.stars for ratings in self.ratings.values() for r in ratings
        )
        return total_stars / total_ratings

    # Aggregations

    def ratings_frame(self) -> pd.DataFrame:
        """
        One row per rating, in insertion order.

        Columns: product, user, stars, comment, activity, category.
        Activity and category are None for products that were rated but
        never added.
        """
        rows = []
        for product_name, ratings in self.ratings.items():
            product = self.products.get(product_name)
            for rating in ratings:
                row = rating.to_dict()
                row["activity"] = product.activity if product else None
                row["category"] = product.category if product else None
                rows.append(row)
        return build_ratings_frame(rows)

    def stars_per_activity(self) -> Dict[str, float]:
        """
        Mean stars per activity over all ratings of its products.

        Ordered by activity name. Activities whose products have no ratings
        are left out.
        """
        return mean_stars_by(self.ratings_frame(), "activity")

    def get_products_per_stars(self) -> Dict[float, List[str]]:
        """
        Products grouped by mean stars.

        Ordered by mean descending, names sorted within each group.
        Products with a mean of 0.0 are left out.
        """
        return group_products_by_mean(self.ratings_frame())
