"""
Rating data model.

A single user's star score and comment for a product.
"""

from dataclasses import dataclass

import config.settings as settings
from src.errors import ValidationError


@dataclass(frozen=True)
class Rating:
    """
    One rating of a product.
    Ratings are append-only; the same user may rate a product many times.
    """
    product_name: str  # Product being rated; need not be in the catalog
    user_name: str  # Who rated it
    stars: int  # Whole stars, 0-5 inclusive
    comment: str  # Free text, may be empty

    def __post_init__(self):
        # Validate stars: whole numbers only (bool is an int subclass)
        is_whole = isinstance(self.stars, int) and not isinstance(self.stars, bool)
        if not is_whole or not (settings.MIN_STARS <= self.stars <= settings.MAX_STARS):
            raise ValidationError(
                f"Star rating must be an integer between {settings.MIN_STARS} "
                f"and {settings.MAX_STARS}, got {self.stars!r}"
            )

    def describe(self) -> str:
        """
        Human-readable form used by rating listings.

        Returns:
            "<stars> : <comment>", e.g. "5 : great"
        """
        return f"{self.stars}{settings.RATING_SEPARATOR}{self.comment}"

    def to_dict(self) -> dict:
        """
        Convert to a plain dict.

        Returns:
            Dict with keys product, user, stars, comment
        """
        return {
            "product": self.product_name,
            "user": self.user_name,
            "stars": self.stars,
            "comment": self.comment,
        }
