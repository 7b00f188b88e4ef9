"""
Schemas for dining commons menu item reviews.
"""

from typing import Optional

from pydantic import Field

from .common import CampusModel, IsoDateTime


class MenuItemReviewFields(CampusModel):
    """Mutable fields of a menu item review."""

    item_id: int = Field(..., description="Identifier of the reviewed menu item")
    reviewer_email: str
    # Conventionally 1 to 5; not enforced.
    stars: int
    date_reviewed: IsoDateTime
    comments: str


class MenuItemReview(MenuItemReviewFields):
    """A stored menu item review."""

    id: Optional[int] = None
