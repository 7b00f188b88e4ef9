"""
Schemas for recommendation letter requests.
"""

from typing import Optional

from pydantic import Field

from .common import CampusModel, IsoDateTime


class RecommendationRequestFields(CampusModel):
    """Mutable fields of a recommendation request."""

    requester_email: str = Field(..., description="E-mail of the person requesting a recommendation")
    professor_email: str = Field(..., description="E-mail of the professor asked for the recommendation")
    explanation: str = Field(..., description="What the recommendation is needed for")
    date_requested: IsoDateTime
    date_needed: IsoDateTime
    done: bool = Field(..., description="Whether the recommendation has been sent")


class RecommendationRequest(RecommendationRequestFields):
    """A stored recommendation request."""

    id: Optional[int] = None
