"""
Schemas for dining commons.

Unlike the other resources, a dining commons is keyed by a short
``code`` (e.g. ``"ortega"``) chosen by the administrator who creates
it rather than by a store-assigned integer.
"""

from pydantic import Field

from .common import CampusModel


class DiningCommonsFields(CampusModel):
    """Mutable fields of a dining commons."""

    name: str
    has_sack_meal: bool
    has_take_out_meal: bool
    has_dining_cam: bool
    latitude: float = Field(..., allow_inf_nan=False)
    longitude: float = Field(..., allow_inf_nan=False)


class DiningCommons(DiningCommonsFields):
    """A stored dining commons; also the create payload."""

    code: str = Field(..., min_length=1, description="Short identifier, e.g. ortega")
