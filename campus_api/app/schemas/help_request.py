"""
Schemas for help requests.

A help request is raised by a team during a lab section; it records
who asked, where the team sits and whether the request was solved.
"""

from typing import Optional

from pydantic import Field

from .common import CampusModel, IsoDateTime


class HelpRequestFields(CampusModel):
    """Mutable fields of a help request."""

    requester_email: str = Field(..., description="E-mail of the student asking for help")
    team_id: str = Field(..., description="Team identifier, e.g. s22-5pm-3")
    table_or_breakout_room: str = Field(..., description="Table number or breakout room name")
    request_time: IsoDateTime = Field(..., description="When the request was made (ISO-8601, no timezone)")
    explanation: str
    solved: bool


class HelpRequest(HelpRequestFields):
    """A stored help request."""

    id: Optional[int] = None
