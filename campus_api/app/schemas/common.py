"""
Shared schema base class, timestamp type and envelope models.
"""

import re
from datetime import datetime
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, NaiveDatetime
from pydantic.alias_generators import to_camel

_ISO_DATE_TIME = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}")


def _require_date_time(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and _ISO_DATE_TIME.match(value):
        return value
    raise ValueError("expected an ISO-8601 date-time such as 2022-04-20T17:35:00")


# Date and time are both required; "2022-04-20" or an epoch number is refused.
IsoDateTime = Annotated[NaiveDatetime, BeforeValidator(_require_date_time)]


class CampusModel(BaseModel):
    """Base class for all resource records.

    Records are immutable values: an update builds a new record rather
    than mutating the stored one.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class GenericMessage(BaseModel):
    """Confirmation envelope, e.g. ``{"message": "Articles with id 3 deleted"}``."""

    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned for not-found, malformed and internal errors."""

    type: str
    message: str


class UserInfo(BaseModel):
    email: str


class CurrentUser(BaseModel):
    """Identity and roles of the authenticated caller."""

    user: UserInfo
    roles: List[str]
