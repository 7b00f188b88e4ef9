"""
Schemas for shared articles.
"""

from typing import Optional

from .common import CampusModel, IsoDateTime


class ArticleFields(CampusModel):
    """Mutable fields of an article."""

    title: str
    url: str
    explanation: str
    email: str
    date_added: IsoDateTime


class Article(ArticleFields):
    """A stored article."""

    id: Optional[int] = None
