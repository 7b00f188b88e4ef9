"""
Article endpoints, mounted at ``/api/articles``.
"""

from campus_api.app.schemas.article import Article, ArticleFields

from .resources import ResourceDefinition, build_resource_router

definition = ResourceDefinition(
    kind="Articles",
    path="articles",
    table="articles",
    record_model=Article,
    create_model=ArticleFields,
    fields_model=ArticleFields,
)

router = build_resource_router(definition)
