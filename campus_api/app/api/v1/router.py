"""
Top-level router for version 1 of the API.

This router aggregates the per-resource CRUD routers under their
resource names.  ``RESOURCES`` lists the definitions of every
resource type; the application factory uses it to build one service
per type.  When a new resource type is added, add its endpoint module
here.
"""

from typing import List

from fastapi import APIRouter

from .endpoints import (
    articles,
    current_user,
    dining_commons,
    help_requests,
    menu_item_reviews,
    recommendation_requests,
)
from .endpoints.resources import ResourceDefinition

_resource_modules = [
    help_requests,
    menu_item_reviews,
    recommendation_requests,
    articles,
    dining_commons,
]

RESOURCES: List[ResourceDefinition] = [module.definition for module in _resource_modules]

router = APIRouter()

for module in _resource_modules:
    router.include_router(module.router, prefix=f"/{module.definition.path}", tags=[module.definition.kind])

router.include_router(current_user.router, prefix="/currentUser", tags=["currentUser"])
