"""
Menu item review endpoints, mounted at ``/api/menuitemreview``.
"""

from campus_api.app.schemas.menu_item_review import MenuItemReview, MenuItemReviewFields

from .resources import ResourceDefinition, build_resource_router

definition = ResourceDefinition(
    kind="MenuItemReview",
    path="menuitemreview",
    table="menu_item_reviews",
    record_model=MenuItemReview,
    create_model=MenuItemReviewFields,
    fields_model=MenuItemReviewFields,
)

router = build_resource_router(definition)
