"""
Recommendation request endpoints, mounted at ``/api/recommendationrequest``.
"""

from campus_api.app.schemas.recommendation_request import (
    RecommendationRequest,
    RecommendationRequestFields,
)

from .resources import ResourceDefinition, build_resource_router

definition = ResourceDefinition(
    kind="RecRequest",
    path="recommendationrequest",
    table="recommendation_requests",
    record_model=RecommendationRequest,
    create_model=RecommendationRequestFields,
    fields_model=RecommendationRequestFields,
)

router = build_resource_router(definition)
