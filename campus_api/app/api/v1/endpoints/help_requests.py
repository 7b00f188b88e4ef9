"""
Help request endpoints, mounted at ``/api/helprequest``.
"""

from campus_api.app.schemas.help_request import HelpRequest, HelpRequestFields

from .resources import ResourceDefinition, build_resource_router

definition = ResourceDefinition(
    kind="HelpRequest",
    path="helprequest",
    table="help_requests",
    record_model=HelpRequest,
    create_model=HelpRequestFields,
    fields_model=HelpRequestFields,
)

router = build_resource_router(definition)
