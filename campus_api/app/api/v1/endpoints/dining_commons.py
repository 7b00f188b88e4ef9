"""
Dining commons endpoints, mounted at ``/api/ucsbdiningcommons``.

Dining commons are addressed by their ``code`` (``?code=ortega``),
which the administrator supplies on creation.  The update body holds
the remaining fields; the code itself cannot be changed.
"""

from campus_api.app.schemas.dining_commons import DiningCommons, DiningCommonsFields

from .resources import ResourceDefinition, build_resource_router

definition = ResourceDefinition(
    kind="UCSBDiningCommons",
    path="ucsbdiningcommons",
    table="dining_commons",
    record_model=DiningCommons,
    create_model=DiningCommons,
    fields_model=DiningCommonsFields,
    key_field="code",
    key_type=str,
)

router = build_resource_router(definition)
