"""
Pydantic schema definitions for the resource types.

Each resource type defines a ``<Kind>Fields`` model holding the
mutable fields (used for create query parameters and update bodies)
and a ``<Kind>`` model for the stored record including its key.
Field names are snake_case in Python and camelCase on the wire.
"""
