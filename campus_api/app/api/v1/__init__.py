"""
Version 1 of the API.

This subpackage bundles all endpoints of the Campus Resources API.
Breaking changes to the route family should be introduced in a new
version subpackage.
"""
