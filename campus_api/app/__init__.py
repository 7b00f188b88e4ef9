"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource type (help requests, menu item reviews,
recommendation requests, articles, dining commons) is described by a
schema module and exposed through the shared CRUD router defined in
``api/v1/endpoints/resources.py``.
"""

from .main import app  # noqa: F401
