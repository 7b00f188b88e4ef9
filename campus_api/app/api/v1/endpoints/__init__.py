"""
Endpoint subpackage for API v1.

``resources.py`` holds the shared CRUD routing table; every other
module binds it to one resource type and exposes the resulting
``router``.  The routers are aggregated in ``router.py`` at the
package level and then included in the main application.
"""
