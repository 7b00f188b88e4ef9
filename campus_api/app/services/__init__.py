"""
Service layer abstraction.

``ResourceService`` encapsulates the CRUD contract shared by every
resource type.  It talks to storage only through the repository
interface, so the SQLite repositories used in production can be
swapped for in-memory ones without changing API handlers.
"""
