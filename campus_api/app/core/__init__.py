"""
Cross-cutting infrastructure: settings, logging, database access,
authentication and the error envelope.
"""
