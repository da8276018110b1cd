"""
product_api.services

Service layer package.

Responsibilities:
- Business-facing operations that wrap repositories with lifecycle telemetry.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services never translate errors into HTTP semantics; that is the API layer's job.
