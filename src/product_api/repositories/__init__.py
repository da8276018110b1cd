"""
product_api.repositories

Repository package.

Responsibilities:
- Group data-access repositories over the in-memory store.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories are intentionally thin; reporting/telemetry belongs in services.
