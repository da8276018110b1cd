"""
product_api.api.routers

HTTP routers.

Responsibilities:
- Health probes and the product CRUD controller.
"""

# Package marker.
