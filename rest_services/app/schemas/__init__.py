"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the services so that the API
representation does not depend on how products are stored or how the
upstream weather API is called.
"""
