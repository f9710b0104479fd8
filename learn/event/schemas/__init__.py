"""
Pydantic schema definitions for API payloads.

Schemas are separated from the route modules so that response shapes
are documented in one place and can be reused by clients and tests.
"""
