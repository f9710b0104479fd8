"""
Grouped OpenAPI documentation.

The application registers one or more documentation groups with a
:class:`DocumentationHost`, which serves an OpenAPI document and a
Swagger UI page per group.  :class:`ApiDocsClient` reads those
documents back over HTTP.
"""

from .client import ApiDocsClient, ApiDocsError, ApiEndpoint
from .groups import ApiGroupDescriptor, ant_match, in_package
from .host import (
    DocumentationConfigError,
    DocumentationHost,
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidGroupError,
)

__all__ = [
    "ApiDocsClient",
    "ApiDocsError",
    "ApiEndpoint",
    "ApiGroupDescriptor",
    "DocumentationConfigError",
    "DocumentationHost",
    "DuplicateGroupError",
    "GroupNotFoundError",
    "InvalidGroupError",
    "ant_match",
    "in_package",
]
