"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, documentation bootstrap),
``docs`` (grouped OpenAPI documentation), ``api`` (versioned routers)
and ``schemas`` (response models).
"""

from .main import app  # noqa: F401
