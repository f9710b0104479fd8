"""
API documentation groups.

``build_public_api_group`` describes the ``public`` documentation
group: every path of every endpoint defined under the ``learn``
package.  ``configure_documentation`` is the explicit start‑up step
that registers the group with a :class:`DocumentationHost` and serves
it from the application.  It is called once by ``create_app``.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from learn.event.core.config import Settings, settings as default_settings
from learn.event.docs import ApiGroupDescriptor, DocumentationHost

logger = logging.getLogger(__name__)

PUBLIC_GROUP = "public"


def build_public_api_group() -> ApiGroupDescriptor:
    """Return the descriptor of the ``public`` documentation group."""
    return ApiGroupDescriptor(
        group_name=PUBLIC_GROUP,
        path_match_patterns=("/**",),
        package_scan_roots=("learn",),
    )


def configure_documentation(app: FastAPI, app_settings: Optional[Settings] = None) -> Optional[DocumentationHost]:
    """Register the documentation groups and serve them from ``app``.

    Returns the installed host, or ``None`` when documentation is
    disabled via ``DOCS_ENABLED``.  Configuration errors raised by the
    host (for example a duplicate group name) propagate so that the
    application fails to start.
    """
    app_settings = app_settings or default_settings
    if not app_settings.docs_enabled:
        logger.info("API documentation is disabled")
        return None

    host = DocumentationHost(
        title=app_settings.project_name,
        version=app_settings.api_version,
        description=app_settings.description,
        api_docs_path=app_settings.api_docs_path,
        swagger_ui_path=app_settings.swagger_ui_path,
    )
    host.register_all([build_public_api_group()])
    host.install(app)
    return host
