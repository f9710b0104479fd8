"""
Documentation host serving one OpenAPI document per group.

FastAPI generates a single OpenAPI document for the whole application.
``DocumentationHost`` keeps a registry of :class:`ApiGroupDescriptor`
objects and, for each of them, builds a document restricted to the
routes the group selects.  Installing the host on an application adds
the following routes (all hidden from the generated schemas):

* ``GET <api_docs_path>/swagger-config`` – the list of groups and the
  URL of each group's document;
* ``GET <api_docs_path>/<group>`` – the OpenAPI document of a group;
* ``GET <swagger_ui_path>?group=<group>`` – a Swagger UI page for a
  group (the first registered group when ``group`` is omitted).

Groups are registered once during application start‑up.  Configuration
problems such as duplicate group names raise
:class:`DocumentationConfigError` immediately so that a misconfigured
service fails to start instead of serving incomplete documentation.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from fastapi import APIRouter, FastAPI, HTTPException, Query, status
from fastapi import routing as fastapi_routing
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.openapi.utils import get_openapi
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.routing import APIRoute

from .groups import ApiGroupDescriptor, describe

logger = logging.getLogger(__name__)

# Newer FastAPI releases keep included routers as nested entries of
# ``app.routes`` and expose ``iter_route_contexts`` to walk them with the
# include prefixes applied.  Older releases flatten included routes.
_iter_route_contexts = getattr(fastapi_routing, "iter_route_contexts", None)

# Path segment reserved for the group listing endpoint.
SWAGGER_CONFIG = "swagger-config"


class DocumentationConfigError(Exception):
    """Raised when the documentation groups are misconfigured."""


class DuplicateGroupError(DocumentationConfigError):
    """Raised when a group name is registered twice."""

    def __init__(self, group_name: str) -> None:
        super().__init__(f"Documentation group '{group_name}' is already registered")
        self.group_name = group_name


class InvalidGroupError(DocumentationConfigError):
    """Raised when a group name cannot be used in a document URL."""


class GroupNotFoundError(KeyError):
    """Raised when looking up a group that was never registered."""


class DocumentationHost:
    """Registry of documentation groups for one application."""

    def __init__(
        self,
        *,
        title: str,
        version: str,
        description: Optional[str] = None,
        api_docs_path: str = "/v3/api-docs",
        swagger_ui_path: str = "/swagger-ui",
    ) -> None:
        self.title = title
        self.version = version
        self.description = description
        self.api_docs_path = "/" + api_docs_path.strip("/")
        self.swagger_ui_path = "/" + swagger_ui_path.strip("/")
        self._groups: Dict[str, ApiGroupDescriptor] = {}
        self._documents: Dict[Tuple[int, str], Dict[str, Any]] = {}
        self._app: Optional[FastAPI] = None

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    def register(self, descriptor: ApiGroupDescriptor) -> ApiGroupDescriptor:
        """Add a group to the registry and return it.

        Raises:
            InvalidGroupError: if the name is blank, contains ``/`` or is
                the reserved ``swagger-config`` segment.
            DuplicateGroupError: if a group with the same name exists.
        """
        name = descriptor.group_name
        if not name or not name.strip():
            raise InvalidGroupError("Documentation group name must not be blank")
        if "/" in name:
            raise InvalidGroupError(f"Documentation group name '{name}' must not contain '/'")
        if name == SWAGGER_CONFIG:
            raise InvalidGroupError(f"Documentation group name '{name}' is reserved")
        if name in self._groups:
            raise DuplicateGroupError(name)
        self._groups[name] = descriptor
        logger.info("Registered documentation group '%s' (%s)", name, ", ".join(describe(descriptor)))
        return descriptor

    def register_all(self, descriptors: Iterable[ApiGroupDescriptor]) -> None:
        for descriptor in descriptors:
            self.register(descriptor)

    @property
    def groups(self) -> Tuple[ApiGroupDescriptor, ...]:
        """Registered groups in registration order."""
        return tuple(self._groups.values())

    def get_group(self, name: str) -> ApiGroupDescriptor:
        try:
            return self._groups[name]
        except KeyError:
            raise GroupNotFoundError(name) from None

    def group_url(self, name: str) -> str:
        return f"{self.api_docs_path}/{name}"

    # ------------------------------------------------------------------
    # Document generation
    # ------------------------------------------------------------------
    @staticmethod
    def iter_api_routes(routes: Iterable[Any]) -> Iterator[Any]:
        """Yield every API route of ``routes``, including those of
        included routers, with its full path.

        The yielded objects are accepted by ``get_openapi`` and expose
        ``path``, ``endpoint`` and ``include_in_schema``.
        """
        if _iter_route_contexts is None:
            for route in routes:
                if isinstance(route, APIRoute):
                    yield route
            return
        for context in _iter_route_contexts(list(routes)):
            if isinstance(context.original_route, APIRoute):
                yield context

    @classmethod
    def select_routes(cls, routes: Iterable[Any], descriptor: ApiGroupDescriptor) -> List[Any]:
        """Return the API routes that belong to ``descriptor``.

        Only API routes included in the schema are considered; their
        order in the application is preserved.
        """
        return [
            route
            for route in cls.iter_api_routes(routes)
            if route.include_in_schema and descriptor.matches_endpoint(route.path, route.endpoint)
        ]

    def openapi(self, app: FastAPI, name: str) -> Dict[str, Any]:
        """Return the OpenAPI document of group ``name`` for ``app``.

        The document is generated on first use and cached for the
        lifetime of the host.  Once installed, the host only serves the
        application it was installed on.
        """
        if self._app is not None and app is not self._app:
            raise DocumentationConfigError("The documentation host is installed on another application")
        descriptor = self.get_group(name)
        key = (id(app), name)
        document = self._documents.get(key)
        if document is None:
            routes = self.select_routes(app.routes, descriptor)
            logger.debug("Generating OpenAPI document for group '%s' with %d routes", name, len(routes))
            document = get_openapi(
                title=self.title,
                version=self.version,
                description=self.description,
                routes=routes,
            )
            self._documents[key] = document
        return document

    def swagger_config(self) -> Dict[str, Any]:
        """Return the group listing consumed by Swagger UI."""
        return {
            "urls": [
                {"url": self.group_url(group.group_name), "name": group.label}
                for group in self._groups.values()
            ]
        }

    # ------------------------------------------------------------------
    # HTTP routes
    # ------------------------------------------------------------------
    def install(self, app: FastAPI) -> None:
        """Serve this host's documents and Swagger UI from ``app``.

        The host is stored as ``app.state.documentation``.  Installing a
        second host on the same application, or one host on two
        applications, is a configuration error.
        """
        if getattr(app.state, "documentation", None) is not None:
            raise DocumentationConfigError("A documentation host is already installed on this application")
        if self._app is not None:
            raise DocumentationConfigError("The documentation host is installed on another application")
        self._app = app

        router = APIRouter(include_in_schema=False)

        # Registered before the group route so that "swagger-config" is
        # never captured as a group name.
        @router.get(f"{self.api_docs_path}/{SWAGGER_CONFIG}")
        async def get_swagger_config() -> JSONResponse:
            return JSONResponse(self.swagger_config())

        @router.get(self.api_docs_path + "/{group_name}")
        async def get_group_openapi(group_name: str) -> JSONResponse:
            try:
                document = self.openapi(app, group_name)
            except GroupNotFoundError:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Documentation group not found")
            return JSONResponse(document)

        @router.get(self.swagger_ui_path)
        async def get_swagger_ui(group: Optional[str] = Query(None)) -> HTMLResponse:
            if group is None:
                if not self._groups:
                    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No documentation groups")
                group = next(iter(self._groups))
            try:
                descriptor = self.get_group(group)
            except GroupNotFoundError:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Documentation group not found")
            return get_swagger_ui_html(
                openapi_url=self.group_url(descriptor.group_name),
                title=f"{self.title} - {descriptor.label}",
            )

        app.include_router(router)
        app.state.documentation = self
        logger.info(
            "Serving %d documentation group(s) under %s and Swagger UI at %s",
            len(self._groups),
            self.api_docs_path,
            self.swagger_ui_path,
        )
