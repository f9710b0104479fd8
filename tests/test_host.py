"""Tests for the documentation host."""

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from learn.event.docs import (
    ApiGroupDescriptor,
    DocumentationConfigError,
    DocumentationHost,
    DuplicateGroupError,
    GroupNotFoundError,
    InvalidGroupError,
)


def build_app() -> FastAPI:
    """An application with endpoints from two different modules."""
    app = FastAPI(title="Sample", version="0.1.0")
    router = APIRouter()

    @router.get("/events/", tags=["events"])
    async def list_events():
        return []

    @router.get("/events/{event_id}", tags=["events"])
    async def get_event(event_id: int):
        return {"id": event_id}

    @router.get("/hidden", include_in_schema=False)
    async def hidden():
        return {}

    async def list_partners():
        return []

    list_partners.__module__ = "partners.api"
    router.add_api_route("/partners/", list_partners, methods=["GET"], tags=["partners"])

    app.include_router(router)
    return app


@pytest.fixture
def host():
    return DocumentationHost(title="Sample", version="0.1.0", description="Sample API")


class TestRegistry:
    def test_register_returns_descriptor_and_keeps_order(self, host):
        first = ApiGroupDescriptor("public", ("/**",), (__name__,))
        second = ApiGroupDescriptor("partners", ("/partners/**",))

        assert host.register(first) is first
        host.register(second)

        assert host.groups == (first, second)
        assert host.get_group("partners") is second

    def test_duplicate_name(self, host):
        host.register(ApiGroupDescriptor("public", ("/**",)))

        with pytest.raises(DuplicateGroupError):
            host.register(ApiGroupDescriptor("public", ("/api/**",)))
        assert len(host.groups) == 1

    @pytest.mark.parametrize("name", ["", "   ", "a/b", "swagger-config"])
    def test_invalid_names(self, host, name):
        with pytest.raises(InvalidGroupError):
            host.register(ApiGroupDescriptor(name))

    def test_config_errors_share_a_base(self):
        assert issubclass(DuplicateGroupError, DocumentationConfigError)
        assert issubclass(InvalidGroupError, DocumentationConfigError)

    def test_unknown_group(self, host):
        with pytest.raises(GroupNotFoundError):
            host.get_group("missing")

    def test_paths_are_normalised(self):
        host = DocumentationHost(title="t", version="1", api_docs_path="docs/", swagger_ui_path="/ui/")

        assert host.api_docs_path == "/docs"
        assert host.swagger_ui_path == "/ui"
        assert host.group_url("public") == "/docs/public"


class TestDocuments:
    def test_package_filter(self, host):
        app = build_app()
        host.register(ApiGroupDescriptor("local", ("/**",), (__name__,)))

        document = host.openapi(app, "local")

        assert set(document["paths"]) == {"/events/", "/events/{event_id}"}
        assert document["info"] == {"title": "Sample", "version": "0.1.0", "description": "Sample API"}

    def test_path_filter_across_packages(self, host):
        app = build_app()
        host.register(ApiGroupDescriptor("partners", ("/partners/**",)))

        assert set(host.openapi(app, "partners")["paths"]) == {"/partners/"}

    def test_hidden_routes_are_skipped(self, host):
        app = build_app()
        group = ApiGroupDescriptor("all")

        paths = [route.path for route in host.select_routes(app.routes, group)]

        assert paths == ["/events/", "/events/{event_id}", "/partners/"]

    def test_nested_routers_use_full_paths(self, host):
        app = FastAPI()
        inner = APIRouter()

        @inner.get("/", tags=["events"])
        async def list_events():
            return []

        @inner.get("/internal", include_in_schema=False)
        async def internal():
            return {}

        outer = APIRouter()
        outer.include_router(inner, prefix="/events")
        app.include_router(outer, prefix="/api/v1")
        host.register(ApiGroupDescriptor("api", ("/api/**",), (__name__,)))

        paths = [route.path for route in host.select_routes(app.routes, host.get_group("api"))]

        assert paths == ["/api/v1/events/"]
        assert set(host.openapi(app, "api")["paths"]) == {"/api/v1/events/"}

    def test_excluded_router_is_skipped(self, host):
        app = build_app()
        extra = APIRouter()

        @extra.get("/extra")
        async def extra_route():
            return {}

        app.include_router(extra, include_in_schema=False)
        host.register(ApiGroupDescriptor("all"))

        assert "/extra" not in host.openapi(app, "all")["paths"]

    def test_each_app_gets_its_own_document(self, host):
        first = FastAPI()
        second = FastAPI()

        @first.get("/a")
        async def route_a():
            return {}

        @second.get("/b")
        async def route_b():
            return {}

        host.register(ApiGroupDescriptor("all"))

        assert set(host.openapi(first, "all")["paths"]) == {"/a"}
        assert set(host.openapi(second, "all")["paths"]) == {"/b"}

    def test_document_is_cached(self, host):
        app = build_app()
        host.register(ApiGroupDescriptor("all"))

        assert host.openapi(app, "all") is host.openapi(app, "all")

    def test_swagger_config_lists_groups(self, host):
        host.register(ApiGroupDescriptor("public", display_name="Public API"))
        host.register(ApiGroupDescriptor("partners"))

        assert host.swagger_config() == {
            "urls": [
                {"url": "/v3/api-docs/public", "name": "Public API"},
                {"url": "/v3/api-docs/partners", "name": "partners"},
            ]
        }


class TestInstall:
    @pytest.fixture
    def client(self, host):
        app = build_app()
        host.register(ApiGroupDescriptor("local", ("/**",), (__name__,)))
        host.register(ApiGroupDescriptor("partners", ("/partners/**",)))
        host.install(app)
        return TestClient(app)

    def test_group_document(self, client):
        response = client.get("/v3/api-docs/local")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/events/{event_id}" in paths
        assert not any(path.startswith("/v3/api-docs") or path.startswith("/swagger-ui") for path in paths)

    def test_unknown_group_document(self, client):
        response = client.get("/v3/api-docs/nope")

        assert response.status_code == 404
        assert response.json() == {"detail": "Documentation group not found"}

    def test_swagger_config_route(self, client):
        response = client.get("/v3/api-docs/swagger-config")

        assert response.status_code == 200
        assert [entry["name"] for entry in response.json()["urls"]] == ["local", "partners"]

    def test_swagger_ui_defaults_to_first_group(self, client):
        response = client.get("/swagger-ui")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "/v3/api-docs/local" in response.text

    def test_swagger_ui_for_group(self, client):
        response = client.get("/swagger-ui", params={"group": "partners"})

        assert response.status_code == 200
        assert "/v3/api-docs/partners" in response.text

    def test_swagger_ui_unknown_group(self, client):
        assert client.get("/swagger-ui", params={"group": "nope"}).status_code == 404

    def test_swagger_ui_without_groups(self, host):
        app = build_app()
        host.install(app)

        assert TestClient(app).get("/swagger-ui").status_code == 404

    def test_install_twice(self, host):
        app = build_app()
        host.install(app)

        with pytest.raises(DocumentationConfigError):
            DocumentationHost(title="Other", version="1").install(app)

    def test_host_serves_one_app_only(self, host):
        first = build_app()
        second = build_app()
        host.register(ApiGroupDescriptor("all"))
        host.install(first)

        with pytest.raises(DocumentationConfigError):
            host.install(second)
        with pytest.raises(DocumentationConfigError):
            host.openapi(second, "all")
        assert getattr(second.state, "documentation", None) is None
        assert "/events/" in TestClient(first).get("/v3/api-docs/all").json()["paths"]
