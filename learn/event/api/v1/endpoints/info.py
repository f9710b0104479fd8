"""
Information endpoint for API v1.

This route returns the project name and version together with the
documentation groups the service publishes, so that clients can find
the OpenAPI documents without knowing the documentation paths.  It is
publicly accessible.
"""

from fastapi import APIRouter, Request

from learn.event.schemas.info import DocumentationLink, InfoRead

router = APIRouter()


@router.get("/", response_model=InfoRead)
async def get_info(request: Request) -> InfoRead:
    """Return service information and the published documentation groups."""
    app = request.app
    host = getattr(app.state, "documentation", None)
    links = []
    if host is not None:
        links = [DocumentationLink(group=g.group_name, url=host.group_url(g.group_name)) for g in host.groups]
    return InfoRead(project=app.title, version=app.version, documentation=links)
