"""Pydantic schemas for the informational endpoints."""

from typing import List

from pydantic import BaseModel, Field


class DocumentationLink(BaseModel):
    """Location of one documentation group's OpenAPI document."""

    group: str = Field(..., description="Documentation group name")
    url: str = Field(..., description="Path of the group's OpenAPI document")


class InfoRead(BaseModel):
    """General information about the running service."""

    project: str
    version: str
    documentation: List[DocumentationLink] = Field(
        default_factory=list,
        description="Registered documentation groups; empty when documentation is disabled",
    )


class HealthRead(BaseModel):
    status: str = "ok"
