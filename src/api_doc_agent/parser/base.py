"""Data models for generated OpenAPI documents.

Providers return Operation objects; the processor collects them into a
path-keyed map which the assembler wraps into an OpenApiDocument.
Field aliases carry the OpenAPI key names (``in``, ``schema``,
``requestBody``).
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Parameter(BaseModel):
    """A single operation parameter (query, path, header, body or cookie)."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    location: Literal["query", "path", "header", "body", "cookie"] = Field(alias="in")
    required: bool = False
    description: str | None = None
    json_schema: dict | None = Field(default=None, alias="schema")
    example: Any = None
    examples: dict | None = None


class Operation(BaseModel):
    """Description of one HTTP method on one path."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    summary: str
    description: str
    parameters: list[Parameter] | None = None
    request_body: dict | None = Field(default=None, alias="requestBody")
    responses: dict | None = None
    tags: list[str] | None = None


PathItem = dict[str, Operation]  # {method: Operation}
ResultMap = dict[str, PathItem]  # {api_path: PathItem}


class Info(BaseModel):
    title: str | None = None
    version: str | None = None
    description: str | None = None


class Server(BaseModel):
    url: str
    description: str | None = None


class OpenApiDocument(BaseModel):
    """The assembled OpenAPI 3.0 document."""

    model_config = ConfigDict(frozen=True)

    openapi: str
    info: Info
    servers: list[Server] = []
    paths: ResultMap

    def to_dict(self) -> dict:
        """Plain JSON-compatible dict with OpenAPI key names, None fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
