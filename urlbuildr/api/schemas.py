"""
API request/response schemas.

These Pydantic models define the contract between the API layer
and external clients. They are separate from the domain option set
so the HTTP surface can evolve independently.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field


class UrlBuildRequest(BaseModel):
    """
    Request body for POST /urls.

    Either a literal base ``url`` (extended fluently with the other
    fields) or a structured initializer.
    """

    url: Optional[str] = Field(
        None,
        description="Literal base URL; when set, prefix/host/port/pathPrefix are ignored",
        json_schema_extra={"example": "https://thegreatsite.co:65132"},
    )
    prefix: Optional[str] = Field(None, description="Literal placed before the host")
    host: Optional[str] = Field(None, description="Host name")
    port: Optional[Union[int, str]] = Field(None, description="Port number")
    path_prefix: Optional[str] = Field(
        None, alias="pathPrefix", description="First path component"
    )
    additions: list[Union[str, int]] = Field(
        default_factory=list,
        description="Path segments, may contain ':name' placeholders",
        json_schema_extra={"example": ["users", ":userId", "cart"]},
    )
    params: Union[dict[str, Any], list[Any]] = Field(
        default_factory=dict,
        description="Placeholder values as a mapping or name/value list",
        json_schema_extra={"example": {"userId": 54298}},
    )
    queries: Union[dict[str, Any], list[Any]] = Field(
        default_factory=dict,
        description="Query parameters as a mapping or name/value list",
        json_schema_extra={"example": {"showAllPurchases": True}},
    )
    encode_queries: Optional[bool] = Field(
        None, description="Percent-encode query keys and values"
    )

    model_config = {"populate_by_name": True}


class UrlBuildResponse(BaseModel):
    """Response body carrying the rendered URL."""

    url: str = Field(..., description="The assembled URL")


class UrlDefaultsResponse(BaseModel):
    """The configured defaults applied to structured initializers."""

    prefix: str = Field(..., description="Default prefix")
    host: str = Field(..., description="Default host")
    port: Optional[Union[int, str]] = Field(None, description="Default port")
    path_prefix: str = Field(..., alias="pathPrefix", description="Default path prefix")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(..., description="Error description")
