"""
Domain models — the option set and the mutable URL descriptor.

UrlOptions is what callers hand in; UrlDescriptor is what the renderer
reads. Both are plain Pydantic models with no framework dependencies.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from urlbuildr.core.config import settings
from urlbuildr.domain.canonicalizer import accumulate
from urlbuildr.utils.sanitize import sanitize_path


class UrlOptions(BaseModel):
    """
    Structured initializer for a URL.

    Accepts the camelCase ``pathPrefix`` alias alongside ``path_prefix``.
    ``params`` and ``queries`` keep whatever shape the caller used; they are
    canonicalised when the descriptor is built.
    """

    prefix: str = Field(default="", description="Literal placed before the host")
    host: str = Field(default="", description="Host name; without it no base URL is built")
    port: Optional[Union[int, str]] = Field(
        default=None, description="Port rendered as ':port' after the host"
    )
    path_prefix: str = Field(
        default="",
        alias="pathPrefix",
        description="First path component, rendered before the additions",
    )
    additions: list[str] = Field(
        default_factory=list, description="Path segments appended in order"
    )
    params: Any = Field(
        default_factory=dict,
        description="Placeholder values, as a mapping or name/value list",
    )
    queries: Any = Field(
        default_factory=dict,
        description="Query parameters, as a mapping or name/value list",
    )

    model_config = {"populate_by_name": True}

    @field_validator("prefix", "host", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("path_prefix", mode="before")
    @classmethod
    def _sanitize_path_prefix(cls, value: Any) -> str:
        return sanitize_path(value)

    @field_validator("additions", mode="before")
    @classmethod
    def _sanitize_additions(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, (str, int, float)):
            value = [value]
        return [sanitize_path(item) for item in value]


def default_option_values() -> dict[str, Any]:
    """The configured defaults as raw, unsanitised field values."""
    return {
        "prefix": settings.url_prefix,
        "host": settings.url_host,
        "port": settings.url_port,
        "path_prefix": settings.url_path_prefix,
    }


def default_options() -> UrlOptions:
    """Build a fresh option set from the configured defaults."""
    return UrlOptions.model_validate(default_option_values())


def option_field_name(key: str) -> Optional[str]:
    """Resolve a field name or alias to the UrlOptions field name."""
    for name, info in UrlOptions.model_fields.items():
        if key == name or key == info.alias:
            return name
    return None


class UrlDescriptor(BaseModel):
    """
    Every part of a URL before rendering, plus the render cache.

    ``url_string`` is only meaningful while ``is_built`` is True.
    """

    prefix: str = ""
    host: str = ""
    port: Optional[Union[int, str]] = None
    path_prefix: str = ""
    segments: list[str] = Field(default_factory=list)
    parameters: dict[str, Any] = Field(default_factory=dict)
    queries: dict[str, Any] = Field(default_factory=dict)
    is_built: bool = False
    url_string: str = ""

    @classmethod
    def from_options(cls, options: UrlOptions) -> "UrlDescriptor":
        """Canonicalise an option set into a fresh descriptor."""
        return cls(
            prefix=options.prefix,
            host=options.host,
            port=options.port,
            path_prefix=options.path_prefix,
            segments=list(options.additions),
            parameters=accumulate(options.params),
            queries=accumulate(options.queries),
        )

    @classmethod
    def from_literal(cls, url: str) -> "UrlDescriptor":
        """A descriptor whose host is the whole literal URL."""
        return cls(host=sanitize_path(url))

    def to_options(self) -> UrlOptions:
        # Stored values are already sanitised and must not be stripped again
        return UrlOptions.model_construct(
            prefix=self.prefix,
            host=self.host,
            port=self.port,
            path_prefix=self.path_prefix,
            additions=list(self.segments),
            params=dict(self.parameters),
            queries=dict(self.queries),
        )

    def invalidate(self) -> None:
        self.is_built = False
