"""
URL builder — the fluent surface over a UrlDescriptor.

Construct from a literal base URL or a structured initializer, chain
mutators, then call to_string(). Rendering happens at most once per
mutation: every mutator clears the cache flag and to_string() only
re-renders while the flag is clear.

    >>> URLBuilder("https://thegreatsite.co:65132") \\
    ...     .add("accounts", "/users", "/:userId/", "cart") \\
    ...     .query({"showAllPurchases": True}) \\
    ...     .param({"userId": 54298}) \\
    ...     .to_string()
    'https://thegreatsite.co:65132/accounts/users/54298/cart?showAllPurchases=true'
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from urlbuildr.core.exceptions import InvalidArgumentShape
from urlbuildr.core.logging import get_logger
from urlbuildr.domain.canonicalizer import accumulate
from urlbuildr.domain.models import (
    UrlDescriptor,
    UrlOptions,
    default_option_values,
    default_options,
    option_field_name,
)
from urlbuildr.domain.renderer import render
from urlbuildr.utils.sanitize import sanitize_path

logger = get_logger(__name__)

_MISSING = object()

Initializer = Union[str, Mapping, UrlOptions, None]


class URLBuilder:
    """Assembles a URL from its parts, caching the rendered string."""

    def __init__(
        self, initializer: Initializer = None, *, encode_queries: bool = False
    ) -> None:
        self.encode_queries = encode_queries
        self._descriptor = self._descriptor_for(initializer)

    @staticmethod
    def _descriptor_for(initializer: Initializer) -> UrlDescriptor:
        if isinstance(initializer, str):
            return UrlDescriptor.from_literal(initializer)
        if initializer is None:
            return UrlDescriptor.from_options(default_options())
        if isinstance(initializer, UrlOptions):
            # Both sides are already sanitised
            options = default_options().model_copy(
                update=initializer.model_dump(exclude_unset=True)
            )
            return UrlDescriptor.from_options(options)
        if not isinstance(initializer, Mapping):
            raise InvalidArgumentShape(
                initializer, "initializer must be a URL string or a mapping of options"
            )
        merged = default_option_values()
        merged.update(_normalise_fields(initializer))
        return UrlDescriptor.from_options(UrlOptions.model_validate(merged))

    # ── Inspection ───────────────────────────────────────────

    @property
    def descriptor(self) -> UrlDescriptor:
        """A snapshot of the record; edits to it do not reach the builder."""
        return self._descriptor.model_copy(deep=True)

    @property
    def options(self) -> UrlOptions:
        """The current option set, with params and queries canonicalised."""
        return self._descriptor.to_options()

    @property
    def is_built(self) -> bool:
        return self._descriptor.is_built

    # ── Mutators ─────────────────────────────────────────────

    def set(
        self,
        field: Union[str, Mapping, None] = None,
        value: Any = _MISSING,
        **fields: Any,
    ) -> "URLBuilder":
        """
        Overwrite one or more options.

        Accepts ``set("host", "example.com")``, ``set({"host": ..., "port": ...})``
        or ``set(host=..., port=...)``. ``additions`` replaces the segment
        list and ``params``/``queries`` replace their collections. Unknown
        option names are logged and ignored.
        """
        updates: dict[str, Any] = {}
        if value is not _MISSING and not isinstance(field, str):
            raise InvalidArgumentShape(field, "set() only takes a value after a field name")
        if isinstance(field, Mapping):
            updates.update(field)
        elif isinstance(field, str):
            if value is _MISSING:
                raise InvalidArgumentShape(field, "set() with a field name needs a value")
            updates[field] = value
        elif field is not None:
            raise InvalidArgumentShape(field, "set() takes a field name or a mapping")
        updates.update(fields)

        for name, new_value in _normalise_fields(updates).items():
            self._apply(name, new_value)
        self._descriptor.invalidate()
        return self

    def _apply(self, name: str, value: Any) -> None:
        descriptor = self._descriptor
        if name in ("prefix", "host"):
            setattr(descriptor, name, "" if value is None else str(value))
        elif name == "port":
            descriptor.port = value
        elif name == "path_prefix":
            descriptor.path_prefix = sanitize_path(value)
        elif name == "additions":
            descriptor.segments = UrlOptions(additions=value).additions
        elif name == "params":
            descriptor.parameters = accumulate(value)
        elif name == "queries":
            descriptor.queries = accumulate(value)

    def prefix(self, value: str) -> "URLBuilder":
        return self.set("prefix", value)

    def host(self, value: str) -> "URLBuilder":
        return self.set("host", value)

    def port(self, value: Optional[Union[int, str]]) -> "URLBuilder":
        return self.set("port", value)

    def path_prefix(self, value: str) -> "URLBuilder":
        return self.set("path_prefix", value)

    def add(self, *segments: Any) -> "URLBuilder":
        """Append path segments in call order, one slash trimmed from each end."""
        self._descriptor.segments.extend(sanitize_path(s) for s in segments)
        self._descriptor.invalidate()
        return self

    def param(self, *items: Any) -> "URLBuilder":
        """Merge placeholder values; see accumulate() for accepted shapes."""
        self._descriptor.parameters.update(accumulate(*items))
        self._descriptor.invalidate()
        return self

    def query(self, *items: Any) -> "URLBuilder":
        """Merge query parameters; a repeated key keeps its position."""
        self._descriptor.queries.update(accumulate(*items))
        self._descriptor.invalidate()
        return self

    def clear(self) -> "URLBuilder":
        """Reset every part, segments and collections included, to the defaults."""
        self._descriptor = UrlDescriptor.from_options(default_options())
        return self

    # ── Rendering ────────────────────────────────────────────

    def to_string(self) -> str:
        descriptor = self._descriptor
        if descriptor.is_built:
            logger.debug("Render cache hit: %s", descriptor.url_string)
            return descriptor.url_string

        descriptor.url_string = render(descriptor, encode_queries=self.encode_queries)
        descriptor.is_built = True
        logger.debug("Rendered url=%s", descriptor.url_string)
        return descriptor.url_string

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"URLBuilder({self.to_string()!r})"


def _normalise_fields(fields: Mapping) -> dict[str, Any]:
    """Map option names and aliases to field names, dropping unknown ones."""
    normalised: dict[str, Any] = {}
    for key, value in fields.items():
        name = option_field_name(str(key))
        if name is None:
            logger.warning("Ignoring unknown URL option %r", key)
            continue
        normalised[name] = value
    return normalised
