"""
FastAPI dependency injection.

Provides a fresh builder factory per request so no URL state is
shared between independent requests.
"""

from typing import Callable, Optional

from urlbuildr.core.config import settings
from urlbuildr.domain.url_builder import Initializer, URLBuilder

BuilderFactory = Callable[..., URLBuilder]


def get_builder_factory() -> BuilderFactory:
    """
    Provide a callable that creates URLBuilder instances.

    The factory applies the configured query-encoding default unless
    the caller overrides it.
    """

    def factory(
        initializer: Initializer = None, encode_queries: Optional[bool] = None
    ) -> URLBuilder:
        if encode_queries is None:
            encode_queries = settings.encode_queries
        return URLBuilder(initializer, encode_queries=encode_queries)

    return factory
