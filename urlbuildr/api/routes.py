"""
API routes for the URL builder.

Exposes URL assembly over HTTP. Each request gets its own builder
from the dependency factory; nothing is kept between requests.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from urlbuildr.api.dependencies import BuilderFactory, get_builder_factory
from urlbuildr.api.schemas import (
    ErrorResponse,
    UrlBuildRequest,
    UrlBuildResponse,
    UrlDefaultsResponse,
)
from urlbuildr.core.exceptions import InvalidArgumentShape
from urlbuildr.core.logging import get_logger
from urlbuildr.domain.models import default_options

logger = get_logger(__name__)

router = APIRouter(prefix="/urls", tags=["URLs"])


@router.post(
    "",
    response_model=UrlBuildResponse,
    status_code=status.HTTP_200_OK,
    summary="Assemble a URL",
    description=(
        "Builds a URL from a structured initializer, or from a literal base "
        "URL extended with additions, params and queries."
    ),
    responses={
        422: {"model": ErrorResponse, "description": "Uninterpretable argument"},
    },
)
async def build_url(
    request: UrlBuildRequest,
    factory: BuilderFactory = Depends(get_builder_factory),
) -> UrlBuildResponse:
    """
    POST /urls — Render the described URL.

    - With ``url`` set, the literal is the base and the remaining fields
      are applied fluently (add, param, query).
    - Otherwise the body is a structured initializer merged over the
      configured defaults.
    """
    try:
        if request.url is not None:
            builder = (
                factory(request.url, encode_queries=request.encode_queries)
                .add(*request.additions)
                .param(request.params)
                .query(request.queries)
            )
        else:
            initializer = request.model_dump(
                exclude_none=True, exclude={"url", "encode_queries"}
            )
            builder = factory(initializer, encode_queries=request.encode_queries)

        url = builder.to_string()
        logger.info("Built url=%s", url)
        return UrlBuildResponse(url=url)

    except InvalidArgumentShape as exc:
        logger.warning("Rejected URL request: %s", exc.message)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=exc.message,
        ) from exc


@router.get(
    "/defaults",
    response_model=UrlDefaultsResponse,
    summary="Show configured URL defaults",
)
async def get_defaults() -> UrlDefaultsResponse:
    """GET /urls/defaults — The defaults merged under structured initializers."""
    options = default_options()
    return UrlDefaultsResponse(
        prefix=options.prefix,
        host=options.host,
        port=options.port,
        path_prefix=options.path_prefix,
    )
