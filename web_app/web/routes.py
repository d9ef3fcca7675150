"""Shortener routes implementation.

Errors are written as plain text. Decode and store failures on /add and
store failures on DELETE all map to 500, so clients cannot tell error kinds
apart by status code alone.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse
from pydantic import ValidationError

from shortener.common.url_builder import build_short_url
from shortener.errors import DecodeError, ShortenerError
from ..api.schemas import AddRequest, AddResponse

router = APIRouter()

EMPTY_HASH_MESSAGE = "shortened URL is empty"


def _unexpected_error(request: Request, error: Exception) -> PlainTextResponse:
    # Picked up by LoggingMiddleware
    request.state.error_detail = str(error)
    return PlainTextResponse(
        content=f"unexpected error: {error}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _empty_hash() -> PlainTextResponse:
    return PlainTextResponse(
        content=EMPTY_HASH_MESSAGE,
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def _decode_add_request(request: Request) -> AddRequest:
    """Parse the /add body, raising DecodeError on any problem."""
    raw = await request.body()
    try:
        return AddRequest.model_validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"{location}: {first['msg']}" if location else first["msg"]
        raise DecodeError(f"unable to decode request body ({detail})") from e


@router.post(
    "/add",
    status_code=status.HTTP_201_CREATED,
    response_model=AddResponse,
    responses={
        500: {"description": "Undecodable body or store failure (plain text)"},
    },
    summary="Create short URL",
    description="Shorten a URL. The short code is derived from the SHA-1 digest of the URL.",
)
async def add_path(request: Request):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config

    try:
        body = await _decode_add_request(request)
        result = await service.shorten(body.url)
    except ShortenerError as e:
        return _unexpected_error(request, e)

    response = AddResponse(
        shortened_url=build_short_url(
            short_code=result["short_code"],
            base_url=config.base_url,
            path_prefix=config.path_prefix,
        ),
        long_url=result["long_url"],
    )

    return JSONResponse(
        content=response.model_dump(),
        status_code=status.HTTP_201_CREATED,
    )


@router.delete("/", include_in_schema=False)
async def delete_empty_path():
    """Reject a delete without a short code."""
    return _empty_hash()


@router.delete(
    "/{short_code}",
    response_class=PlainTextResponse,
    responses={
        500: {"description": "Store failure, including unknown short code"},
    },
    summary="Delete short URL",
)
async def delete_path(request: Request, short_code: str):
    """Delete a short URL."""
    service = request.app.state.service

    try:
        await service.delete(short_code)
    except ShortenerError as e:
        return _unexpected_error(request, e)

    return PlainTextResponse(content="deleted", status_code=status.HTTP_200_OK)


@router.get("/", include_in_schema=False)
async def redirect_empty_path():
    """Reject a redirect without a short code."""
    return _empty_hash()


@router.get(
    "/{short_code}",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    responses={
        404: {"description": "Short code not found"},
    },
    summary="Redirect to original URL",
)
async def redirect_path(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service

    try:
        long_url = await service.resolve(short_code)
    except ShortenerError as e:
        request.state.error_detail = str(e)
        return PlainTextResponse(content="not found", status_code=status.HTTP_404_NOT_FOUND)

    return RedirectResponse(url=long_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
