"""Request-scoped dependencies."""

import structlog
from fastapi import Request

from src.api.schemas.books import BookInput
from src.core.books.store import BookStore

logger = structlog.get_logger(__name__)


def get_book_store(request: Request) -> BookStore:
    """Get the book store owned by the running application."""
    return request.app.state.book_store


async def get_book_input(request: Request) -> BookInput:
    """
    Read a book body from the request.

    Only a JSON object sent as ``application/json`` contributes fields.
    Any other body (missing, another content type, unparsable, or a JSON
    value that is not an object) yields a book with every field null.
    """
    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json":
        return BookInput()

    try:
        payload = await request.json()
    except ValueError:
        logger.debug("Ignoring unparsable book body", path=request.url.path)
        return BookInput()

    if not isinstance(payload, dict):
        return BookInput()
    return BookInput.model_validate(payload)
