"""Book CRUD endpoints."""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_book_input, get_book_store
from src.api.schemas.books import Book, BookInput, DeleteBookResponse, ErrorResponse
from src.core.books.store import BookStore
from src.core.errors import BookNotFoundError

router = APIRouter(prefix="/api/books", tags=["Books"])

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Book not found"}}


def parse_book_id(raw: str) -> int:
    """
    Parse a path segment into a book ID.

    Reads the leading integer the way a lenient parser would ("2abc" -> 2,
    "1.5" -> 1). Segments with no leading digits can never match a stored
    book, so they raise BookNotFoundError instead of a validation error.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        raise BookNotFoundError()
    return int(match.group(1))


@router.get("", response_model=list[Book])
async def list_books(
    store: Annotated[BookStore, Depends(get_book_store)],
) -> list[Book]:
    """List all books."""
    return store.list_books()


@router.get("/{book_id}", response_model=Book, responses=NOT_FOUND_RESPONSE)
async def get_book(
    book_id: str,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> Book:
    """Get a specific book by ID."""
    return store.get_book(parse_book_id(book_id))


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
async def create_book(
    store: Annotated[BookStore, Depends(get_book_store)],
    data: Annotated[BookInput, Depends(get_book_input)],
) -> Book:
    """
    Add a new book.

    The ID is assigned by the store; any ID in the body is ignored.
    """
    return store.create_book(data)


@router.put("/{book_id}", response_model=Book, responses=NOT_FOUND_RESPONSE)
async def update_book(
    book_id: str,
    store: Annotated[BookStore, Depends(get_book_store)],
    data: Annotated[BookInput, Depends(get_book_input)],
) -> Book:
    """
    Replace a book by ID.

    This is a full replace: fields left out of the body are cleared.
    """
    return store.update_book(parse_book_id(book_id), data)


@router.delete("/{book_id}", response_model=DeleteBookResponse, responses=NOT_FOUND_RESPONSE)
async def delete_book(
    book_id: str,
    store: Annotated[BookStore, Depends(get_book_store)],
) -> DeleteBookResponse:
    """Delete a book by ID."""
    book = store.delete_book(parse_book_id(book_id))
    return DeleteBookResponse(book=book)
