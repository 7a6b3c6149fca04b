"""Book schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BookInput(BaseModel):
    """
    Request body for creating or replacing a book.

    Fields are not type-checked: whatever the client sends is stored as-is,
    and anything omitted becomes null.
    """

    model_config = ConfigDict(extra="ignore")

    title: Any = None
    author: Any = None
    genre: Any = None
    copies_available: Any = Field(default=None, alias="copiesAvailable")


class Book(BaseModel):
    """A book held by the store."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(description="Store-assigned book identifier")
    title: Any = None
    author: Any = None
    genre: Any = None
    copies_available: Any = Field(default=None, alias="copiesAvailable")


class DeleteBookResponse(BaseModel):
    """Response returned after a book is removed."""
    message: str = "Book deleted successfully"
    book: Book


class ErrorResponse(BaseModel):
    """Error body returned for failed lookups."""
    error: str


class ApiInfo(BaseModel):
    """Root discovery document."""
    message: str
    endpoints: dict[str, str]
