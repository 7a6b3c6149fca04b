"""API schemas."""

from src.api.schemas.books import ApiInfo, Book, BookInput, DeleteBookResponse, ErrorResponse

__all__ = ["ApiInfo", "Book", "BookInput", "DeleteBookResponse", "ErrorResponse"]
