"""Domain exceptions."""


class BooksAPIError(Exception):
    """Base class for errors raised by the books service."""


class BookNotFoundError(BooksAPIError):
    """No book in the store has the requested ID."""

    def __init__(self, book_id: int | None = None) -> None:
        self.book_id = book_id
        super().__init__("Book not found")
