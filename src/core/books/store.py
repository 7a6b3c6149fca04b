"""In-memory book storage."""

import threading

import structlog

from src.api.schemas.books import Book, BookInput
from src.core.errors import BookNotFoundError

logger = structlog.get_logger(__name__)

SEED_BOOKS: tuple[dict, ...] = (
    {
        "id": 1,
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "genre": "Fiction",
        "copies_available": 5,
    },
    {
        "id": 2,
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "copies_available": 3,
    },
    {
        "id": 3,
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian Fiction",
        "copies_available": 7,
    },
)


class BookStore:
    """
    Ordered in-memory collection of books.

    Books keep insertion order. Every operation holds the same lock, so each
    call is atomic with respect to concurrent requests.
    """

    def __init__(self, seed: bool = True) -> None:
        self._seed = seed
        self._books: list[Book] = []
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        """Restore the store to its initial contents."""
        with self._lock:
            self._books = [Book(**data) for data in SEED_BOOKS] if self._seed else []

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: int) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        logger.debug("Book lookup missed", book_id=book_id)
        raise BookNotFoundError(book_id)

    def _next_id(self) -> int:
        # Highest remaining id wins, so deleting the newest book frees its id.
        return max((book.id for book in self._books), default=0) + 1

    def list_books(self) -> list[Book]:
        """List all books in store order."""
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: int) -> Book:
        """Get a book by ID."""
        with self._lock:
            return self._books[self._index_of(book_id)]

    def create_book(self, data: BookInput) -> Book:
        """Append a new book with the next free ID."""
        with self._lock:
            book = Book(id=self._next_id(), **data.model_dump())
            self._books.append(book)
        logger.info("Book created", book_id=book.id)
        return book

    def update_book(self, book_id: int, data: BookInput) -> Book:
        """Replace every field of a book except its ID."""
        with self._lock:
            index = self._index_of(book_id)
            book = Book(id=book_id, **data.model_dump())
            self._books[index] = book
        logger.info("Book updated", book_id=book_id)
        return book

    def delete_book(self, book_id: int) -> Book:
        """Remove a book and return it."""
        with self._lock:
            book = self._books.pop(self._index_of(book_id))
        logger.info("Book deleted", book_id=book_id)
        return book
