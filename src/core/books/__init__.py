"""Book management module."""

from src.core.books.store import BookStore

__all__ = ["BookStore"]
