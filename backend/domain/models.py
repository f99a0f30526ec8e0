"""
Core domain models for the book catalog.
These are framework-agnostic and can be used across all services.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Author:
    """
    A persisted author.

    Authors are owned independently of books; a book points at exactly one.
    """
    id: int
    name: Optional[str] = None
    biography: Optional[str] = None


@dataclass
class Book:
    """A persisted book together with the author it references."""
    id: int
    title: str
    author: Author
    number_of_page: Optional[int] = None


# Write inputs, built from request payloads by explicit field mapping

@dataclass
class AuthorInput:
    name: Optional[str] = None
    biography: Optional[str] = None


@dataclass
class BookInput:
    """
    Fields a caller supplies when creating or updating a book.

    Nothing here is guaranteed present; the service checks structure before
    touching the store.
    """
    title: Optional[str] = None
    number_of_page: Optional[int] = None
    author: Optional[AuthorInput] = None
