"""
Book composition service.

Owns the one multi-entity write in the system: every create/update persists
a new Author and then the Book that points at it, inside a single
transaction, so a failure on the book leaves no author behind.

Current behaviour worth knowing:
- update always creates a fresh Author instead of editing the existing one
- delete removes only the Book; its Author rows stay as orphans
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from db import session_scope
from domain.models import BookInput
from domain.outcome import Outcome
from repositories import AuthorsRepository, BooksRepository

logger = logging.getLogger(__name__)

# Range of a signed 64-bit INTEGER column; ids outside it can never exist
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _storable_id(book_id: int) -> bool:
    return MIN_ID <= book_id <= MAX_ID


def _not_found(book_id: int) -> Outcome:
    logger.warning("Book %s not found", book_id)
    return Outcome.not_found(f"Book with ID {book_id} not found")


def validate_book_input(data: Optional[BookInput]) -> Optional[str]:
    """Return a message describing the first structural problem, or None."""
    if data is None:
        return "Request body is required"
    if data.author is None:
        return "Author is required"
    if data.title is None or not data.title.strip():
        return "Title is required"
    if data.number_of_page is not None and data.number_of_page < 0:
        return "numberOfPage must be zero or greater"
    return None


class BookService:
    """Read, create, update and delete books with their authors."""

    def __init__(
        self,
        session_factory: sessionmaker,
        books_repo: BooksRepository,
        authors_repo: AuthorsRepository,
    ):
        self.session_factory = session_factory
        self.books_repo = books_repo
        self.authors_repo = authors_repo

    def list_all(self) -> Outcome:
        try:
            with session_scope(self.session_factory) as session:
                books = self.books_repo.find_all(session)
        except SQLAlchemyError as exc:
            logger.exception("Failed to list books")
            return Outcome.failure(str(exc))
        return Outcome.ok(books)

    def get_by_id(self, book_id: int) -> Outcome:
        if not _storable_id(book_id):
            return _not_found(book_id)
        try:
            with session_scope(self.session_factory) as session:
                book = self.books_repo.find_by_id(session, book_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to load book %s", book_id)
            return Outcome.failure(str(exc))
        if book is None:
            return _not_found(book_id)
        return Outcome.ok(book)

    def create(self, data: Optional[BookInput]) -> Outcome:
        """
        Persist a new Author from ``data.author`` and a new Book pointing at it.

        Both rows are written in one transaction.
        """
        problem = validate_book_input(data)
        if problem:
            logger.warning("Rejected book payload: %s", problem)
            return Outcome.invalid(problem)

        try:
            with session_scope(self.session_factory) as session:
                author = self.authors_repo.persist(session, data.author)
                book = self.books_repo.persist(session, data, author)
        except SQLAlchemyError as exc:
            logger.exception("Failed to persist book")
            return Outcome.failure(str(exc))

        logger.info("Persisted book %s", book.id)
        return Outcome.ok(book)

    def update(self, book_id: int, data: Optional[BookInput]) -> Outcome:
        """
        Overwrite title, page count and author of an existing book.

        A new Author row is created from the payload every time; the previous
        author is left untouched.
        """
        problem = validate_book_input(data)
        if problem:
            logger.warning("Rejected book payload: %s", problem)
            return Outcome.invalid(problem)

        if not _storable_id(book_id):
            return _not_found(book_id)

        try:
            with session_scope(self.session_factory) as session:
                if self.books_repo.find_by_id(session, book_id) is None:
                    return _not_found(book_id)
                author = self.authors_repo.persist(session, data.author)
                book = self.books_repo.overwrite(session, book_id, data, author)
        except SQLAlchemyError as exc:
            logger.exception("Failed to update book %s", book_id)
            return Outcome.failure(str(exc))

        logger.info("Updated book %s", book_id)
        return Outcome.ok(book)

    def delete(self, book_id: int) -> Outcome:
        if not _storable_id(book_id):
            return _not_found(book_id)
        try:
            with session_scope(self.session_factory) as session:
                deleted = self.books_repo.delete(session, book_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to delete book %s", book_id)
            return Outcome.failure(str(exc))
        if not deleted:
            return _not_found(book_id)

        logger.info("Deleted book %s", book_id)
        return Outcome.ok(True)
