"""
Book repository backed by SQLAlchemy.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Author, Book, BookInput
from repositories.models import AuthorORM, BookORM


def _book_from_orm(orm: BookORM) -> Book:
    return Book(
        id=orm.id,
        title=orm.title,
        number_of_page=orm.number_of_page,
        author=Author(
            id=orm.author.id,
            name=orm.author.name,
            biography=orm.author.biography,
        ),
    )


def _update_orm_from_input(orm: BookORM, data: BookInput, author: AuthorORM) -> None:
    orm.title = data.title
    orm.number_of_page = data.number_of_page
    orm.author = author


class BooksRepository:
    """Accessors for books. Like AuthorsRepository, nothing here commits."""

    def find_all(self, session: Session) -> List[Book]:
        books = session.query(BookORM).all()
        return [_book_from_orm(b) for b in books]

    def find_by_id(self, session: Session, book_id: int) -> Optional[Book]:
        orm = session.get(BookORM, book_id)
        if not orm:
            return None
        return _book_from_orm(orm)

    def count(self, session: Session) -> int:
        return session.query(BookORM).count()

    def persist(self, session: Session, data: BookInput, author: AuthorORM) -> Book:
        """Add a new book pointing at an already persisted author."""
        orm = BookORM()
        _update_orm_from_input(orm, data, author)
        session.add(orm)
        session.flush()
        return _book_from_orm(orm)

    def overwrite(
        self, session: Session, book_id: int, data: BookInput, author: AuthorORM
    ) -> Optional[Book]:
        """Replace title, page count and author of an existing book."""
        orm = session.get(BookORM, book_id)
        if not orm:
            return None
        _update_orm_from_input(orm, data, author)
        session.add(orm)
        session.flush()
        return _book_from_orm(orm)

    def delete(self, session: Session, book_id: int) -> bool:
        orm = session.get(BookORM, book_id)
        if not orm:
            return False
        session.delete(orm)
        session.flush()
        return True
