"""
Author repository backed by SQLAlchemy.
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from domain.models import Author, AuthorInput
from repositories.models import AuthorORM


def _author_from_orm(orm: AuthorORM) -> Author:
    return Author(id=orm.id, name=orm.name, biography=orm.biography)


class AuthorsRepository:
    """
    Accessors for authors.

    Methods work inside the caller's session and never commit; the caller
    owns the transaction.
    """

    def find_all(self, session: Session) -> List[Author]:
        return [_author_from_orm(a) for a in session.query(AuthorORM).all()]

    def find_by_id(self, session: Session, author_id: int) -> Optional[Author]:
        orm = session.get(AuthorORM, author_id)
        return _author_from_orm(orm) if orm else None

    def count(self, session: Session) -> int:
        return session.query(AuthorORM).count()

    def persist(self, session: Session, data: AuthorInput) -> AuthorORM:
        """Add a new author row and flush so its id is assigned."""
        orm = AuthorORM(name=data.name, biography=data.biography)
        session.add(orm)
        session.flush()
        return orm

    def delete(self, session: Session, author_id: int) -> bool:
        orm = session.get(AuthorORM, author_id)
        if not orm:
            return False
        session.delete(orm)
        session.flush()
        return True
