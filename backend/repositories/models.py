"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from db import Base


class AuthorORM(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String, nullable=True)
    biography = Column(Text, nullable=True)


class BookORM(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    title = Column(String, nullable=False)
    number_of_page = Column(Integer, nullable=True)
    # Authors are never cascaded; deleting a book leaves its author row behind
    author_id = Column(Integer, ForeignKey("authors.id"), nullable=False, index=True)

    author = relationship("AuthorORM", lazy="joined")
