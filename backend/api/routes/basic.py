"""
Basic book operations and file upload routes.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from pydantic import BaseModel, ConfigDict, Field

from api.deps import get_book_service, get_upload_service
from api.envelope import respond
from domain.models import AuthorInput, Book, BookInput
from services.book_service import BookService
from services.file_upload import FileUploadService

router = APIRouter()


class AuthorDto(BaseModel):
    name: Optional[str] = None
    biography: Optional[str] = None


class BookDto(BaseModel):
    """Incoming book payload. Unknown fields are ignored."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    number_of_page: Optional[int] = Field(default=None, alias="numberOfPage")
    author: Optional[AuthorDto] = None


class AuthorResponse(BaseModel):
    id: int
    name: Optional[str] = None
    biography: Optional[str] = None


class BookResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    number_of_page: Optional[int] = Field(default=None, alias="numberOfPage")
    author: AuthorResponse


def dto_to_input(payload: Optional[BookDto]) -> Optional[BookInput]:
    """Convert the request payload to the service's write input."""
    if payload is None:
        return None
    author = None
    if payload.author is not None:
        author = AuthorInput(name=payload.author.name, biography=payload.author.biography)
    return BookInput(
        title=payload.title,
        number_of_page=payload.number_of_page,
        author=author,
    )


def book_to_response(book: Book) -> dict:
    """Convert domain Book to its JSON shape."""
    return BookResponse(
        id=book.id,
        title=book.title,
        number_of_page=book.number_of_page,
        author=AuthorResponse(
            id=book.author.id,
            name=book.author.name,
            biography=book.author.biography,
        ),
    ).model_dump(by_alias=True)


def books_to_response(books: List[Book]) -> List[dict]:
    return [book_to_response(b) for b in books]


@router.post("/save")
def save_book(
    payload: Optional[BookDto] = None,
    service: BookService = Depends(get_book_service),
):
    """Create a book and its author."""
    return respond(service.create(dto_to_input(payload)), book_to_response)


@router.get("")
def find_all_books(service: BookService = Depends(get_book_service)):
    return respond(service.list_all(), books_to_response)


@router.get("/by-param")
def find_by_param_id(
    book_id: int = Query(..., alias="id"),
    service: BookService = Depends(get_book_service),
):
    return respond(service.get_by_id(book_id), book_to_response)


@router.get("/by-path/{book_id}")
def find_by_path_id(book_id: int, service: BookService = Depends(get_book_service)):
    return respond(service.get_by_id(book_id), book_to_response)


@router.put("/update/{book_id}")
def update_book(
    book_id: int,
    payload: Optional[BookDto] = None,
    service: BookService = Depends(get_book_service),
):
    """Replace a book's fields; a new author record is created from the payload."""
    return respond(service.update(book_id, dto_to_input(payload)), book_to_response)


@router.delete("/{book_id}")
def delete_book(book_id: int, service: BookService = Depends(get_book_service)):
    return respond(service.delete(book_id))


@router.post("/upload")
def upload_file(
    file: Optional[UploadFile] = File(None),
    file_name: Optional[str] = Form(None, alias="fileName"),
    service: FileUploadService = Depends(get_upload_service),
):
    """Store an uploaded file and return its content as Base64."""
    stream = file.file if file is not None else None
    return respond(service.upload(stream, file_name))
