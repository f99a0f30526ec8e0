"""FastAPI dependencies resolving components built in create_app."""
from fastapi import Request

from services.book_service import BookService
from services.file_upload import FileUploadService


def get_book_service(request: Request) -> BookService:
    return request.app.state.book_service


def get_upload_service(request: Request) -> FileUploadService:
    return request.app.state.upload_service
