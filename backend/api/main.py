"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.envelope import Envelope, envelope_response
from api.routes import basic
from db import init_db, make_engine, make_session_factory, ping
from repositories import AuthorsRepository, BooksRepository
from services.book_service import BookService
from services.file_upload import FileUploadService
from settings import Settings, get_settings
from storage.file_storage import FileStorage

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = [str(p) for p in error.get("loc", ()) if p not in ("body", "query", "path", "form")]
        field = ".".join(loc)
        msg = error.get("msg", "Invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application and every component it depends on."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    engine = make_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    session_factory = make_session_factory(engine)
    storage = FileStorage(settings.FILE_UPLOAD_DIRECTORY)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting book API")
        init_db(engine)
        storage.ensure_root()
        yield
        logger.info("Shutting down book API")
        engine.dispose()

    app = FastAPI(
        title="Book Basics API",
        description="CRUD for books and authors plus a simple file upload",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.book_service = BookService(
        session_factory, BooksRepository(), AuthorsRepository()
    )
    app.state.upload_service = FileUploadService(storage)

    # CORS middleware for browser clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(basic.router, prefix="/api/v1/basic", tags=["basic"])

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_error(exc)
        logger.warning("Invalid request to %s: %s", request.url.path, message)
        return envelope_response(Envelope.error(message), 400)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return envelope_response(Envelope.error(str(exc.detail)), exc.status_code)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s", request.url.path)
        return envelope_response(Envelope.error(str(exc)), 500)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Book Basics API"}

    @app.get("/health")
    def health():
        """Health check endpoint that also pings the store."""
        if ping(engine):
            return {"status": "healthy"}
        return JSONResponse(status_code=503, content={"status": "degraded"})

    return app


app = create_app()
