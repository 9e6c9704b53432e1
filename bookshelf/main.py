# bookshelf/main.py
import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .logging_config import setup_logging
from .models import Book, BookPayload, Message
from . import storage


setup_logging(settings.log_level, settings.log_file)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(
    title=settings.project_name,
    description="In-memory book catalog: list, create, update and delete books.",
    version=settings.api_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Vanilla HTML/JS frontend, served from the same origin as the API.
app.mount("/ui", StaticFiles(directory=str(STATIC_DIR), html=True), name="ui")


@app.on_event("startup")
def startup_event():
    storage.reset_books(seed=settings.seed_books)
    logger.info("Bookshelf API ready with %d books", len(storage.list_books()))


@app.exception_handler(storage.BookNotFound)
async def book_not_found_handler(request: Request, exc: storage.BookNotFound):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": "Book not found"},
    )


@app.get("/")
def health_check():
    return {"status": "ok", "message": "Bookshelf API running", "books": len(storage.list_books())}


@app.get("/books", response_model=List[Book])
def list_books_api():
    return storage.list_books()


@app.post("/books", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book_api(req: BookPayload):
    return storage.add_book(req)


@app.put(
    "/books/{book_id}",
    response_model=Book,
    responses={404: {"model": Message}},
)
def update_book_api(book_id: int, req: BookPayload):
    return storage.update_book(book_id, req)


@app.delete("/books/{book_id}", response_model=Message)
def delete_book_api(book_id: int):
    storage.delete_book(book_id)
    return Message(message="Book deleted")
