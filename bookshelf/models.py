# bookshelf/models.py
from pydantic import BaseModel


class BookPayload(BaseModel):
    title: str
    author: str


class Book(BaseModel):
    id: int
    title: str
    author: str


class Message(BaseModel):
    message: str
