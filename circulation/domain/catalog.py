"""Domain models for books and borrowers."""
from pydantic import BaseModel, Field


class Book(BaseModel):
    """A single lendable copy of a title.

    Attributes:
        title: Book title
        author: Author's name
        isbn: Identifier of the copy (ISBN)
        available: Whether the copy is free to be checked out. Only the
            loan manager flips this flag.
    """
    title: str = Field(min_length=1)
    author: str
    isbn: str = Field(min_length=1)
    available: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "title": "1984",
                "author": "George Orwell",
                "isbn": "978-0-452-28423-4",
                "available": True
            }
        }


class Borrower(BaseModel):
    """A library user who can take books on loan.

    Borrowers are immutable once created.
    """
    name: str = Field(min_length=1)
    borrower_id: str = Field(min_length=1)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "Ana García",
                "borrower_id": "U001"
            }
        }
