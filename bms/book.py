from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, List, Mapping
from uuid import UUID

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from bms.validators import ISBNValidator

logger = logging.getLogger(__name__)

INVALID_BOOK_MESSAGE = "Invalid book data."
INVALID_ISBN_MESSAGE = "Invalid ISBN. The ISBN must be a valid 10 or 13-digit number with a correct checksum."
ISBN_FORMAT_MESSAGE = "ISBN must be a valid 10 or 13-digit number (with or without hyphens)."

# Bare 10/13 digits, or hyphen-grouped with an optional EAN prefix group.
ISBN_PATTERN = re.compile(r"^(?:\d{9}[\dXx]|\d{13}|(?:\d{3}-)?\d{1,5}-\d{1,7}-\d{1,6}-[\dXx])$")

_REQUIRED = {
    "title": "Title is required.",
    "author": "Author is required.",
    "isbn": "ISBN is required.",
    "publication_date": "Publication date is required.",
}


class InvalidBookError(ValueError):
    """Raised when a book record must not be created or updated."""

    def __init__(self, message: str, errors: List[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors = errors or []


class BookRecord(BaseModel):
    """A book as submitted for creation or update."""
    book_id: UUID | None = None
    title: str | None = Field(default=None, validate_default=True)
    description: str | None = None
    author: str | None = Field(default=None, validate_default=True)
    isbn: str | None = Field(default=None, validate_default=True)
    publication_date: date | None = Field(default=None, validate_default=True)

    @field_validator("title", "author", "isbn", "publication_date", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("title", "author", "isbn", "publication_date")
    @classmethod
    def _required(cls, value, info):
        if value is None:
            raise PydanticCustomError("missing", _REQUIRED[info.field_name])
        return value

    @field_validator("isbn")
    @classmethod
    def _isbn_format(cls, value: str) -> str:
        if not ISBN_PATTERN.match(value.strip()):
            raise PydanticCustomError("isbn_format", ISBN_FORMAT_MESSAGE)
        return value

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"


def screen_book(data: Mapping[str, Any]) -> BookRecord:
    """Check a submitted book before it is written.

    Raises InvalidBookError with the field messages when the record is
    incomplete, or with the checksum message when its ISBN does not validate.
    """
    try:
        book = BookRecord.model_validate(dict(data))
    except ValidationError as e:
        errors = [err["msg"] for err in e.errors()]
        logger.info(f"Book rejected: {errors}")
        raise InvalidBookError(INVALID_BOOK_MESSAGE, errors) from e

    if book.isbn and not ISBNValidator.is_valid_isbn(book.isbn):
        logger.info(f"Book rejected: invalid ISBN {book.isbn!r}")
        raise InvalidBookError(INVALID_ISBN_MESSAGE)
    logger.info(f"Book accepted: {book}")
    return book
