"""Unit tests for the error message helpers."""

import sqlite3

from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from book_catalog.api.http.errors import store_error_message, validation_error_message


class TestStoreErrorMessage:
    def test_uses_driver_message(self):
        orig = sqlite3.IntegrityError("NOT NULL constraint failed: books.title")
        exc = IntegrityError("INSERT INTO books ...", {}, orig)

        assert store_error_message(exc) == "NOT NULL constraint failed: books.title"

    def test_falls_back_to_exception_text(self):
        assert store_error_message(ValueError("nothing here")) == "nothing here"


class TestValidationErrorMessage:
    def test_joins_locations_and_messages(self):
        exc = RequestValidationError(
            [
                {"loc": ("body", "year"), "msg": "Input should be a valid integer", "type": "int_parsing"},
                {"loc": ("path", "book_id"), "msg": "Input should be a valid integer", "type": "int_parsing"},
            ]
        )

        assert validation_error_message(exc) == (
            "body.year: Input should be a valid integer; "
            "path.book_id: Input should be a valid integer"
        )
