"""Book domain entity."""

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A catalog record as stored and returned by the service.

    The identifier is assigned by the store on insert and never changes.
    """

    id: int = Field(description="Store-assigned identifier")
    title: str = Field(description="Book title")
    author: str = Field(description="Book author")
    year: int | None = Field(default=None, description="Publication year")


class BookPayload(BaseModel):
    """Body of create and update requests.

    Every field is optional here: a missing title or author is rejected by the
    store's NOT NULL constraint, not by the API. Numbers sent as title or
    author are stored as their text, as a text column would.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str | None = None
    author: str | None = None
    year: int | None = None
