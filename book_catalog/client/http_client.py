"""HTTP client for the catalog REST contract."""

from __future__ import annotations

from typing import Any

import httpx

from book_catalog.entities.book import Book

DEFAULT_API_URL = "http://localhost:8080/api"

_JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


class CatalogClient:
    """Thin wrapper over the ``/books`` routes.

    Every call raises ``httpx.HTTPError`` on transport failure or a non-2xx
    status; callers decide what to do with it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._base_path = base_url.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=timeout, headers=_JSON_HEADERS)

    def _url(self, suffix: str = "") -> str:
        return f"{self._base_path}/books{suffix}"

    def _send(self, method: str, url: str, json: dict[str, Any] | None = None) -> Any:
        response = self._http.request(method, url, json=json, headers=_JSON_HEADERS)
        response.raise_for_status()
        return response.json()

    def list_books(self) -> list[Book]:
        data = self._send("GET", self._url())
        return [Book.model_validate(item) for item in data]

    def create_book(self, fields: dict[str, Any]) -> Book:
        return Book.model_validate(self._send("POST", self._url(), json=fields))

    def update_book(self, book_id: int, fields: dict[str, Any]) -> Book | None:
        data = self._send("PUT", self._url(f"/{book_id}"), json=fields)
        return None if data is None else Book.model_validate(data)

    def delete_book(self, book_id: int) -> str:
        return self._send("DELETE", self._url(f"/{book_id}"))["message"]

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> CatalogClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
