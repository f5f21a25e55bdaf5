"""JSON-file-backed implementation of BookRepository."""

from __future__ import annotations

import json
from pathlib import Path

from bookstore.domain.model.book import Book
from bookstore.domain.repository.book_repository import BookRepository


class JsonBookRepository(BookRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BookRepository interface ---------------------------------------------

    def get_by_id(self, book_id: int) -> Book | None:
        for raw in self._load_raw():
            if raw["id"] == book_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Book]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Book:
        return Book(
            id=raw["id"],
            title=raw["title"],
            author=raw["author"],
            description=raw.get("description", ""),
            price=raw["price"],
            is_public=raw.get("is_public", True),
            is_featured=raw.get("is_featured", False),
            category_id=raw["category_id"],
            rating=raw.get("rating", 0),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
