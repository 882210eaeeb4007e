"""In-memory store of open documents."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class Document:
    uri: str
    text: str
    version: int


class DocumentStore:
    """Latest content and version per URI, as reported by the editor."""

    def __init__(self) -> None:
        self._documents: Mapping[str, Document] = MappingProxyType({})
        self._lock = threading.Lock()

    def open(self, uri: str, text: str, version: int) -> Document:
        document = Document(uri=uri, text=text, version=version)
        self._put(uri, document)
        return document

    def update(self, uri: str, text: str, version: int) -> Document:
        """Replace the content of `uri`, opening it if it was not open."""
        document = Document(uri=uri, text=text, version=version)
        self._put(uri, document)
        return document

    def close(self, uri: str) -> None:
        with self._lock:
            documents = dict(self._documents)
            documents.pop(uri, None)
            self._documents = MappingProxyType(documents)

    def get(self, uri: str) -> Document | None:
        return self._documents.get(uri)

    def uris(self) -> tuple[str, ...]:
        return tuple(sorted(self._documents))

    def _put(self, uri: str, document: Document) -> None:
        with self._lock:
            self._documents = MappingProxyType({**self._documents, uri: document})
