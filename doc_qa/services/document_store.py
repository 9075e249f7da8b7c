"""
Document storage: metadata records and page texts keyed by document ID.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ..errors import NotFoundError
from ..models import DocumentRecord


class DocumentStore(ABC):
    """Key-value storage for document records and their page texts."""

    @abstractmethod
    def put(self, record: DocumentRecord, pages: Dict[int, str]) -> None:
        """Store a record together with its page mapping."""

    @abstractmethod
    def get(self, document_id: str) -> DocumentRecord:
        """Return the record for ``document_id`` or raise NotFoundError."""

    @abstractmethod
    def get_pages(self, document_id: str) -> Dict[int, str]:
        """Return the page mapping for ``document_id`` or raise NotFoundError."""

    @abstractmethod
    def delete(self, document_id: str) -> None:
        """Remove the record and its pages or raise NotFoundError."""

    @abstractmethod
    def list(self) -> List[DocumentRecord]:
        """Return all stored records."""

    @abstractmethod
    def contains(self, document_id: str) -> bool:
        """Whether ``document_id`` is stored."""

    def __len__(self) -> int:
        return len(self.list())


class InMemoryDocumentStore(DocumentStore):
    """Process-lifetime store backed by two dicts sharing the same keys."""

    def __init__(self):
        self._documents: Dict[str, DocumentRecord] = {}
        self._pages: Dict[str, Dict[int, str]] = {}

    def put(self, record: DocumentRecord, pages: Dict[int, str]) -> None:
        self._pages[record.id] = dict(pages)
        self._documents[record.id] = record

    def get(self, document_id: str) -> DocumentRecord:
        record = self._documents.get(document_id)
        if record is None:
            raise NotFoundError("Document not found")
        return record

    def get_pages(self, document_id: str) -> Dict[int, str]:
        if document_id not in self._documents:
            raise NotFoundError("Document not found")
        return self._pages[document_id]

    def delete(self, document_id: str) -> None:
        if document_id not in self._documents:
            raise NotFoundError("Document not found")
        del self._documents[document_id]
        self._pages.pop(document_id, None)

    def list(self) -> List[DocumentRecord]:
        return list(self._documents.values())

    def contains(self, document_id: str) -> bool:
        return document_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
