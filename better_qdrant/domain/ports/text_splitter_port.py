"""
Port (interface) for text splitters.
Infrastructure adapters (e.g. RecursiveTextSplitter) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from better_qdrant.domain.entities.document_chunk import TextChunk


class ITextSplitter(ABC):
    @abstractmethod
    def split(
        self,
        text: str,
        source: Optional[str] = None,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> list[TextChunk]:
        """Split *text* into overlapping chunks, numbered from 0 in document order."""
        ...
