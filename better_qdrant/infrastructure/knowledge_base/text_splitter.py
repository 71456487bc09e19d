"""
Infrastructure adapter: LangChain RecursiveCharacterTextSplitter → ITextSplitter.

Chunking parameters arrive per call from IngestDocumentUseCase so the business
decision stays in the application layer. Start offsets come from the splitter's
add_start_index option.
"""

from typing import Optional

from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from better_qdrant.domain.entities.document_chunk import TextChunk
from better_qdrant.domain.ports.text_splitter_port import ITextSplitter


class RecursiveTextSplitter(ITextSplitter):
    """Splits plain text on paragraph, line and word boundaries."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    def split(
        self,
        text: str,
        source: Optional[str] = None,
        chunk_size: Optional[int] = None,
        chunk_overlap: Optional[int] = None,
    ) -> list[TextChunk]:
        splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size or self._chunk_size,
            chunk_overlap=self._chunk_overlap if chunk_overlap is None else chunk_overlap,
            length_function=len,
            add_start_index=True,
        )
        documents = splitter.create_documents([text])
        return [self._to_chunk(doc, idx, source) for idx, doc in enumerate(documents)]

    @staticmethod
    def _to_chunk(doc: Document, index: int, source: Optional[str]) -> TextChunk:
        start = doc.metadata.get("start_index")
        if start is None or start < 0:
            return TextChunk(text=doc.page_content, index=index, source=source)
        return TextChunk(
            text=doc.page_content,
            index=index,
            source=source,
            start=start,
            end=start + len(doc.page_content),
        )
