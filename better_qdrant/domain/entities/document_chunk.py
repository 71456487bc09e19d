"""
Domain entity for a chunk of an ingested document.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class TextChunk:
    text: str
    index: int
    source: Optional[str] = None
    start: Optional[int] = None
    end: Optional[int] = None

    def payload(self) -> dict[str, Any]:
        """Point payload stored alongside the chunk's vector; absent fields are omitted."""
        payload: dict[str, Any] = {"text": self.text, "index": self.index}
        for key in ("source", "start", "end"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload
