from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from specdoc.core.models import BatchResult


@runtime_checkable
class DocumentAssemblerProtocol(Protocol):
    """Sole writer of the output document."""

    def write_header(self, out: Path, path: str, model: str, max_tokens: int, max_chars: int) -> None:
        """Create or overwrite `out` with the title and metadata block."""
        ...

    def append_batch(self, out: Path, index: int, result: BatchResult) -> bool:
        """Append one batch section; return False when the result was skipped."""
        ...
