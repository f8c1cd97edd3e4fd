from __future__ import annotations

"""
Dual-constraint batch partitioning.

Files are framed as ``# File: <path>`` blocks and packed, in input order, into
batches bounded by a file count and a character budget. A file is never
split: one whose framed text alone exceeds the budget gets a batch of its own.

The separator between two files is charged to the file that follows it, so a
file that opens a batch is always framed without one.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from specdoc.constants import ENTRY_SEPARATOR, FILE_HEADER_PREFIX
from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.core.models import Batch, InputFile, WrappedEntry
from specdoc.logging.helpers import get_logger


def wrap_file(file: InputFile, *, with_separator: bool) -> WrappedEntry:
    """Frame `file` for inclusion in a batch prompt."""
    text = f'{FILE_HEADER_PREFIX}{file.path}\n\n{file.raw_text}\n'
    if with_separator:
        text = ENTRY_SEPARATOR + text
    return WrappedEntry.of(file.path, text)


@dataclass
class _OpenBatch:
    """The single batch still under construction."""
    entries: List[WrappedEntry] = field(default_factory=list)
    char_count: int = 0

    def add(self, entry: WrappedEntry) -> None:
        self.entries.append(entry)
        self.char_count += entry.length

    def close(self) -> Batch:
        return Batch(entries=tuple(self.entries), char_count=self.char_count)


class BatchBuilder:
    """Partition input files into batches.

    Args:
        max_files_per_batch: Maximum entries per batch, or None for no limit.
        max_chars: Character budget per batch. Advisory for oversized files.
        logger: Optional logger.

    Raises:
        ValueError: If a limit is not a positive integer.
    """

    def __init__(
        self,
        *,
        max_files_per_batch: Optional[int] = None,
        max_chars: int,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        if max_files_per_batch is not None and (
            isinstance(max_files_per_batch, bool) or not isinstance(max_files_per_batch, int) or max_files_per_batch < 1
        ):
            raise ValueError(f'max_files_per_batch must be a positive integer or None, got {max_files_per_batch!r}')
        if isinstance(max_chars, bool) or not isinstance(max_chars, int) or max_chars < 1:
            raise ValueError(f'max_chars must be a positive integer, got {max_chars!r}')
        self.max_files_per_batch = max_files_per_batch
        self.max_chars = max_chars
        self._log = logger or get_logger('batching')

    def _must_close(self, current: _OpenBatch, entry: WrappedEntry) -> bool:
        if not current.entries:
            return False
        if self.max_files_per_batch is not None and len(current.entries) >= self.max_files_per_batch:
            return True
        return current.char_count + entry.length > self.max_chars

    def build(self, files: Iterable[InputFile]) -> List[Batch]:
        batches: List[Batch] = []
        current = _OpenBatch()

        for f in files:
            entry = wrap_file(f, with_separator=bool(current.entries))
            if self._must_close(current, entry):
                batches.append(current.close())
                current = _OpenBatch()
                entry = wrap_file(f, with_separator=False)
            if entry.length > self.max_chars:
                self._log.warning(
                    '⚠  %s alone is %d chars (budget %d); sending it as its own batch',
                    f.path, entry.length, self.max_chars,
                )
            current.add(entry)

        if current.entries:
            batches.append(current.close())

        self._log.info(
            'planned %d batch(es) (files/batch=%s, max chars=%d)',
            len(batches), self.max_files_per_batch or 'unbounded', self.max_chars,
        )
        return batches
