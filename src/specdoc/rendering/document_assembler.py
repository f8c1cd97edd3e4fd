from __future__ import annotations

"""
Incremental Markdown assembly.

The document is written in two phases:

1. `write_header` creates (or truncates) the file with the title and a
   metadata blockquote.
2. `append_batch` appends one ``## Batch N`` section per non-empty result.

Every append opens the file in append mode and closes it again, so whatever
was written before a failing batch stays on disk intact.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

from specdoc.ai.token_budget import approx_tokens_for_chars
from specdoc.constants import DOCUMENT_SEPARATOR, DOCUMENT_TITLE, FILE_HEADER_PREFIX
from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.core.interfaces.render import DocumentAssemblerProtocol
from specdoc.core.models import BatchResult
from specdoc.logging.helpers import get_logger, trace_io


def _default_clock() -> str:
    return datetime.now().astimezone().strftime('%Y-%m-%d %H:%M:%S %z')


class DocumentAssembler(DocumentAssemblerProtocol):
    """Sole writer of the output document for a run."""

    def __init__(self, *, clock: Optional[Callable[[], str]] = None, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._clock = clock or _default_clock
        self._log = logger or get_logger('render')

    def render_header(self, path: str, model: str, max_tokens: int, max_chars: int) -> str:
        return (
            f'{DOCUMENT_TITLE}\n'
            '\n'
            f'> Generated on {self._clock()} for path: `{path}`\n'
            f'> Model: `{model}` | Heuristic budget: ~{max_tokens} tokens/batch '
            f'({max_chars} chars ≈ {approx_tokens_for_chars(max_chars)} tokens)\n'
            '\n'
            f'{DOCUMENT_SEPARATOR}\n'
        )

    @staticmethod
    def render_section(index: int, result: BatchResult) -> str:
        lines: List[str] = [f'\n\n## Batch {index + 1}\n\n']
        lines.extend(f'{FILE_HEADER_PREFIX}{p}\n' for p in result.source_paths)
        lines.append('\n')
        text = result.generated_text
        lines.append(text if text.endswith('\n') else text + '\n')
        lines.append(f'\n\n{DOCUMENT_SEPARATOR}\n')
        return ''.join(lines)

    def write_header(self, out: Path, path: str, model: str, max_tokens: int, max_chars: int) -> None:
        out = Path(out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.render_header(path, model, max_tokens, max_chars), encoding='utf-8')
        trace_io(self._log, 'header written', out=str(out))

    def append_batch(self, out: Path, index: int, result: BatchResult) -> bool:
        if result.is_empty:
            self._log.info('batch %d returned no content; skipped', index + 1)
            return False
        with Path(out).open('a', encoding='utf-8') as fh:
            fh.write(self.render_section(index, result))
        self._log.info('✔ batch %d appended (%d file(s))', index + 1, len(result.source_paths))
        return True


class OrderedBatchSink:
    """Flush batch results to the assembler strictly in batch-index order.

    Results may be pushed in any order; each one is held until every lower
    index has been flushed. `on_flush` receives ``(result, written)`` for
    each flushed result.
    """

    def __init__(
        self,
        assembler: DocumentAssemblerProtocol,
        out: Path,
        *,
        on_flush: Optional[Callable[[BatchResult, bool], None]] = None,
    ) -> None:
        self._assembler = assembler
        self._out = Path(out)
        self._on_flush = on_flush
        self._pending: Dict[int, BatchResult] = {}
        self._next = 0

    @property
    def next_index(self) -> int:
        return self._next

    @property
    def pending(self) -> int:
        return len(self._pending)

    def push(self, result: BatchResult) -> None:
        idx = result.batch_index
        if idx < self._next or idx in self._pending:
            raise ValueError(f'batch {idx} was already pushed')
        self._pending[idx] = result
        while self._next in self._pending:
            ready = self._pending.pop(self._next)
            written = self._assembler.append_batch(self._out, ready.batch_index, ready)
            if self._on_flush is not None:
                self._on_flush(ready, written)
            self._next += 1
