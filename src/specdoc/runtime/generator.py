from __future__ import annotations

"""
Composition root: collect → batch → header → invoke/append per batch.

Batches are processed one at a time, in order, with an optional pause between
backend calls to respect rate limits. A backend failure propagates out of
`run`; the header and every section appended before it remain on disk.
"""

import time
from pathlib import Path
from typing import Any, Callable, NoReturn, Optional

from specdoc.ai.ai_client import build_openai_client
from specdoc.ai.backend_invoker import BackendInvoker
from specdoc.ai.token_budget import TokenBudgetEstimator
from specdoc.batching.batch_builder import BatchBuilder
from specdoc.constants import ExitCode
from specdoc.core.interfaces.ai import BackendInvokerProtocol
from specdoc.core.interfaces.fs import FileCollectorProtocol
from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.core.interfaces.render import DocumentAssemblerProtocol
from specdoc.core.models import BatchResult, RunReport
from specdoc.discovery.file_collector import FileCollector
from specdoc.io.reader import read_input_files
from specdoc.logging.helpers import get_logger
from specdoc.rendering.document_assembler import DocumentAssembler, OrderedBatchSink
from specdoc.runtime.config import Ready


def _raise_exit(message: str, code: int = ExitCode.NO_INPUT) -> NoReturn:
    get_logger('generator').error(message)
    raise SystemExit(int(code))


class Generator:
    """Wire the collector, batch builder, invoker and assembler together.

    Args:
        ready: Validated configuration (see `specdoc.runtime.config.validate`).
        client: Pre-built OpenAI-compatible client; built from `ready` if None.
        invoker: Backend invoker override; built around `client` if None.
        collector: File collector override.
        assembler: Document assembler override.
        estimator: Optional token estimator used for per-batch diagnostics.
        sleep: Pause function, `time.sleep` by default.
        fatal: Called with a message (and exit code) when the run cannot
            start; it must not return. Raises `SystemExit` by default.
        logger: Optional logger.
    """

    def __init__(
        self,
        ready: Ready,
        *,
        client: Any = None,
        invoker: Optional[BackendInvokerProtocol] = None,
        collector: Optional[FileCollectorProtocol] = None,
        assembler: Optional[DocumentAssemblerProtocol] = None,
        estimator: Optional[TokenBudgetEstimator] = None,
        sleep: Callable[[float], None] = time.sleep,
        fatal: Optional[Callable[..., NoReturn]] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self.config = ready.config
        self._log = logger or get_logger('generator')
        if invoker is None:
            if client is None:
                client = build_openai_client(
                    api_key=ready.api_key, base_url=self.config.base_url, logger=self._log
                )
            invoker = BackendInvoker(
                client,
                model=self.config.model,
                reasoning_effort=self.config.reasoning_effort,
                logger=self._log,
            )
        self._invoker = invoker
        self._collector = collector or FileCollector(pattern=self.config.pattern)
        self._assembler = assembler or DocumentAssembler()
        self._estimator = estimator
        self._sleep = sleep
        self._fatal = fatal or _raise_exit

    def _log_estimate(self, idx: int, batch) -> None:
        if self._estimator is None or not isinstance(self._invoker, BackendInvoker):
            return
        est = self._estimator.estimate_messages_tokens(
            self._invoker.messages_for(batch), model=self.config.model, hint=self.config.max_tokens
        )
        if est.exceeds_hint:
            self._log.warning(
                '⚠  batch %d is ~%d tokens, above the %d token hint',
                idx + 1, est.tokens_in, self.config.max_tokens,
            )
        else:
            self._log.debug('batch %d ≈ %d tokens', idx + 1, est.tokens_in)

    def run(self) -> RunReport:
        cfg = self.config
        out = Path(cfg.out)
        report = RunReport(out=str(out))

        paths = self._collector.collect(cfg.path)
        if not paths:
            self._fatal(f'No spec files found in: {cfg.path}', ExitCode.NO_INPUT)

        files = read_input_files(paths, logger=self._log)
        builder = BatchBuilder(max_files_per_batch=cfg.files_per_batch, max_chars=cfg.max_chars, logger=self._log)
        batches = builder.build(files)
        report.files_total = len(files)
        report.batches_total = len(batches)

        self._assembler.write_header(out, cfg.path, cfg.model, cfg.max_tokens, cfg.max_chars)
        sink = OrderedBatchSink(
            self._assembler,
            out,
            on_flush=lambda result, written: report.record(result, written=written),
        )

        for idx, batch in enumerate(batches):
            report.chars_by_batch[idx] = batch.char_count
            self._log.info('batch %d/%d: %d file(s), %d chars', idx + 1, len(batches), len(batch), batch.char_count)
            self._log_estimate(idx, batch)

            text = self._invoker.invoke(batch)
            sink.push(BatchResult(batch_index=idx, source_paths=batch.paths, generated_text=text))

            if cfg.sleep_between > 0 and idx < len(batches) - 1:
                self._log.debug('sleeping %.2fs before next batch', cfg.sleep_between)
                self._sleep(cfg.sleep_between)

        report.finish()
        return report
