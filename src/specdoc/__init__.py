from __future__ import annotations

from specdoc.ai.backend_invoker import (
    BackendInvoker,
    ChatCompletionInvocation,
    StructuredResponseInvocation,
    supports_responses_api,
)
from specdoc.ai.prompts import SYSTEM_PROMPT
from specdoc.batching.batch_builder import BatchBuilder, wrap_file
from specdoc.core.models import Batch, BatchResult, InputFile, RunReport, WrappedEntry
from specdoc.discovery.file_collector import FileCollector
from specdoc.rendering.document_assembler import DocumentAssembler, OrderedBatchSink
from specdoc.runtime.config import ConfigError, GeneratorConfig, Ready, validate
from specdoc.runtime.generator import Generator

__version__ = '1.0.0'

__all__ = [
    'BackendInvoker',
    'Batch',
    'BatchBuilder',
    'BatchResult',
    'ChatCompletionInvocation',
    'ConfigError',
    'DocumentAssembler',
    'FileCollector',
    'Generator',
    'GeneratorConfig',
    'InputFile',
    'OrderedBatchSink',
    'Ready',
    'RunReport',
    'StructuredResponseInvocation',
    'SYSTEM_PROMPT',
    'WrappedEntry',
    'supports_responses_api',
    'validate',
    'wrap_file',
]
