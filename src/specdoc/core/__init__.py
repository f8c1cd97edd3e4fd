from __future__ import annotations

"""Public surface for specdoc.core: data model and protocol types."""

from specdoc.core.models import (
    Batch,
    BatchResult,
    InputFile,
    RunReport,
    WrappedEntry,
)
from specdoc.core.interfaces import (
    BackendInvokerProtocol,
    DocumentAssemblerProtocol,
    FileCollectorProtocol,
    InvocationStrategyProtocol,
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
)

__all__ = [
    'Batch',
    'BatchResult',
    'InputFile',
    'RunReport',
    'WrappedEntry',
    'BackendInvokerProtocol',
    'DocumentAssemblerProtocol',
    'FileCollectorProtocol',
    'InvocationStrategyProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
]
