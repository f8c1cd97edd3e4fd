from .ai import BackendInvokerProtocol, InvocationStrategyProtocol
from .fs import FileCollectorProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import DocumentAssemblerProtocol

__all__ = [
    'BackendInvokerProtocol',
    'InvocationStrategyProtocol',
    'FileCollectorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'DocumentAssemblerProtocol',
]
