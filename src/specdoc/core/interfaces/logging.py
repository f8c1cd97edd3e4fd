from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """What collectors, builders, invokers and the generator log through.

    `logging.Logger` satisfies it; so does any object with these four methods.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def info(self, msg: str, *args, **kwargs) -> None: ...

    def warning(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Hands out `specdoc.*` loggers once logging is configured."""

    def get_logger(self, name: str) -> LoggerLikeProtocol: ...
