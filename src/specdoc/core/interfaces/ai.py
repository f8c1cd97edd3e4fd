from __future__ import annotations

from typing import Any, Dict, List, Protocol, runtime_checkable

from specdoc.core.models import Batch


@runtime_checkable
class InvocationStrategyProtocol(Protocol):
    """One remote call shape: how to submit messages and read the text back."""

    name: str

    def submit(self, client: Any, *, model: str, messages: List[Dict[str, str]], reasoning_effort: str) -> Any:
        ...

    def extract_text(self, raw: Any) -> str:
        ...


@runtime_checkable
class BackendInvokerProtocol(Protocol):
    """Turns a batch into generated text ('' means nothing to record)."""

    def invoke(self, batch: Batch) -> str:
        ...
