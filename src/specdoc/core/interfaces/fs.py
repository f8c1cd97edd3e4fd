from __future__ import annotations

from pathlib import Path
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class FileCollectorProtocol(Protocol):
    def collect(self, path: str | Path) -> List[str]:
        ...
