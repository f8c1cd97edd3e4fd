from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.core.models import InputFile
from specdoc.logging.helpers import get_logger, trace_io


def read_input_file(path: str, *, logger: Optional[LoggerLikeProtocol] = None) -> InputFile:
    """Read one input file as UTF-8 text.

    Undecodable bytes are dropped rather than aborting the run; a missing or
    unreadable file raises `OSError`.
    """
    log = logger or get_logger('io.reader')
    text = Path(path).read_text(encoding='utf-8', errors='ignore')
    trace_io(log, 'read', path=path, chars=len(text))
    return InputFile(path=path, raw_text=text)


def read_input_files(paths: Iterable[str], *, logger: Optional[LoggerLikeProtocol] = None) -> List[InputFile]:
    return [read_input_file(p, logger=logger) for p in paths]
