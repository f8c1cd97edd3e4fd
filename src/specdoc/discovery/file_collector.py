from __future__ import annotations

"""
Input file discovery.

A path argument resolves to an ordered list of file paths:

* a regular file is returned as the sole input, whatever its name;
* a directory is walked recursively (hidden directories skipped) and every
  visible file whose name matches the glob pattern is collected, sorted
  lexicographically by path string.

Paths are kept in the form the caller passed them (joined with the walked
sub-directories), since they are echoed verbatim into prompts and output.
"""

import fnmatch
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from specdoc.constants import DEFAULT_PATTERN
from specdoc.core.interfaces.fs import FileCollectorProtocol
from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.logging.helpers import get_logger, trace_io


@dataclass
class FileCollector(FileCollectorProtocol):
    """Resolves a file-or-directory argument into input paths."""

    pattern: str = DEFAULT_PATTERN
    logger: Optional[LoggerLikeProtocol] = None

    def __post_init__(self) -> None:
        self._log = self.logger or get_logger('discovery')

    def collect(self, path: str | Path) -> List[str]:
        root = str(path)
        if os.path.isdir(root):
            files = self._walk(root)
            self._log.info('found %d file(s) matching %r under %s', len(files), self.pattern, root)
            return files
        return [root]

    def _walk(self, root: str) -> List[str]:
        collected: List[str] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [d for d in dirnames if not d.startswith('.')]
            for fn in filenames:
                if fn.startswith('.') or not fnmatch.fnmatchcase(fn, self.pattern):
                    continue
                fp = os.path.join(dirpath, fn)
                if not os.path.isfile(fp):
                    continue
                trace_io(self._log, 'collected', path=fp)
                collected.append(fp)
        return sorted(collected)
