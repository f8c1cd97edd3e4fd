from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

from enum import IntEnum

# Per-file framing inside a batch prompt and inside the output document.
FILE_HEADER_PREFIX: str = '# File: '
ENTRY_SEPARATOR: str = '\n\n---\n\n'

DOCUMENT_TITLE: str = '# Inferred Documentation from RSpec'
DOCUMENT_SEPARATOR: str = '---'

DEFAULT_OUT: str = 'user_docs.md'
DEFAULT_PATTERN: str = '*_spec.rb'
DEFAULT_MAX_CHARS: int = 120_000
DEFAULT_MAX_TOKENS: int = 24_000
DEFAULT_MODEL: str = 'gpt-5-mini'
DEFAULT_REASONING_EFFORT: str = 'low'
DEFAULT_SLEEP_BETWEEN: float = 0.0

REASONING_EFFORTS = ('low', 'medium', 'high')

# Rough heuristic used only for display: ~4 characters per token.
CHARS_PER_TOKEN: int = 4


class ExitCode(IntEnum):
    """Process exit codes, one per terminal failure kind."""
    OK = 0
    BACKEND_FAILURE = 1
    USAGE = 2  # argparse
    MISSING_CREDENTIAL = 3
    MISSING_PATH = 4
    PATH_NOT_FOUND = 5
    INVALID_OPTION = 6
    NO_INPUT = 7
    INTERRUPTED = 130
