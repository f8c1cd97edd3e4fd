from __future__ import annotations
"""
Token budget estimation for batch prompts.

Counts are computed with tiktoken using the model's encoding when tiktoken
knows the model, and `cl100k_base` otherwise. When no encoding can be loaded
(e.g. offline, since tiktoken downloads BPE files lazily) or encoding fails,
the ~4 chars per token heuristic is used instead; it is also what the document
header displays.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional

import tiktoken

from specdoc.constants import CHARS_PER_TOKEN
from specdoc.logging.helpers import get_logger

_FALLBACK_ENCODING = 'cl100k_base'
_log = get_logger('ai.tokens')


def approx_tokens_for_chars(chars: int) -> int:
    """Heuristic token count for a character budget: ceil(chars / 4)."""
    return math.ceil(chars / CHARS_PER_TOKEN)


@dataclass(frozen=True)
class TokenEstimation:
    tokens_in: int
    exceeds_hint: bool = False


class TokenBudgetEstimator:
    def __init__(self) -> None:
        self._encodings: Dict[str, Optional[tiktoken.Encoding]] = {}

    def _encoding_for(self, model: str) -> Optional[tiktoken.Encoding]:
        if model in self._encodings:
            return self._encodings[model]
        try:
            try:
                enc = tiktoken.encoding_for_model(model)
            except KeyError:
                enc = tiktoken.get_encoding(_FALLBACK_ENCODING)
        except Exception as exc:
            # BPE files are fetched on first use; offline runs land here.
            _log.debug('tiktoken unavailable for %s (%s); using chars/%d', model, exc, CHARS_PER_TOKEN)
            enc = None
        self._encodings[model] = enc
        return enc

    def estimate_text_tokens(self, text: str, *, model: str) -> int:
        enc = self._encoding_for(model)
        if enc is not None:
            try:
                return len(enc.encode(text, disallowed_special=()))
            except Exception as exc:
                _log.debug('tiktoken encode failed (%s); using chars/%d', exc, CHARS_PER_TOKEN)
        return approx_tokens_for_chars(len(text))

    def estimate_messages_tokens(
        self,
        messages: Iterable[Mapping[str, str]],
        *,
        model: str,
        hint: Optional[int] = None,
    ) -> TokenEstimation:
        text = '\n'.join((f"{m.get('role', '')}: {m.get('content', '')}" for m in messages))
        used = self.estimate_text_tokens(text, model=model)
        return TokenEstimation(tokens_in=used, exceeds_hint=bool(hint) and used > hint)
