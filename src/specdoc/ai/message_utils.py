from __future__ import annotations

"""
Utilities to build OpenAI-style chat messages for a batch.

Behavioral contract:
- Exactly two messages per batch.
- The system message comes first and is identical for every batch.
- The user message is the concatenation of the batch's wrapped files, in
  entry order.
"""

from typing import Dict, List

from specdoc.core.models import Batch


def build_batch_messages(*, system_prompt: str, batch: Batch) -> List[Dict[str, str]]:
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": batch.user_content},
    ]
