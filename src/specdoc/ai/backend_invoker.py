from __future__ import annotations
"""Backend invocation over two OpenAI call shapes.

`BackendInvoker.invoke(batch)` sends one batch and returns the generated text
('' when there is nothing to record). The call shape is chosen on every call
by probing the client:

* `StructuredResponseInvocation` (Responses API) when `client.responses.create`
  exists;
* `ChatCompletionInvocation` (Chat Completions API) otherwise.

Each strategy owns its own text extraction. Results may be SDK objects or
plain dicts/lists; `_dig` walks both.

Errors raised by the remote call are not handled here and propagate to the
caller.
"""

from typing import Any, Dict, List, Optional, Sequence, Union

from specdoc.ai.message_utils import build_batch_messages
from specdoc.ai.prompts import SYSTEM_PROMPT
from specdoc.core.interfaces.ai import BackendInvokerProtocol, InvocationStrategyProtocol
from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.core.models import Batch
from specdoc.logging.helpers import get_logger

_Key = Union[str, int]


def _dig(obj: Any, path: Sequence[_Key]) -> Any:
    """Follow `path` through mappings, sequences and attributes; None if absent."""
    cur = obj
    for key in path:
        if cur is None:
            return None
        if isinstance(key, int):
            if not isinstance(cur, (list, tuple)) or not -len(cur) <= key < len(cur):
                return None
            cur = cur[key]
        elif isinstance(cur, dict):
            cur = cur.get(key)
        else:
            cur = getattr(cur, key, None)
    return cur


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ''


class StructuredResponseInvocation(InvocationStrategyProtocol):
    """Responses API: `client.responses.create(model, input, reasoning)`.

    Reasoning models emit a reasoning item first and the final message at a
    later index, so the text at ``output[1]`` wins over ``output[0]``
    whenever the secondary slot is present.
    """

    name = 'responses'

    SECONDARY_SLOT = ('output', 1, 'content', 0, 'text')
    PRIMARY_SLOT = ('output', 0, 'content', 0, 'text')

    def submit(self, client: Any, *, model: str, messages: List[Dict[str, str]], reasoning_effort: str) -> Any:
        return client.responses.create(
            model=model,
            input=messages,
            reasoning={"effort": reasoning_effort},
        )

    def extract_text(self, raw: Any) -> str:
        text = _dig(raw, self.SECONDARY_SLOT)
        if text is None:
            text = _dig(raw, self.PRIMARY_SLOT)
        return _as_text(text)


class ChatCompletionInvocation(InvocationStrategyProtocol):
    """Chat Completions API: `client.chat.completions.create(model, messages)`."""

    name = 'chat'

    TEXT_SLOT = ('choices', 0, 'message', 'content')

    def submit(self, client: Any, *, model: str, messages: List[Dict[str, str]], reasoning_effort: str) -> Any:
        return client.chat.completions.create(
            model=model,
            messages=[{"role": m["role"], "content": m["content"]} for m in messages],
        )

    def extract_text(self, raw: Any) -> str:
        return _as_text(_dig(raw, self.TEXT_SLOT))


def supports_responses_api(client: Any) -> bool:
    """Probe for the Responses API; any failure while probing means 'absent'."""
    try:
        responses = getattr(client, 'responses', None)
        return responses is not None and callable(getattr(responses, 'create', None))
    except Exception:
        return False


class BackendInvoker(BackendInvokerProtocol):
    """Send batches to an OpenAI-compatible client.

    Args:
        client: `openai.OpenAI` instance or any object exposing the same
            `responses.create` and/or `chat.completions.create` surface.
        model: Model identifier.
        reasoning_effort: Effort hint for the Responses API.
        system_prompt: Instruction message sent first with every batch.
        logger: Optional logger.
    """

    def __init__(
        self,
        client: Any,
        *,
        model: str,
        reasoning_effort: str,
        system_prompt: str = SYSTEM_PROMPT,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._client = client
        self.model = model
        self.reasoning_effort = reasoning_effort
        self.system_prompt = system_prompt
        self._structured = StructuredResponseInvocation()
        self._chat = ChatCompletionInvocation()
        self._log = logger or get_logger('ai')

    def select_strategy(self) -> InvocationStrategyProtocol:
        return self._structured if supports_responses_api(self._client) else self._chat

    def messages_for(self, batch: Batch, *, system_prompt: Optional[str] = None) -> List[Dict[str, str]]:
        prompt = self.system_prompt if system_prompt is None else system_prompt
        return build_batch_messages(system_prompt=prompt, batch=batch)

    def invoke_prompt(self, system_prompt: str, batch: Batch) -> str:
        strategy = self.select_strategy()
        messages = self.messages_for(batch, system_prompt=system_prompt)
        self._log.debug('→ %s API (model=%s, %d chars)', strategy.name, self.model, batch.char_count)
        raw = strategy.submit(
            self._client,
            model=self.model,
            messages=messages,
            reasoning_effort=self.reasoning_effort,
        )
        return strategy.extract_text(raw)

    def invoke(self, batch: Batch) -> str:
        return self.invoke_prompt(self.system_prompt, batch)
