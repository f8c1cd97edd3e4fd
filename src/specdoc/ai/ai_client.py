from __future__ import annotations
"""OpenAI SDK client construction.

The SDK client is built once per run. Connection settings follow the usual
OpenAI environment variables unless given explicitly:

* OPENAI_BASE_URL: custom endpoint base URL (proxies, compatible servers).
* OPENAI_ORG / OPENAI_PROJECT: organization and project identifiers.
"""

import os
from typing import Optional

import openai

from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.logging.helpers import get_logger


def build_openai_client(
    *,
    api_key: str,
    base_url: Optional[str] = None,
    organization: Optional[str] = None,
    project: Optional[str] = None,
    timeout: Optional[float] = None,
    logger: Optional[LoggerLikeProtocol] = None,
) -> openai.OpenAI:
    """Return a configured `openai.OpenAI` client.

    Args:
        api_key: API credential (already validated as present).
        base_url: Optional custom endpoint, otherwise OPENAI_BASE_URL.
        organization: Optional organization ID, otherwise OPENAI_ORG.
        project: Optional project ID, otherwise OPENAI_PROJECT.
        timeout: Optional request timeout in seconds (SDK default if None).
        logger: Optional logger.
    """
    log = logger or get_logger('ai')
    base_url = base_url or os.getenv('OPENAI_BASE_URL') or None
    kwargs = {
        'api_key': api_key,
        'base_url': base_url,
        'organization': organization or os.getenv('OPENAI_ORG') or None,
        'project': project or os.getenv('OPENAI_PROJECT') or None,
    }
    if timeout is not None:
        kwargs['timeout'] = timeout
    log.debug('OpenAI client → base_url=%s', base_url or 'default')
    return openai.OpenAI(**kwargs)
