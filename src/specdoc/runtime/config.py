from __future__ import annotations

"""
Run configuration and pre-flight validation.

Settings are resolved once, at startup, from three sources in priority order:
explicit argument, environment variable, built-in default. Invalid
environment overrides are logged and ignored.

`validate` is the single pre-flight step: it returns either `Ready` (the
config plus the credential) or a `ConfigError` carrying its exit code.
Nothing stateful is built until a `Ready` exists.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Optional, TypeVar, Union

from specdoc.constants import (
    DEFAULT_MAX_CHARS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_OUT,
    DEFAULT_PATTERN,
    DEFAULT_REASONING_EFFORT,
    DEFAULT_SLEEP_BETWEEN,
    REASONING_EFFORTS,
    ExitCode,
)
from specdoc.core.interfaces.logging import LoggerLikeProtocol
from specdoc.logging.helpers import get_logger

API_KEY_ENV = 'OPENAI_API_KEY'

ENV_OUT = 'SPECDOC_OUT'
ENV_FILES_PER_BATCH = 'SPECDOC_FILES_PER_BATCH'
ENV_MAX_CHARS = 'SPECDOC_MAX_CHARS'
ENV_MAX_TOKENS = 'SPECDOC_MAX_TOKENS'
ENV_MODEL = 'SPECDOC_MODEL'
ENV_REASONING_EFFORT = 'SPECDOC_REASONING_EFFORT'
ENV_SLEEP_BETWEEN = 'LLM_SLEEP_BETWEEN'
ENV_BASE_URL = 'OPENAI_BASE_URL'

T = TypeVar('T')

_log = get_logger('config')


def _from_env(
    env: Mapping[str, str],
    name: str,
    convert: Callable[[str], T],
    default: T,
    logger: LoggerLikeProtocol,
) -> T:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        logger.warning('Invalid %s=%r; ignoring.', name, raw)
        return default


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable settings for one run."""
    path: str
    out: str = DEFAULT_OUT
    files_per_batch: Optional[int] = None
    max_chars: int = DEFAULT_MAX_CHARS
    max_tokens: int = DEFAULT_MAX_TOKENS
    model: str = DEFAULT_MODEL
    reasoning_effort: str = DEFAULT_REASONING_EFFORT
    sleep_between: float = DEFAULT_SLEEP_BETWEEN
    pattern: str = DEFAULT_PATTERN
    base_url: Optional[str] = None

    @classmethod
    def from_sources(
        cls,
        *,
        path: Optional[str],
        out: Optional[str] = None,
        files_per_batch: Optional[int] = None,
        max_chars: Optional[int] = None,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
        reasoning_effort: Optional[str] = None,
        sleep_between: Optional[float] = None,
        pattern: Optional[str] = None,
        base_url: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> 'GeneratorConfig':
        """Resolve every setting as explicit > environment > default."""
        env = os.environ if env is None else env
        log = logger or _log

        def pick(explicit, name, convert, default):
            if explicit is not None:
                return explicit
            return _from_env(env, name, convert, default, log)

        return cls(
            path=path if path is not None else '',
            out=pick(out, ENV_OUT, str, DEFAULT_OUT),
            files_per_batch=pick(files_per_batch, ENV_FILES_PER_BATCH, int, None),
            max_chars=pick(max_chars, ENV_MAX_CHARS, int, DEFAULT_MAX_CHARS),
            max_tokens=pick(max_tokens, ENV_MAX_TOKENS, int, DEFAULT_MAX_TOKENS),
            model=pick(model, ENV_MODEL, str, DEFAULT_MODEL),
            reasoning_effort=pick(reasoning_effort, ENV_REASONING_EFFORT, str.lower, DEFAULT_REASONING_EFFORT),
            sleep_between=pick(sleep_between, ENV_SLEEP_BETWEEN, float, DEFAULT_SLEEP_BETWEEN),
            pattern=pattern or DEFAULT_PATTERN,
            base_url=pick(base_url, ENV_BASE_URL, str, None),
        )


class ConfigErrorKind(Enum):
    MISSING_CREDENTIAL = ExitCode.MISSING_CREDENTIAL
    MISSING_PATH = ExitCode.MISSING_PATH
    PATH_NOT_FOUND = ExitCode.PATH_NOT_FOUND
    INVALID_OPTION = ExitCode.INVALID_OPTION


@dataclass(frozen=True)
class ConfigError:
    kind: ConfigErrorKind
    message: str

    @property
    def exit_code(self) -> int:
        return int(self.kind.value)


@dataclass(frozen=True)
class Ready:
    """A validated config together with the API credential."""
    config: GeneratorConfig
    api_key: str


def _invalid(message: str) -> ConfigError:
    return ConfigError(ConfigErrorKind.INVALID_OPTION, message)


def validate(config: GeneratorConfig, env: Optional[Mapping[str, str]] = None) -> Union[Ready, ConfigError]:
    """Run every pre-flight check, in order, and stop at the first failure."""
    env = os.environ if env is None else env

    api_key = env.get(API_KEY_ENV)
    if not api_key:
        return ConfigError(ConfigErrorKind.MISSING_CREDENTIAL, f'Please set your {API_KEY_ENV} environment variable.')
    if not config.path or not config.path.strip():
        return ConfigError(ConfigErrorKind.MISSING_PATH, 'Provide a file or directory path as the first argument.')
    if not os.path.exists(config.path):
        return ConfigError(ConfigErrorKind.PATH_NOT_FOUND, f'File not found: {config.path}')

    if config.files_per_batch is not None and config.files_per_batch < 1:
        return _invalid(f'files per batch must be a positive integer, got {config.files_per_batch}')
    if config.max_chars < 1:
        return _invalid(f'max chars must be a positive integer, got {config.max_chars}')
    if config.max_tokens < 1:
        return _invalid(f'max tokens must be a positive integer, got {config.max_tokens}')
    if config.reasoning_effort not in REASONING_EFFORTS:
        return _invalid(
            f'reasoning effort must be one of {", ".join(REASONING_EFFORTS)}, got {config.reasoning_effort!r}'
        )
    if not config.out or not config.out.strip():
        return _invalid('output path must not be empty')

    return Ready(config=config, api_key=api_key)
