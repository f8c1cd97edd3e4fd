from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import NoReturn, Optional, Sequence

from specdoc.ai.token_budget import TokenBudgetEstimator
from specdoc.constants import ExitCode
from specdoc.core.models import RunReport
from specdoc.logging.factory import DefaultLoggerFactory
from specdoc.logging.helpers import get_logger
from specdoc.parsing.parser import _build_parser
from specdoc.runtime.config import ConfigError, GeneratorConfig, validate
from specdoc.runtime.generator import Generator


logger = get_logger('specdoc')


def _configure_logging(enable_json: bool, verbose: bool = False) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    level = logging.DEBUG if verbose else logging.INFO
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('specdoc')


def _fatal(msg: str, code: int = ExitCode.BACKEND_FAILURE) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(int(code))


def _config_from_namespace(ns: argparse.Namespace) -> GeneratorConfig:
    return GeneratorConfig.from_sources(
        path=ns.path,
        out=ns.out,
        files_per_batch=ns.files_per_batch,
        max_chars=ns.max_chars,
        max_tokens=ns.max_tokens,
        model=ns.model,
        reasoning_effort=ns.reasoning_effort,
        sleep_between=ns.sleep_between,
        pattern=ns.pattern,
        base_url=ns.base_url,
        logger=logger,
    )


class SpecDoc:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(argv: Sequence[str]) -> RunReport:
        """Run the tool with an argv-like sequence and return the run report.

        Pre-flight failures and an empty input set terminate through
        `_fatal` (SystemExit with the matching exit code) before any output
        file is touched.
        """
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('SPECDOC_JSON_LOGS') == '1'
        _configure_logging(json_logs, ns.verbose)

        outcome = validate(_config_from_namespace(ns))
        if isinstance(outcome, ConfigError):
            _fatal(outcome.message, outcome.exit_code)

        generator = Generator(outcome, estimator=TokenBudgetEstimator(), fatal=_fatal, logger=logger)
        report = generator.run()

        print(f'Done. Combined documentation written to {report.out}')
        if ns.report:
            print(report.to_json())
        return report


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for `specdoc` and `python -m specdoc`."""
    try:
        SpecDoc.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(ExitCode.OK)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(ExitCode.INTERRUPTED)
    except BrokenPipeError:
        raise SystemExit(ExitCode.OK)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Generation aborted: %s: %s', type(exc).__name__, exc)
        raise SystemExit(ExitCode.BACKEND_FAILURE)


if __name__ == '__main__':
    main()
