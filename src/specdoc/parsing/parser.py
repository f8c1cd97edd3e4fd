# specdoc/parsing/parser.py
from __future__ import annotations

import argparse

from specdoc.constants import (
    DEFAULT_MAX_CHARS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_OUT,
    DEFAULT_PATTERN,
    DEFAULT_REASONING_EFFORT,
    REASONING_EFFORTS,
)


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Every option defaults to None so that environment overrides can be
          applied afterwards (explicit > environment > default); the defaults
          shown in help texts are the built-in ones.
    """
    p = argparse.ArgumentParser(
        prog="specdoc",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "specdoc – infer developer documentation from RSpec files\n"
            "Spec files are grouped into batches, each batch is sent to an OpenAI "
            "model and the answers are combined into one Markdown document."
        ),
    )

    g_in = p.add_argument_group("Input")
    g_batch = p.add_argument_group("Batching")
    g_ai = p.add_argument_group("AI integration")
    g_misc = p.add_argument_group("Miscellaneous")

    g_in.add_argument(
        "path",
        nargs="?",
        metavar="PATH",
        help="Spec file, or directory searched recursively for spec files.",
    )
    g_in.add_argument(
        "-p",
        "--pattern",
        metavar="GLOB",
        dest="pattern",
        help=f"File-name pattern used when PATH is a directory (default: {DEFAULT_PATTERN}).",
    )
    g_in.add_argument(
        "-o",
        "--out",
        metavar="FILE",
        dest="out",
        help=f"Output Markdown file, overwritten on each run (default: {DEFAULT_OUT}; env SPECDOC_OUT).",
    )

    g_batch.add_argument(
        "-f",
        "--files-per-batch",
        metavar="N",
        type=int,
        dest="files_per_batch",
        help="Maximum number of files per batch (default: unbounded; env SPECDOC_FILES_PER_BATCH).",
    )
    g_batch.add_argument(
        "-c",
        "--max-chars",
        metavar="N",
        type=int,
        dest="max_chars",
        help=(
            f"Character budget per batch (default: {DEFAULT_MAX_CHARS}; env SPECDOC_MAX_CHARS). "
            "A single file larger than the budget is still sent, alone."
        ),
    )
    g_batch.add_argument(
        "-t",
        "--max-tokens",
        metavar="N",
        type=int,
        dest="max_tokens",
        help=(
            f"Advisory token budget per batch, shown in the header and used for "
            f"warnings only (default: {DEFAULT_MAX_TOKENS}; env SPECDOC_MAX_TOKENS)."
        ),
    )
    g_batch.add_argument(
        "-s",
        "--sleep-between",
        metavar="SECONDS",
        type=float,
        dest="sleep_between",
        help="Pause between backend calls (default: env LLM_SLEEP_BETWEEN or 0).",
    )

    g_ai.add_argument(
        "-m",
        "--model",
        metavar="MODEL",
        dest="model",
        help=f"Model identifier (default: {DEFAULT_MODEL}; env SPECDOC_MODEL).",
    )
    g_ai.add_argument(
        "-r",
        "--reasoning-effort",
        choices=REASONING_EFFORTS,
        dest="reasoning_effort",
        help=f"Reasoning effort for the Responses API (default: {DEFAULT_REASONING_EFFORT}).",
    )
    g_ai.add_argument(
        "--base-url",
        metavar="URL",
        dest="base_url",
        help="Custom OpenAI-compatible endpoint (default: env OPENAI_BASE_URL).",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines on stderr (or set SPECDOC_JSON_LOGS=1).",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Enable debug logging.",
    )
    g_misc.add_argument(
        "--report",
        action="store_true",
        dest="report",
        help="Print a JSON run report to stdout after the completion line.",
    )
    return p
