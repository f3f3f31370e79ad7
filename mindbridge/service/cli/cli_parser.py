"""CLI parser construction for the ``mindbridge`` command.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...base.models import PROVIDER_IDS
from ...config.defaults import MAX_TOKENS_DEFAULT, SERVER_NAME, SERVER_VERSION

COMMANDS = ("serve", "providers", "reasoning-models", "ask")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    Returns
    -------
    argparse.ArgumentParser
        Parser with ``serve`` (default), ``providers``, ``reasoning-models``
        and ``ask`` subcommands. No I/O happens here.
    """
    p = argparse.ArgumentParser(prog=SERVER_NAME, description="LLM second-opinion router (MCP server)")
    p.add_argument("--version", action="version", version=f"%(prog)s {SERVER_VERSION}")
    p.add_argument("--log-level", default=None, help="Override MINDBRIDGE_LOG_LEVEL (e.g. DEBUG)")
    p.add_argument("--log-file", default=None, help="Also write JSON logs to this file")
    sub = p.add_subparsers(dest="cmd")

    sub.add_parser("serve", help="Run the MCP server over stdio (default)")
    sub.add_parser("providers", help="Print configured providers and their models as JSON")
    sub.add_parser("reasoning-models", help="Print the reasoning-capable model catalog as JSON")

    p_ask = sub.add_parser("ask", help="Send one prompt through the dispatcher and print the reply")
    p_ask.add_argument("prompt")
    p_ask.add_argument("--provider", required=True, help=f"One of: {', '.join(PROVIDER_IDS)}")
    p_ask.add_argument("--model", required=True)
    p_ask.add_argument("--system", dest="system_prompt", default=None)
    p_ask.add_argument("--temperature", type=float, default=None)
    p_ask.add_argument("--max-tokens", type=int, default=MAX_TOKENS_DEFAULT)
    p_ask.add_argument("--reasoning-effort", choices=("low", "medium", "high"), default=None)
    p_ask.add_argument("--json", action="store_true", help="Print the full envelope as JSON")
    return p


__all__ = ["build_parser", "COMMANDS"]
