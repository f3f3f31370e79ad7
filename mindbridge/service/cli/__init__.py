"""mindbridge CLI (package entrypoint).

Wires argument parsing to the action handlers in ``cli_actions``. With no
subcommand the MCP server is started, which is what MCP hosts invoke.
"""

from __future__ import annotations

import sys
from typing import Optional

from ...base.logging import configure_logger
from .cli_actions import handle_ask, handle_providers, handle_reasoning_models, handle_serve
from .cli_parser import COMMANDS, build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, non-zero on error).
    """
    p = build_parser()
    argv_list = list(sys.argv[1:] if argv is None else argv)
    if not any(a in COMMANDS for a in argv_list) and not any(a in ("-h", "--help", "--version") for a in argv_list):
        argv_list.append("serve")
    args = p.parse_args(argv_list)

    if args.log_level or args.log_file:
        configure_logger(level=args.log_level, file_path=args.log_file)

    if args.cmd == "providers":
        return handle_providers(args)
    if args.cmd == "reasoning-models":
        return handle_reasoning_models(args)
    if args.cmd == "ask":
        return handle_ask(args)
    return handle_serve(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
