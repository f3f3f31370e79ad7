"""CLI action handlers.

Purpose
-------
Subcommand handlers for the ``mindbridge`` CLI. ``serve`` owns process
bootstrap: banner on stderr, SIGINT/SIGTERM mapped to a clean exit, and any
startup failure logged and turned into exit status 1.

Output
------
Tool payloads go to stdout; banners and logs go to stderr so that stdout
stays clean for the MCP stdio transport.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import signal
import sys
from typing import Any, Callable, Dict, Optional

from ...base.http import aclose_all_clients
from ...base.logging import get_logger, log_event
from ...base.registry import ProviderRegistry
from ...config import load_config
from ...config.defaults import SERVER_NAME, SERVER_VERSION
from .. import tools
from ..dispatcher import RequestDispatcher

logger = get_logger("mindbridge.cli")


def build_registry() -> ProviderRegistry:
    return ProviderRegistry.from_config(load_config())


def _raise_exit(signum: int, _frame: Any) -> None:
    raise SystemExit(0)


def handle_serve(args: argparse.Namespace, server_factory: Optional[Callable[[], Any]] = None) -> int:
    """Run the MCP stdio server until the host disconnects or a signal arrives.

    Returns
    -------
    int
        0 on clean shutdown (including SIGINT/SIGTERM), 1 on bootstrap failure.
    """
    print(f"{SERVER_NAME} v{SERVER_VERSION} MCP server starting on stdio", file=sys.stderr)
    try:
        if server_factory is None:
            from ..server import MindBridgeServer

            server_factory = MindBridgeServer
        server = server_factory()
        log_event(logger, "server.start", providers=server.registry.list_ids())
        signal.signal(signal.SIGTERM, _raise_exit)
        asyncio.run(server.start())
    except KeyboardInterrupt:
        log_event(logger, "server.stop", reason="sigint")
        return 0
    except SystemExit as exc:
        log_event(logger, "server.stop", reason="signal")
        return int(exc.code or 0)
    except Exception as exc:
        logger.exception("fatal error during server bootstrap")
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    log_event(logger, "server.stop", reason="eof")
    return 0


def handle_providers(args: argparse.Namespace, registry: Optional[ProviderRegistry] = None) -> int:
    envelope = tools.list_providers(registry if registry is not None else build_registry())
    print(envelope.first_text)
    return 0


def handle_reasoning_models(args: argparse.Namespace) -> int:
    print(tools.list_reasoning_models().first_text)
    return 0


def ask_arguments(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate ``ask`` flags into tool arguments (alias names, unset values dropped)."""
    raw = {
        "prompt": args.prompt,
        "provider": args.provider,
        "model": args.model,
        "systemPrompt": args.system_prompt,
        "temperature": args.temperature,
        "maxTokens": args.max_tokens,
        "reasoning_effort": args.reasoning_effort,
    }
    return {k: v for k, v in raw.items() if v is not None}


async def _ask(dispatcher: RequestDispatcher, arguments: Dict[str, Any]):
    try:
        return await dispatcher.dispatch(arguments)
    finally:
        await aclose_all_clients()


def handle_ask(args: argparse.Namespace, registry: Optional[ProviderRegistry] = None) -> int:
    """Dispatch one prompt and print the reply; exit 1 for error envelopes."""
    dispatcher = RequestDispatcher(registry if registry is not None else build_registry())
    envelope = asyncio.run(_ask(dispatcher, ask_arguments(args)))
    if getattr(args, "json", False):
        print(json.dumps(envelope.to_dict(), indent=2))
    else:
        stream = sys.stderr if envelope.is_error else sys.stdout
        print(envelope.first_text, file=stream)
    return 1 if envelope.is_error else 0


__all__ = [
    "build_registry",
    "handle_serve",
    "handle_providers",
    "handle_reasoning_models",
    "handle_ask",
    "ask_arguments",
]
