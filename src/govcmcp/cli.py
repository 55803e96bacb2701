"""
Command-line entry point.

    govcmcp serve [--no-health] [--port N]     run the MCP server on stdio
    govcmcp search QUERY [--limit N]           search the command catalogue
    govcmcp exec COMMAND [ARGS...] [--json]    run one govc command
    govcmcp help COMMAND                       show govc usage for COMMAND

Logging always goes to stderr; under `serve`, stdout is the MCP transport.
"""

import argparse
import asyncio
import logging
import sys

from govcmcp.catalogue import load_catalogue
from govcmcp.config import AppConfig
from govcmcp.errors import ConfigError
from govcmcp.executor import GovcExecutor
from govcmcp.formatter import format_for_llm, format_outcome
from govcmcp.runner import ProcessRunner
from govcmcp.search import SearchIndex

logger = logging.getLogger(__name__)


JSON_OPTION = "--json"


def split_json_option(tokens: list[str]) -> tuple[list[str], bool]:
    """
    Remove --json from the tokens collected after COMMAND.

    Everything after COMMAND is passed through to govc, so --json given
    there would otherwise reach govc without switching on JSON mode.
    """
    rest = [token for token in tokens if token != JSON_OPTION]
    return rest, len(rest) != len(tokens)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="govcmcp", description="govc MCP server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server on stdio")
    serve_parser.add_argument("--no-health", action="store_true", help="Disable the liveness endpoint")
    serve_parser.add_argument("--port", type=int, help="Liveness endpoint port (default: $HTTP_PORT or 3211)")

    search_parser = subparsers.add_parser("search", help="Search the govc command catalogue")
    search_parser.add_argument("query", help="Search keywords")
    search_parser.add_argument("--limit", type=int, help="Max results")

    exec_parser = subparsers.add_parser("exec", help="Run a govc command through the pipeline")
    exec_parser.add_argument("--json", action="store_true", help="Request JSON output")
    exec_parser.add_argument("govc_command", metavar="COMMAND", help="govc command (e.g. vm.info)")
    exec_parser.add_argument("args", nargs=argparse.REMAINDER, help="Flags and arguments passed to govc")

    help_parser = subparsers.add_parser("help", help="Show govc usage for a command")
    help_parser.add_argument("govc_command", metavar="COMMAND", help="govc command (e.g. vm.info)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.server.log_level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        from govcmcp.server import serve

        if args.no_health:
            config.server.health_enabled = False
        if args.port is not None:
            config.server.http_port = args.port
        asyncio.run(serve(config))
        return 0

    if args.command == "search":
        index = SearchIndex(load_catalogue())
        entries = index.search(args.query, limit=args.limit or config.server.search_limit)
        if not entries:
            print(f"No commands found matching '{args.query}'")
            return 1
        print(format_for_llm([entry.to_dict() for entry in entries]))
        return 0

    executor = GovcExecutor(ProcessRunner(config.runner))

    if args.command == "exec":
        positional, trailing_json = split_json_option(args.args)
        outcome = asyncio.run(
            executor.run(args.govc_command, positional_args=positional, json=args.json or trailing_json)
        )
        print(format_outcome(outcome))
        return 0 if outcome.succeeded else 1

    if args.command == "help":
        print(asyncio.run(executor.help(args.govc_command)))
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
