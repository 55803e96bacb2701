"""
GovcExecutor - the invocation pipeline.

    Invocation -> build_args -> ProcessRunner -> interpret_output
               -> sanitize -> ExecutionOutcome

Every path through execute() ends in an ExecutionOutcome. Process errors
raised by the runner are caught here and become a FailedOutcome with exit
code -1; nothing raises past this point.
"""

import logging
import re
from collections.abc import Sequence

from govcmcp.args import build_args
from govcmcp.errors import ProcessSpawnError, ProcessTimeoutError
from govcmcp.interpreter import NOT_PARSED, interpret_output
from govcmcp.runner import ProcessRunner
from govcmcp.sanitizer import ABSENT, sanitize
from govcmcp.types import (
    ExecutionOutcome,
    FailedOutcome,
    Invocation,
    OptionValue,
    StructuredOutcome,
    TextOutcome,
)

logger = logging.getLogger(__name__)

_SECTION_START = re.compile(r"^(Available commands|Commands):", re.IGNORECASE)


def parse_command_list(help_text: str) -> list[str]:
    """
    Extract command names from `govc -h` output.

    The list is the block after an "Available commands:" (or "Commands:")
    header, up to a blank line, a "Use ..." hint or a "Flags:" header.
    Returns [] when no such block is found.
    """
    commands: list[str] = []
    in_section = False

    for line in help_text.splitlines():
        stripped = line.strip()
        if not in_section:
            if _SECTION_START.match(stripped):
                in_section = True
            continue
        if not stripped or stripped.startswith("Use ") or stripped.startswith("Flags:"):
            break
        commands.append(stripped)

    return commands


class GovcExecutor:
    """
    Runs govc invocations and turns the result into an ExecutionOutcome.

    Stateless apart from its runner; safe to share across concurrent calls.
    """

    def __init__(self, runner: ProcessRunner | None = None):
        self.runner = runner or ProcessRunner()

    async def execute(self, invocation: Invocation) -> ExecutionOutcome:
        tokens = build_args(
            invocation.options,
            invocation.positional_args,
            json=invocation.wants_structured_output,
        )

        try:
            result = await self.runner.run(invocation.command, tokens)
        except (ProcessSpawnError, ProcessTimeoutError) as e:
            return FailedOutcome(exit_code=e.exit_code, error=str(e))

        if result.exit_code != 0:
            return FailedOutcome(
                exit_code=result.exit_code,
                error=result.stderr.strip() or f"govc exited with code {result.exit_code}",
                text=result.stdout.strip() or None,
            )

        data, text = interpret_output(result.stdout, invocation.wants_structured_output)
        if data is NOT_PARSED:
            return TextOutcome(exit_code=result.exit_code, text=text)

        cleaned = sanitize(data)
        # Documents that reduce to nothing ([], {}, null) are returned as parsed
        return StructuredOutcome(
            exit_code=result.exit_code,
            data=data if cleaned is ABSENT else cleaned,
        )

    async def run(
        self,
        command: str,
        options: dict[str, OptionValue] | None = None,
        positional_args: Sequence[str] = (),
        json: bool = True,
    ) -> ExecutionOutcome:
        """Convenience wrapper building the Invocation from its parts."""
        return await self.execute(
            Invocation(
                command=command,
                options=dict(options or {}),
                positional_args=list(positional_args),
                wants_structured_output=json,
            )
        )

    async def help(self, command: str) -> str:
        """Usage text for a command (govc prints it on stderr)."""
        try:
            result = await self.runner.run(command, ["-h"])
        except (ProcessSpawnError, ProcessTimeoutError) as e:
            logger.warning(f"Help for {command} failed: {e}")
            return f"Failed to get help for '{command}'"

        text = (result.stderr + result.stdout).strip()
        return text or f"No help available for '{command}'"

    async def list_commands(self) -> str:
        """Newline-separated list of all commands the installed govc knows."""
        try:
            result = await self.runner.run(None, ["-h"])
        except (ProcessSpawnError, ProcessTimeoutError) as e:
            logger.warning(f"Listing commands failed: {e}")
            return f"Failed to list commands: {e}"

        text = (result.stderr + result.stdout).strip()
        commands = parse_command_list(text)
        if commands:
            return "\n".join(commands)
        return text or "No command list available"
