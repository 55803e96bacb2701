"""
Core types for the govc pipeline.

These types represent the data that flows from an agent's request to the
text it gets back. ExecutionOutcome is a closed union of three variants so
callers can dispatch on the variant instead of catching exceptions.
"""

from dataclasses import dataclass, field
from typing import Any

OptionValue = str | int | float | bool | None


@dataclass
class Invocation:
    """
    One logical request to run a govc command.

    Options keep their insertion order; that order is the order of the
    flags on the command line.
    """
    command: str
    options: dict[str, OptionValue] = field(default_factory=dict)
    positional_args: list[str] = field(default_factory=list)
    wants_structured_output: bool = True


@dataclass(frozen=True)
class StructuredOutcome:
    """Successful run whose stdout parsed as JSON."""
    exit_code: int
    data: Any

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def structured_value(self) -> Any:
        return self.data

    @property
    def raw_text(self) -> str | None:
        return None

    @property
    def error_message(self) -> str | None:
        return None


@dataclass(frozen=True)
class TextOutcome:
    """Successful run carried forward as trimmed text (None when stdout was empty)."""
    exit_code: int
    text: str | None

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def structured_value(self) -> Any:
        return None

    @property
    def raw_text(self) -> str | None:
        return self.text

    @property
    def error_message(self) -> str | None:
        return None


@dataclass(frozen=True)
class FailedOutcome:
    """
    A run that did not succeed.

    exit_code is -1 when the process never started or was killed on
    timeout; a child that died from signal N reports 128 + N. Any stdout
    produced before a non-zero exit is kept in text.
    """
    exit_code: int
    error: str
    text: str | None = None

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def structured_value(self) -> Any:
        return None

    @property
    def raw_text(self) -> str | None:
        return self.text

    @property
    def error_message(self) -> str | None:
        return self.error


ExecutionOutcome = StructuredOutcome | TextOutcome | FailedOutcome


@dataclass
class ToolCall:
    """A request from the agent to execute a tool."""
    id: str
    name: str
    arguments: dict[str, Any]


@dataclass
class ToolResult:
    """
    The result of executing a tool.

    content is always the text handed back to the agent, including for
    failures; error carries the short failure reason for logging.
    """
    tool_call_id: str
    content: str
    success: bool = True
    error: str | None = None
