"""
Tool System - the agent-facing surface of govc.

The agent never runs govc directly: it emits a tool call that the registry
dispatches to a handler. Three kinds of tool are registered:

- one typed tool per CommandDef (vm.info -> vm_info), schema from its flags
- discovery tools: govc_search, govc_help, govc_commands
- govc_run, the escape hatch for any command in the catalogue

Handlers are coroutines returning the final text for the agent.
"""

import logging
from collections.abc import Awaitable, Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from govcmcp.args import split_args
from govcmcp.commands import COMMAND_DEFS, CommandDef
from govcmcp.executor import GovcExecutor
from govcmcp.formatter import format_for_llm, format_outcome
from govcmcp.search import DEFAULT_LIMIT, SearchIndex
from govcmcp.types import ToolCall, ToolResult

logger = logging.getLogger(__name__)

POSITIONAL_KEY = "_args"


class ToolHandler(Protocol):
    """Protocol for tool handler coroutines."""
    def __call__(self, **kwargs: Any) -> Awaitable[str]: ...


@dataclass
class Tool:
    """
    Definition of a tool that the agent can use.

    A tool has:
    - name: Unique identifier
    - description: What the tool does (shown to the LLM)
    - parameters: JSON Schema for the tool's parameters
    - handler: Coroutine function that executes the tool
    """
    name: str
    description: str
    parameters: dict[str, Any]
    handler: ToolHandler

    def to_mcp_schema(self) -> dict[str, Any]:
        """Convert to the MCP tool listing format."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.parameters,
        }

    async def execute(self, arguments: dict[str, Any]) -> ToolResult:
        """
        Execute the tool with the given arguments.

        Unexpected handler exceptions are turned into a failed ToolResult.
        """
        try:
            result = await self.handler(**arguments)
            return ToolResult(
                tool_call_id="",
                content=str(result),
                success=True,
            )
        except Exception as e:
            logger.error(f"Tool {self.name} failed: {e}")
            return ToolResult(
                tool_call_id="",
                content=f"Error: {e}",
                success=False,
                error=str(e),
            )


@dataclass
class ToolRegistry:
    """Registry of available tools. Only tools registered here can be called."""

    _tools: dict[str, Tool] = field(default_factory=dict)

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            logger.warning(f"Overwriting existing tool: {tool.name}")
        self._tools[tool.name] = tool
        logger.debug(f"Registered tool: {tool.name}")

    def register_function(
        self,
        name: str,
        description: str,
        parameters: dict[str, Any],
        handler: ToolHandler,
    ) -> Tool:
        """Convenience method to register a coroutine function as a tool."""
        tool = Tool(
            name=name,
            description=description,
            parameters=parameters,
            handler=handler,
        )
        self.register(tool)
        return tool

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Dispatch a tool call to its handler."""
        tool = self._tools.get(tool_call.name)
        if tool is None:
            return ToolResult(
                tool_call_id=tool_call.id,
                content=f"Unknown tool: {tool_call.name}",
                success=False,
                error=f"Unknown tool: {tool_call.name}",
            )

        logger.info(f"Executing tool: {tool_call.name}")
        result = await tool.execute(tool_call.arguments)
        result.tool_call_id = tool_call.id
        return result

    def get_schemas(self) -> list[dict[str, Any]]:
        """MCP-format schemas for all registered tools."""
        return [tool.to_mcp_schema() for tool in self._tools.values()]

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools.keys())

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools


def tool_name(command: str) -> str:
    """govc command name -> tool name (dots are not valid in tool names)."""
    return command.replace(".", "_")


def command_schema(definition: CommandDef) -> dict[str, Any]:
    """JSON Schema for a typed command's arguments."""
    properties: dict[str, Any] = {}
    required: list[str] = []

    for key, flag in definition.flags.items():
        properties[key] = flag.to_json_schema()
        if flag.required:
            required.append(key)

    if definition.positional_args:
        properties[POSITIONAL_KEY] = {
            "type": "string",
            "description": f"Positional arguments: {definition.positional_args}. Space-separated values.",
        }

    schema: dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required
    return schema


def make_command_handler(definition: CommandDef, executor: GovcExecutor) -> ToolHandler:
    """
    Handler for a typed command tool.

    _args is tokenized into positional arguments; any other key not
    declared in the flag schema is ignored.
    """
    async def handler(**arguments: Any) -> str:
        raw_positional = arguments.get(POSITIONAL_KEY)
        positional = split_args(raw_positional) if isinstance(raw_positional, str) else []
        options = {key: value for key, value in arguments.items() if key in definition.flags}

        outcome = await executor.run(definition.command, options, positional, json=True)
        return format_outcome(outcome)

    return handler


def generate_command_tools(
    executor: GovcExecutor,
    command_defs: Iterable[CommandDef] = COMMAND_DEFS,
) -> list[Tool]:
    return [
        Tool(
            name=tool_name(definition.command),
            description=f"[govc {definition.command}] {definition.description}",
            parameters=command_schema(definition),
            handler=make_command_handler(definition, executor),
        )
        for definition in command_defs
    ]


def register_discovery_tools(
    registry: ToolRegistry,
    executor: GovcExecutor,
    index: SearchIndex,
    default_limit: int = DEFAULT_LIMIT,
) -> None:
    """Register govc_search, govc_help, govc_commands and govc_run."""

    async def search(query: str, limit: int | None = None) -> str:
        entries = index.search(query, limit=int(limit) if limit else default_limit)
        if not entries:
            return f"No commands found matching '{query}'"
        return format_for_llm([entry.to_dict() for entry in entries])

    async def get_help(command: str) -> str:
        return await executor.help(command)

    async def list_commands() -> str:
        return await executor.list_commands()

    async def run(command: str, args: str | list[str] | None = None, json: bool = False) -> str:
        if isinstance(args, str):
            positional = split_args(args)
        else:
            positional = [str(arg) for arg in args or []]
        outcome = await executor.run(command, positional_args=positional, json=bool(json))
        return format_outcome(outcome)

    registry.register_function(
        name="govc_search",
        description=(
            "Search the catalogue of ~400 govc commands by keyword. Tolerates typos and "
            "partial terms. Use this first to find the right command, then call its typed "
            "tool or govc_run."
        ),
        parameters={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search keywords (e.g. 'snapshot revert', 'host maintenance')",
                },
                "limit": {
                    "type": "number",
                    "description": f"Maximum number of results (default: {default_limit})",
                },
            },
            "required": ["query"],
        },
        handler=search,
    )

    registry.register_function(
        name="govc_help",
        description="Get detailed help for a govc command, including available flags and usage.",
        parameters={
            "type": "object",
            "properties": {
                "command": {
                    "type": "string",
                    "description": "The govc command to get help for (e.g. 'vm.info')",
                },
            },
            "required": ["command"],
        },
        handler=get_help,
    )

    registry.register_function(
        name="govc_commands",
        description="List all commands supported by the installed govc binary.",
        parameters={"type": "object", "properties": {}},
        handler=list_commands,
    )

    registry.register_function(
        name="govc_run",
        description=(
            "Run any govc command. Use for commands without a dedicated tool. "
            "Check flags with govc_help first."
        ),
        parameters={
            "type": "object",
            "properties": {
                "command": {
                    "type": "string",
                    "description": "The govc command (e.g. 'vm.info', 'host.esxcli')",
                },
                "args": {
                    "anyOf": [
                        {"type": "string"},
                        {"type": "array", "items": {"type": "string"}},
                    ],
                    "description": "Flags and positional arguments, as one shell-like string or a list",
                },
                "json": {
                    "type": "boolean",
                    "description": "Request JSON output (default: false)",
                },
            },
            "required": ["command"],
        },
        handler=run,
    )


def build_registry(
    executor: GovcExecutor,
    index: SearchIndex,
    command_defs: Iterable[CommandDef] = COMMAND_DEFS,
    search_limit: int = DEFAULT_LIMIT,
) -> ToolRegistry:
    """Registry with every typed command tool plus the discovery tools."""
    registry = ToolRegistry()
    for tool in generate_command_tools(executor, command_defs):
        registry.register(tool)
    register_discovery_tools(registry, executor, index, default_limit=search_limit)
    logger.info(f"Registered {len(registry)} tools")
    return registry
