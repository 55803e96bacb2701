"""
govcmcp - govc (the vSphere CLI) exposed as MCP tools.

An agent request flows through one pipeline:

1. Arguments: named options and positional values become govc flags
2. Execution: one govc child per call, filtered environment, hard timeout
3. Interpretation: JSON when requested and parseable, trimmed text otherwise
4. Sanitization: noisy vSphere fields and empty values are pruned,
   managed object references compacted to "Type:value"
5. Formatting: TOON for the agent, indented JSON when TOON cannot encode

A fuzzy search over the ~400 command catalogue lets the agent find the
command it needs before running it.
"""

__version__ = "0.1.0"

from govcmcp.args import build_args, split_args
from govcmcp.catalogue import CatalogueEntry, load_catalogue
from govcmcp.config import AppConfig, RunnerConfig, ServerConfig
from govcmcp.errors import ConfigError, GovcMcpError, ProcessSpawnError, ProcessTimeoutError
from govcmcp.executor import GovcExecutor
from govcmcp.formatter import format_for_llm, format_outcome
from govcmcp.runner import ProcessResult, ProcessRunner
from govcmcp.sanitizer import ABSENT, sanitize
from govcmcp.search import SearchIndex
from govcmcp.tools import Tool, ToolRegistry, build_registry
from govcmcp.types import (
    ExecutionOutcome,
    FailedOutcome,
    Invocation,
    StructuredOutcome,
    TextOutcome,
    ToolCall,
    ToolResult,
)

__all__ = [
    "ABSENT",
    "AppConfig",
    "CatalogueEntry",
    "ConfigError",
    "ExecutionOutcome",
    "FailedOutcome",
    "GovcExecutor",
    "GovcMcpError",
    "Invocation",
    "ProcessResult",
    "ProcessRunner",
    "ProcessSpawnError",
    "ProcessTimeoutError",
    "RunnerConfig",
    "SearchIndex",
    "ServerConfig",
    "StructuredOutcome",
    "TextOutcome",
    "Tool",
    "ToolCall",
    "ToolRegistry",
    "ToolResult",
    "build_args",
    "build_registry",
    "format_for_llm",
    "format_outcome",
    "load_catalogue",
    "sanitize",
    "split_args",
]
