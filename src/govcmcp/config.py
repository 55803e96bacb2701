"""
Configuration for the govc MCP server.

All configuration is loaded from environment variables. The same process
can then run under a container orchestrator, a desktop MCP client or a
test harness without code changes.

The subprocess timeout is configurable but MUST be enforced - an
invocation that outlives it is killed, never waited on.
"""

import os
from dataclasses import dataclass, field

from govcmcp.errors import ConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


@dataclass
class RunnerConfig:
    """
    Configuration for spawning the govc binary.

    Only variables starting with env_prefix (plus PATH, and HOME when
    forward_home is set) are visible to the child process.
    """
    binary: str = "govc"
    timeout_ms: int = 120_000
    env_prefix: str = "GOVC_"
    forward_home: bool = True

    def __post_init__(self) -> None:
        if self.timeout_ms <= 0:
            raise ConfigError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @classmethod
    def from_env(cls) -> "RunnerConfig":
        """Load configuration from environment variables."""
        return cls(
            binary=os.getenv("GOVC_BIN", "govc") or "govc",
            timeout_ms=_env_int("GOVC_TIMEOUT_MS", 120_000),
            forward_home=_env_bool("GOVC_MCP_FORWARD_HOME", True),
        )


@dataclass
class ServerConfig:
    """Configuration for the MCP server and its liveness endpoint."""
    name: str = "govc-mcp"
    version: str = "0.1.0"
    http_port: int = 3211
    health_enabled: bool = True
    log_level: str = "INFO"
    search_limit: int = 15

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        from govcmcp import __version__

        return cls(
            version=__version__,
            http_port=_env_int("HTTP_PORT", 3211),
            health_enabled=_env_bool("GOVC_MCP_HEALTH", True),
            log_level=os.getenv("GOVC_MCP_LOG_LEVEL", "INFO").upper(),
        )


@dataclass
class AppConfig:
    """Complete application configuration."""
    runner: RunnerConfig = field(default_factory=RunnerConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load all configuration from environment variables."""
        return cls(
            runner=RunnerConfig.from_env(),
            server=ServerConfig.from_env(),
        )
