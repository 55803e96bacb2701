"""
Internal exceptions.

None of these cross the pipeline boundary: the executor converts process
errors into a FailedOutcome at the point where they are raised.
"""


class GovcMcpError(Exception):
    """Base class for all govcmcp errors."""


class ConfigError(GovcMcpError):
    """Invalid configuration value."""


class ProcessSpawnError(GovcMcpError):
    """The external program could not be started."""

    exit_code = -1

    def __init__(self, program: str, reason: str):
        self.program = program
        self.reason = reason
        super().__init__(f"Failed to start {program}: {reason}")


class ProcessTimeoutError(GovcMcpError):
    """The external program did not exit within the configured bound."""

    exit_code = -1

    def __init__(self, program: str, timeout_ms: int):
        self.program = program
        self.timeout_ms = timeout_ms
        super().__init__(f"{program} timed out after {timeout_ms}ms")
