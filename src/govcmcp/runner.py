"""
Process Runner - bounded execution of the govc binary.

Each call spawns exactly one child process with a filtered environment and
races its completion against a timer. Whichever finishes first decides the
result; the loser is cancelled. A timed-out child is killed and reaped
before the timeout is reported, so no process outlives its invocation.

There is no retry and no concurrency ceiling: concurrent calls simply run
concurrent children.
"""

import asyncio
import logging
import os
import shlex
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from govcmcp.config import RunnerConfig
from govcmcp.errors import ProcessSpawnError, ProcessTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Captured output of a child that exited on its own."""
    exit_code: int
    stdout: str
    stderr: str


def build_child_env(
    environ: Mapping[str, str],
    prefix: str = "GOVC_",
    forward_home: bool = True,
) -> dict[str, str]:
    """
    Select the environment visible to the child.

    Variables starting with prefix are forwarded verbatim, plus PATH (so the
    binary can be found) and optionally HOME (govc keeps its session cache
    under ~/.govc). Nothing else leaks through.
    """
    env = {key: value for key, value in environ.items() if key.startswith(prefix)}
    if "PATH" in environ:
        env["PATH"] = environ["PATH"]
    if forward_home and "HOME" in environ:
        env["HOME"] = environ["HOME"]
    return env


def render_command_line(argv: Sequence[str]) -> str:
    """Render argv as a copy-pasteable shell line for the log."""
    return shlex.join(argv)


class ProcessRunner:
    """
    Runs `<binary> <command> <tokens...>` under a timeout.

    The environment is captured per call from environ (defaults to
    os.environ) so that tests can inject a synthetic one.
    """

    def __init__(
        self,
        config: RunnerConfig | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.config = config or RunnerConfig()
        self._environ = environ

    def child_env(self) -> dict[str, str]:
        environ = self._environ if self._environ is not None else os.environ
        return build_child_env(
            environ,
            prefix=self.config.env_prefix,
            forward_home=self.config.forward_home,
        )

    async def run(
        self,
        command: str | None,
        tokens: Sequence[str] = (),
        timeout_ms: int | None = None,
    ) -> ProcessResult:
        """
        Execute the binary and wait for it to exit or for the timeout.

        command may be None to invoke the binary with tokens only
        (e.g. `govc -h`).

        Raises:
            ProcessSpawnError: the binary could not be started
            ProcessTimeoutError: the child was killed after timeout_ms
        """
        effective_timeout = timeout_ms or self.config.timeout_ms
        argv = [self.config.binary]
        if command:
            argv.append(command)
        argv.extend(tokens)

        logger.info(render_command_line(argv))

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=self.child_env(),
            )
        except (OSError, ValueError) as e:
            # ValueError: arguments the OS cannot pass (e.g. an embedded NUL byte)
            logger.error(f"Failed to spawn {self.config.binary}: {e}")
            raise ProcessSpawnError(self.config.binary, str(e)) from e

        completion = asyncio.ensure_future(process.communicate())
        timer = asyncio.ensure_future(asyncio.sleep(effective_timeout / 1000))

        try:
            done, _ = await asyncio.wait(
                {completion, timer},
                return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            # Covers both losing the race and the caller being cancelled
            timer.cancel()
            if not completion.done():
                completion.cancel()
                await _kill(process)

        if completion in done:
            stdout, stderr = completion.result()
            return ProcessResult(
                exit_code=_exit_code(process.returncode),
                stdout=stdout.decode("utf-8", errors="replace"),
                stderr=stderr.decode("utf-8", errors="replace"),
            )

        logger.warning(f"{self.config.binary} {command or ''} timed out after {effective_timeout}ms")
        raise ProcessTimeoutError(self.config.binary, effective_timeout)


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Force-kill a child and reap it."""
    if process.returncode is None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
    await process.wait()


def _exit_code(returncode: int | None) -> int:
    """
    Normalize a child's return code.

    asyncio reports death by signal N as -N, which would collide with the
    -1 "never started" sentinel for SIGHUP. Signals are mapped to 128 + N,
    as a shell does.
    """
    if returncode is None:
        return -1
    if returncode < 0:
        return 128 - returncode
    return returncode
