"""
Tests for ProcessRunner - bounded execution of govc.

These use a fake govc script, so no vSphere endpoint is needed.
"""

import asyncio
import json
import os
import signal
import time
from unittest.mock import patch

import pytest

from govcmcp.config import RunnerConfig
from govcmcp.errors import ProcessSpawnError, ProcessTimeoutError
from govcmcp.runner import ProcessRunner, build_child_env, render_command_line


class TestChildEnvironment:
    """Test which variables reach the child."""

    def test_only_prefixed_path_and_home(self) -> None:
        """Only GOVC_ variables, PATH and HOME are forwarded."""
        environ = {
            "GOVC_URL": "https://vc.example",
            "GOVC_PASSWORD": "secret",
            "PATH": "/usr/bin",
            "HOME": "/home/me",
            "AWS_SECRET_ACCESS_KEY": "leak",
            "USER": "me",
        }

        env = build_child_env(environ)

        assert env == {
            "GOVC_URL": "https://vc.example",
            "GOVC_PASSWORD": "secret",
            "PATH": "/usr/bin",
            "HOME": "/home/me",
        }

    def test_home_not_forwarded_when_disabled(self) -> None:
        """HOME is withheld when forwarding is switched off."""
        env = build_child_env({"HOME": "/home/me", "PATH": "/bin"}, forward_home=False)
        assert env == {"PATH": "/bin"}

    def test_prefix_is_case_sensitive(self) -> None:
        """Lower-case govc_ variables do not match the prefix."""
        env = build_child_env({"govc_url": "x", "GOVC_URL": "y"})
        assert env == {"GOVC_URL": "y"}

    def test_missing_path_is_not_invented(self) -> None:
        """No PATH is added when the parent has none."""
        assert build_child_env({"GOVC_URL": "x"}) == {"GOVC_URL": "x"}

    @pytest.mark.asyncio
    async def test_child_sees_filtered_env(self, make_runner) -> None:
        """The child process observes exactly the filtered variables."""
        runner = make_runner(GOVC_FAKE_ECHO="1", GOVC_URL="https://vc", OTHER_SECRET="nope")

        result = await runner.run("about", ["-json"])

        payload = json.loads(result.stdout)
        assert payload["argv"] == ["about", "-json"]
        assert payload["env"]["GOVC_URL"] == "https://vc"
        assert payload["env"]["HOME"] == "/home/tester"
        assert "OTHER_SECRET" not in payload["env"]


class TestRenderCommandLine:
    """Test the diagnostic command line."""

    def test_quotes_arguments_with_spaces(self) -> None:
        """Arguments with spaces are shell-quoted."""
        assert render_command_line(["vm.info", "my vm"]) == "vm.info 'my vm'"


class TestProcessRunner:
    """Test execution, capture and the timeout race."""

    @pytest.mark.asyncio
    async def test_captures_stdout_stderr_and_exit_code(self, make_runner) -> None:
        """Both streams and the exit code are captured."""
        runner = make_runner(GOVC_FAKE_STDOUT="out", GOVC_FAKE_STDERR="err", GOVC_FAKE_EXIT="3")

        result = await runner.run("vm.info")

        assert result.exit_code == 3
        assert result.stdout == "out"
        assert result.stderr == "err"

    @pytest.mark.asyncio
    async def test_command_none_runs_binary_with_tokens_only(self, make_runner) -> None:
        """Without a command only the tokens follow the binary."""
        runner = make_runner(GOVC_FAKE_ECHO="1")

        result = await runner.run(None, ["-h"])

        assert json.loads(result.stdout)["argv"] == ["-h"]

    @pytest.mark.asyncio
    async def test_logs_rendered_command_line(self, make_runner, fake_govc, caplog) -> None:
        """The logged line names the configured binary, not a generic govc."""
        runner = make_runner()

        with caplog.at_level("INFO", logger="govcmcp.runner"):
            await runner.run("vm.info", ["-json", "my vm"])

        assert render_command_line([str(fake_govc), "vm.info", "-json", "my vm"]) in caplog.text

    @pytest.mark.asyncio
    async def test_spawn_failure_raises(self, tmp_path) -> None:
        """A missing binary is reported as a spawn error with exit code -1."""
        runner = ProcessRunner(RunnerConfig(binary=str(tmp_path / "no-such-govc")), environ={})

        with pytest.raises(ProcessSpawnError) as exc_info:
            await runner.run("about")

        assert exc_info.value.exit_code == -1

    @pytest.mark.asyncio
    async def test_unpassable_argument_is_spawn_failure(self, make_runner) -> None:
        """An argument with a NUL byte cannot be passed to exec and is a spawn error."""
        runner = make_runner()

        with pytest.raises(ProcessSpawnError) as exc_info:
            await runner.run("vm.info", ["bad\x00name"])

        assert exc_info.value.exit_code == -1
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_killed_by_signal_maps_to_shell_code(self, make_runner) -> None:
        """Death by SIGHUP reports 129, never the -1 not-started sentinel."""
        runner = make_runner(GOVC_FAKE_SIGNAL=str(signal.SIGHUP.value))

        result = await runner.run("vm.info")

        assert result.exit_code == 128 + signal.SIGHUP.value

    @pytest.mark.asyncio
    async def test_timeout_kills_child(self, make_runner) -> None:
        """A 50ms bound against a long-running child kills and reaps it."""
        runner = make_runner(timeout_ms=50, GOVC_FAKE_SLEEP="30")
        spawned = []
        real_exec = asyncio.create_subprocess_exec

        async def spy(*args, **kwargs):
            process = await real_exec(*args, **kwargs)
            spawned.append(process)
            return process

        started = time.monotonic()
        with patch("govcmcp.runner.asyncio.create_subprocess_exec", side_effect=spy):
            with pytest.raises(ProcessTimeoutError) as exc_info:
                await runner.run("vm.info")
        elapsed = time.monotonic() - started

        assert str(exc_info.value).endswith("timed out after 50ms")
        assert exc_info.value.exit_code == -1
        assert elapsed < 10

        process = spawned[0]
        assert process.returncode is not None
        with pytest.raises(ProcessLookupError):
            os.kill(process.pid, 0)

    @pytest.mark.asyncio
    async def test_timeout_override_per_call(self, make_runner) -> None:
        """A per-call timeout overrides the configured one."""
        runner = make_runner(timeout_ms=60_000, GOVC_FAKE_SLEEP="30")

        with pytest.raises(ProcessTimeoutError) as exc_info:
            await runner.run("vm.info", timeout_ms=50)

        assert exc_info.value.timeout_ms == 50

    @pytest.mark.asyncio
    async def test_concurrent_runs_are_independent(self, make_runner) -> None:
        """Concurrent calls run separate children with separate output."""
        runner = make_runner(GOVC_FAKE_ECHO="1")

        results = await asyncio.gather(*(runner.run(f"cmd{i}") for i in range(5)))

        assert [json.loads(r.stdout)["argv"][0] for r in results] == [f"cmd{i}" for i in range(5)]
