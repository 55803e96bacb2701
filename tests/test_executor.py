"""
Tests for GovcExecutor - the full invocation pipeline.

Every failure mode must come back as an outcome, never an exception.
"""

import json
from unittest.mock import AsyncMock

import pytest

from govcmcp.config import RunnerConfig
from govcmcp.executor import GovcExecutor, parse_command_list
from govcmcp.runner import ProcessResult, ProcessRunner
from govcmcp.types import FailedOutcome, Invocation, StructuredOutcome, TextOutcome

GOVC_HELP = """Usage: govc <COMMAND> [COMMON OPTIONS] [PATH]...

Available commands:
  about
  about.cert
  vm.info

Use "govc COMMAND -h" for help on a command.
"""


def stub_runner(exit_code: int = 0, stdout: str = "", stderr: str = "") -> AsyncMock:
    runner = AsyncMock(spec=ProcessRunner)
    runner.run.return_value = ProcessResult(exit_code=exit_code, stdout=stdout, stderr=stderr)
    return runner


class TestExecute:
    """Test outcome construction from process results."""

    @pytest.mark.asyncio
    async def test_structured_output_is_sanitized(self) -> None:
        """Parsed JSON is sanitized before it is returned."""
        stdout = json.dumps({
            "virtualMachines": [{
                "self": {"type": "VirtualMachine", "value": "vm-42"},
                "name": "web01",
                "declaredAlarmState": [{"key": "alarm-1"}],
                "parent": None,
            }],
        })
        executor = GovcExecutor(stub_runner(stdout=stdout))

        outcome = await executor.execute(Invocation("vm.info", {"r": True}, ["web01"]))

        assert isinstance(outcome, StructuredOutcome)
        assert outcome.succeeded
        assert outcome.data == {"virtualMachines": [{"self": "VirtualMachine:vm-42", "name": "web01"}]}

    @pytest.mark.asyncio
    async def test_builds_tokens_for_runner(self) -> None:
        """The runner receives the built token list."""
        runner = stub_runner(stdout="{}")
        executor = GovcExecutor(runner)

        await executor.execute(Invocation("vm.power", {"on": True, "force": False, "x": None}, ["web01"]))

        runner.run.assert_awaited_once_with("vm.power", ["-json", "-on=true", "-force=false", "web01"])

    @pytest.mark.asyncio
    async def test_empty_after_sanitize_keeps_parsed_value(self) -> None:
        """A document that sanitizes to nothing is returned as parsed."""
        executor = GovcExecutor(stub_runner(stdout="[]"))

        outcome = await executor.execute(Invocation("tags.ls"))

        assert outcome == StructuredOutcome(exit_code=0, data=[])

    @pytest.mark.asyncio
    async def test_non_json_output_is_text(self) -> None:
        """Unparseable output degrades to text, not an error."""
        executor = GovcExecutor(stub_runner(stdout="Name: web01\n"))

        outcome = await executor.execute(Invocation("vm.info"))

        assert outcome == TextOutcome(exit_code=0, text="Name: web01")
        assert outcome.raw_text == "Name: web01"
        assert outcome.structured_value is None

    @pytest.mark.asyncio
    async def test_text_mode_does_not_parse(self) -> None:
        """JSON-looking output stays text when JSON was not requested."""
        executor = GovcExecutor(stub_runner(stdout='{"a": 1}'))

        outcome = await executor.execute(Invocation("about", wants_structured_output=False))

        assert outcome == TextOutcome(exit_code=0, text='{"a": 1}')

    @pytest.mark.asyncio
    async def test_empty_stdout(self) -> None:
        """Empty output on success is a text outcome without text."""
        executor = GovcExecutor(stub_runner(stdout=""))

        outcome = await executor.execute(Invocation("vm.destroy", positional_args=["old"]))

        assert outcome == TextOutcome(exit_code=0, text=None)

    @pytest.mark.asyncio
    async def test_non_zero_exit_keeps_stdout(self) -> None:
        """stderr becomes the error and stdout is kept."""
        executor = GovcExecutor(stub_runner(exit_code=1, stdout="partial\n", stderr=" vm not found \n"))

        outcome = await executor.execute(Invocation("vm.info"))

        assert outcome == FailedOutcome(exit_code=1, error="vm not found", text="partial")
        assert outcome.error_message == "vm not found"
        assert not outcome.succeeded

    @pytest.mark.asyncio
    async def test_non_zero_exit_without_stderr(self) -> None:
        """A silent failure gets a generic error message."""
        executor = GovcExecutor(stub_runner(exit_code=2))

        outcome = await executor.execute(Invocation("vm.info"))

        assert outcome == FailedOutcome(exit_code=2, error="govc exited with code 2", text=None)

    @pytest.mark.asyncio
    async def test_spawn_failure_becomes_outcome(self, tmp_path) -> None:
        """A missing binary is a failed outcome with exit code -1."""
        runner = ProcessRunner(RunnerConfig(binary=str(tmp_path / "missing")), environ={})

        outcome = await GovcExecutor(runner).execute(Invocation("about"))

        assert isinstance(outcome, FailedOutcome)
        assert outcome.exit_code == -1
        assert "Failed to start" in outcome.error

    @pytest.mark.asyncio
    async def test_unpassable_argument_becomes_outcome(self, make_runner) -> None:
        """An argument containing a NUL byte is a failed outcome, not an exception."""
        outcome = await GovcExecutor(make_runner()).run("vm.info", positional_args=["bad\x00name"])

        assert isinstance(outcome, FailedOutcome)
        assert outcome.exit_code == -1

    @pytest.mark.asyncio
    async def test_signal_death_is_distinct_from_spawn_failure(self, make_runner) -> None:
        """A child killed by SIGHUP reports 129, not -1."""
        outcome = await GovcExecutor(make_runner(GOVC_FAKE_SIGNAL="1")).run("vm.info")

        assert isinstance(outcome, FailedOutcome)
        assert outcome.exit_code == 129

    @pytest.mark.asyncio
    async def test_timeout_becomes_outcome(self, make_runner) -> None:
        """A timeout is a failed outcome with exit code -1."""
        runner = make_runner(timeout_ms=50, GOVC_FAKE_SLEEP="30")

        outcome = await GovcExecutor(runner).execute(Invocation("vm.info"))

        assert isinstance(outcome, FailedOutcome)
        assert outcome.exit_code == -1
        assert outcome.error.endswith("timed out after 50ms")

    @pytest.mark.asyncio
    async def test_end_to_end_with_fake_govc(self, make_runner) -> None:
        """A real child's JSON output flows through the pipeline."""
        payload = json.dumps({"about": {"name": "VMware vCenter Server", "apiType": "VirtualCenter"}})
        runner = make_runner(GOVC_FAKE_STDOUT=payload)

        outcome = await GovcExecutor(runner).run("about")

        assert outcome == StructuredOutcome(
            exit_code=0,
            data={"about": {"name": "VMware vCenter Server", "apiType": "VirtualCenter"}},
        )


class TestHelpAndCommands:
    """Test the discovery helpers."""

    @pytest.mark.asyncio
    async def test_help_combines_stderr_and_stdout(self) -> None:
        """Help text comes from stderr and stdout combined."""
        runner = stub_runner(stderr="Usage: govc vm.info [OPTIONS] VM...\n")

        text = await GovcExecutor(runner).help("vm.info")

        assert text == "Usage: govc vm.info [OPTIONS] VM..."
        runner.run.assert_awaited_once_with("vm.info", ["-h"])

    @pytest.mark.asyncio
    async def test_help_empty(self) -> None:
        """Empty help output gets a placeholder message."""
        text = await GovcExecutor(stub_runner()).help("nope")
        assert text == "No help available for 'nope'"

    @pytest.mark.asyncio
    async def test_help_spawn_failure(self, tmp_path) -> None:
        """A spawn failure during help is reported as text."""
        runner = ProcessRunner(RunnerConfig(binary=str(tmp_path / "missing")), environ={})

        text = await GovcExecutor(runner).help("vm.info")

        assert text == "Failed to get help for 'vm.info'"

    @pytest.mark.asyncio
    async def test_list_commands(self) -> None:
        """Command names are extracted from govc -h."""
        runner = stub_runner(stderr=GOVC_HELP)

        text = await GovcExecutor(runner).list_commands()

        assert text == "about\nabout.cert\nvm.info"
        runner.run.assert_awaited_once_with(None, ["-h"])

    @pytest.mark.asyncio
    async def test_list_commands_falls_back_to_raw_text(self) -> None:
        """Unrecognized help output is returned as is."""
        text = await GovcExecutor(stub_runner(stdout="something else")).list_commands()
        assert text == "something else"


class TestParseCommandList:
    def test_stops_at_flags(self) -> None:
        """The list ends at a Flags: header."""
        help_text = "Commands:\n  ls\n  find\nFlags:\n  -debug\n"
        assert parse_command_list(help_text) == ["ls", "find"]

    def test_no_section(self) -> None:
        """Text without a command section yields nothing."""
        assert parse_command_list("Usage: govc") == []

    def test_stops_at_blank_line(self) -> None:
        """The list ends at the first blank line."""
        assert parse_command_list(GOVC_HELP) == ["about", "about.cert", "vm.info"]
