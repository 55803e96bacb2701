"""Shared fixtures: a throwaway fake govc executable."""

import os
import stat
import sys
from pathlib import Path

import pytest

from govcmcp.config import RunnerConfig
from govcmcp.runner import ProcessRunner

# Behaviour is driven by GOVC_FAKE_* variables, which pass the child
# environment filter like any other GOVC_ variable.
FAKE_GOVC = """#!{python}
import json
import os
import sys
import time

pidfile = os.environ.get("GOVC_FAKE_PIDFILE")
if pidfile:
    with open(pidfile, "w") as f:
        f.write(str(os.getpid()))

signum = os.environ.get("GOVC_FAKE_SIGNAL")
if signum:
    os.kill(os.getpid(), int(signum))

delay = float(os.environ.get("GOVC_FAKE_SLEEP", "0"))
if delay:
    time.sleep(delay)

if os.environ.get("GOVC_FAKE_ECHO"):
    print(json.dumps({{"argv": sys.argv[1:], "env": dict(os.environ)}}))
    sys.exit(0)

sys.stdout.write(os.environ.get("GOVC_FAKE_STDOUT", ""))
sys.stderr.write(os.environ.get("GOVC_FAKE_STDERR", ""))
sys.exit(int(os.environ.get("GOVC_FAKE_EXIT", "0")))
"""


@pytest.fixture
def fake_govc(tmp_path: Path) -> Path:
    """Path to an executable that stands in for govc."""
    path = tmp_path / "govc"
    path.write_text(FAKE_GOVC.format(python=sys.executable))
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_runner(fake_govc: Path):
    """Factory for a ProcessRunner bound to the fake govc and a synthetic environment."""
    def _make(timeout_ms: int = 10_000, forward_home: bool = True, **env: str) -> ProcessRunner:
        environ = {"PATH": os.environ.get("PATH", ""), "HOME": "/home/tester", **env}
        config = RunnerConfig(binary=str(fake_govc), timeout_ms=timeout_ms, forward_home=forward_home)
        return ProcessRunner(config, environ=environ)

    return _make
