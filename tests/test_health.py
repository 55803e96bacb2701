"""Tests for the liveness endpoint."""

import socket

import pytest
from fastapi.testclient import TestClient

from govcmcp.health import create_health_app, serve_health


class TestHealthApp:
    """Any GET path answers 200 ok."""

    @pytest.mark.parametrize("path", ["/", "/health", "/healthz", "/some/deep/path"])
    def test_ok(self, path: str) -> None:
        """Every path answers 200 with a plain-text ok."""
        client = TestClient(create_health_app())

        response = client.get(path)

        assert response.status_code == 200
        assert response.text == "ok"
        assert response.headers["content-type"].startswith("text/plain")


class TestServeHealth:
    @pytest.mark.asyncio
    async def test_bind_failure_is_not_fatal(self) -> None:
        """A port already in use is logged; serve_health returns normally."""
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
            blocker.bind(("127.0.0.1", 0))
            blocker.listen(1)
            port = blocker.getsockname()[1]

            await serve_health(port, host="127.0.0.1")
