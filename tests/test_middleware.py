# ============================================================================
# PING MIDDLEWARE TESTS
# ============================================================================
# STATUS: Tests - HTTP surface of the ping endpoint
# PURPOSE: Verify passthrough, rendering, status codes and the fallback
# CREATED: 19 OCT 2026
# ============================================================================
"""
Ping Middleware Tests

Wraps a tiny ASGI app in PingMiddleware and drives it with Starlette's
TestClient.

Run with:
    pytest tests/test_middleware.py -v
"""

import asyncio
import json
import threading
import time
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from core.config import PingDefaults
from pingcheck.classifier import Classifier
from pingcheck.exceptions import RegistryFrozenError
from pingcheck.middleware import PingMiddleware

JSON_TYPE = "application/json; charset=UTF-8"


# ============================================================================
# FIXTURES
# ============================================================================

async def fake_app(scope, receive, send):
    """Downstream app answering every request with 'fake'."""
    await send({
        "type": "http.response.start",
        "status": 200,
        "headers": [(b"content-type", b"text/plain"), (b"x-downstream", b"yes")],
    })
    await send({"type": "http.response.body", "body": b"fake"})


async def raising_app(scope, receive, send):
    raise RuntimeError("boom")


def build_app(setup=None, downstream=fake_app, **kwargs):
    kwargs.setdefault("defaults", PingDefaults())
    return PingMiddleware(downstream, setup=setup, **kwargs)


def ping(app, path="/_ping", **kwargs):
    # No context manager: the fake apps don't speak the lifespan protocol
    return TestClient(app, **kwargs).get(path)


# ============================================================================
# PASSTHROUGH
# ============================================================================

class TestPassthrough:

    def test_non_matching_path(self):
        response = ping(build_app(), "/something")

        assert response.status_code == 200
        assert response.text == "fake"
        assert response.headers["x-downstream"] == "yes"

    def test_non_matching_path_does_not_run_checks(self):
        work = MagicMock(return_value="up")
        response = ping(build_app(lambda p: p.register("db", work)), "/something")

        assert response.text == "fake"
        work.assert_not_called()

    def test_non_matching_path_propagates_exception(self):
        app = build_app(downstream=raising_app)

        with pytest.raises(RuntimeError, match="boom"):
            ping(app, "/something")

    def test_prefix_of_ping_path_passes_through(self):
        assert ping(build_app(), "/_ping/extra").text == "fake"
        assert ping(build_app(), "/_pin").text == "fake"


# ============================================================================
# RENDERING
# ============================================================================

class TestPing:

    def test_defaults(self):
        response = ping(build_app())

        assert response.status_code == 200
        assert response.headers["content-type"] == JSON_TYPE
        body = response.json()
        assert set(body) == {"now", "status"}
        assert body["status"] == "ok"

    def test_now_is_current_epoch_string(self):
        body = ping(build_app()).json()

        assert isinstance(body["now"], str)
        assert abs(int(body["now"]) - time.time()) <= 2

    def test_good_checks(self):
        def setup(p):
            p.register("db", lambda: "up")
            p.register("queue", lambda: "up")

        response = ping(build_app(setup))

        assert response.status_code == 200
        assert response.headers["content-type"] == JSON_TYPE
        body = response.json()
        assert body["status"] == "ok"
        assert body["db"] == "up"
        assert body["queue"] == "up"
        assert "failures" not in body
        assert "timeouts" not in body

    def test_body_is_compact_json(self):
        response = ping(build_app(lambda p: p.register("db", lambda: "up")))
        now = response.json()["now"]

        assert response.text == '{"now":"%s","status":"ok","db":"up"}' % now

    def test_unnamed_check(self):
        body = ping(build_app(lambda p: p.register(None, lambda: "yohoho"))).json()

        assert set(body) == {"now", "status"}
        assert body["status"] == "ok"

    def test_failing_unnamed_check(self):
        response = ping(build_app(lambda p: p.register(None, lambda: False)))

        assert response.status_code == 503
        assert set(response.json()) == {"now", "status"}
        assert response.json()["status"] == "failures"

    def test_check_that_raises(self):
        def setup(p):
            p.register("db", lambda: "ok")

            @p.check("raise")
            def explode():
                raise RuntimeError("nooooope")

        response = ping(build_app(setup))

        assert response.status_code == 503
        assert response.headers["content-type"] == JSON_TYPE
        body = response.json()
        assert body["status"] == "failures"
        assert body["failures"] == ["raise"]
        assert body["db"] == "ok"
        assert "raise" not in body

    def test_check_that_returns_false(self):
        def setup(p):
            p.register("db", lambda: "ok")
            p.register("fail", lambda: False)

        response = ping(build_app(setup))

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "failures"
        assert body["failures"] == ["fail"]

    def test_check_that_times_out(self):
        def setup(p):
            p.register("db", lambda: "ok")
            p.register("long", lambda: time.sleep(0.003), timeout=0.001)

        response = ping(build_app(setup))

        assert response.status_code == 503
        assert response.headers["content-type"] == JSON_TYPE
        body = response.json()
        assert body["status"] == "failures"
        assert body["timeouts"] == ["long"]
        assert "failures" not in body
        assert "long" not in body

    def test_hung_sync_check_across_requests(self):
        release = threading.Event()

        def setup(p):
            p.register("hang", lambda: release.wait(30), timeout=0.05)
            p.register("db", lambda: "up", timeout=0.5)

        client = TestClient(build_app(setup))
        try:
            for _ in range(12):
                body = client.get("/_ping").json()
                assert body["db"] == "up"
                assert body["timeouts"] == ["hang"]
        finally:
            release.set()

    def test_async_checks(self):
        def setup(p):
            @p.check("cache")
            async def cache():
                await asyncio.sleep(0)
                return "warm"

            @p.check("slow", timeout=0.01)
            async def slow():
                await asyncio.sleep(1)

        body = ping(build_app(setup)).json()

        assert body["cache"] == "warm"
        assert body["timeouts"] == ["slow"]

    def test_duplicate_name_last_wins(self):
        def setup(p):
            p.register("db", lambda: "first")
            p.register("db", lambda: "second")

        body = ping(build_app(setup)).json()
        assert body["db"] == "second"

    def test_any_method(self):
        app = build_app(lambda p: p.register("db", lambda: "up"))
        response = TestClient(app).post("/_ping")

        assert response.status_code == 200
        assert response.json()["db"] == "up"

    def test_custom_path(self):
        app = build_app(path="/_piiiiing")

        assert ping(app, "/_piiiiing").json()["status"] == "ok"
        assert ping(app, "/_ping").text == "fake"

    def test_path_from_defaults(self):
        app = build_app(defaults=PingDefaults(path="/healthz"))
        assert ping(app, "/healthz").json()["status"] == "ok"

    def test_mount_prefix_is_ignored(self):
        response = ping(build_app(), "/_ping", root_path="/myapp")

        assert response.status_code == 200
        assert response.headers["content-type"] == JSON_TYPE
        assert response.json()["status"] == "ok"

    def test_root_path_stripped_from_full_path(self):
        assert PingMiddleware._request_path(
            {"path": "/myapp/_ping", "root_path": "/myapp"}
        ) == "/_ping"
        assert PingMiddleware._request_path(
            {"path": "/_ping", "root_path": "/myapp"}
        ) == "/_ping"
        assert PingMiddleware._request_path({"path": "/myapp", "root_path": "/myapp"}) == "/"

    def test_custom_classifier(self):
        lenient = Classifier(is_failure=lambda o: False)

        def setup(p):
            @p.check("flaky")
            def flaky():
                raise RuntimeError("degraded")

        response = ping(build_app(setup, classifier=lenient))

        assert response.status_code == 200
        assert response.json()["flaky"] == "degraded"


# ============================================================================
# FALLBACK
# ============================================================================

class TestFallback:

    def test_checks_taking_more_than_max(self):
        app = build_app(lambda p: p.register("long", lambda: time.sleep(0.3)), max_seconds=0.02)

        response = ping(app)

        assert response.status_code == 500
        assert response.headers["content-type"] == JSON_TYPE
        body = response.json()
        assert body == {"status": "failures", "now": body["now"]}
        assert abs(int(body["now"]) - time.time()) <= 2
        assert response.text.startswith('{"status":"failures","now":"')

    def test_orchestration_fault(self):
        app = build_app(lambda p: p.register("db", lambda: "up"))
        app.executor.execute_all = AsyncMock(side_effect=RuntimeError("pool gone"))

        response = ping(app)

        assert response.status_code == 500
        assert response.json()["status"] == "failures"

    def test_unserializable_document_falls_back(self):
        app = build_app(lambda p: p.register("db", lambda: "up"))
        document = MagicMock()
        document.to_dict.return_value = {"now": object()}
        app.evaluate = AsyncMock(return_value=document)

        response = ping(app)

        assert response.status_code == 500
        assert json.loads(response.text)["status"] == "failures"


# ============================================================================
# CONFIGURATION
# ============================================================================

class TestConfiguration:

    def test_setup_called_once_and_registry_frozen(self):
        setup = MagicMock()
        app = build_app(setup)

        setup.assert_called_once_with(app.registry)
        assert app.registry.is_frozen
        with pytest.raises(RegistryFrozenError):
            app.registry.register("late", lambda: True)

    def test_max_seconds_default(self):
        assert build_app().executor.max_seconds == 29.0
        assert build_app(max_seconds=5).executor.max_seconds == 5

    def test_default_check_timeout_from_defaults(self):
        app = build_app(
            lambda p: p.register("db", lambda: "up"),
            defaults=PingDefaults(check_timeout=2.5),
        )
        assert app.registry.get("db").timeout == 2.5

    def test_fastapi_add_middleware(self):
        api = FastAPI()

        @api.get("/hello")
        async def hello():
            return {"hello": "world"}

        api.add_middleware(
            PingMiddleware,
            setup=lambda p: p.register("db", lambda: "up"),
            defaults=PingDefaults(),
        )

        with TestClient(api) as client:
            assert client.get("/hello").json() == {"hello": "world"}
            response = client.get("/_ping")

        assert response.status_code == 200
        assert response.json()["db"] == "up"
