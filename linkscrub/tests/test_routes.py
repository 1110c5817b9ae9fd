from __future__ import annotations

import pytest

from linkscrub.app_factory import build_clean_service, create_app
from linkscrub.config.ini_config import AppSettings
from linkscrub.domain.errors import EmptyInputError, NoUrlFoundError, ResolutionError
from linkscrub.domain.models import CleanResult
from linkscrub.services.clean_service import CleanService
from linkscrub.services.redirect_resolver import HttpxRedirectResolver
from linkscrub.services.url_normalization import DomainRuleEngine


# -----------------------------
# Test doubles
# -----------------------------
class FakeCleanService:
    def __init__(self, result: CleanResult | None = None, error: Exception | None = None):
        self._result = result
        self._error = error
        self.inputs: list[str] = []

    def process(self, text: str) -> CleanResult:
        self.inputs.append(text)
        if self._error:
            raise self._error
        return self._result


SETTINGS = AppSettings(
    timeout_seconds=3.0,
    max_redirects=7,
    user_agent="test-agent",
    log_level="WARNING",
    flask_host="127.0.0.1",
    flask_port=5001,
    flask_debug=False,
)


def ok_result(clean_url: str) -> CleanResult:
    return CleanResult(
        status="ok",
        input_text="",
        candidate_url=clean_url,
        resolved_url=clean_url,
        clean_url=clean_url,
    )


def failed_result(error) -> CleanResult:
    return CleanResult(status="failed", input_text="", candidate_url="", resolved_url="", clean_url="", error=error)


@pytest.fixture
def make_client():
    def _make(service):
        app = create_app(settings=SETTINGS, clean_service=service)
        app.config["TESTING"] = True
        return app.test_client()
    return _make


# -----------------------------
# Tests
# -----------------------------
def test_index_renders_form(make_client):
    resp = make_client(FakeCleanService()).get("/")

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert 'name="inputText"' in body
    assert 'action="/process"' in body
    assert "Xiaohongshu" in body


def test_process_success_renders_clean_url(make_client):
    service = FakeCleanService(ok_result("https://fixupx.com/user/status/1?s=20"))
    resp = make_client(service).post("/process", data={"inputText": "see http://short.ly/abc123"})

    assert resp.status_code == 200
    body = resp.get_data(as_text=True)
    assert "https://fixupx.com/user/status/1?s=20" in body
    assert service.inputs == ["see http://short.ly/abc123"]


@pytest.mark.parametrize(
    "error, code",
    [
        (EmptyInputError(), 400),
        (NoUrlFoundError(), 400),
        (ResolutionError("https://unreachable.example/", "refused"), 502),
    ],
)
def test_process_failure_renders_message(make_client, error, code):
    resp = make_client(FakeCleanService(failed_result(error))).post("/process", data={"inputText": "x"})

    assert resp.status_code == code
    body = resp.get_data(as_text=True)
    assert type(error).user_message in body
    assert 'name="inputText"' in body


def test_missing_form_field_is_passed_as_empty(make_client):
    service = FakeCleanService(failed_result(EmptyInputError()))
    resp = make_client(service).post("/process", data={})

    assert resp.status_code == 400
    assert service.inputs == [""]


def test_unexpected_error_is_contained(make_client):
    resp = make_client(FakeCleanService(error=RuntimeError("boom"))).post("/process", data={"inputText": "x"})

    assert resp.status_code == 500
    body = resp.get_data(as_text=True)
    assert ResolutionError.user_message in body
    assert "boom" not in body


def test_unknown_route_is_404(make_client):
    assert make_client(FakeCleanService()).get("/nowhere").status_code == 404


def test_get_process_not_allowed(make_client):
    assert make_client(FakeCleanService()).get("/process").status_code == 405


def test_create_app_copies_flask_settings():
    app = create_app(settings=SETTINGS, clean_service=FakeCleanService())

    assert app.config["HOST"] == "127.0.0.1"
    assert app.config["PORT"] == 5001
    assert app.config["DEBUG"] is False


def test_build_clean_service_wires_one_resolver():
    service = build_clean_service(SETTINGS)

    assert isinstance(service, CleanService)
    assert isinstance(service.resolver, HttpxRedirectResolver)
    assert service.resolver.timeout_seconds == 3.0
    assert service.resolver.max_redirects == 7
    assert service.resolver.user_agent == "test-agent"
    assert isinstance(service.cleaner, DomainRuleEngine)
    assert [r.name for r in service.cleaner.rules] == [
        "x",
        "xiaohongshu",
        "weixin",
        "netease_music",
        "netease_short",
    ]
