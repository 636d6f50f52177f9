"""
Test the HTTP API
"""
import pytest
from fastapi.testclient import TestClient

from a11yscan import main
from a11yscan.api import llm
from a11yscan.core.config import Settings


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "_LAST_SCAN", None)
    return TestClient(main.app)


class _FakeCompletions:
    def __init__(self):
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = type("Message", (), {"content": f"reply #{len(self.calls)}"})()
        choice = type("Choice", (), {"message": message})()
        return type("Response", (), {"choices": [choice]})()


class _FakeOpenAI:
    def __init__(self):
        self.chat = type("Chat", (), {"completions": _FakeCompletions()})()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_rules(client):
    rules = client.get("/rules").json()
    assert len(rules) == 22
    assert rules[0] == {
        "id": "img-alt",
        "title": "Images have an alt attribute",
        "severity": "critical",
        "wcag_reference": "1.1.1 Non-text Content (A)",
    }


def test_scan_markup_and_last(client):
    assert client.get("/scan/last").status_code == 404

    resp = client.post("/scan", json={"markup": '<img src="a.jpg">'})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["url"] == "<inline>"
    assert body["issues"][0]["rule_id"] == "img-alt"
    assert body["issues"][0]["wcag_reference"] == "1.1.1 Non-text Content (A)"
    assert set(body["summary"]) == {"critical", "warning", "info"}
    assert "error" not in body

    assert client.get("/scan/last").json() == body


def test_scan_requires_exactly_one_target(client):
    resp = client.post("/scan", json={"url": "http://example.test", "markup": "<p></p>"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "VALIDATION_ERROR"

    assert client.post("/scan", json={}).status_code == 400


def test_scan_unknown_rule(client):
    resp = client.post("/scan", json={"markup": "<p></p>", "disabled_rules": ["bogus"]})
    assert resp.status_code == 400


def test_failed_scan_omits_results(client, monkeypatch):
    from a11yscan.models.schemas import ScanResult

    async def fake_run_scan(**kwargs):
        return ScanResult(success=False, url=kwargs["url"], error="received status 503")

    monkeypatch.setattr(main, "run_scan", fake_run_scan)
    body = client.post("/scan", json={"url": "http://example.test"}).json()
    assert body == {"success": False, "url": "http://example.test", "error": "received status 503"}


def test_contrast(client):
    body = client.post("/contrast", json={"foreground": "#000", "background": "#FFFFFF"}).json()
    assert body["ratio"] == 21.0
    assert body["foreground"] == "#000000"
    assert body["wcag_aaa_normal"] is True


def test_contrast_invalid(client):
    resp = client.post("/contrast", json={"foreground": "#zzz", "background": "#fff"})
    assert resp.status_code == 400
    assert "#zzz" in resp.json()["message"]


def test_alt_report(client):
    body = client.post("/images/alt-report", json={"markup": '<img src="a.png" alt="A"><img src="b.png" alt="">'}).json()
    assert body["summary"]["has_alt"] == 1
    assert body["summary"]["empty"] == 1
    assert body["summary"]["compliance_rate"] == 50.0


def test_llm_disabled_without_key(client, monkeypatch):
    monkeypatch.setattr(llm, "_client", None)
    monkeypatch.setattr(llm, "get_settings", lambda: Settings(openai_api_key=None))
    resp = client.post("/llm/session", json={"scan": {"success": True, "url": "<inline>", "issues": []}})
    assert resp.status_code == 503


def test_llm_session_flow(client, monkeypatch):
    fake = _FakeOpenAI()
    monkeypatch.setattr(llm, "_client", fake)
    monkeypatch.setattr(llm, "_SESSIONS", {})

    scan = client.post("/scan", json={"markup": '<img src="a.jpg">'}).json()
    boot = client.post("/llm/session", json={"scan": scan}).json()
    assert boot["first"] == "reply #1"
    context = boot["messages"][1]["content"]
    assert "img-alt (critical) [1.1.1 Non-text Content (A)]" in context

    reply = client.post("/llm/message", json={"session_id": boot["session_id"], "user_message": "Fix alt"}).json()
    assert reply["reply"] == "reply #2"
    assert [m["role"] for m in reply["messages"][-2:]] == ["user", "assistant"]

    assert client.post("/llm/message", json={"session_id": "nope", "user_message": "x"}).status_code == 404


def test_llm_rejects_failed_scan(client, monkeypatch):
    monkeypatch.setattr(llm, "_client", _FakeOpenAI())
    resp = client.post("/llm/session", json={"scan": {"success": False, "error": "received status 500"}})
    assert resp.status_code == 400


def test_batch_rejects_blank_url(client):
    resp = client.post("/scan/batch", json={"urls": ["http://example.test/a", "  "]})
    assert resp.status_code == 400
    assert resp.json()["details"]["index"] == 1
