"""
Test the command line entry point
"""
import json

import pytest

from a11yscan import cli


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)


def _run(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    return exc.value.code


def test_contrast_command(capsys):
    assert _run(["contrast", "#000", "#fff"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["ratio"] == 21.0


def test_contrast_invalid_hex(capsys):
    assert _run(["contrast", "#zzz", "#fff"]) == 2
    assert "#zzz" in capsys.readouterr().err


def test_scan_file(tmp_path, capsys, accessible_page):
    page = tmp_path / "page.html"
    page.write_text(accessible_page, encoding="utf-8")
    assert _run(["scan", "--file", str(page)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["success"] is True
    assert out["score"] == 100


def test_scan_with_low_score_still_exits_zero(tmp_path, capsys):
    page = tmp_path / "page.html"
    page.write_text('<img src="a"><img src="b"><img src="c"><img src="d"><img src="e"><img src="f"><img src="g">')
    assert _run(["scan", "--file", str(page), "--disable-rule", "landmark-nav"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 0
    assert "landmark-nav" not in {i["rule_id"] for i in out["issues"]}


def test_scan_needs_a_target(capsys):
    assert _run(["scan"]) == 2


def test_failed_scan_exits_non_zero(monkeypatch, capsys):
    from a11yscan.models.schemas import ScanResult

    async def fake_run_scan(**kwargs):
        return ScanResult(success=False, url=kwargs["url"], error="received status 500")

    monkeypatch.setattr(cli, "run_scan", fake_run_scan)
    assert _run(["scan", "http://example.test"]) == 1
    captured = capsys.readouterr()
    assert json.loads(captured.out)["error"] == "received status 500"
    assert "received status 500" in captured.err


def test_rules_command(capsys):
    assert _run(["rules"]) == 0
    rules = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rules][:3] == ["img-alt", "img-alt-empty", "img-link-alt"]
