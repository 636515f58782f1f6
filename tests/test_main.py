import json

import pytest

import main
from fetcher import FetchError


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.html"
    path.write_text('<html><body><h1>Hi</h1><img src="http://x.com/a.png"></body></html>', encoding="utf-8")
    return path


def test_json_to_stdout(page, capsys):
    assert main.main([str(page), "--format", "json"]) == 0
    captured = capsys.readouterr()
    data = json.loads(captured.out)
    assert data["summary"]["total_issues"] == len(data["annotations"])
    assert data["meta"]["source"] == str(page)
    assert "issues found" in captured.err


def test_json_filters(page, tmp_path, capsys):
    output = tmp_path / "out.json"
    code = main.main([str(page), "--format", "json", "-o", str(output),
                      "--category", "security", "--severity", "high"])
    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert [a["issue"] for a in data["annotations"]] == ["Resource loaded over insecure HTTP"]


def test_html_report(page, tmp_path):
    output = tmp_path / "report.html"
    assert main.main([str(page), "-o", str(output)]) == 0
    assert "Missing alt text on image" in output.read_text(encoding="utf-8")


def test_default_html_path(page, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main.main([str(page)]) == 0
    written = list((tmp_path / "reports").glob("*_page.html"))
    assert len(written) == 1


def test_url_target_uses_fetcher(monkeypatch, capsys):
    recorded = {}

    def fake_fetch(url, timeout, user_agent):
        recorded.update(url=url, timeout=timeout, user_agent=user_agent)
        return "<html><body><h1>ok</h1></body></html>"

    monkeypatch.setattr(main, "fetch_html", fake_fetch)
    monkeypatch.setenv("RESPONSIBOT_TIMEOUT", "3")
    monkeypatch.setenv("RESPONSIBOT_USER_AGENT", "EnvAgent/1.0")

    assert main.main(["https://example.com", "--format", "json"]) == 0
    assert recorded == {"url": "https://example.com", "timeout": 3.0, "user_agent": "EnvAgent/1.0"}
    assert json.loads(capsys.readouterr().out)["summary"]["total_issues"] == 0


def test_fetch_failure_exit_code(monkeypatch, capsys):
    def fake_fetch(url, timeout, user_agent):
        raise FetchError("boom")

    monkeypatch.setattr(main, "fetch_html", fake_fetch)
    assert main.main(["https://example.com"]) == 1
    assert "boom" in capsys.readouterr().err


def test_unparseable_file_exit_code(tmp_path, capsys):
    path = tmp_path / "plain.txt"
    path.write_text("no markup here", encoding="utf-8")
    assert main.main([str(path), "--format", "json"]) == 1
    assert "Invalid HTML input" in capsys.readouterr().err


def test_missing_file_exit_code(tmp_path):
    assert main.main([str(tmp_path / "nope.html")]) == 1


def test_invalid_workers():
    with pytest.raises(SystemExit) as exc:
        main.main(["page.html", "--workers", "0"])
    assert exc.value.code == 2
