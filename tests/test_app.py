import pytest

import config
from reqparse import app
from reqparse.metrics import Metrics
from reqparse.utils import ResultSink


@pytest.fixture
def requests_dir(tmp_path, monkeypatch):
    d = tmp_path / "requests"
    d.mkdir()
    (d / "get.txt").write_text("GET /a?x=1 HTTP/1.1\nHost: example.com\n", encoding="utf-8")
    (d / "post.txt").write_text(
        'POST /b HTTP/1.1\nHost: example.com\n\n{"k": "v"}\n', encoding="utf-8"
    )
    (d / "example_skip.txt").write_text("GET / HTTP/1.1\n", encoding="utf-8")
    (d / "notes.md").write_text("not a request", encoding="utf-8")
    monkeypatch.setattr(config, "REQUESTS_DIR", d)
    monkeypatch.setattr(config, "RESULTS_DIR", tmp_path / "results")
    return d


def test_iter_request_files_skips_examples(requests_dir):
    names = [p.name for p in app.iter_request_files()]
    assert names == ["get.txt", "post.txt"]


def test_iter_request_files_keeps_examples_when_configured(requests_dir, monkeypatch):
    monkeypatch.setattr(config, "SKIP_EXAMPLE_FILES", False)
    names = [p.name for p in app.iter_request_files()]
    assert names == ["example_skip.txt", "get.txt", "post.txt"]


def test_process_single_file_records_metrics(requests_dir):
    metrics = Metrics()
    app.process_single_file(requests_dir / "post.txt", ResultSink(None), metrics)
    assert metrics.stats.parsed == 1
    assert metrics.stats.with_body == 1


def test_process_single_file_unreadable(tmp_path, caplog):
    metrics = Metrics()
    app.process_single_file(tmp_path / "missing.txt", ResultSink(None), metrics)
    assert metrics.stats.failed == 1
    assert "Failed to read missing.txt" in caplog.text


def test_process_single_file_warns_on_unparseable_body(tmp_path, caplog):
    path = tmp_path / "form.txt"
    path.write_text("POST / HTTP/1.1\nHost: a\n\nname=test", encoding="utf-8")
    metrics = Metrics()
    app.process_single_file(path, ResultSink(None), metrics)
    assert metrics.stats.unparseable_body == 1
    assert "not valid JSON" in caplog.text


def test_run_parses_directory_and_writes_results(requests_dir):
    args = app.parse_args(["--output", "out.txt", "--workers", "2"])
    assert app.run(args) == 0

    data = (config.RESULTS_DIR / "out.txt").read_text(encoding="utf-8")
    assert '"path": "/a"' in data
    assert '"k": "v"' in data


def test_run_with_explicit_files_and_missing_one(requests_dir, tmp_path):
    args = app.parse_args([str(requests_dir / "get.txt"), str(tmp_path / "nope.txt")])
    assert app.run(args) == 1


def test_run_without_files(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "REQUESTS_DIR", tmp_path / "empty")
    assert app.run(app.parse_args([])) == 0


def test_run_examples_passes():
    assert app.run_examples() == 0


def test_main_examples_exits_zero(monkeypatch):
    monkeypatch.setattr(app, "setup_logging", lambda: None)
    with pytest.raises(SystemExit) as exc:
        app.main(["--examples"])
    assert exc.value.code == 0
