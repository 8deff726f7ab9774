from watchfiles import Change

from assetpipe import watcher


def test_watch_builds_then_rebuilds(invoke, project, monkeypatch):
    a = project / "_assets" / "css" / "a.css"
    captured = {}

    def fake_watch(*roots, **kwargs):
        captured["roots"] = roots
        captured["kwargs"] = kwargs
        a.write_text(".a { color: green; }")
        yield {(Change.modified, str(a))}

    monkeypatch.setattr(watcher.watchfiles, "watch", fake_watch)

    result = invoke(["watch"])

    assert result.exit_code == 0, result.output
    assert result.output.count("Done: minify, combine, banner") == 2
    assert "Changed: a.css" in result.output
    assert "green" in (project / "css" / "site.min.css").read_text()
    assert captured["roots"] == (project / "_assets" / "css",)
    assert captured["kwargs"]["debounce"] == 50


def test_watch_keeps_going_after_failure(invoke, project, monkeypatch):
    a = project / "_assets" / "css" / "a.css"

    def fake_watch(*roots, **kwargs):
        a.write_text(".a { color: red;")
        yield {(Change.modified, str(a))}
        a.write_text(".a { color: red; }")
        yield {(Change.modified, str(a))}

    monkeypatch.setattr(watcher.watchfiles, "watch", fake_watch)

    result = invoke(["watch"])

    assert result.exit_code == 0, result.output
    assert "Error:" in result.output
    assert result.output.count("Done:") == 2


def test_watch_without_package_json(runner, tmp_path):
    from assetpipe.cli.main import cli

    result = runner.invoke(cli, ["--root", str(tmp_path), "watch"])
    assert result.exit_code == 1
    assert "Error:" in result.output
