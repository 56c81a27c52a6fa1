import json

import pytest

from auditor import cli


def test_missing_directory_exits_non_zero(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    exit_code = cli.main(["does-not-exist"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.strip() == "Error: directory 'does-not-exist' not found"


def test_buffer_scan_reports_results_line(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.js").write_text("const b = new Buffer(10);\n", encoding="utf-8")

    exit_code = cli.main(["--check", "node-deprecated-apis"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "=== Deprecated APIs Found ===" in captured.out
    assert captured.out.rstrip().splitlines()[-1] == "Results: 0 error(s), 1 warning(s), 1 info(s)"


def test_strict_mode_fails_on_errors(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "server.js").write_text("execSync('make');\n", encoding="utf-8")

    advisory = cli.main([".", "--check", "node-sync-calls"])
    strict = cli.main([".", "--check", "node-sync-calls", "--strict"])

    captured = capsys.readouterr()
    assert advisory == 0
    assert strict == 1
    assert "Results: 1 error(s), 0 warning(s), 1 info(s)" in captured.out


def test_strict_from_config(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".pattern-audit.yaml").write_text("strict: true\n", encoding="utf-8")
    (tmp_path / "server.js").write_text("spawnSync('make');\n", encoding="utf-8")

    exit_code = cli.main([".", "--check", "node-sync-calls"])

    capsys.readouterr()
    assert exit_code == 1


def test_json_report_written(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "app.js").write_text("const q = querystring.stringify(params);\n", encoding="utf-8")
    output_path = tmp_path / "artifacts" / "audit.json"

    exit_code = cli.main([".", "-c", "node-deprecated-apis", "--out", str(output_path)])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert f"Report written to {output_path}" in captured.out
    data = json.loads(output_path.read_text(encoding="utf-8"))
    assert data["summary"] == {"errors": 0, "warnings": 1, "infos": 1}
    assert data["matches"][0]["probe_id"] == "node.querystring"
    assert data["matches"][0]["line_number"] == 1
    assert data["registries"] == ["node-deprecated-apis"]
    assert data["passed"] is False


def test_json_report_printed(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    exit_code = cli.main([".", "-c", "react-patterns", "--format", "json"])

    captured = capsys.readouterr()
    assert exit_code == 0
    payload = captured.out.split("JSON Report\n", 1)[1]
    assert json.loads(payload)["passed"] is True


def test_list_registries(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    exit_code = cli.main(["--list"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "node-sync-calls:" in captured.out
    assert "react.find-dom-node" in captured.out


def test_unknown_check_is_usage_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([".", "--check", "nope"])

    assert excinfo.value.code == 2
    assert "unknown check(s): nope" in capsys.readouterr().err


def test_custom_probe_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "rules.yaml").write_text(
        "id: team-rules\ntitle: Team Rules\nprobes:\n"
        "  - {id: team.console, label: console.log, pattern: 'console\\.log\\(', severity: ERROR, "
        "description: console.log left in code}\n",
        encoding="utf-8",
    )
    (tmp_path / "app.ts").write_text("console.log('hi');\n", encoding="utf-8")

    exit_code = cli.main([".", "--probes", "rules.yaml", "--check", "team-rules", "--strict"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "=== Team Rules ===" in captured.out
    assert "Results: 1 error(s), 0 warning(s), 1 info(s)" in captured.out


def test_invalid_config_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".pattern-audit.yaml").write_text("bogus: 1\n", encoding="utf-8")

    exit_code = cli.main(["."])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith("Error: ")


def test_exclude_dir_flag(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "old.js").write_text("new Buffer(5);\n", encoding="utf-8")

    cli.main([".", "-c", "node-deprecated-apis", "--exclude-dir", "vendor"])

    captured = capsys.readouterr()
    assert "Results: 0 error(s), 0 warning(s), 0 info(s)" in captured.out


def test_default_invocation_scans_src_with_every_registry(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.js").write_text("const b = new Buffer(10);\n", encoding="utf-8")

    exit_code = cli.main([])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "=== Deprecated APIs Found ===" in captured.out
    assert captured.out.rstrip().splitlines()[-1] == "Results: 0 error(s), 1 warning(s), 1 info(s)"


def test_custom_probe_file_with_bad_exclude_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "rules.yaml").write_text(
        "id: team-rules\nprobes:\n"
        "  - {id: team.todo, label: TODO, pattern: TODO, severity: INFO, description: todo, exclude: 5}\n",
        encoding="utf-8",
    )

    exit_code = cli.main([".", "--probes", "rules.yaml"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out.startswith("Error: ")
    assert "non-string 'exclude'" in captured.out


def test_select_registries_rejects_unknown_ids():
    registries = cli.load_registries()

    with pytest.raises(ValueError, match="unknown check\\(s\\): nope"):
        cli.select_registries(registries, ["node-sync-calls", "nope"])

    assert cli.unknown_checks(registries, ["nope", "node-sync-calls"]) == ["nope"]
    assert [registry.id for registry in cli.select_registries(registries, ["node-sync-calls"] * 2)] == [
        "node-sync-calls"
    ]
