import pytest

from steam_gephi_export.cli import main, run_exporter
from steam_gephi_export.errors import DatabaseError, EnvVarNotFoundError


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    monkeypatch.setenv("MONGODB_URI", "placeholder")
    monkeypatch.delenv("MONGODB_URI")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_run_exporter_requires_uri(clean_env):
    with pytest.raises(EnvVarNotFoundError):
        run_exporter()


def test_run_exporter_rejects_bad_uri(clean_env, monkeypatch):
    monkeypatch.setenv("MONGODB_URI", "not-a-uri")
    with pytest.raises(DatabaseError):
        run_exporter()


def test_main_reports_missing_uri(clean_env, capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert "Environment variable not found: MONGODB_URI" in captured.err
    assert not (clean_env / "steam_friends_graph.csv").exists()


def test_main_reports_database_error(clean_env, monkeypatch, capsys):
    monkeypatch.setenv("MONGODB_URI", "not-a-uri")
    assert main([]) == 1
    assert "MongoDB error" in capsys.readouterr().err


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "Gephi" in capsys.readouterr().out