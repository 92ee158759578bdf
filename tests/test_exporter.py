import pytest

from steam_gephi_export.errors import ExportError
from steam_gephi_export.exporter import export_to_gephi_csv, iter_edges
from steam_gephi_export.models import FriendEntry, MonitoredSteamUser


def user(steam_id, *friends):
    return MonitoredSteamUser(
        steam_id=steam_id,
        discord_channel_id="chan",
        added_by="admin",
        current_friends=[FriendEntry(f, 0) for f in friends],
    )


def test_iter_edges_in_order():
    users = [user("a", "b", "c"), user("b", "a")]
    assert list(iter_edges(users)) == [("a", "b"), ("a", "c"), ("b", "a")]


def test_iter_edges_skips_users_without_friends(capsys):
    assert list(iter_edges([user("lonely"), user("x", "y")])) == [("x", "y")]
    assert "lonely" in capsys.readouterr().out


def test_export_writes_header_and_edges(tmp_path):
    target = tmp_path / "graph.csv"
    count = export_to_gephi_csv([user("a", "b"), user("c", "a", "b")], target)
    assert count == 3
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Source,Target"
    assert lines[1:] == ["a,b", "c,a", "c,b"]


def test_export_quotes_fields_that_need_it(tmp_path):
    target = tmp_path / "graph.csv"
    export_to_gephi_csv([user("a,1", "b")], target)
    assert target.read_text(encoding="utf-8").splitlines()[1] == '"a,1",b'


def test_export_without_edges_leaves_empty_file(tmp_path):
    target = tmp_path / "graph.csv"
    assert export_to_gephi_csv([user("lonely")], target) == 0
    assert target.read_text(encoding="utf-8") == ""


def test_export_to_missing_directory_raises(tmp_path):
    with pytest.raises(ExportError):
        export_to_gephi_csv([user("a", "b")], tmp_path / "missing" / "graph.csv")


def test_default_path_is_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    count = export_to_gephi_csv([user("a", "b")])
    assert count == 1
    lines = (tmp_path / "steam_friends_graph.csv").read_text(encoding="utf-8").splitlines()
    assert lines == ["Source,Target", "a,b"]