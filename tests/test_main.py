"""Tests for the command-line entry point."""

import io
import json

import pytest

from map_areas.main import main


@pytest.fixture
def stdin(monkeypatch):
    def feed(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return feed


class TestConvert:
    """Tests for the convert subcommand."""

    def test_osbot_to_runelite(self, stdin, capsys):
        stdin("new Area(10, 20, 14, 29).setPlane(1)")
        assert main(["convert", "--from", "osbot", "--to", "runelite"]) == 0
        assert capsys.readouterr().out.strip() == "WorldArea area = new WorldArea(10, 20, 5, 10, 1);"

    def test_polygon_kind(self, stdin, capsys):
        stdin("new Tile(1, 2), new Tile(3, 4)")
        assert main(["convert", "--from", "dreambot", "--to", "osbot", "--kind", "polygon", "--style", "list"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("List<Position> polygon = new ArrayList<>();")

    def test_empty_result(self, stdin, capsys):
        """Nothing found is not an error."""
        stdin("no shapes here")
        assert main(["convert", "--from", "osbot", "--to", "hd117"]) == 0
        assert capsys.readouterr().out == ""

    def test_unknown_dialect(self, stdin, capsys):
        stdin("new Area(1, 2, 3, 4)")
        assert main(["convert", "--from", "tribot", "--to", "osbot"]) == 1
        assert "tribot" in capsys.readouterr().err

    def test_malformed_json(self, stdin, capsys):
        stdin('{"aabbs": [')
        assert main(["convert", "--from", "hd117", "--to", "osbot"]) == 1
        assert "error: Invalid JSON" in capsys.readouterr().err


class TestExport:
    """Tests for the export subcommand."""

    def test_raw_to_json(self, stdin, capsys):
        stdin("3200,3200,3210,3210")
        assert main(["export", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == {"areas": [{"minX": 3200, "minY": 3200, "maxX": 3210, "maxY": 3210, "plane": 0}]}

    def test_unknown_format(self, stdin, capsys):
        stdin("3200,3200,3210,3210")
        assert main(["export", "--format", "yaml"]) == 1


class TestResolve:
    """Tests for the resolve subcommand."""

    def test_resolve(self, stdin, capsys):
        stdin('[{"name": "A", "areas": ["B"]}, {"name": "B", "aabbs": [[100, 100, 1, 110, 110, 1]]}]')
        assert main(["resolve"]) == 0
        out = capsys.readouterr().out
        assert out.count("[ 100, 100, 1, 110, 110, 1 ]") == 2
