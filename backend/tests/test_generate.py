"""
PrepNotes — Snapshot Generator Tests
======================================

What:  build_snapshot() shape, file output, idempotence and the CLI entry.
How:   Runs against the shared notes_tree fixture; logging setup is patched
       out so the CLI does not replace pytest's handlers.
"""

import json
from unittest.mock import patch

from prepnotes.generate import build_snapshot, main, render_snapshot, write_snapshot
from prepnotes.services.tree_walker import WalkConfig


class TestBuildSnapshot:

    def test_folders_keyed_by_top_level_directory(self, notes_tree):
        snapshot = build_snapshot(notes_tree)

        assert list(snapshot.folders) == ["CSS", "React"]
        react = snapshot.folders["React"]
        assert react.icon == "⚛️"
        assert [e.name for e in react.files] == ["Advanced", "Guides", "demo.js", "hooks"]

    def test_files_hold_every_top_level_entry(self, notes_tree):
        snapshot = build_snapshot(notes_tree)

        assert [e.name for e in snapshot.files] == ["CSS", "React", "top"]

    def test_excluded_and_hidden_entries_absent(self, notes_tree):
        (notes_tree / "scripts").mkdir()
        (notes_tree / "assets").mkdir()
        (notes_tree / "backend" / "tests").mkdir(parents=True)
        (notes_tree / "backend" / "tests" / "conftest.md").write_text("x")
        text = render_snapshot(build_snapshot(notes_tree))

        for name in ["node_modules", "client", ".git", "scripts", "assets", "backend", ".draft"]:
            assert f'"{name}"' not in text

    def test_content_inlined(self, notes_tree):
        snapshot = build_snapshot(notes_tree)

        hooks = next(e for e in snapshot.folders["React"].files if e.name == "hooks")
        assert hooks.content == "# Hooks\n\nuseState, useEffect\n"
        assert hooks.path == "React/hooks.md"

    def test_custom_config(self, notes_tree):
        config = WalkConfig(excluded_names=frozenset({"React"}), inline_content=False)
        snapshot = build_snapshot(notes_tree, config)

        assert "React" not in snapshot.folders
        top = snapshot.files[-1]
        assert top.content is None


class TestWriteSnapshot:

    def test_json_shape(self, notes_tree, tmp_path):
        output = tmp_path / "out" / "data.json"
        write_snapshot(build_snapshot(notes_tree), output)

        data = json.loads(output.read_text(encoding="utf-8"))
        assert set(data) == {"folders", "files"}
        assert data["folders"]["CSS"] == {"icon": "📁", "files": [], "isDirectory": True}
        react_files = data["folders"]["React"]["files"]
        assert react_files[0]["isDirectory"] is True
        assert react_files[0]["hasChildren"] is True
        assert react_files[-1]["fileType"] == "markdown"
        assert "content" in react_files[-1]

    def test_pretty_printed_with_raw_glyphs(self, notes_tree, tmp_path):
        output = tmp_path / "data.json"
        write_snapshot(build_snapshot(notes_tree), output)

        text = output.read_text(encoding="utf-8")
        assert text.startswith('{\n  "folders": {')
        assert "⚛️" in text
        assert "\\u" not in text

    def test_two_runs_are_byte_identical(self, notes_tree, tmp_path):
        first = tmp_path / "first.json"
        second = tmp_path / "second.json"
        write_snapshot(build_snapshot(notes_tree), first)
        write_snapshot(build_snapshot(notes_tree), second)

        assert first.read_bytes() == second.read_bytes()

    def test_overwrites_previous_snapshot(self, notes_tree, tmp_path):
        output = tmp_path / "data.json"
        output.write_text("stale")
        write_snapshot(build_snapshot(notes_tree), output)

        assert json.loads(output.read_text(encoding="utf-8"))["folders"]


class TestCli:

    def test_main_writes_output(self, notes_tree, tmp_path):
        output = tmp_path / "client" / "data.json"
        with patch("prepnotes.generate.setup_logging"):
            main(["--root", str(notes_tree), "--output", str(output)])

        data = json.loads(output.read_text(encoding="utf-8"))
        assert list(data["folders"]) == ["CSS", "React"]
