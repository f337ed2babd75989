#!/usr/bin/env python3
"""
Tests for the abbr-shell host.
"""

import shutil
from unittest.mock import MagicMock, patch

from prompt_toolkit.key_binding import KeyBindings

from abbrkit.cli.shell import build_key_bindings, main, run_line
from abbrkit.config import Config
from abbrkit.core import Scope


class TestRunLine:
    """Tests for dispatching accepted lines."""

    def test_abbr_runs_in_process(self, ctx):
        """Test global abbreviations live in the shell's store."""
        assert run_line("abbr -a -g gco 'git checkout'", ctx) == 0
        assert ctx.store.get(Scope.SESSION, "gco") == "git checkout"

    def test_abbr_error_status(self, ctx):
        assert run_line("abbr -e nope", ctx) == 1

    def test_unwritable_universals_file(self, ctx, source_path, capsys):
        """Test a failed write is reported as an abbr error, not raised."""
        shutil.rmtree(source_path.parent)
        assert run_line("abbr -a x y", ctx) == 1
        assert "abbr: Cannot write universals file" in capsys.readouterr().err
        assert ctx.store.get(Scope.SHARED, "x") is None

    def test_abbr_unavailable(self, capsys):
        """Test abbr reports when the store failed to initialize."""
        assert run_line("abbr -l", None) == 1
        assert "unavailable" in capsys.readouterr().err

    def test_other_commands_run_in_shell(self, ctx):
        with patch("abbrkit.cli.shell.subprocess.run", return_value=MagicMock(returncode=3)) as run:
            assert run_line("ls -l | wc -l", ctx) == 3
        assert run.call_args[0][0] == "ls -l | wc -l"
        assert run.call_args[1]["shell"] is True

    def test_unbalanced_quotes(self, ctx, capsys):
        assert run_line("echo 'oops", ctx) == 1
        assert "Error" in capsys.readouterr().err


class TestBuildKeyBindings:
    """Tests for choosing key bindings."""

    def test_default_bindings(self, store):
        bindings = build_key_bindings(store, Config())
        assert len(bindings.bindings) == 6

    def test_bindings_disabled(self, store):
        """Test default_bindings=False leaves only Ctrl+C."""
        bindings = build_key_bindings(store, Config(default_bindings=False))
        assert isinstance(bindings, KeyBindings)
        assert len(bindings.bindings) == 1

    def test_no_store(self):
        """Test the shell runs without expansion when the store is missing."""
        assert len(build_key_bindings(None, Config()).bindings) == 1


class TestMain:
    """Tests for abbr-shell startup."""

    def test_initialization_error_keeps_shell_running(self, tmp_path, capsys):
        """Test a broken store disables abbreviations, not the shell."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        cfg = Config(
            universals_source=str(blocker / "universal"),
            snapshot_path=str(tmp_path / "snap.json"),
        )
        with patch("abbrkit.cli.shell.get_config", return_value=cfg), \
                patch("abbrkit.cli.shell.repl", return_value=0) as repl:
            assert main() == 0

        assert repl.call_args[0][0] is None
        assert "Abbreviations disabled" in capsys.readouterr().err
