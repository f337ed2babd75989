#!/usr/bin/env python3
"""
Tests for parsing abbr command lines.
"""

import pytest

from abbrkit.cli.commands import command_registry, load_builtin_commands, parse_args
from abbrkit.cli.commands.builtins.add import Add
from abbrkit.cli.commands.builtins.create_aliases import CreateAliases
from abbrkit.cli.commands.builtins.erase import Erase
from abbrkit.cli.commands.builtins.git_populate import GitPopulate
from abbrkit.cli.commands.builtins.help import Help
from abbrkit.cli.commands.builtins.list import ListWords
from abbrkit.cli.commands.builtins.populate import Populate
from abbrkit.cli.commands.builtins.rename import Rename
from abbrkit.cli.commands.builtins.show import Show
from abbrkit.core import Scope, UsageError


# ============================================================================
# Registry Tests
# ============================================================================

class TestRegistry:
    """Tests for the builtin verbs."""

    def test_all_verbs_registered(self):
        """Test every verb is loaded."""
        load_builtin_commands()
        names = [entry.name for entry in command_registry.all_commands()]
        assert names == [
            "add", "create-aliases", "erase", "git-populate", "help",
            "list", "populate", "rename", "show",
        ]

    @pytest.mark.parametrize("flag,name", [
        ("-a", "add"), ("--add", "add"),
        ("-e", "erase"), ("--erase", "erase"),
        ("-r", "rename"), ("--rename", "rename"),
        ("-s", "show"), ("--show", "show"),
        ("-l", "list"), ("--list", "list"),
        ("-c", "create-aliases"), ("--create-aliases", "create-aliases"),
        ("-p", "populate"), ("--populate", "populate"),
        ("-i", "git-populate"), ("--git-populate", "git-populate"),
        ("-h", "help"), ("--help", "help"),
    ])
    def test_flags(self, flag, name):
        """Test each flag selects its verb."""
        load_builtin_commands()
        assert command_registry.by_flag(flag).name == name

    def test_every_command_type_dispatches(self):
        """Test each command type maps back to its entry."""
        load_builtin_commands()
        for entry in command_registry.all_commands():
            command = entry.command_type.__new__(entry.command_type)
            assert command_registry.for_command(command) is entry


# ============================================================================
# Verb Parsing Tests
# ============================================================================

class TestParseVerbs:
    """Tests for each verb's arguments."""

    def test_add(self):
        """Test add joins the expansion words."""
        assert parse_args(["-a", "gco", "git", "checkout"]) == Add(Scope.SHARED, "gco", "git checkout")

    def test_add_quoted_expansion(self):
        """Test a single quoted expansion argument is kept."""
        assert parse_args(["--add", "gco", "git checkout"]) == Add(Scope.SHARED, "gco", "git checkout")

    def test_add_global(self):
        """Test -g selects the session scope."""
        assert parse_args(["-a", "-g", "l", "less"]) == Add(Scope.SESSION, "l", "less")

    def test_scope_before_verb(self):
        """Test option order does not matter."""
        assert parse_args(["--global", "-a", "l", "less"]) == Add(Scope.SESSION, "l", "less")

    def test_universal_flag(self):
        """Test -U selects the shared scope explicitly."""
        assert parse_args(["-U", "-e", "l"]) == Erase(Scope.SHARED, "l")

    def test_options_after_positional_are_arguments(self):
        """Test flags inside the expansion are not parsed."""
        command = parse_args(["-a", "gl", "git", "log", "-n", "5"])
        assert command == Add(Scope.SHARED, "gl", "git log -n 5")

    def test_end_of_options(self):
        """Test -- ends option parsing, as in --show output."""
        assert parse_args(["-a", "-U", "--", "-x", "y"]) == Add(Scope.SHARED, "-x", "y")

    def test_erase(self):
        assert parse_args(["-e", "l"]) == Erase(Scope.SHARED, "l")

    def test_rename(self):
        assert parse_args(["-r", "-g", "gco", "gch"]) == Rename(Scope.SESSION, "gco", "gch")

    def test_show(self):
        assert parse_args(["-s"]) == Show(Scope.SHARED)

    def test_list(self):
        assert parse_args(["--list"]) == ListWords(Scope.SHARED)

    def test_create_aliases(self):
        """Test create-aliases takes an optional destination."""
        assert parse_args(["-c"]) == CreateAliases(Scope.SHARED, None)
        assert parse_args(["-c", "-g", "~/aliases"]) == CreateAliases(Scope.SESSION, "~/aliases")

    def test_populate(self):
        assert parse_args(["-p", "-g"]) == Populate(Scope.SESSION)

    def test_git_populate(self):
        assert parse_args(["-i"]) == GitPopulate(Scope.SHARED)

    def test_help_ignores_arguments(self):
        assert parse_args(["-h", "anything"]) == Help(Scope.SHARED)


# ============================================================================
# Default Verb Tests
# ============================================================================

class TestDefaultVerb:
    """Tests for the verb used when none is given."""

    def test_no_arguments_shows(self):
        """Test bare abbr shows."""
        assert parse_args([]) == Show(Scope.SHARED)

    def test_arguments_add(self):
        """Test bare arguments add."""
        assert parse_args(["l", "less"]) == Add(Scope.SHARED, "l", "less")

    def test_scope_only_shows(self):
        """Test a scope flag alone still shows."""
        assert parse_args(["-g"]) == Show(Scope.SESSION)

    def test_scope_with_arguments_adds(self):
        assert parse_args(["-g", "l", "less"]) == Add(Scope.SESSION, "l", "less")


# ============================================================================
# Usage Error Tests
# ============================================================================

class TestUsageErrors:
    """Tests for malformed command lines."""

    @pytest.mark.parametrize("argv", [
        ["-a", "-e", "x"],
        ["-s", "-l"],
        ["-h", "-a", "x", "y"],
        ["-g", "-U", "-a", "x", "y"],
        ["-g", "--global"],
    ])
    def test_illegal_combination(self, argv):
        """Test two verbs or two scopes are rejected."""
        with pytest.raises(UsageError, match="Illegal combination of options"):
            parse_args(argv)

    def test_unknown_option(self):
        """Test unknown flags are rejected."""
        with pytest.raises(UsageError, match="Unknown option '-x'"):
            parse_args(["-a", "-x", "y", "z"])

    @pytest.mark.parametrize("argv,flag,message", [
        (["-a", "x"], "-a", "Requires at least two arguments"),
        (["x"], "-a", "Requires at least two arguments"),
        (["-e"], "-e", "Expected one argument"),
        (["-e", "a", "b"], "-e", "Expected one argument"),
        (["-r", "a"], "-r", "Requires exactly two arguments"),
        (["-r", "a", "b", "c"], "-r", "Requires exactly two arguments"),
        (["-s", "x"], "-s", "Unexpected argument"),
        (["-l", "x"], "-l", "Unexpected argument"),
        (["-c", "a", "b"], "-c", "Unexpected argument"),
        (["-p", "x"], "-p", "Unexpected argument"),
        (["-i", "x"], "-i", "Unexpected argument"),
    ])
    def test_argument_count(self, argv, flag, message):
        """Test each verb checks its argument count."""
        with pytest.raises(UsageError, match=message) as exc_info:
            parse_args(argv)
        assert exc_info.value.flag == flag

    def test_error_format(self):
        """Test errors print with the abbr prefix and the flag."""
        with pytest.raises(UsageError) as exc_info:
            parse_args(["-e"])
        assert exc_info.value.format() == "abbr -e: Expected one argument"
