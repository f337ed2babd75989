"""
Command registry for the abbr command.

Each verb (add, erase, rename, ...) registers a command type, the flags
that select it, and the handler that runs it. The parser turns a command
line into an instance of one of the command types; the registry dispatches
that instance to its handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, ClassVar

from abbrkit.core import AbbreviationStore, Scope, UsageError

if TYPE_CHECKING:
    from abbrkit.utils import AliasSource


@dataclass
class AbbrCommand:
    """Base class for parsed abbr commands, one subclass per verb."""

    scope: Scope

    # Accepted positional argument counts; None means unbounded
    min_args: ClassVar[int] = 0
    max_args: ClassVar[int | None] = 0
    arg_error: ClassVar[str] = "Unexpected argument"

    @classmethod
    def from_args(cls, scope: Scope, args: list[str]) -> "AbbrCommand":
        return cls(scope)

    @classmethod
    def check_args(cls, flag: str, args: list[str]) -> None:
        """Raise UsageError if args has the wrong length for this verb."""
        too_many = cls.max_args is not None and len(args) > cls.max_args
        if len(args) < cls.min_args or too_many:
            raise UsageError(cls.arg_error, flag=flag)


@dataclass
class CommandContext:
    """Everything a command handler may touch."""

    store: AbbreviationStore
    alias_source: "AliasSource | None" = None
    git_alias_source: "AliasSource | None" = None


@dataclass
class CommandEntry:
    """Entry for a registered command."""

    name: str
    command_type: type[AbbrCommand]
    handler: Callable[[CommandContext, AbbrCommand], None]
    description: str
    usage: str
    flags: list[str] = field(default_factory=list)

    @property
    def short_flag(self) -> str:
        return self.flags[0] if self.flags else f"--{self.name}"


class CommandRegistry:
    """Registry for abbr verbs."""

    def __init__(self):
        self._commands: dict[str, CommandEntry] = {}
        self._flags: dict[str, str] = {}
        self._types: dict[type[AbbrCommand], str] = {}

    def register(
        self,
        name: str,
        command_type: type[AbbrCommand],
        description: str,
        usage: str | None = None,
        flags: list[str] | None = None,
    ) -> Callable:
        """Decorator to register a command handler.

        Args:
            name: Verb name (e.g., "add")
            command_type: AbbrCommand subclass the parser produces for it
            description: Short description for --help
            usage: Synopsis line (e.g., "abbr --add|-a [SCOPE] WORD EXPANSION")
            flags: Flags selecting the verb, short flag first

        Example:
            @command_registry.register("list", List, "List words", flags=["-l", "--list"])
            def cmd_list(ctx, command):
                ...
        """
        def decorator(func: Callable) -> Callable:
            entry = CommandEntry(
                name=name,
                command_type=command_type,
                handler=func,
                description=description,
                usage=usage or f"abbr --{name}",
                flags=flags or [],
            )
            self._commands[name] = entry
            self._types[command_type] = name
            for flag in entry.flags:
                self._flags[flag] = name
            return func
        return decorator

    def get(self, name: str) -> CommandEntry | None:
        """Get a command by verb name."""
        return self._commands.get(name)

    def by_flag(self, flag: str) -> CommandEntry | None:
        """Get the command a flag selects, or None for unknown flags."""
        name = self._flags.get(flag)
        return self._commands[name] if name else None

    def for_command(self, command: AbbrCommand) -> CommandEntry:
        name = self._types.get(type(command))
        if name is None:
            raise TypeError(f"No handler registered for {type(command).__name__}")
        return self._commands[name]

    def execute(self, ctx: CommandContext, command: AbbrCommand) -> None:
        """Run the handler registered for the command's type."""
        self.for_command(command).handler(ctx, command)

    def all_commands(self) -> list[CommandEntry]:
        """Get all registered commands sorted by name."""
        return sorted(self._commands.values(), key=lambda e: e.name)


# Global command registry
command_registry = CommandRegistry()
