#!/usr/bin/env python3
"""
A command-line todo list manager.

Lists live as JSON files under the XDG data directory, one file per list.
"""

import sys
import click
from rich.console import Console
from rich.markup import escape
from typing import Callable, Dict, List
from . import __version__
from .config import Config, ConfigError
from .store import ListStore, StoreError
from .todo_manager import TodoList, parse_index, parse_indices
from .renderer import render_list, render_note

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_UNRECOGNIZED = 2


class UnrecognizedCommand(Exception):
    """The arguments don't match any command shape"""


def echo(text: str):
    """Print user content verbatim; rich would expand tabs and drop control characters"""
    click.echo(text)


class Router:
    def __init__(self, store: ListStore, report_unrecognized: bool = False, verbose: bool = False):
        self.store = store
        self.report_unrecognized = report_unrecognized
        self.verbose = verbose

        self.commands: Dict[str, Callable[[List[str]], None]] = {
            "list": self.handle_list,
            "-l": self.handle_list,
            "note": self.handle_note,
            "-n": self.handle_note,
        }
        self.note_commands: Dict[str, Callable[[str, List[str]], None]] = {
            "add": self.note_add,
            "remove": self.note_remove,
            "check": self.note_check,
            "uncheck": self.note_uncheck,
            "read": self.note_read,
        }

    def debug(self, message: str):
        if self.verbose:
            err_console.print(f"[dim]{escape(message)}[/dim]")

    def dispatch(self, args: List[str]) -> int:
        """Run exactly one command and return the process exit status"""
        try:
            if not args:
                raise UnrecognizedCommand("no command given")
            handler = self.commands.get(args[0].lower())
            if handler is None:
                raise UnrecognizedCommand(args[0])
            handler(args[1:])
        except UnrecognizedCommand:
            if not self.report_unrecognized:
                return EXIT_OK
            err_console.print(f"[red]Unrecognized command: {escape(' '.join(args))}[/red]")
            return EXIT_UNRECOGNIZED
        except StoreError as e:
            err_console.print(f"[red]Error: {escape(str(e))}[/red]")
            return EXIT_FAILURE
        return EXIT_OK

    # list commands

    def handle_list(self, args: List[str]):
        if not args:
            for name in self.store.enumerate():
                echo(name)
            return

        subcommand, rest = args[0].lower(), args[1:]
        actions = {
            "new": self.list_new,
            "del": self.list_delete,
            "read": self.list_read,
        }
        action = actions.get(subcommand)
        if action is None:
            echo(f"Invalid command: {args[0]}")
            return
        if len(rest) != 1:
            raise UnrecognizedCommand(subcommand)
        action(rest[0])

    def list_new(self, name: str):
        self.store.create(name)
        self.debug(f"Created list '{name}' in {self.store.root}")

    def list_delete(self, name: str):
        self.store.delete(name)
        self.debug(f"Deleted list '{name}'")

    def list_read(self, name: str):
        rendered = render_list(self.load(name))
        if rendered:
            echo(rendered)

    # note commands

    def handle_note(self, args: List[str]):
        if len(args) < 3:
            raise UnrecognizedCommand(" ".join(args))
        handler = self.note_commands.get(args[0].lower())
        if handler is None:
            raise UnrecognizedCommand(args[0])
        handler(args[1], args[2:])

    def note_add(self, name: str, words: List[str]):
        todo_list = self.load(name)
        todo_list.add_note(" ".join(words))
        self.save(name, todo_list)

    def note_remove(self, name: str, tokens: List[str]):
        todo_list = self.load(name)
        if tokens == ["all"]:
            todo_list.remove_all()
        elif tokens == ["checked"]:
            todo_list.remove_checked()
        elif tokens == ["unchecked"]:
            todo_list.remove_unchecked()
        else:
            todo_list.remove_notes(self.indices(tokens))
        self.save(name, todo_list)

    def note_check(self, name: str, tokens: List[str]):
        todo_list = self.load(name)
        if tokens == ["all"]:
            todo_list.check_all()
        else:
            for index in self.indices(tokens):
                todo_list.check_note(index)
        self.save(name, todo_list)

    def note_uncheck(self, name: str, tokens: List[str]):
        todo_list = self.load(name)
        if tokens == ["all"]:
            todo_list.uncheck_all()
        else:
            for index in self.indices(tokens):
                todo_list.uncheck_note(index)
        self.save(name, todo_list)

    def note_read(self, name: str, tokens: List[str]):
        if len(tokens) != 1:
            raise UnrecognizedCommand(" ".join(tokens))
        todo_list = self.load(name)
        index = parse_index(tokens[0])
        if index is None:
            echo(f"Invalid index: {tokens[0]}")
            return
        note = todo_list.get_note(index)
        if note is not None:
            echo(render_note(note))

    # helpers

    def indices(self, tokens: List[str]) -> List[int]:
        indices, invalid = parse_indices(tokens)
        for token in invalid:
            echo(f"Invalid index: {token}")
        return indices

    def load(self, name: str) -> TodoList:
        todo_list = self.store.load(name)
        self.debug(f"Loaded list '{name}' ({len(todo_list)} notes)")
        return todo_list

    def save(self, name: str, todo_list: TodoList):
        self.store.save(name, todo_list)
        self.debug(f"Saved list '{name}' ({len(todo_list)} notes)")


@click.command(context_settings={
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
    "help_option_names": ["--help"],
})
@click.option('--verbose', '-v', is_flag=True, help='Print diagnostics to stderr')
@click.option('--strict', is_flag=True, help='Report unrecognized commands instead of ignoring them')
@click.option('--data-dir', type=click.Path(file_okay=False), help='Directory holding the lists')
@click.option('--local', is_flag=True, help='Use the .todo directory in the current directory')
@click.version_option(__version__, prog_name='todo')
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def main(verbose: bool, strict: bool, data_dir: str, local: bool, args: tuple):
    """
    Manage named todo lists.

    \b
    todo list [new <name> | del <name> | read <name>]
    todo note <add|remove|check|uncheck|read> <list> <args...>
    """
    try:
        cfg = Config(data_dir=data_dir, local=local)
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(EXIT_FAILURE)

    router = Router(
        ListStore(cfg),
        report_unrecognized=strict or bool(cfg.get("report_unrecognized")),
        verbose=verbose or bool(cfg.get("verbose")),
    )
    router.debug(f"Data directory: {cfg.data_dir}")
    sys.exit(router.dispatch(list(args)))


if __name__ == "__main__":
    main()
