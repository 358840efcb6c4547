"""
Plain-text rendering of notes and lists.

A note renders as "[#] - text" ("[ ] - text" when unchecked). Extra lines of a
multi-line note are indented so they line up under the first line's text.
"""

from .todo_manager import Note, TodoList

NOTE_PREFIX_WIDTH = len("[ ] - ")


def render_note(note: Note) -> str:
    mark = "#" if note.checked else " "
    lines = note.text.splitlines() or [""]
    rendered = [f"[{mark}] - {lines[0]}"]
    rendered.extend(" " * NOTE_PREFIX_WIDTH + line for line in lines[1:])
    return "\n".join(rendered)


def render_list(todo_list: TodoList) -> str:
    if not todo_list.notes:
        return ""

    # index column: digits of the largest index plus one space
    width = len(str(len(todo_list.notes))) + 1
    output = []
    for number, note in enumerate(todo_list.notes, 1):
        lines = render_note(note).split("\n")
        output.append(str(number).ljust(width) + lines[0])
        output.extend(" " * width + line for line in lines[1:])
    return "\n".join(output).rstrip()
